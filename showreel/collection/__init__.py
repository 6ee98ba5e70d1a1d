"""Saved show collection: persistence and add/remove flows."""

from .service import CollectionOutcome, CollectionOutcomeKind, CollectionService
from .store import JsonCollectionStore

__all__ = [
    "CollectionOutcome",
    "CollectionOutcomeKind",
    "CollectionService",
    "JsonCollectionStore",
]
