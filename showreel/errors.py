"""User-facing failure taxonomy for collection and episode flows."""

from __future__ import annotations


class ShowreelError(Exception):
    """Base for failures that are reported to the user and end the command."""

    reason: str = "error"

    def __init__(self, message: str, *, reason: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if reason is not None:
            self.reason = reason


class NoCollectionError(ShowreelError):
    reason = "no collection"


class NotFoundError(ShowreelError):
    reason = "show not found"


class EmptyChoiceSetError(ShowreelError):
    reason = "no seasons/episodes to pick"


class FetchFailureError(ShowreelError):
    reason = "torrent fetch failed"


class DuplicateEntryError(ShowreelError):
    reason = "duplicate entry"


class ChoiceConsistencyError(LookupError):
    """A chooser answered with a label that was never offered."""
