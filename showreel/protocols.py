"""Protocol definitions for the collaborators injected into the flows."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol, Sequence

from showreel.models import CollectionEntry, Show, TorrentCandidate


class CatalogResolver(Protocol):
    """Catalog lookups used by the episode pipeline and the add flow."""

    async def resolve_show_by_id(self, show_id: str) -> Show | None:
        ...

    async def resolve_torrents_for_episode(self, locator: str) -> Sequence[TorrentCandidate] | None:
        ...


class CollectionRepository(Protocol):
    """Persistence for the user's show list."""

    def load(self) -> list[CollectionEntry]:
        ...

    def save(self, entries: Sequence[CollectionEntry]) -> None:
        ...

    def contains(self, show_id: str) -> bool:
        ...

    def remove(self, show_id: str) -> bool:
        ...


class UserInterface(Protocol):
    """Chooser and notification surface."""

    async def present_choice(self, prompt: str, labels: Sequence[str]) -> str:
        ...

    async def present_confirmation(self, prompt: str) -> bool:
        ...

    def emit_info(self, text: str) -> None:
        ...

    def emit_error(self, text: str) -> None:
        ...

    def emit_detail(self, label: str, value: str) -> None:
        ...

    def status(self, text: str) -> AbstractContextManager:
        ...
