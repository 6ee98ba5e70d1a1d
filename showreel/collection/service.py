"""Add/remove flows for the saved show collection."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from rich.markup import escape

from showreel import logger
from showreel.errors import DuplicateEntryError, NoCollectionError, NotFoundError, ShowreelError
from showreel.models import CollectionEntry, Show
from showreel.protocols import CatalogResolver, CollectionRepository, UserInterface
from showreel.selection.choices import show_choices


class CollectionOutcomeKind(enum.Enum):
    ADDED = "added"
    REMOVED = "removed"
    CANCELLED = "cancelled"
    ABORTED = "aborted"


@dataclass(frozen=True)
class CollectionOutcome:
    kind: CollectionOutcomeKind
    entry: CollectionEntry | None = None
    reason: str | None = None


class CollectionService:
    def __init__(self, store: CollectionRepository, resolver: CatalogResolver, ui: UserInterface) -> None:
        self.store = store
        self.resolver = resolver
        self.ui = ui

    async def add(self, show_id: str) -> CollectionOutcome:
        try:
            return await self._add(show_id.strip())
        except ShowreelError as exc:
            self.ui.emit_error(exc.message)
            return CollectionOutcome(CollectionOutcomeKind.ABORTED, reason=exc.reason)

    async def _add(self, show_id: str) -> CollectionOutcome:
        if self.store.contains(show_id):
            raise DuplicateEntryError("This TV show is already in your collection.")

        with self.ui.status("Searching for TV shows"):
            show = await self.resolver.resolve_show_by_id(show_id)
        if show is None:
            raise NotFoundError("Nothing found")

        if not await self._confirm_show(show):
            return CollectionOutcome(CollectionOutcomeKind.CANCELLED)

        entry = CollectionEntry(title=show.title, id=show_id)
        self.store.save([entry, *self.store.load()])
        logger.debug(f"Added {show_id} ({show.title})")
        self.ui.emit_info(f"[blue bold]{escape(show.title)}[/blue bold] has been added")
        return CollectionOutcome(CollectionOutcomeKind.ADDED, entry=entry)

    async def _confirm_show(self, show: Show) -> bool:
        self.ui.emit_detail("Title:", show.title)
        self.ui.emit_detail("Release date:", show.release_date or "-")
        self.ui.emit_detail("Summary:", show.summary or "-")
        return await self.ui.present_confirmation("Is this what you are looking for?")

    async def remove(self) -> CollectionOutcome:
        try:
            return await self._remove()
        except ShowreelError as exc:
            self.ui.emit_error(exc.message)
            return CollectionOutcome(CollectionOutcomeKind.ABORTED, reason=exc.reason)

    async def _remove(self) -> CollectionOutcome:
        entries = self.store.load()
        if not entries:
            raise NoCollectionError("You haven't added any TV shows.")

        choices = show_choices(entries)
        picked = choices.resolve(await self.ui.present_choice("Choose a TV show", choices.labels))

        confirmed = await self.ui.present_confirmation(
            f"Do you really want to remove [blue]{escape(picked.title)}[/blue] from your collection?"
        )
        if not confirmed:
            return CollectionOutcome(CollectionOutcomeKind.CANCELLED, entry=picked)

        if not self.store.remove(picked.id):
            raise NotFoundError("It seems that this TV show has disappeared.")
        self.ui.emit_info(f"[blue bold]{escape(picked.title)}[/blue bold] has been removed")
        return CollectionOutcome(CollectionOutcomeKind.REMOVED, entry=picked)
