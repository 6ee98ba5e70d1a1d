"""JSON file persistence for the saved show collection."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Sequence

from showreel import logger
from showreel.models import CollectionEntry

COLLECTION_KEY = "shows"
LEGACY_COLLECTION_KEY = "tvShows"


def _entry_from_row(row: object, idx: int) -> CollectionEntry:
    if not isinstance(row, dict):
        raise ValueError(f"Collection entry {idx} must be an object")
    show_id = row.get("id") or row.get("imdbId")
    title = row.get("title")
    if not isinstance(show_id, str) or not show_id:
        raise ValueError(f"Collection entry {idx} is missing an id")
    if not isinstance(title, str):
        raise ValueError(f"Collection entry {idx} is missing a title")
    return CollectionEntry(title=title, id=show_id)


class JsonCollectionStore:
    """Reads and writes `{"shows": [{"title", "id"}, ...]}`; a missing file is an empty collection."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> list[CollectionEntry]:
        if not self.path.exists():
            return []
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as exc:
            raise ValueError(f"Failed to read collection {self.path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise ValueError(f"Collection {self.path} root must be an object")
        rows = payload.get(COLLECTION_KEY, payload.get(LEGACY_COLLECTION_KEY)) or []
        if not isinstance(rows, list):
            raise ValueError(f"Collection {self.path} '{COLLECTION_KEY}' must be an array")
        return [_entry_from_row(row, idx) for idx, row in enumerate(rows)]

    def save(self, entries: Sequence[CollectionEntry]) -> None:
        payload = {COLLECTION_KEY: [{"title": entry.title, "id": entry.id} for entry in entries]}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".collection-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Saved {len(entries)} show(s) to {self.path}")

    def contains(self, show_id: str) -> bool:
        return any(entry.id == show_id for entry in self.load())

    def remove(self, show_id: str) -> bool:
        """Drop `show_id`; returns False (and writes nothing) when it is not stored."""
        entries = self.load()
        kept = [entry for entry in entries if entry.id != show_id]
        if len(kept) == len(entries):
            return False
        self.save(kept)
        return True
