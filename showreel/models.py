"""Shared data structures for shows, episodes and torrents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

Quality = Literal["1080p", "720p", "HDTV", "SDTV", "WEBRIP"]
QUALITY_TAGS: tuple[Quality, ...] = ("1080p", "720p", "HDTV", "SDTV", "WEBRIP")
UNKNOWN_QUALITY_LABEL = "unknown"


@dataclass(frozen=True)
class Episode:
    """Single episode as listed by the catalog."""
    number: int | str
    title: Optional[str]
    torrent_source_locator: str


@dataclass(frozen=True)
class Season:
    number: int | str
    episodes: Tuple[Episode, ...] = ()


@dataclass(frozen=True)
class Show:
    """Show record with its nested seasons."""
    id: str
    title: str
    seasons: Tuple[Season, ...] = ()
    release_date: Optional[str] = None
    summary: Optional[str] = None


@dataclass(frozen=True)
class TorrentCandidate:
    """Raw torrent row returned for an episode."""
    title: str
    seeders: int
    leechers: int
    size: str
    magnet_link: str


@dataclass(frozen=True)
class RankedTorrent:
    """Torrent candidate annotated with its inferred quality tag."""
    candidate: TorrentCandidate
    quality: Optional[Quality] = None

    @property
    def seeders(self) -> int:
        return self.candidate.seeders

    @property
    def magnet_link(self) -> str:
        return self.candidate.magnet_link

    @property
    def quality_label(self) -> str:
        return self.quality or UNKNOWN_QUALITY_LABEL


@dataclass(frozen=True)
class CollectionEntry:
    title: str
    id: str
