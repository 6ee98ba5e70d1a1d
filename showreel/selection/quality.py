"""Coarse quality tag inference from raw torrent titles."""

from __future__ import annotations

from typing import Callable, Optional

from showreel.models import Quality

QualityPredicate = Callable[[str], bool]


def _contains_any(*markers: str) -> QualityPredicate:
    lowered = tuple(marker.lower() for marker in markers)

    def _matches(title: str) -> bool:
        text = title.lower()
        return any(marker in text for marker in lowered)

    return _matches


# Evaluated top to bottom; "HD" also occurs in "HDTV" titles, so order decides.
QUALITY_RULES: tuple[tuple[Quality, QualityPredicate], ...] = (
    ("1080p", _contains_any("1080p")),
    ("720p", _contains_any("720p")),
    ("HDTV", _contains_any("HDTV", "HD")),
    ("SDTV", _contains_any("SDTV", "SD")),
    ("WEBRIP", _contains_any("WEB")),
)


def deduce_quality_from_torrent(title: str) -> Optional[Quality]:
    """Return the tag of the first rule matching `title`, or None."""
    for quality, matches in QUALITY_RULES:
        if matches(title or ""):
            return quality
    return None
