"""Deduplicate torrent candidates by quality tag and rank them by seeders."""

from __future__ import annotations

from typing import Iterable, Optional

from showreel.models import Quality, RankedTorrent, TorrentCandidate
from showreel.selection.choices import ChoiceList, build_choice_list
from showreel.selection.quality import deduce_quality_from_torrent


def annotate_quality(candidates: Iterable[TorrentCandidate]) -> list[RankedTorrent]:
    return [
        RankedTorrent(candidate=candidate, quality=deduce_quality_from_torrent(candidate.title))
        for candidate in candidates
    ]


def rank_torrents(candidates: Iterable[TorrentCandidate]) -> list[RankedTorrent]:
    """
    Keep the highest-seeded candidate per quality tag, best first.

    The list is stable-sorted ascending and then reversed rather than sorted
    descending: candidates with equal seeders end up in reverse input order,
    which is the tie-break users of the old tool are used to.
    """
    annotated = annotate_quality(candidates)
    ordered = sorted(annotated, key=lambda item: item.seeders)
    ordered.reverse()

    seen: set[Optional[Quality]] = set()
    ranked: list[RankedTorrent] = []
    for item in ordered:
        if item.quality in seen:
            continue
        seen.add(item.quality)
        ranked.append(item)
    return ranked


def torrent_label(item: RankedTorrent) -> str:
    candidate = item.candidate
    return f"▲{candidate.seeders} ▼{candidate.leechers} - {candidate.size} - {item.quality_label}"


def torrent_choices(candidates: Iterable[TorrentCandidate]) -> ChoiceList[RankedTorrent]:
    return build_choice_list(rank_torrents(candidates), torrent_label)
