"""Map catalog JSON payloads onto the show/torrent dataclasses."""

from __future__ import annotations

from typing import Any, Mapping

from showreel import logger
from showreel.catalog.resilience import expect_dict, optional_list_of_dicts
from showreel.models import Episode, Season, Show, TorrentCandidate


def _first(entry: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = entry.get(key)
        if value not in (None, ""):
            return value
    return None


def as_int(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        cleaned = value.replace(",", "").strip()
        if cleaned.isdigit():
            return int(cleaned)
    return None


def _ordinal(value: object) -> int | str:
    number = as_int(value)
    if number is not None:
        return number
    return str(value) if value is not None else ""


def parse_episode(entry: dict) -> Episode:
    locator = _first(entry, "torrentSourceLocator", "torrent_source_locator", "dataHref", "data_href", "locator")
    title = _first(entry, "episodeTitle", "episode_title", "title")
    return Episode(
        number=_ordinal(_first(entry, "episodeNumber", "episode_number", "number")),
        title=str(title) if title is not None else None,
        torrent_source_locator=str(locator or ""),
    )


def parse_season(entry: dict, context: str) -> Season:
    episodes = tuple(
        parse_episode(raw)
        for raw in optional_list_of_dicts(entry, "episodes", context)
    )
    return Season(number=_ordinal(_first(entry, "season", "number", "seasonNumber")), episodes=episodes)


def parse_show(payload: object, show_id: str) -> Show | None:
    """Build a Show from `{"show": {...}}` or a bare show object; None when the payload is empty."""
    if payload is None:
        return None
    root = expect_dict(payload, "show payload")
    if "show" in root:
        if root["show"] is None:
            return None
        root = expect_dict(root["show"], "show payload.show")
    if not root:
        return None

    title = _first(root, "title", "name")
    if not title:
        raise ValueError("show payload is missing a title")
    seasons = tuple(
        parse_season(raw, f"show.seasons[{idx}]")
        for idx, raw in enumerate(optional_list_of_dicts(root, "seasons", "show"))
    )
    release_date = _first(root, "releaseDate", "release_date", "from")
    summary = _first(root, "summary", "overview")
    return Show(
        id=str(_first(root, "id", "imdbId", "imdb_id") or show_id),
        title=str(title),
        seasons=seasons,
        release_date=str(release_date) if release_date is not None else None,
        summary=str(summary) if summary is not None else None,
    )


def parse_torrent(entry: dict, context: str) -> TorrentCandidate | None:
    """Map one torrent row; rows without a magnet link cannot be played and map to None."""
    magnet = _first(entry, "magnetLink", "magnet_link", "magnet")
    if not magnet:
        logger.warning(f"Skipping {context}: missing a magnet link")
        return None
    return TorrentCandidate(
        title=str(_first(entry, "title", "name") or ""),
        seeders=max(as_int(entry.get("seeders")) or 0, 0),
        leechers=max(as_int(entry.get("leechers")) or 0, 0),
        size=str(_first(entry, "size") or "?"),
        magnet_link=str(magnet),
    )


def parse_torrents(payload: object) -> list[TorrentCandidate] | None:
    """Accept `{"torrents": [...]}` or a bare list; None for an empty/null payload."""
    if payload is None:
        return None
    if isinstance(payload, list):
        rows = [expect_dict(row, f"torrents[{idx}]") for idx, row in enumerate(payload)]
    else:
        root = expect_dict(payload, "torrents payload")
        if root.get("torrents") is None:
            return None
        rows = optional_list_of_dicts(root, "torrents", "torrents payload")
    parsed = (parse_torrent(row, f"torrents[{idx}]") for idx, row in enumerate(rows))
    return [torrent for torrent in parsed if torrent is not None]
