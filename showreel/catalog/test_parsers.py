from __future__ import annotations

import pytest

from showreel import logger as showreel_logger
from showreel.catalog.parsers import as_int, parse_show, parse_torrents
from showreel.models import Episode, TorrentCandidate


def test_parse_show_maps_original_catalog_fields() -> None:
    payload = {
        "show": {
            "title": "Mr. Robot",
            "from": "2015",
            "summary": "A hacker.",
            "seasons": [
                {"season": 1, "episodes": []},
                {
                    "season": "2",
                    "episodes": [
                        {"episodeNumber": 1, "episodeTitle": "Pilot", "dataHref": "/ep/1"},
                        {"episodeNumber": "2", "episodeTitle": None, "dataHref": "/ep/2"},
                    ],
                },
            ],
        }
    }

    show = parse_show(payload, "tt4158110")

    assert show is not None
    assert show.id == "tt4158110"
    assert show.title == "Mr. Robot"
    assert show.release_date == "2015"
    assert [season.number for season in show.seasons] == [1, 2]
    assert show.seasons[0].episodes == ()
    assert show.seasons[1].episodes == (
        Episode(number=1, title="Pilot", torrent_source_locator="/ep/1"),
        Episode(number=2, title=None, torrent_source_locator="/ep/2"),
    )


def test_parse_show_accepts_bare_snake_case_object() -> None:
    show = parse_show(
        {
            "id": "tt5753856",
            "title": "Dark",
            "seasons": [{"number": 1, "episodes": [{"number": 1, "title": "Secrets", "torrent_source_locator": "x"}]}],
        },
        "ignored",
    )

    assert show is not None
    assert show.id == "tt5753856"
    assert show.seasons[0].episodes[0].title == "Secrets"


@pytest.mark.parametrize("payload", [None, {}, {"show": None}])
def test_parse_show_empty_payload_is_none(payload) -> None:
    assert parse_show(payload, "tt0") is None


@pytest.mark.parametrize(
    "payload",
    [
        ["not", "a", "dict"],
        {"show": {"seasons": []}},
        {"show": {"title": "X", "seasons": {"season": 1}}},
        {"show": {"title": "X", "seasons": [{"season": 1, "episodes": ["bad"]}]}},
    ],
)
def test_parse_show_rejects_malformed_payloads(payload) -> None:
    with pytest.raises(ValueError):
        parse_show(payload, "tt0")


def test_parse_torrents_wrapped_and_bare() -> None:
    row = {"title": "Show.720p", "seeders": "1,204", "leechers": 7, "size": "700 MB", "magnet": "magnet:?xt=1"}
    expected = [TorrentCandidate("Show.720p", 1204, 7, "700 MB", "magnet:?xt=1")]

    assert parse_torrents({"torrents": [row]}) == expected
    assert parse_torrents([row]) == expected


def test_parse_torrents_defaults_and_clamps_counts() -> None:
    torrents = parse_torrents([{"name": "Show", "seeders": -3, "magnetLink": "magnet:?xt=2"}])

    assert torrents == [TorrentCandidate("Show", 0, 0, "?", "magnet:?xt=2")]


def test_parse_torrents_null_is_failure_and_empty_list_is_empty() -> None:
    assert parse_torrents(None) is None
    assert parse_torrents({"torrents": None}) is None
    assert parse_torrents({"torrents": []}) == []


def test_parse_torrents_skips_rows_without_magnet(monkeypatch: pytest.MonkeyPatch) -> None:
    warnings: list[str] = []
    monkeypatch.setattr(showreel_logger, "warning", warnings.append)

    torrents = parse_torrents(
        {
            "torrents": [
                {"title": "Show.1080p", "seeders": 9, "magnet": "magnet:?xt=good"},
                {"title": "Broken.720p", "seeders": 40, "leechers": 2},
            ]
        }
    )

    assert torrents == [TorrentCandidate("Show.1080p", 9, 0, "?", "magnet:?xt=good")]
    assert warnings == ["Skipping torrents[1]: missing a magnet link"]


def test_parse_torrents_without_any_magnet_is_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(showreel_logger, "warning", lambda _msg: None)

    assert parse_torrents([{"title": "Show", "seeders": 1}]) == []


@pytest.mark.parametrize(
    ("value", "expected"),
    [(3, 3), (2.9, 2), ("1,000", 1000), (" 12 ", 12), ("n/a", None), (None, None), (True, None)],
)
def test_as_int(value, expected) -> None:
    assert as_int(value) == expected
