from __future__ import annotations

import pytest

from showreel.selection.quality import QUALITY_RULES, deduce_quality_from_torrent


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Show.S01E01.1080p.WEB-DL.x264", "1080p"),
        ("Show.S01E01.720p.HDTV.x264", "720p"),
        ("Show.S01E01.HDTV.HD.x264", "HDTV"),
        ("Show.S01E01.hdtv.x264", "HDTV"),
        ("Show S01E01 HD", "HDTV"),
        ("Show.S01E01.SDTV.XviD", "SDTV"),
        ("Show.S01E01.WEBRip.x264", "WEBRIP"),
        ("Show.S01E01.xvid", None),
        ("", None),
    ],
)
def test_deduce_quality_uses_first_matching_rule(title: str, expected: str | None) -> None:
    assert deduce_quality_from_torrent(title) == expected


def test_resolution_beats_source_markers() -> None:
    # Both HDTV and 1080p present: the 1080p rule is evaluated first.
    assert deduce_quality_from_torrent("Show.S02E03.HDTV.1080p") == "1080p"


def test_hd_rule_precedes_sd_rule() -> None:
    assert deduce_quality_from_torrent("Show.S01E01.HDTV.HD.x264") == "HDTV"
    assert deduce_quality_from_torrent("Show.S01E01.SD.HD") == "HDTV"


def test_substring_matches_anywhere_in_title() -> None:
    # "sd" inside a word still counts, as in the original matcher.
    assert deduce_quality_from_torrent("Tuesday.Night.S01E01") == "SDTV"


def test_deduce_quality_is_deterministic() -> None:
    title = "Some.Show.S03E07.WEB.h264"
    assert {deduce_quality_from_torrent(title) for _ in range(5)} == {"WEBRIP"}


def test_rule_order_is_fixed() -> None:
    assert [tag for tag, _ in QUALITY_RULES] == ["1080p", "720p", "HDTV", "SDTV", "WEBRIP"]
