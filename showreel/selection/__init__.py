"""Filtering, quality inference and ranking for the episode picker."""

from .choices import (
    ChoiceList,
    build_choice_list,
    episode_choices,
    resolve,
    season_choices,
    show_choices,
)
from .quality import QUALITY_RULES, deduce_quality_from_torrent
from .ranking import rank_torrents, torrent_choices, torrent_label

__all__ = [
    "ChoiceList",
    "build_choice_list",
    "resolve",
    "show_choices",
    "season_choices",
    "episode_choices",
    "QUALITY_RULES",
    "deduce_quality_from_torrent",
    "rank_torrents",
    "torrent_choices",
    "torrent_label",
]
