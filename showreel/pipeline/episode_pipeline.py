"""Sequential show -> season -> episode -> torrent picker."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

from showreel import logger
from showreel.errors import (
    EmptyChoiceSetError,
    FetchFailureError,
    NoCollectionError,
    NotFoundError,
    ShowreelError,
)
from showreel.models import CollectionEntry, Episode, RankedTorrent, Season, Show
from showreel.protocols import CatalogResolver, CollectionRepository, UserInterface
from showreel.selection.choices import ChoiceList, episode_choices, season_choices, show_choices
from showreel.selection.ranking import torrent_choices


class PipelineState(enum.Enum):
    SELECT_SHOW = "select_show"
    SELECT_SEASON = "select_season"
    SELECT_EPISODE = "select_episode"
    FETCH_TORRENTS = "fetch_torrents"
    SELECT_TORRENT = "select_torrent"
    RESOLVED = "resolved"
    ABORTED = "aborted"


@dataclass(frozen=True)
class PipelineOutcome:
    state: PipelineState
    magnet: str | None = None
    reason: str | None = None
    aborted_at: PipelineState | None = None
    show: Show | None = None
    season: Season | None = None
    episode: Episode | None = None
    torrent: RankedTorrent | None = None

    @property
    def resolved(self) -> bool:
        return self.state is PipelineState.RESOLVED


@dataclass
class _Picks:
    show: Show | None = None
    season: Season | None = None
    episode: Episode | None = None
    torrent: RankedTorrent | None = None


class EpisodePipeline:
    """
    Walk the collection down to a single torrent and return its magnet.

    Each stage either hands its pick to the next one or aborts the run with a
    reason; failures are reported through the UI and never retried here.
    """

    def __init__(self, store: CollectionRepository, resolver: CatalogResolver, ui: UserInterface) -> None:
        self.store = store
        self.resolver = resolver
        self.ui = ui
        self.state = PipelineState.SELECT_SHOW

    async def run(self) -> PipelineOutcome:
        self.state = PipelineState.SELECT_SHOW
        picks = _Picks()
        try:
            entry = await self._select_show()
            self.state = PipelineState.SELECT_SEASON
            picks.show = await self._load_show(entry)
            picks.season = await self._pick(
                season_choices(picks.show.seasons),
                "Pick a season",
                "This TV show has no seasons with episodes yet.",
            )
            self.state = PipelineState.SELECT_EPISODE
            picks.episode = await self._pick(
                episode_choices(picks.season.episodes),
                "Pick an episode",
                "This season has no episodes with data yet.",
            )
            self.state = PipelineState.FETCH_TORRENTS
            torrents = await self._fetch_torrents(picks.episode)
            self.state = PipelineState.SELECT_TORRENT
            picks.torrent = await self._pick(
                torrent_choices(torrents),
                "Pick a torrent",
                "No torrents found for this episode.",
            )
        except ShowreelError as exc:
            aborted_at = self.state
            self.state = PipelineState.ABORTED
            self.ui.emit_error(exc.message)
            logger.debug(f"Pipeline aborted at {aborted_at.value}: {exc.reason}")
            return PipelineOutcome(
                state=PipelineState.ABORTED,
                reason=exc.reason,
                aborted_at=aborted_at,
                show=picks.show,
                season=picks.season,
                episode=picks.episode,
            )

        self.state = PipelineState.RESOLVED
        return PipelineOutcome(
            state=PipelineState.RESOLVED,
            magnet=picks.torrent.magnet_link,
            show=picks.show,
            season=picks.season,
            episode=picks.episode,
            torrent=picks.torrent,
        )

    async def _select_show(self) -> CollectionEntry:
        entries = self.store.load()
        if not entries:
            raise NoCollectionError("You haven't added any TV shows.")
        return await self._pick(show_choices(entries), "Choose a TV show", "You haven't added any TV shows.")

    async def _load_show(self, entry: CollectionEntry) -> Show:
        with self.ui.status("Loading show information"):
            show = await self.resolver.resolve_show_by_id(entry.id)
        if show is None:
            raise NotFoundError("It seems that this TV show has disappeared.")
        return show

    async def _fetch_torrents(self, episode: Episode) -> Sequence:
        with self.ui.status("Loading episode information"):
            torrents = await self.resolver.resolve_torrents_for_episode(episode.torrent_source_locator)
        if torrents is None:
            raise FetchFailureError("Failed to fetch torrents for the episode.")
        logger.debug(f"Fetched {len(torrents)} torrent(s) for episode {episode.number}")
        return torrents

    async def _pick(self, choices: ChoiceList, prompt: str, empty_message: str):
        if choices.is_empty():
            raise EmptyChoiceSetError(empty_message)
        picked_label = await self.ui.present_choice(prompt, choices.labels)
        return choices.resolve(picked_label)
