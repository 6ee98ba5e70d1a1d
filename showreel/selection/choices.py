"""Choice-list construction and resolution for the show/season/episode levels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Sequence, TypeVar

from showreel.errors import ChoiceConsistencyError
from showreel.models import CollectionEntry, Episode, Season, Show

_T = TypeVar("_T")


@dataclass(frozen=True)
class ChoiceList(Generic[_T]):
    """Parallel labels/entities; index i of one always describes index i of the other."""

    labels: tuple[str, ...]
    entities: tuple[_T, ...]

    def __len__(self) -> int:
        return len(self.labels)

    def is_empty(self) -> bool:
        return not self.labels

    def resolve(self, picked_label: str) -> _T:
        return resolve(picked_label, self.labels, self.entities)


def build_choice_list(
    entities: Iterable[_T],
    label: Callable[[_T], str],
    presentable: Callable[[_T], bool] | None = None,
) -> ChoiceList[_T]:
    kept = [entity for entity in entities if presentable is None or presentable(entity)]
    return ChoiceList(
        labels=tuple(label(entity) for entity in kept),
        entities=tuple(kept),
    )


def resolve(picked_label: str, labels: Sequence[str], entities: Sequence[_T]) -> _T:
    """Return the entity behind the first label equal to `picked_label`."""
    for idx, candidate in enumerate(labels):
        if candidate == picked_label:
            return entities[idx]
    raise ChoiceConsistencyError(f"Chooser returned a label that was not offered: {picked_label!r}")


def season_label(season: Season) -> str:
    return str(season.number)


def episode_label(episode: Episode) -> str:
    return f"{episode.number}) {episode.title}"


def season_is_presentable(season: Season) -> bool:
    return len(season.episodes) > 0


def episode_is_presentable(episode: Episode) -> bool:
    return bool(episode.title)


def show_choices(shows: Iterable[Show | CollectionEntry]) -> ChoiceList:
    return build_choice_list(shows, lambda show: show.title)


def season_choices(seasons: Iterable[Season]) -> ChoiceList[Season]:
    return build_choice_list(seasons, season_label, season_is_presentable)


def episode_choices(episodes: Iterable[Episode]) -> ChoiceList[Episode]:
    return build_choice_list(episodes, episode_label, episode_is_presentable)
