"""
Catalog entities.

Series own Seasons, Seasons own Episodes. Children keep a back-reference
to their owner; add/remove keep both sides consistent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


def _contains(items: list, item: object) -> bool:
    return any(existing is item for existing in items)


def _discard(items: list, item: object) -> bool:
    for index, existing in enumerate(items):
        if existing is item:
            del items[index]
            return True
    return False


@dataclass(eq=False)
class Episode:
    """
    Individual episode of a season.

    Attributes:
        number: Episode number within its season (1-indexed)
        id: Internal database ID (None until persisted)
        watched: Whether the episode has been watched
        season: Owning Season
    """

    number: int
    id: Optional[int] = None
    watched: bool = False
    season: Optional[Season] = field(default=None, repr=False)


@dataclass(eq=False)
class Season:
    """
    Season of a TV series.

    Attributes:
        number: Season number (1-indexed)
        id: Internal database ID (None until persisted)
        series: Owning Series
        episodes: Episodes of the season, in insertion order
    """

    number: int
    id: Optional[int] = None
    series: Optional[Series] = field(default=None, repr=False)
    episodes: list[Episode] = field(default_factory=list)

    def add_episode(self, episode: Episode) -> Season:
        if not _contains(self.episodes, episode):
            self.episodes.append(episode)
            episode.season = self
        return self

    def remove_episode(self, episode: Episode) -> Season:
        # The back-reference may already point at another season after a re-parent
        if _discard(self.episodes, episode) and episode.season is self:
            episode.season = None
        return self

    @property
    def watched_count(self) -> int:
        """Number of watched episodes in the season."""
        return sum(1 for episode in self.episodes if episode.watched)


@dataclass(eq=False)
class Series:
    """
    TV series tracked by the catalog.

    Attributes:
        name: Series name
        id: Internal database ID (None until persisted)
        seasons: Seasons of the series, in insertion order
    """

    name: str
    id: Optional[int] = None
    seasons: list[Season] = field(default_factory=list)

    def add_season(self, season: Season) -> Series:
        if not _contains(self.seasons, season):
            self.seasons.append(season)
            season.series = self
        return self

    def remove_season(self, season: Season) -> Series:
        if _discard(self.seasons, season) and season.series is self:
            season.series = None
        return self

    @property
    def episode_count(self) -> int:
        """Total number of episodes across all seasons."""
        return sum(len(season.episodes) for season in self.seasons)
