"""
Service catalogue : creation de series et lecture des saisons.

La creation construit l'arbre complet (serie, saisons, episodes) en memoire ;
la persistance en cascade est laissee au repository.
"""

from typing import Optional

from loguru import logger

from ..adapters.cache import TTL, ReadThroughCache, cache_key
from ..core.entities.catalog import Episode, Season, Series
from ..core.ports.repositories import ISeasonRepository


def build_series(name: str, seasons_quantity: int, episodes_per_season: int) -> Series:
    """
    Construit une serie transiente avec ses saisons et episodes.

    Les saisons sont numerotees de 1 a seasons_quantity, et chacune
    contient les episodes 1 a episodes_per_season.

    Args:
        name: Nom de la serie
        seasons_quantity: Nombre de saisons
        episodes_per_season: Nombre d'episodes par saison

    Returns:
        La serie non persistee
    """
    series = Series(name=name)
    for season_number in range(1, seasons_quantity + 1):
        season = Season(number=season_number)
        for episode_number in range(1, episodes_per_season + 1):
            season.add_episode(Episode(number=episode_number))
        series.add_season(season)

    logger.debug(
        f"Serie construite: {name} ({seasons_quantity} saisons x {episodes_per_season} episodes)"
    )
    return series


def seasons_cache_key(series_id: int) -> str:
    """Cle de cache de la liste des saisons d'une serie."""
    return cache_key("series", series_id, "seasons")


def load_seasons(
    cache: ReadThroughCache,
    season_repo: ISeasonRepository,
    series_id: int,
    ttl: Optional[TTL] = None,
) -> list[Season]:
    """
    Retourne les saisons d'une serie en passant par le cache.

    Le loader recopie la liste dans une liste Python : la valeur stockee
    ne depend plus de la session du repository.
    """
    return cache.get(
        seasons_cache_key(series_id),
        lambda: list(season_repo.list_by_series(series_id)),
        ttl,
    )
