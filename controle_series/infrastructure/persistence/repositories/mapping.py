"""
Conversion entre modeles DB et entites de domaine.

Les entites produites sont entierement materialisees : les collections
SQLAlchemy paresseuses sont parcourues ici, pendant que la session est
ouverte, et recopiees dans des listes Python.
"""

from controle_series.core.entities.catalog import Episode, Season, Series
from controle_series.infrastructure.persistence.models import (
    EpisodeModel,
    SeasonModel,
    SeriesModel,
)


def series_to_entity(model: SeriesModel) -> Series:
    """Convertit une serie DB (avec saisons et episodes) en entite."""
    series = Series(name=model.name, id=model.id)
    for season_model in model.seasons:
        series.add_season(season_to_entity(season_model))
    return series


def season_to_entity(model: SeasonModel) -> Season:
    season = Season(number=model.number, id=model.id)
    for episode_model in model.episodes:
        season.add_episode(
            Episode(number=episode_model.number, id=episode_model.id, watched=episode_model.watched)
        )
    return season


def series_to_model(entity: Series) -> SeriesModel:
    """Convertit une nouvelle serie (et ses enfants) en modeles DB."""
    return SeriesModel(
        name=entity.name,
        seasons=[season_to_model(season) for season in entity.seasons],
    )


def season_to_model(entity: Season) -> SeasonModel:
    return SeasonModel(
        number=entity.number,
        episodes=[
            EpisodeModel(number=episode.number, watched=episode.watched)
            for episode in entity.episodes
        ],
    )
