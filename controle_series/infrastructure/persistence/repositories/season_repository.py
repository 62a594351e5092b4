"""
Implementation SQLModel du repository Season.

Implemente l'interface ISeasonRepository : lecture des saisons d'une serie
et mise a jour de l'etat "vu" des episodes.
"""

from collections.abc import Iterable
from typing import Optional

from sqlmodel import Session

from controle_series.core.entities.catalog import Episode, Season
from controle_series.core.ports.repositories import ISeasonRepository
from controle_series.infrastructure.persistence.models import (
    EpisodeModel,
    SeasonModel,
    SeriesModel,
)
from controle_series.infrastructure.persistence.repositories.mapping import (
    series_to_entity,
)


class SQLModelSeasonRepository(ISeasonRepository):
    """
    Repository SQLModel pour les saisons.

    Les saisons retournees sont rattachees a une entite Series complete,
    ce qui garantit que season.series.seasons contient bien la saison.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def get_by_id(self, season_id: int) -> Optional[Season]:
        """Recupere une saison avec sa serie et ses episodes."""
        model = self._session.get(SeasonModel, season_id)
        if model is None or model.series is None:
            return None
        series = series_to_entity(model.series)
        return next(season for season in series.seasons if season.id == season_id)

    def list_by_series(self, series_id: int) -> list[Season]:
        """
        Liste les saisons d'une serie, triees par numero.

        Retourne une liste vide si la serie n'existe pas.
        """
        model = self._session.get(SeriesModel, series_id)
        if model is None:
            return []
        return list(series_to_entity(model).seasons)

    def save_episodes(self, episodes: Iterable[Episode], flush: bool = False) -> None:
        """Enregistre l'etat "vu" des episodes deja persistes."""
        for episode in episodes:
            if episode.id is None:
                continue
            model = self._session.get(EpisodeModel, episode.id)
            if model is None:
                continue
            model.watched = episode.watched
            self._session.add(model)
        if flush:
            self.flush()

    def flush(self) -> None:
        """Confirme les modifications en attente."""
        self._session.commit()
