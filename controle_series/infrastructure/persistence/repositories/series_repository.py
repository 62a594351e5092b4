"""
Implementation SQLModel du repository Series.

Implemente l'interface ISeriesRepository pour la persistance des series,
de leurs saisons et de leurs episodes via SQLModel.
"""

from typing import Optional

from loguru import logger
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from controle_series.core.entities.catalog import Season, Series
from controle_series.core.exceptions import SeriesNotFoundError
from controle_series.core.ports.repositories import ISeriesRepository
from controle_series.infrastructure.persistence.models import (
    EpisodeModel,
    SeasonModel,
    SeriesModel,
)
from controle_series.infrastructure.persistence.repositories.mapping import (
    season_to_model,
    series_to_entity,
    series_to_model,
)


class SQLModelSeriesRepository(ISeriesRepository):
    """
    Repository SQLModel pour les series.

    Implemente ISeriesRepository avec conversion bidirectionnelle
    entre l'entite Series (domaine) et SeriesModel (persistance).
    Les saisons et episodes suivent leur serie en cascade.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: SeriesModel) -> Series:
        return series_to_entity(model)

    def _to_model(self, entity: Series) -> SeriesModel:
        return series_to_model(entity)

    def find_all(self) -> list[Series]:
        """Liste toutes les series, triees par nom."""
        statement = (
            select(SeriesModel)
            .options(selectinload(SeriesModel.seasons).selectinload(SeasonModel.episodes))
            .order_by(SeriesModel.name, SeriesModel.id)
        )
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def get_by_id(self, series_id: int) -> Optional[Series]:
        """Recupere une serie par son ID interne."""
        model = self._session.get(SeriesModel, series_id)
        if model:
            return self._to_entity(model)
        return None

    def get_name(self, series_id: int) -> Optional[str]:
        """Retourne le nom d'une serie sans charger ses saisons."""
        statement = select(SeriesModel.name).where(SeriesModel.id == series_id)
        return self._session.exec(statement).first()

    def save(self, series: Series, flush: bool = False) -> Series:
        """
        Sauvegarde une serie (insertion ou mise a jour).

        En mise a jour, les saisons et episodes sont rapproches par ID :
        les enfants connus sont mis a jour, les nouveaux sont inseres et
        ceux absents de l'entite sont supprimes.

        Args :
            series : L'entite a sauvegarder
            flush : Confirme la transaction si True

        Retourne :
            L'entite relue depuis la base (avec les IDs attribues)

        Raises :
            SeriesNotFoundError : si series.id ne correspond a aucune serie
        """
        if series.id is None:
            model = self._to_model(series)
        else:
            model = self._session.get(SeriesModel, series.id)
            if model is None:
                raise SeriesNotFoundError(series.id)
            self._apply(series, model)

        self._session.add(model)
        # Attribue les IDs sans confirmer la transaction
        self._session.flush()
        if flush:
            self.flush()
            self._session.refresh(model)
        return self._to_entity(model)

    def rename(self, series_id: int, name: str, flush: bool = False) -> str:
        """
        Renomme une serie sans charger ni reecrire ses saisons et episodes.

        Les etats "vu" confirmes entre-temps par une autre session sont
        donc preserves.

        Retourne :
            L'ancien nom de la serie

        Raises :
            SeriesNotFoundError : si aucune serie ne porte cet ID
        """
        model = self._session.get(SeriesModel, series_id)
        if model is None:
            raise SeriesNotFoundError(series_id)
        previous_name = model.name
        model.name = name
        self._session.add(model)
        self._session.flush()
        if flush:
            self.flush()
        return previous_name

    def remove_by_id(self, series_id: int) -> None:
        """Supprime une serie et, en cascade, ses saisons et episodes."""
        model = self._session.get(SeriesModel, series_id)
        if model is None:
            raise SeriesNotFoundError(series_id)
        name = model.name
        self._session.delete(model)
        self._session.commit()
        logger.info(f"Serie supprimee: {name} (id={series_id})")

    def flush(self) -> None:
        """Confirme les modifications en attente."""
        self._session.commit()

    def _apply(self, series: Series, model: SeriesModel) -> None:
        model.name = series.name

        known = {season_model.id: season_model for season_model in model.seasons}
        season_models = []
        for season in series.seasons:
            season_model = known.get(season.id) if season.id is not None else None
            if season_model is None:
                season_model = season_to_model(season)
            else:
                season_model.number = season.number
                self._apply_episodes(season, season_model)
            season_models.append(season_model)
        # Les saisons non reprises sont supprimees (delete-orphan)
        model.seasons = season_models

    def _apply_episodes(self, season: Season, model: SeasonModel) -> None:
        known = {episode_model.id: episode_model for episode_model in model.episodes}
        episode_models = []
        for episode in season.episodes:
            episode_model = known.get(episode.id) if episode.id is not None else None
            if episode_model is None:
                episode_model = EpisodeModel(number=episode.number)
            episode_model.number = episode.number
            episode_model.watched = episode.watched
            episode_models.append(episode_model)
        model.episodes = episode_models
