"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance du catalogue.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQLite via SQLModel, en mémoire pour les tests, etc.).

Les entités retournées sont entièrement matérialisées : elles ne dépendent plus
de la session qui les a chargées et peuvent être mises en cache.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Optional

from ..entities.catalog import Episode, Season, Series


class ISeriesRepository(ABC):
    """
    Interface de stockage des séries.

    Définit les opérations pour persister et récupérer les entités Series
    avec leurs saisons et épisodes.
    """

    @abstractmethod
    def find_all(self) -> list[Series]:
        """Liste toutes les séries, triées par nom."""
        ...

    @abstractmethod
    def get_by_id(self, series_id: int) -> Optional[Series]:
        """Récupère une série par son ID interne."""
        ...

    @abstractmethod
    def get_name(self, series_id: int) -> Optional[str]:
        """Retourne le nom d'une serie sans charger ses saisons."""
        ...

    @abstractmethod
    def save(self, series: Series, flush: bool = False) -> Series:
        """Sauvegarde une série et ses enfants (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def rename(self, series_id: int, name: str, flush: bool = False) -> str:
        """Renomme une série sans toucher à ses enfants. Retourne l'ancien nom."""
        ...

    @abstractmethod
    def remove_by_id(self, series_id: int) -> None:
        """Supprime une série et ses descendants. Lève SeriesNotFoundError si absente."""
        ...

    @abstractmethod
    def flush(self) -> None:
        """Confirme les modifications en attente."""
        ...


class ISeasonRepository(ABC):
    """
    Interface de stockage des saisons.

    Définit les opérations de lecture des saisons et de mise à jour
    de l'état "vu" des épisodes.
    """

    @abstractmethod
    def get_by_id(self, season_id: int) -> Optional[Season]:
        """Récupère une saison avec sa série et ses épisodes."""
        ...

    @abstractmethod
    def list_by_series(self, series_id: int) -> list[Season]:
        """Liste les saisons d'une série, triées par numéro."""
        ...

    @abstractmethod
    def save_episodes(self, episodes: Iterable[Episode], flush: bool = False) -> None:
        """Enregistre l'état "vu" des épisodes."""
        ...

    @abstractmethod
    def flush(self) -> None:
        """Confirme les modifications en attente."""
        ...
