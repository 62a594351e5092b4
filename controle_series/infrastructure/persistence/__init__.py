"""
Module de persistance SQLite pour Controle Series.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine, session factory, initialisation
- models.py : Modeles SQLModel representant les tables series, seasons, episodes
- repositories/ : Conversion entre modeles DB et entites de domaine

Usage:
    from controle_series.infrastructure.persistence import init_db, get_session

    init_db()  # Cree les tables si necessaire
    for session in get_session():
        ...  # session fermee a la sortie de la boucle
"""

from controle_series.infrastructure.persistence.database import (
    get_engine,
    get_session,
    init_db,
)
from controle_series.infrastructure.persistence.models import (
    EpisodeModel,
    SeasonModel,
    SeriesModel,
)

__all__ = [
    "get_engine",
    "get_session",
    "init_db",
    "SeriesModel",
    "SeasonModel",
    "EpisodeModel",
]
