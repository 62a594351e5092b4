"""
Configuration de la base de donnees pour Controle Series.

Ce module fournit :
- Engine SQLAlchemy configure pour le multi-thread (SQLite)
- Session factory sous forme de generateur
- Fonction d'initialisation des tables

La base de donnees est configuree via CONTROLE_SERIES_DATABASE_URL
(defaut: sqlite:///controle_series.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from sqlalchemy import Engine, event
from sqlmodel import Session, SQLModel, create_engine

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Active ON DELETE CASCADE sur SQLite (desactive par defaut)."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(db_url: str, **kwargs) -> Engine:
    """
    Cree un engine pour l'URL donnee.

    Pour SQLite, le repertoire parent du fichier est cree si besoin et
    les cles etrangeres sont activees a chaque connexion.
    """
    if db_url.startswith("sqlite"):
        if db_url.startswith("sqlite:///") and not db_url.startswith("sqlite:///:memory:"):
            db_path = Path(db_url.replace("sqlite:///", ""))
            db_path.parent.mkdir(exist_ok=True, parents=True)
        kwargs.setdefault("connect_args", {"check_same_thread": False})

    engine = create_engine(db_url, echo=False, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def get_engine() -> Engine:
    """
    Retourne l'engine global, en le creant si necessaire.

    Utilise la configuration de l'application pour l'URL de la BDD.
    """
    global _engine
    if _engine is None:
        from controle_series.config import Settings

        _engine = create_db_engine(Settings().database_url)
    return _engine


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Prevu pour les dependances FastAPI (Depends) : la session est fermee
    quand le generateur est epuise, a la fin de la requete.

    Yields:
        Session SQLModel connectee a l'engine global
    """
    with Session(get_engine()) as session:
        yield session


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from controle_series.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine or get_engine())
