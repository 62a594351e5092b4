"""
Fixtures pytest partagees pour les tests Controle Series.

Ce module contient les fixtures communes utilisees dans les tests:
- Engine SQLite en memoire et sessions
- Horloge controlable pour le cache
- Client HTTP FastAPI branche sur la base de test
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

from controle_series.adapters.cache import ReadThroughCache
from controle_series.infrastructure.persistence.database import create_db_engine, init_db
from controle_series.web.app import create_app
from controle_series.web.deps import get_db_session, get_season_cache


class FakeClock:
    """Horloge monotone avancee manuellement."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Base SQLite en memoire partagee entre les sessions d'un meme test."""
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def season_cache(clock: FakeClock) -> ReadThroughCache:
    return ReadThroughCache(default_ttl=10, clock=clock)


@pytest.fixture
def client(engine: Engine, season_cache: ReadThroughCache) -> TestClient:
    """
    Client HTTP sur l'application complete.

    Chaque requete recoit sa propre session sur la base de test ; le lifespan
    n'est pas execute, la base du fichier de configuration n'est jamais touchee.
    """
    app = create_app()

    def _session() -> Iterator[Session]:
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _session
    app.dependency_overrides[get_season_cache] = lambda: season_cache
    return TestClient(app)
