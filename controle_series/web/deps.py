"""
Dépendances partagées de l'application web.

Fournit les templates Jinja2 et les dépendances FastAPI (session, repositories,
cache des saisons) injectées explicitement dans les routes.
"""

import tomllib
from collections.abc import Generator
from pathlib import Path
from typing import Optional

from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates
from sqlmodel import Session

from ..adapters.cache import ReadThroughCache
from ..core.ports.repositories import ISeasonRepository, ISeriesRepository
from ..infrastructure.persistence.database import get_session
from ..infrastructure.persistence.repositories import (
    SQLModelSeasonRepository,
    SQLModelSeriesRepository,
)

_WEB_DIR = Path(__file__).parent
_PROJECT_ROOT = _WEB_DIR.parent.parent

templates = Jinja2Templates(directory=_WEB_DIR / "templates")

# Version lue depuis pyproject.toml — disponible dans tous les templates
_PYPROJECT = _PROJECT_ROOT / "pyproject.toml"
if _PYPROJECT.exists():
    with open(_PYPROJECT, "rb") as f:
        _version = tomllib.load(f)["project"]["version"]
    templates.env.globals["app_version"] = f"Controle Series v{_version}"
else:
    templates.env.globals["app_version"] = "Controle Series"


def get_db_session() -> Generator[Session, None, None]:
    """Session SQLModel propre à la requête, fermée à la fin de celle-ci."""
    yield from get_session()


def get_series_repository(
    session: Session = Depends(get_db_session),
) -> ISeriesRepository:
    return SQLModelSeriesRepository(session)


def get_season_repository(
    session: Session = Depends(get_db_session),
) -> ISeasonRepository:
    return SQLModelSeasonRepository(session)


def get_season_cache(request: Request) -> ReadThroughCache:
    """Cache des saisons partagé, fourni par le container de l'application."""
    return request.app.state.container.season_cache()


# Messages de confirmation : seul le code circule dans l'URL
FLASH_MESSAGES = {
    "created": "Série ajoutée avec succès.",
    "updated": "Série modifiée avec succès.",
    "deleted": "Série supprimée avec succès.",
    "watched": "Épisodes marqués comme vus.",
}


def flash_message(code: Optional[str]) -> Optional[str]:
    """Texte du message associé au code ``?success=``, None si code inconnu."""
    if code is None:
        return None
    return FLASH_MESSAGES.get(code)
