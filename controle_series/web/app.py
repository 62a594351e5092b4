"""
Application FastAPI de Controle Series.

Initialise l'application web avec le Container DI, configure les fichiers
statiques, la surcharge de méthode HTTP et monte les routes.
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from ..container import Container
from .errors import register_error_handlers
from .middleware import MethodOverrideMiddleware
from .routes.episodes import router as episodes_router
from .routes.home import router as home_router
from .routes.seasons import router as seasons_router
from .routes.series import router as series_router

_WEB_DIR = Path(__file__).parent


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage et le ferme à l'arrêt."""
    container = Container()
    container.database.init()
    app.state.container = container
    yield
    container.shutdown_resources()


def create_app() -> FastAPI:
    """Construit l'application avec ses routes et gestionnaires d'erreurs."""
    application = FastAPI(title="Controle Series", lifespan=lifespan)
    application.add_middleware(MethodOverrideMiddleware)

    # Fichiers statiques
    application.mount("/static", StaticFiles(directory=_WEB_DIR / "static"), name="static")

    # Routes
    application.include_router(home_router)
    application.include_router(series_router)
    application.include_router(seasons_router)
    application.include_router(episodes_router)

    register_error_handlers(application)
    return application


app = create_app()
