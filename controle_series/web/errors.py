"""
Gestionnaires d'erreurs de l'application web.

- Entité introuvable : page 404
- Erreur de persistance : journalisée puis page 500 générique
"""

from fastapi import FastAPI, Request
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from ..core.exceptions import CatalogNotFoundError
from .deps import templates


async def not_found_handler(request: Request, exc: CatalogNotFoundError):
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"entity_type": exc.entity_type, "entity_id": exc.entity_id},
        status_code=404,
    )


async def persistence_error_handler(request: Request, exc: SQLAlchemyError):
    logger.opt(exception=exc).error(f"Erreur de persistance sur {request.method} {request.url.path}")
    return templates.TemplateResponse(request, "error.html", {}, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    """Enregistre les gestionnaires d'erreurs sur l'application."""
    app.add_exception_handler(CatalogNotFoundError, not_found_handler)
    app.add_exception_handler(SQLAlchemyError, persistence_error_handler)
