"""
Route des saisons d'une série.

La liste des saisons passe par le cache en lecture traversante : pendant la
durée de vie de l'entrée, la base n'est pas interrogée pour cette liste.
"""

from fastapi import APIRouter, Depends, Request

from ...adapters.cache import ReadThroughCache
from ...core.exceptions import SeriesNotFoundError
from ...core.ports.repositories import ISeasonRepository, ISeriesRepository
from ...services.catalog import load_seasons
from ..deps import (
    get_season_cache,
    get_season_repository,
    get_series_repository,
    templates,
)

router = APIRouter()


@router.get("/series/{series_id:int}/seasons")
async def seasons_index(
    request: Request,
    series_id: int,
    series_repo: ISeriesRepository = Depends(get_series_repository),
    season_repo: ISeasonRepository = Depends(get_season_repository),
    cache: ReadThroughCache = Depends(get_season_cache),
):
    """Saisons d'une série, avec le nombre d'épisodes vus."""
    series_name = series_repo.get_name(series_id)
    if series_name is None:
        raise SeriesNotFoundError(series_id)

    seasons = load_seasons(cache, season_repo, series_id)
    return templates.TemplateResponse(
        request,
        "seasons/index.html",
        {"series_id": series_id, "series_name": series_name, "seasons": seasons},
    )
