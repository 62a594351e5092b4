"""
Routes des épisodes d'une saison : liste et marquage "vu".
"""

from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from loguru import logger

from ...adapters.cache import ReadThroughCache
from ...core.exceptions import SeasonNotFoundError
from ...core.ports.repositories import ISeasonRepository
from ...services.catalog import seasons_cache_key
from ...services.watch import parse_watched_form, reconcile_watched
from ..deps import flash_message, get_season_cache, get_season_repository, templates

router = APIRouter(prefix="/season")


@router.get("/{season_id:int}/episodes")
async def episodes_index(
    request: Request,
    season_id: int,
    success: Optional[str] = None,
    repo: ISeasonRepository = Depends(get_season_repository),
):
    """Épisodes d'une saison avec leurs cases "vu"."""
    season = repo.get_by_id(season_id)
    if season is None:
        raise SeasonNotFoundError(season_id)
    return templates.TemplateResponse(
        request,
        "episodes/index.html",
        {
            "season": season,
            "series": season.series,
            "episodes": season.episodes,
            "success": flash_message(success),
        },
    )


@router.post("/{season_id:int}/episodes")
async def watch_episodes(
    request: Request,
    season_id: int,
    repo: ISeasonRepository = Depends(get_season_repository),
    cache: ReadThroughCache = Depends(get_season_cache),
):
    """Marque comme vus exactement les épisodes cochés de la saison."""
    season = repo.get_by_id(season_id)
    if season is None:
        raise SeasonNotFoundError(season_id)

    form = await request.form()
    reconcile_watched(parse_watched_form(form.keys()), season.episodes)
    repo.save_episodes(season.episodes, flush=True)
    cache.invalidate(seasons_cache_key(season.series.id))

    logger.info(
        f"Episodes vus mis a jour: saison {season.number} de {season.series.name} "
        f"({season.watched_count}/{len(season.episodes)})"
    )
    query = urlencode({"success": "watched"})
    return RedirectResponse(url=f"/season/{season_id}/episodes?{query}", status_code=303)
