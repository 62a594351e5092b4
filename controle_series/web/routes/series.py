"""
Routes des séries : liste, création, édition et suppression.

Les formulaires invalides sont réaffichés avec les messages par champ ;
les actions réussies redirigent vers la liste avec un message de confirmation.
"""

from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from loguru import logger

from ...adapters.cache import ReadThroughCache
from ...core.exceptions import SeriesNotFoundError
from ...core.ports.repositories import ISeriesRepository
from ...services.catalog import build_series, seasons_cache_key
from ..deps import flash_message, get_season_cache, get_series_repository, templates
from ..forms import SeriesCreateForm, SeriesEditForm, validate_form

router = APIRouter(prefix="/series")


def _redirect_to_list(code: str) -> RedirectResponse:
    return RedirectResponse(url=f"/series?{urlencode({'success': code})}", status_code=303)


def _render_form(
    request: Request,
    form_data: dict,
    errors: Optional[dict] = None,
    series_id: Optional[int] = None,
):
    is_edit = series_id is not None
    return templates.TemplateResponse(
        request,
        "series/form.html",
        {
            "form_data": form_data,
            "errors": errors or {},
            "is_edit": is_edit,
            "series_id": series_id,
        },
        status_code=422 if errors else 200,
    )


@router.get("")
async def series_index(
    request: Request,
    success: Optional[str] = None,
    repo: ISeriesRepository = Depends(get_series_repository),
):
    """Liste des séries."""
    return templates.TemplateResponse(
        request,
        "series/index.html",
        {"series_list": repo.find_all(), "success": flash_message(success)},
    )


@router.get("/create")
async def add_series_form(request: Request):
    """Formulaire de création vide."""
    return _render_form(request, {})


@router.post("/create")
async def add_series(
    request: Request,
    repo: ISeriesRepository = Depends(get_series_repository),
):
    """Crée une série avec ses saisons et ses épisodes."""
    form_data = dict(await request.form())
    form, errors = validate_form(SeriesCreateForm, form_data)
    if errors:
        return _render_form(request, form_data, errors)

    series = build_series(form.series_name, form.seasons_quantity, form.episodes_per_season)
    series = repo.save(series, flush=True)
    logger.info(
        f"Serie creee: {series.name} (id={series.id}, "
        f"{len(series.seasons)} saisons, {series.episode_count} episodes)"
    )
    return _redirect_to_list("created")


@router.delete("/delete/{series_id:int}")
async def delete_series(
    series_id: int,
    repo: ISeriesRepository = Depends(get_series_repository),
    cache: ReadThroughCache = Depends(get_season_cache),
):
    """Supprime une série et tout son contenu."""
    repo.remove_by_id(series_id)
    cache.invalidate(seasons_cache_key(series_id))
    return _redirect_to_list("deleted")


@router.get("/edit/{series_id:int}")
async def edit_series_form(
    request: Request,
    series_id: int,
    repo: ISeriesRepository = Depends(get_series_repository),
):
    """Formulaire d'édition pré-rempli."""
    name = repo.get_name(series_id)
    if name is None:
        raise SeriesNotFoundError(series_id)
    return _render_form(request, {"series_name": name}, series_id=series_id)


@router.patch("/edit/{series_id:int}")
async def store_series_changes(
    request: Request,
    series_id: int,
    repo: ISeriesRepository = Depends(get_series_repository),
):
    """Renomme une série, sans toucher aux épisodes."""
    if repo.get_name(series_id) is None:
        raise SeriesNotFoundError(series_id)

    form_data = dict(await request.form())
    form, errors = validate_form(SeriesEditForm, form_data)
    if errors:
        return _render_form(request, form_data, errors, series_id=series_id)

    previous_name = repo.rename(series_id, form.series_name, flush=True)
    logger.info(f"Serie renommee: {previous_name} -> {form.series_name} (id={series_id})")
    return _redirect_to_list("updated")
