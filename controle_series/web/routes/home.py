"""
Route de la page d'accueil : redirige vers la liste des séries.
"""

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

router = APIRouter()


@router.get("/")
async def home():
    return RedirectResponse(url="/series", status_code=303)
