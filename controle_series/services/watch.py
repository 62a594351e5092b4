"""
Rapprochement de l'etat "vu" des episodes d'une saison.

Le formulaire soumet une case par episode coche, nommee "episodes[<id>]".
Seules les cles comptent : tout episode de la saison absent de la
soumission redevient "non vu".
"""

import re
from collections.abc import Iterable, Mapping

from loguru import logger

from ..core.entities.catalog import Episode

_EPISODE_KEY = re.compile(r"^episodes\[(\d+)\]$")


def parse_watched_form(form: Iterable[str] | Mapping[str, object]) -> set[int]:
    """
    Extrait les IDs d'episodes coches depuis les cles du formulaire.

    Les cles qui ne suivent pas le format "episodes[<id>]" sont ignorees.
    """
    watched_ids = set()
    for key in form:
        match = _EPISODE_KEY.match(key)
        if match:
            watched_ids.add(int(match.group(1)))
    return watched_ids


def reconcile_watched(submitted_ids: Iterable[int], episodes: Iterable[Episode]) -> None:
    """
    Marque "vu" exactement les episodes dont l'ID a ete soumis.

    Les IDs qui ne correspondent a aucun episode de la liste sont ignores.

    Args:
        submitted_ids: IDs des episodes coches
        episodes: Tous les episodes de la saison (modifies en place)
    """
    submitted = set(submitted_ids)
    episodes = list(episodes)
    for episode in episodes:
        episode.watched = episode.id in submitted

    unknown = submitted - {episode.id for episode in episodes}
    if unknown:
        logger.debug(f"IDs d'episodes hors saison ignores: {sorted(unknown)}")
