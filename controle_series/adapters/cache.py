"""
Cache en lecture traversante (read-through) avec TTL court.

Le cache memorise une valeur calculee par un loader pendant une duree limitee.
Sur un miss, le loader est appele une seule fois et son resultat est stocke
avec une expiration absolue (maintenant + ttl). Sur un hit, la valeur stockee
est retournee telle quelle, sans appel au loader.

Les loaders doivent retourner des valeurs entierement materialisees (listes,
dataclasses) et jamais des collections paresseuses liees a une session ORM :
la session est fermee bien avant l'expiration de l'entree.
"""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Optional, TypeVar, Union

from loguru import logger

T = TypeVar("T")

TTL = Union[int, float, timedelta]


def cache_key(entity: str, entity_id: Any, field: str) -> str:
    """
    Construit une cle de cache au format "{entite}_{id}_{champ}".

    Example:
        cache_key("series", 3, "seasons") -> "series_3_seasons"
    """
    return f"{entity}_{entity_id}_{field}"


def _ttl_seconds(ttl: TTL) -> float:
    if isinstance(ttl, timedelta):
        return ttl.total_seconds()
    return float(ttl)


@dataclass(frozen=True)
class _Entry:
    expires_at: float
    value: Any


class ReadThroughCache:
    """
    Cache memoire thread-safe avec calcul a la demande.

    Le verrou protege uniquement la table interne : le loader s'execute hors
    verrou. Deux requetes concurrentes sur une meme cle absente peuvent donc
    appeler chacune leur loader ; la derniere ecriture gagne.

    Attributes:
        default_ttl: Duree de vie utilisee quand get() ne precise pas de ttl

    Example:
        cache = ReadThroughCache(default_ttl=10)
        seasons = cache.get("series_3_seasons", lambda: repo.list_by_series(3))
    """

    def __init__(
        self,
        default_ttl: TTL = 10,
        maxsize: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialise un cache vide.

        Args:
            default_ttl: Duree de vie par defaut (secondes ou timedelta)
            maxsize: Nombre maximum d'entrees (None = illimite)
            clock: Horloge monotone en secondes, injectable pour les tests
        """
        if maxsize is not None and maxsize < 1:
            raise ValueError("maxsize doit etre superieur a 0")
        self.default_ttl = _ttl_seconds(default_ttl)
        self._maxsize = maxsize
        self._clock = clock
        self._lock = threading.RLock()
        self._entries: dict[str, _Entry] = {}

    def get(
        self, key: str, loader: Callable[[], T], ttl: Optional[TTL] = None
    ) -> T:
        """
        Retourne la valeur associee a la cle, en la calculant si necessaire.

        Args:
            key: Cle unique de l'agregat demande (ex: "series_3_seasons")
            loader: Fonction sans argument appelee uniquement sur un miss
            ttl: Duree de vie de l'entree ; <= 0 signifie deja expiree

        Returns:
            La valeur en cache ou le resultat du loader

        Raises:
            Toute exception levee par le loader, sans rien stocker
        """
        found, value = self._lookup(key)
        if found:
            logger.debug(f"Cache hit: {key}")
            return value

        logger.debug(f"Cache miss: {key}")
        value = loader()

        seconds = self.default_ttl if ttl is None else _ttl_seconds(ttl)
        if seconds > 0:
            self._store(key, value, seconds)
        return value

    def invalidate(self, key: str) -> bool:
        """Supprime une entree. Retourne True si elle existait."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return self._lookup(key)[0]

    def __len__(self) -> int:
        with self._lock:
            self._purge_expired(self._clock())
            return len(self._entries)

    def _lookup(self, key: str) -> tuple[bool, Any]:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return False, None
            if entry.expires_at <= now:
                del self._entries[key]
                return False, None
            return True, entry.value

    def _store(self, key: str, value: Any, seconds: float) -> None:
        now = self._clock()
        with self._lock:
            self._entries.pop(key, None)
            if self._maxsize is not None and len(self._entries) >= self._maxsize:
                self._purge_expired(now)
                # Les dict conservent l'ordre d'insertion : la premiere cle est la plus ancienne
                while len(self._entries) >= self._maxsize:
                    self._entries.pop(next(iter(self._entries)))
            self._entries[key] = _Entry(expires_at=now + seconds, value=value)

    def _purge_expired(self, now: float) -> None:
        expired = [k for k, entry in self._entries.items() if entry.expires_at <= now]
        for k in expired:
            del self._entries[k]
