"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans controle_series/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from controle_series.infrastructure.persistence.repositories.season_repository import (
    SQLModelSeasonRepository,
)
from controle_series.infrastructure.persistence.repositories.series_repository import (
    SQLModelSeriesRepository,
)

__all__ = [
    "SQLModelSeriesRepository",
    "SQLModelSeasonRepository",
]
