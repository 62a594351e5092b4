"""Domain entities for the series catalog."""

from .catalog import Episode, Season, Series

__all__ = ["Episode", "Season", "Series"]
