"""Ports (interfaces abstraites) du domaine."""

from .repositories import ISeasonRepository, ISeriesRepository

__all__ = ["ISeasonRepository", "ISeriesRepository"]
