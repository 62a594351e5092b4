"""Services applicatifs du catalogue."""

from .catalog import build_series, load_seasons
from .watch import parse_watched_form, reconcile_watched

__all__ = ["build_series", "load_seasons", "parse_watched_form", "reconcile_watched"]
