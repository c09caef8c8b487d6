"""API routers module."""

from . import players, stats

__all__ = ["players", "stats"]
