"""
Services module for The Player Index NBA API.

This module provides the request -> upstream -> reshape logic:
- players: Player search reduced to PlayerSummary records
- stats: Season averages reduced to the SeasonAverages shape

Usage:
    from playerindex_api.services.players import search_players
    from playerindex_api.services.stats import get_season_averages
"""

from .players import search_players
from .stats import get_season_averages

__all__ = [
    "search_players",
    "get_season_averages",
]
