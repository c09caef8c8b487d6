"""
Upstream data providers.

Usage:
    from playerindex_api.providers import BallDontLieNBA

    async with BallDontLieNBA(api_key="...") as client:
        players = await client.search_players("lebron")
"""

from .balldontlie_nba import BallDontLieNBA

__all__ = ["BallDontLieNBA"]
