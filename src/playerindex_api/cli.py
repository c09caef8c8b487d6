#!/usr/bin/env python3
"""
Command-line interface for The Player Index NBA API.

Usage:
    playerindex-api serve                      # Listen on $PORT (default 3000)
    playerindex-api serve --port 8080 --reload
    playerindex-api players lebron             # Print player summaries as JSON
    playerindex-api averages 237 --season 2023 # Print season averages as JSON
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

from .core.config import Settings, get_settings
from .core.http import ExternalAPIError
from .providers.balldontlie_nba import BallDontLieNBA

logger = logging.getLogger("playerindex_api.cli")


def get_client(settings: Settings) -> BallDontLieNBA:
    """Build an upstream client from settings."""
    return BallDontLieNBA(
        api_key=settings.balldontlie_api_key,
        base_url=settings.balldontlie_base_url,
        timeout=settings.upstream_timeout,
    )


def cmd_serve(args: argparse.Namespace, settings: Settings) -> int:
    """Run the HTTP server."""
    import uvicorn

    host = args.host or settings.host
    port = args.port or settings.port

    if not settings.is_upstream_configured:
        logger.warning(
            "BALLDONTLIE_API_KEY is not set. The API will not work until you add it."
        )
    logger.info(f"{settings.app_name} running on port {port}")

    uvicorn.run(
        "playerindex_api.api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


async def _players(settings: Settings, search: str) -> dict:
    from .services.players import search_players

    async with get_client(settings) as client:
        players = await search_players(client, search)
    return {"players": [p.model_dump() for p in players]}


async def _averages(settings: Settings, player_id: str, season: Optional[str]) -> dict:
    from .services.stats import get_season_averages

    async with get_client(settings) as client:
        averages = await get_season_averages(client, player_id, season or settings.default_season)
    return {"averages": averages.model_dump() if averages else None}


def cmd_players(args: argparse.Namespace, settings: Settings) -> int:
    """Search players and print the summaries."""
    try:
        result = asyncio.run(_players(settings, args.search))
    except ExternalAPIError as e:
        logger.error(f"Failed to fetch player data: {e.details}")
        return 1

    print(json.dumps(result, indent=2))
    return 0


def cmd_averages(args: argparse.Namespace, settings: Settings) -> int:
    """Fetch one player's season averages and print them."""
    try:
        result = asyncio.run(_averages(settings, args.player_id, args.season))
    except ExternalAPIError as e:
        logger.error(f"Failed to fetch season averages: {e.details}")
        return 1

    print(json.dumps(result, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playerindex-api",
        description="The Player Index NBA API - BallDontLie proxy",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", default=None, help="Bind address (default: $HOST or 0.0.0.0)")
    serve.add_argument("--port", type=int, default=None, help="Port (default: $PORT or 3000)")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve.set_defaults(func=cmd_serve)

    players = subparsers.add_parser("players", help="Search players by name")
    players.add_argument("search", help="Name filter, e.g. lebron")
    players.set_defaults(func=cmd_players)

    averages = subparsers.add_parser("averages", help="Show a player's season averages")
    averages.add_argument("player_id", help="BallDontLie player ID")
    averages.add_argument("--season", default=None, help="Season year (default: $DEFAULT_SEASON)")
    averages.set_defaults(func=cmd_averages)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    settings.setup_logging()

    return args.func(args, settings)


if __name__ == "__main__":
    sys.exit(main())
