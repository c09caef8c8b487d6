"""
Players router - proxies BallDontLie player search.

Endpoints:
- GET /players?search=lebron - Player summaries in upstream order
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Query

from ...core.http import ExternalAPIError
from ...core.models import ErrorResponse, PlayersResponse
from ...services.players import search_players
from ..dependencies import NBAClientDependency
from ..errors import MissingParameterError, UpstreamFetchError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/players",
    response_model=PlayersResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_players(
    client: NBAClientDependency,
    search: Annotated[Optional[str], Query(description="Player name filter")] = None,
) -> PlayersResponse:
    """
    Search players by name.

    Returns the first page of upstream matches, each reduced to
    id, first/last name, position and team name.
    """
    if not search:
        raise MissingParameterError("Missing required query parameter: search")

    try:
        players = await search_players(client, search)
    except ExternalAPIError as e:
        logger.error(f"Error in /players: {e.details}")
        raise UpstreamFetchError("Failed to fetch player data", details=e.details) from e

    return PlayersResponse(players=players)
