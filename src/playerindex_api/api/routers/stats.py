"""
Stats router - proxies BallDontLie season averages.

Endpoints:
- GET /season-averages?playerId=237&season=2024 - One player's per-game averages

A player/season pair with no upstream record yields {"averages": null}.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Query

from ...core.http import ExternalAPIError
from ...core.models import ErrorResponse, SeasonAveragesResponse
from ...services.stats import get_season_averages
from ..dependencies import NBAClientDependency, SettingsDependency
from ..errors import MissingParameterError, UpstreamFetchError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/season-averages",
    response_model=SeasonAveragesResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_player_season_averages(
    client: NBAClientDependency,
    settings: SettingsDependency,
    player_id: Annotated[Optional[str], Query(alias="playerId", description="BallDontLie player ID")] = None,
    season: Annotated[Optional[str], Query(description="Season year (defaults to DEFAULT_SEASON)")] = None,
) -> SeasonAveragesResponse:
    """Get season averages for exactly one player/season pair."""
    if not player_id:
        raise MissingParameterError("Missing required playerId parameter")

    season_to_use = season or settings.default_season

    try:
        averages = await get_season_averages(client, player_id, season_to_use)
    except ExternalAPIError as e:
        logger.error(f"Error in /season-averages: {e.details}")
        raise UpstreamFetchError("Failed to fetch season averages", details=e.details) from e

    return SeasonAveragesResponse(averages=averages)
