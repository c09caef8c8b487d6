"""
Stats service — season averages against BallDontLie.
"""

import logging

from pydantic import ValidationError

from ..core.http import ExternalAPIError
from ..core.models import SeasonAverages
from ..providers.balldontlie_nba import BallDontLieNBA

logger = logging.getLogger(__name__)


async def get_season_averages(
    client: BallDontLieNBA,
    player_id: int | str,
    season: int | str,
) -> SeasonAverages | None:
    """Fetch season averages for a single player/season pair.

    Takes the first matching upstream record. Returns None when upstream has
    no record for the pair; that is not treated as a failure.

    Raises:
        ExternalAPIError: If the upstream call fails or the record cannot be
            reshaped.
    """
    records = await client.get_season_averages(season=season, player_ids=[player_id])
    if not records or not records[0]:
        logger.debug(f"No season averages for player {player_id} in {season}")
        return None

    try:
        return SeasonAverages.from_upstream(records[0])
    except (ValidationError, AttributeError, TypeError) as e:
        raise ExternalAPIError(f"Malformed season averages record from upstream: {e}") from e
