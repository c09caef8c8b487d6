"""
Players service — player search against BallDontLie.

Routers and CLI call this instead of talking to the client directly.
"""

import logging

from pydantic import ValidationError

from ..core.http import ExternalAPIError
from ..core.models import PlayerSummary
from ..providers.balldontlie_nba import BallDontLieNBA

logger = logging.getLogger(__name__)


async def search_players(client: BallDontLieNBA, search: str) -> list[PlayerSummary]:
    """Search upstream players and reduce each record to a PlayerSummary.

    Upstream order is preserved; nothing is sorted or de-duplicated.

    Raises:
        ExternalAPIError: If the upstream call fails or a record cannot be
            reshaped.
    """
    records = await client.search_players(search)
    try:
        return [PlayerSummary.from_upstream(record) for record in records]
    except (ValidationError, AttributeError, TypeError) as e:
        raise ExternalAPIError(f"Malformed player record from upstream: {e}") from e
