"""
BallDontLie NBA API client.

Provides access to NBA player search and season averages
via the BallDontLie API (https://api.balldontlie.io).
"""

import logging
from typing import Any

import httpx

from ..core.http import BaseApiClient, ExternalAPIError

logger = logging.getLogger(__name__)


class BallDontLieNBA(BaseApiClient):
    """BallDontLie NBA API client."""

    BASE_URL = "https://api.balldontlie.io/v1"

    def __init__(
        self,
        api_key: str | None,
        *,
        base_url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key
        super().__init__(
            base_url=base_url,
            headers={"Authorization": f"Bearer {api_key}"} if api_key else {},
            timeout=timeout,
            transport=transport,
        )

    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def _get_data(self, path: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        """GET ``path`` and return the ``data`` list of the response envelope."""
        if not self.is_configured():
            raise ExternalAPIError("BALLDONTLIE_API_KEY is not configured")

        payload = await self._get(path, params)
        if not isinstance(payload, dict):
            raise ExternalAPIError(f"Malformed response from {path}: expected an object")

        data = payload.get("data")
        if data is None:
            return []
        if not isinstance(data, list):
            raise ExternalAPIError(f"Malformed response from {path}: 'data' is not a list")
        return data

    # =========================================================================
    # Players
    # =========================================================================

    async def search_players(self, search: str) -> list[dict[str, Any]]:
        """
        Search players by name.

        Only the first page returned by upstream is surfaced; the cursor in
        ``meta`` is ignored.
        """
        return await self._get_data("/players", {"search": search})

    # =========================================================================
    # Season Averages
    # =========================================================================

    async def get_season_averages(
        self,
        season: int | str,
        player_ids: list[int | str],
    ) -> list[dict[str, Any]]:
        """
        Get player season averages.

        Args:
            season: Season year (e.g., 2024 for 2024-25 season)
            player_ids: Player IDs to filter, sent as ``player_ids[]``
        """
        params: dict[str, Any] = {
            "season": season,
            "player_ids[]": player_ids,
        }
        return await self._get_data("/season_averages", params)
