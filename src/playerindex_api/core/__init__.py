"""
Core module for The Player Index NBA API.

This module provides the foundational components:
- Configuration management (config.py)
- Response models and upstream transforms (models.py)
- Shared HTTP client infrastructure (http.py)

Usage:
    from playerindex_api.core import Settings, get_settings
    from playerindex_api.core import PlayerSummary, SeasonAverages
    from playerindex_api.core.http import BaseApiClient, ExternalAPIError
"""

from .config import Settings, get_settings
from .http import BaseApiClient, ExternalAPIError
from .models import (
    ErrorResponse,
    PlayersResponse,
    PlayerSummary,
    SeasonAverages,
    SeasonAveragesResponse,
)

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # HTTP
    "BaseApiClient",
    "ExternalAPIError",
    # Models
    "ErrorResponse",
    "PlayersResponse",
    "PlayerSummary",
    "SeasonAverages",
    "SeasonAveragesResponse",
]
