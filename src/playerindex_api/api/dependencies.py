"""
Dependency injection for API endpoints.

The BallDontLie client is created once in the application lifespan with the
credential from Settings and stored on ``app.state``. Routes receive it via
``NBAClientDependency``; tests swap it out through ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends, Request

from ..core.config import Settings
from ..providers.balldontlie_nba import BallDontLieNBA


def get_settings_dependency(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings


def get_nba_client(request: Request) -> BallDontLieNBA:
    """Process-wide BallDontLie client."""
    return request.app.state.nba_client


SettingsDependency = Annotated[Settings, Depends(get_settings_dependency)]
NBAClientDependency = Annotated[BallDontLieNBA, Depends(get_nba_client)]
