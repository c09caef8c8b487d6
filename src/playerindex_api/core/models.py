"""
Pydantic models for the proxy's response shapes.

Each model that is derived from an upstream BallDontLie record exposes a
``from_upstream`` classmethod. Fields missing from the upstream record, or
explicitly null there, pass through as null.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel


# =============================================================================
# Players
# =============================================================================


class PlayerSummary(BaseModel):
    """Reduced view of an upstream player record."""

    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    position: Optional[str] = None
    team_name: Optional[str] = None

    @classmethod
    def from_upstream(cls, record: dict[str, Any]) -> PlayerSummary:
        """Build a summary from a BallDontLie ``/players`` record."""
        team = record.get("team") or {}
        return cls(
            id=record.get("id"),
            first_name=record.get("first_name"),
            last_name=record.get("last_name"),
            position=record.get("position"),
            team_name=team.get("full_name") or None,
        )


class PlayersResponse(BaseModel):
    players: list[PlayerSummary]


# =============================================================================
# Season Averages
# =============================================================================


# upstream field -> local field
SEASON_AVERAGE_FIELDS: dict[str, str] = {
    "games_played": "games_played",
    "min": "min",
    "pts": "ppg",
    "reb": "rpg",
    "ast": "apg",
    "stl": "spg",
    "blk": "bpg",
    "turnover": "turnover",
    "fg_pct": "fg_pct",
    "fg3_pct": "fg3_pct",
    "ft_pct": "ft_pct",
}


class SeasonAverages(BaseModel):
    """Per-game season averages, renamed from an upstream season_averages record."""

    games_played: Optional[int] = None
    # Upstream reports minutes as "MM:SS" text
    min: Union[str, float, None] = None
    ppg: Optional[float] = None
    rpg: Optional[float] = None
    apg: Optional[float] = None
    spg: Optional[float] = None
    bpg: Optional[float] = None
    turnover: Optional[float] = None
    fg_pct: Optional[float] = None
    fg3_pct: Optional[float] = None
    ft_pct: Optional[float] = None

    @classmethod
    def from_upstream(cls, record: dict[str, Any]) -> SeasonAverages:
        """Build averages from a BallDontLie ``/season_averages`` record."""
        return cls(
            **{local: record.get(upstream) for upstream, local in SEASON_AVERAGE_FIELDS.items()}
        )


class SeasonAveragesResponse(BaseModel):
    averages: Optional[SeasonAverages] = None


# =============================================================================
# Errors
# =============================================================================


class ErrorResponse(BaseModel):
    """Error envelope returned for 4xx/5xx responses."""

    error: str
    details: Any = None
