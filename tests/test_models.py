"""
Tests for reshaping upstream records into response models.
"""

import pytest

from playerindex_api.core.models import PlayerSummary, SeasonAverages


class TestPlayerSummary:
    def test_team_full_name(self):
        summary = PlayerSummary.from_upstream(
            {
                "id": 115,
                "first_name": "Stephen",
                "last_name": "Curry",
                "position": "G",
                "team": {"full_name": "Golden State Warriors"},
            }
        )
        assert summary.model_dump() == {
            "id": 115,
            "first_name": "Stephen",
            "last_name": "Curry",
            "position": "G",
            "team_name": "Golden State Warriors",
        }

    @pytest.mark.parametrize("team", [None, {}, {"full_name": None}, {"full_name": ""}])
    def test_no_team(self, team):
        summary = PlayerSummary.from_upstream({"id": 1, "team": team})
        assert summary.team_name is None

    def test_missing_fields_are_null(self):
        summary = PlayerSummary.from_upstream({"id": 7})
        assert summary.first_name is None
        assert summary.last_name is None
        assert summary.position is None


class TestSeasonAverages:
    def test_renames_fields(self):
        averages = SeasonAverages.from_upstream(
            {
                "games_played": 71,
                "min": "35:18",
                "pts": 25.7,
                "reb": 7.3,
                "ast": 8.3,
                "stl": 1.3,
                "blk": 0.5,
                "turnover": 3.5,
                "fg_pct": 0.54,
                "fg3_pct": 0.41,
                "ft_pct": 0.75,
                "season": 2023,
                "player_id": 237,
            }
        )
        assert averages.model_dump() == {
            "games_played": 71,
            "min": "35:18",
            "ppg": 25.7,
            "rpg": 7.3,
            "apg": 8.3,
            "spg": 1.3,
            "bpg": 0.5,
            "turnover": 3.5,
            "fg_pct": 0.54,
            "fg3_pct": 0.41,
            "ft_pct": 0.75,
        }

    def test_empty_record(self):
        averages = SeasonAverages.from_upstream({})
        assert all(value is None for value in averages.model_dump().values())
