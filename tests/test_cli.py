"""
Tests for the playerindex-api command-line interface.
"""

import json
import logging

import pytest

from playerindex_api import cli


@pytest.fixture
def cli_env(monkeypatch, settings, upstream):
    monkeypatch.setattr(cli, "get_settings", lambda: settings)
    monkeypatch.setattr(cli, "get_client", lambda s: upstream.client(s.balldontlie_api_key))
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    return upstream


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_players_command(cli_env, capsys):
    cli_env.json(
        "/v1/players",
        {"data": [{"id": 237, "first_name": "LeBron", "last_name": "James",
                   "position": "F", "team": {"full_name": "Los Angeles Lakers"}}]},
    )

    assert cli.main(["players", "lebron"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["players"][0]["team_name"] == "Los Angeles Lakers"


def test_averages_command_without_record(cli_env, capsys):
    cli_env.json("/v1/season_averages", {"data": []})

    assert cli.main(["averages", "237", "--season", "2021"]) == 0

    assert json.loads(capsys.readouterr().out) == {"averages": None}
    assert cli_env.requests[0].url.params["season"] == "2021"


def test_upstream_failure_exit_code(cli_env, capsys):
    cli_env.fail("/v1/players")

    assert cli.main(["players", "lebron"]) == 1
    assert capsys.readouterr().out == ""


def test_serve_uses_configured_port(monkeypatch, cli_env):
    calls = {}
    monkeypatch.setattr("uvicorn.run", lambda app, **kwargs: calls.update(app=app, **kwargs))

    assert cli.main(["serve"]) == 0

    assert calls["app"] == "playerindex_api.api.main:create_app"
    assert calls["factory"] is True
    assert calls["port"] == 3000
    assert calls["host"] == "0.0.0.0"


def test_serve_port_flag(monkeypatch, cli_env):
    calls = {}
    monkeypatch.setattr("uvicorn.run", lambda app, **kwargs: calls.update(kwargs))

    cli.main(["serve", "--port", "8081"])

    assert calls["port"] == 8081
