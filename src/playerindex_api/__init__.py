"""
The Player Index NBA API

A minimal HTTP proxy in front of the BallDontLie NBA API. Player search and
season averages are fetched upstream with a bearer token and reshaped into a
small, stable schema for front-end clients.

Usage:
    uvicorn --factory playerindex_api.api.main:create_app --port 3000

    # or
    playerindex-api serve --port 3000
"""

__version__ = "1.0.0"
