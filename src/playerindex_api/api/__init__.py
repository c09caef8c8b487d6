"""HTTP surface of The Player Index NBA API."""
