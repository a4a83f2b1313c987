"""Shared test fixtures for collins-dict."""

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every COLLINS_* override from the environment."""
    for name in (
        "COLLINS_SEARCH_URL",
        "COLLINS_TIMEOUT",
        "COLLINS_WIDTH",
        "COLLINS_SYNONYMS",
        "COLLINS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
