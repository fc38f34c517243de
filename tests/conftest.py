"""pytest global fixtures: environment isolation."""

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Clear GREENPATH_* settings and reset the logger singleton per test."""
    monkeypatch.delenv("GREENPATH_CATALOG_PATH", raising=False)
    monkeypatch.delenv("GREENPATH_START_XP", raising=False)
    monkeypatch.delenv("GREENPATH_LOG_EVENTS", raising=False)
    from greenpath.infrastructure.logging import reset_logger

    reset_logger()
    yield
    reset_logger()
