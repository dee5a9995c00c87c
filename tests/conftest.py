"""
Pytest configuration and shared fixtures for intrange tests.
"""
import pytest

from intrange.constants import ENV_DEBUG, ENV_LOG_LEVEL, ENV_MAX_DISPLAY


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Tests start without any INTRANGE_* variables set."""
    for name in (ENV_DEBUG, ENV_LOG_LEVEL, ENV_MAX_DISPLAY):
        monkeypatch.delenv(name, raising=False)


def _drain(cursor) -> list[int]:
    values = []
    while cursor.has_next():
        values.append(cursor.next())
    return values


@pytest.fixture
def drain():
    """Consume a cursor through has_next()/next(), the way a loop construct does."""
    return _drain
