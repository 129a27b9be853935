"""Global pytest fixtures for generic-functions."""

from __future__ import annotations

import logging

import pytest

from generic_functions.config import COUNTRY_ENV, HTTP_TIMEOUT_ENV


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test without the library's settings inherited from the shell."""
    monkeypatch.delenv(COUNTRY_ENV, raising=False)
    monkeypatch.delenv(HTTP_TIMEOUT_ENV, raising=False)


@pytest.fixture
def records() -> list[dict]:
    """A small list of records shaped like the ones list screens filter."""
    return [
        {
            "id": 1,
            "field_search": "Église Saint-Pierre de Montmartre",
            "ddeb": "1875-03-12",
            "state": [{"state": ["open", "listed"]}],
        },
        {
            "id": 2,
            "field_search": "Musée des Beaux-Arts",
            "ddeb": "1921-06-01",
            "state": [{"state": ["closed"]}],
        },
        {
            "id": 3,
            "field_search": "Pont Neuf",
            "ddeb": "1607-01-01",
            "state": [{"state": ["open"]}, {"state": ["open", "listed"]}],
        },
        {
            "id": 4,
            "field_search": "Gare Saint-Lazare",
            "ddeb": "not a date",
            "state": [],
        },
    ]


@pytest.fixture
def debug_caplog(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """caplog capturing DEBUG records from generic_functions loggers."""
    caplog.set_level(logging.DEBUG, logger="generic_functions")
    return caplog
