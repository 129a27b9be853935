"""Unit tests for generic_functions.config."""

import pytest

from generic_functions.config import (
    COUNTRY_ENV,
    DEFAULT_COUNTRY,
    DEFAULT_HTTP_TIMEOUT,
    HTTP_TIMEOUT_ENV,
    get_default_country,
    get_http_timeout,
)
from generic_functions.errors import InvalidSettingError

# --- HTTP timeout ---


def test_http_timeout_default():
    """Without the variable, requests time out after ten seconds."""
    assert get_http_timeout() == DEFAULT_HTTP_TIMEOUT == 10.0


def test_http_timeout_empty_variable_uses_default(monkeypatch):
    """An empty variable counts as unset."""
    monkeypatch.setenv(HTTP_TIMEOUT_ENV, "")
    assert get_http_timeout() == DEFAULT_HTTP_TIMEOUT


@pytest.mark.parametrize(("raw", "expected"), [("3", 3.0), ("0.5", 0.5), (" 12 ", 12.0)])
def test_http_timeout_from_env(monkeypatch, raw, expected):
    """Positive numbers are accepted."""
    monkeypatch.setenv(HTTP_TIMEOUT_ENV, raw)
    assert get_http_timeout() == expected


@pytest.mark.parametrize(
    ("raw", "reason"),
    [
        ("fast", "expected a number"),
        ("0", "expected a positive number"),
        ("-1", "expected a positive number"),
    ],
)
def test_http_timeout_invalid(monkeypatch, raw, reason):
    """Anything but a positive number is rejected with the offending value."""
    monkeypatch.setenv(HTTP_TIMEOUT_ENV, raw)
    with pytest.raises(InvalidSettingError) as excinfo:
        get_http_timeout()
    assert excinfo.value.name == HTTP_TIMEOUT_ENV
    assert excinfo.value.value == raw
    assert excinfo.value.reason == reason


# --- default country ---


def test_default_country():
    """France is the default country."""
    assert get_default_country() == DEFAULT_COUNTRY == "FR"


@pytest.mark.parametrize(("raw", "expected"), [("us", "US"), (" jp ", "JP"), ("DE", "DE")])
def test_default_country_from_env(monkeypatch, raw, expected):
    """Codes are trimmed and upper-cased."""
    monkeypatch.setenv(COUNTRY_ENV, raw)
    assert get_default_country() == expected


def test_default_country_unknown(monkeypatch):
    """Codes without a date format are rejected."""
    monkeypatch.setenv(COUNTRY_ENV, "ZZ")
    with pytest.raises(InvalidSettingError, match="unknown country code"):
        get_default_country()
