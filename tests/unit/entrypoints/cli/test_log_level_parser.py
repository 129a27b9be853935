"""Unit tests for the CLI log level parser.

These tests exercise
generic_functions.entrypoints.cli.helpers.log_level_parser.parse_log_level,
covering defaults, override order, comma/space separated input,
case-insensitive level names and malformed input.
"""

import logging
import types

import click
import pytest

from generic_functions.entrypoints.cli.helpers.log_level_parser import parse_log_level


def make_ctx():
    """Create a minimal Click context stub; the callback never reads it."""
    return types.SimpleNamespace()


@pytest.mark.parametrize("value", [None, (), ""])
def test_empty_uses_defaults(value):
    """Without levels, the HTTP stack loggers are kept at WARNING."""
    assert parse_log_level(make_ctx(), None, value) == {
        "urllib3": logging.WARNING,
        "requests": logging.WARNING,
    }


def test_repeated_flags_override_order():
    """Later repeated flags override earlier ones for the same logger."""
    value = ("urllib3=INFO", "requests=ERROR", "urllib3=DEBUG")
    out = parse_log_level(make_ctx(), None, value)
    assert out["urllib3"] == logging.DEBUG
    assert out["requests"] == logging.ERROR


def test_envvar_string_with_commas_and_spaces():
    """A plain string, as read from the environment, is split on commas and spaces."""
    value = "urllib3=INFO,  generic_functions.catalog=DEBUG requests=ERROR"
    out = parse_log_level(make_ctx(), None, value)
    assert out == {
        "urllib3": logging.INFO,
        "requests": logging.ERROR,
        "generic_functions.catalog": logging.DEBUG,
    }


def test_case_insensitive_levels():
    """Level names are parsed case-insensitively."""
    out = parse_log_level(make_ctx(), None, ("urllib3=info", "requests=WaRnInG"))
    assert out["urllib3"] == logging.INFO
    assert out["requests"] == logging.WARNING


@pytest.mark.parametrize("item", ["not-a-pair", "=DEBUG"])
def test_invalid_pair_raises(item):
    """Malformed NAME=LEVEL items raise click.BadParameter."""
    with pytest.raises(click.BadParameter):
        parse_log_level(make_ctx(), None, (item,))


def test_invalid_level_raises():
    """Unknown level names raise click.BadParameter."""
    with pytest.raises(click.BadParameter, match="Invalid log level: LOUD"):
        parse_log_level(make_ctx(), None, ("urllib3=LOUD",))
