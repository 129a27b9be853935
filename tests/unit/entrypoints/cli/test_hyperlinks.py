"""Unit tests for generic_functions.entrypoints.cli.helpers.hyperlinks."""

import pytest

from generic_functions.entrypoints.cli.helpers import hyperlinks


class FakeTTYStream:
    """Minimal stream that claims to be a terminal."""

    encoding = "utf-8"

    def isatty(self) -> bool:
        """Pretend to be an interactive terminal."""
        return True


@pytest.fixture(autouse=True)
def _clean_osc8_env(monkeypatch):
    """Clear terminal-identifying variables so each case sets only its own."""
    for k in ("TERM_PROGRAM", "WT_SESSION", "VTE_VERSION", "TERM"):
        monkeypatch.delenv(k, raising=False)


@pytest.mark.parametrize(
    ("env", "expected"),
    [
        ({"TERM_PROGRAM": "vscode"}, True),
        ({"TERM_PROGRAM": "Apple_Terminal"}, True),
        ({"TERM_PROGRAM": "iTerm.app"}, True),
        ({"TERM_PROGRAM": "WezTerm"}, True),
        ({"TERM_PROGRAM": "ghostty"}, True),
        ({"WT_SESSION": "1"}, True),
        ({"VTE_VERSION": "6000"}, True),
        ({"TERM": "alacritty"}, True),
        ({"TERM": "konsole-256color"}, True),
        ({"TERM": "xterm-256color"}, False),
        ({}, False),
    ],
)
def test_supports_osc8_matrix(monkeypatch, env, expected):
    """Each known terminal signal enables hyperlinks."""
    for k, v in env.items():
        monkeypatch.setenv(k, v)
    assert hyperlinks.supports_osc8(stream=FakeTTYStream()) is expected  # type: ignore[arg-type]


def test_supports_osc8_non_tty(monkeypatch):
    """A stream that is not a terminal never gets hyperlinks."""

    class FakePipe:  # pylint: disable=too-few-public-methods
        """Redirected output."""

        def isatty(self) -> bool:
            """Not a terminal."""
            return False

    monkeypatch.setenv("TERM_PROGRAM", "vscode")
    assert hyperlinks.supports_osc8(stream=FakePipe()) is False  # type: ignore[arg-type]


def test_hyperlink_falls_back_to_plain_url(monkeypatch):
    """Unsupported terminals get the bare URL, label or not."""
    monkeypatch.setattr(hyperlinks, "supports_osc8", lambda: False)
    assert hyperlinks.hyperlink("https://example.com", "docs") == "https://example.com"


def test_hyperlink_wraps_url_in_osc8(monkeypatch):
    """Supported terminals get the BEL-terminated escape with the label shown."""
    monkeypatch.setattr(hyperlinks, "supports_osc8", lambda: True)
    assert hyperlinks.hyperlink("https://example.com") == (
        "\x1b]8;;https://example.com\x07https://example.com\x1b]8;;\x07"
    )
    assert hyperlinks.hyperlink("https://example.com", "docs") == (
        "\x1b]8;;https://example.com\x07docs\x1b]8;;\x07"
    )
