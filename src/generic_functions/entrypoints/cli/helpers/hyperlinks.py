"""OSC-8 terminal hyperlinks, with a plain-text fallback."""

import os
import sys
from typing import TextIO

OSC8_TERMINAL_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty", "ghostty"}
)


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Guess whether ``stream`` renders OSC-8 hyperlinks.

    Args:
        stream: Text stream to probe; defaults to ``sys.stdout``.

    Returns:
        bool: False for anything that is not a TTY; otherwise True only for
        terminals known to support hyperlinks (by ``TERM_PROGRAM``, Windows
        Terminal's ``WT_SESSION``, VTE-based terminals, Alacritty, Konsole).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    terminal_program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        terminal_program in OSC8_TERMINAL_PROGRAMS
        or os.getenv("WT_SESSION")
        or os.getenv("VTE_VERSION")
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, label: str | None = None) -> str:
    """Render ``url`` as a clickable link when the terminal supports it.

    Args:
        url: Target URL.
        label: Text shown instead of the URL; only used when links are supported.

    Returns:
        str: The OSC-8 escape sequence (BEL-terminated), or the bare URL.
    """
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{label or url}\x1b]8;;\x07"
