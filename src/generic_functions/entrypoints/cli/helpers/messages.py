"""One-line user notices for the CLI.

Notices go to stderr so stdout only carries command output (the tables).
Each notice starts with an emoji, replaced by an ASCII marker when stderr
cannot encode it.
"""

import click

WARN_GLYPHS = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS_GLYPHS = ("✅", "[OK]")  # pragma: no mutate
ERROR_GLYPHS = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if ``character`` can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(glyphs: tuple[str, str]) -> str:
    emoji, fallback = glyphs
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """``"⚠️"``, or ``"[!]"`` when stderr cannot encode it."""
    return _glyph(WARN_GLYPHS)


def success_glyph() -> str:
    """``"✅"``, or ``"[OK]"`` when stderr cannot encode it."""
    return _glyph(SUCCESS_GLYPHS)


def error_glyph() -> str:
    """``"❌"``, or ``"[X]"`` when stderr cannot encode it."""
    return _glyph(ERROR_GLYPHS)


def warn(msg: str) -> None:
    """Print a bold yellow warning line to stderr.

    Example:
        ``⚠️  No function matches 'zzz'.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Print a bold green success line to stderr."""
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Print a bold red error line to stderr.

    Example:
        ``❌  No catalog entry named 'chunkk'.``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
