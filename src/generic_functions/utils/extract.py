"""Typed extraction of regex captures from strings."""

from __future__ import annotations

import json
import re
from datetime import datetime
from typing import Any, Literal

from generic_functions.core.date import to_datetime
from generic_functions.core.numeric import parse_float

__all__ = ["extract_from_string"]

ExtractKind = Literal["string", "number", "boolean", "array", "date"]


def _group(match: re.Match[str], index: int) -> str | None:
    return match.group(index) if index <= (match.re.groups or 0) else None


def extract_from_string(
    text: Any, pattern: str | re.Pattern[str], kind: ExtractKind | str
) -> Any:
    """Search ``text`` with ``pattern`` and convert what was captured.

    The capture used is the second group, else the first, else the whole match,
    depending on ``kind``:

    - ``string``: the captured text.
    - ``number``: the first group (or whole match) parsed as a float; ``text``
      when it is not numeric.
    - ``boolean``: whether the first or second group is exactly ``"true"``.
    - ``array``: the whole match decoded as JSON; ``[]`` when it is not valid JSON.
    - ``date``: the captured text as a datetime; the current time when it is
      not a date.
    - anything else: the whole match.

    Args:
        text: The string to search.
        pattern: The regular expression, compiled or not.
        kind: How to convert the capture.

    Returns:
        The converted value, or ``text`` itself when nothing matches.

    Example:
        >>> extract_from_string("Price: $25.99", r"\\$(\\d+\\.\\d+)", "number")
        25.99
        >>> extract_from_string("Active: true", r"Active: (\\w+)", "boolean")
        True
        >>> extract_from_string("no price", r"\\$(\\d+)", "number")
        'no price'
    """
    if not isinstance(text, str):
        return text
    match = re.search(pattern, text)
    if match is None:
        return text
    first, second = _group(match, 1), _group(match, 2)
    captured = second or first or match.group(0)

    if kind == "string":
        return captured
    if kind == "boolean":
        return second == "true" or first == "true"
    if kind == "array":
        try:
            return json.loads(match.group(0))
        except ValueError:
            return []
    if kind == "number":
        number = parse_float(first or match.group(0))
        return number if isinstance(number, float) else text
    if kind == "date":
        moment = to_datetime(captured)
        return moment if moment is not None else datetime.now()
    return match.group(0)
