"""Short, stable, non-cryptographic hashes of JSON-serialisable values."""

from __future__ import annotations

import json
from typing import Any

__all__ = ["hash_value"]

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    sign = "-" if number < 0 else ""
    number = abs(number)
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
    return sign + "".join(reversed(digits))


def hash_value(obj: Any) -> str:
    """Hash ``obj`` into a short base-36 string.

    Strings are hashed as they are; anything else is first serialised to
    compact JSON. The hash is the classic ``h = h * 31 + code_unit`` over the
    UTF-16 code units of the text, wrapped to a signed 32-bit integer, so the
    same value always gives the same hash, across processes and platforms.
    Not suitable for security purposes.

    Example:
        >>> hash_value("hello")
        '1n1e4y'
        >>> hash_value({"a": 1, "b": 2})
        'kz8hg0'
    """
    if isinstance(obj, str):
        text = obj
    else:
        text = json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
    data = text.encode("utf-16-le", "surrogatepass")
    result = 0
    for index in range(0, len(data), 2):
        result = (result * 31 + (data[index] | data[index + 1] << 8)) & 0xFFFFFFFF
    if result >= 0x80000000:
        result -= 0x100000000
    return _to_base36(result)
