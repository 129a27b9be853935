"""String helpers: case conversion, padding, truncation, templating and cleanup.

Case converters split their input with :func:`words`, so ``"helloWorld"``,
``"hello-world"`` and ``"Hello World"`` all convert the same way. Helpers
that receive something other than a string convert it with ``str()`` unless
documented otherwise.
"""

from __future__ import annotations

import html
import re
import unicodedata
from collections.abc import Callable, Mapping
from typing import Any

from ._helpers import base_get_path, iter_items, to_path

__all__ = [
    "camel_case",
    "capitalize",
    "clean",
    "deburr",
    "decode_html_entities",
    "ends_with",
    "escape",
    "escape_reg_exp",
    "get_initials",
    "kebab_case",
    "lower_case",
    "lower_first",
    "pad",
    "pad_end",
    "pad_start",
    "parse_int",
    "pascal_case",
    "purify",
    "remove_break_lines",
    "repeat",
    "replace",
    "snake_case",
    "split",
    "start_case",
    "starts_with",
    "template",
    "to_array",
    "to_lower",
    "to_upper",
    "to_upper_case",
    "trim",
    "trim_end",
    "trim_start",
    "truncate",
    "unescape",
    "upper_case",
    "upper_first",
    "words",
]

_UPPER = "A-ZÀ-ÖØ-Þ"
_LOWER = "a-zß-öø-ÿ"
_WORDS = re.compile(
    rf"[{_UPPER}]+(?=[{_UPPER}][{_LOWER}])"  # acronym followed by a word: "XMLHttp"
    rf"|[{_UPPER}]?[{_LOWER}]+"
    rf"|[{_UPPER}]+"
    r"|\d+"
)
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_LIGATURES = str.maketrans(
    {
        "Æ": "Ae",
        "æ": "ae",
        "Ø": "O",
        "ø": "o",
        "Œ": "Oe",
        "œ": "oe",
        "ß": "ss",
        "Đ": "D",
        "đ": "d",
        "Ł": "L",
        "ł": "l",
        "Þ": "Th",
        "þ": "th",
        "Ð": "D",
        "ð": "d",
    }
)
_HTML_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#39;"}
_HTML_UNESCAPES = {value: key for key, value in _HTML_ESCAPES.items()}
_HTML_ESCAPE_CHARS = re.compile(r"[&<>\"']")
_HTML_ENTITIES = re.compile(r"&(?:amp|lt|gt|quot|#39);")
_REGEXP_CHARS = re.compile(r"[\\^$.*+?()[\]{}|]")
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_TEMPLATE_ESCAPE = r"<%-([\s\S]+?)%>"
_TEMPLATE_INTERPOLATE = r"<%=([\s\S]+?)%>"
_TEMPLATE_ES = r"\$\{([^\\}]*(?:\\.[^\\}]*)*)\}"


# ============================================================================
#                               Words & cases
# ============================================================================


def words(text: Any, pattern: str | re.Pattern[str] | None = None) -> list[str]:
    """Split ``text`` into its words.

    Without ``pattern``, words are runs of letters split on case changes, or
    runs of digits. With ``pattern``, every match is a word.

    Example:
        >>> words("fred, barney, & pebbles")
        ['fred', 'barney', 'pebbles']
        >>> words("XMLHttpRequest")
        ['XML', 'Http', 'Request']
    """
    regex = _WORDS if pattern is None else re.compile(pattern)
    return [match.group(0) for match in regex.finditer(str(text))]


def purify(text: Any) -> str:
    """Remove accents (combining diacritical marks) from ``text``.

    Returns an empty string when ``text`` is not a string.

    Example:
        >>> purify("Héllo Wörld")
        'Hello World'
    """
    if not isinstance(text, str):
        return ""
    return _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", text))


def deburr(text: Any) -> str:
    """Convert Latin-1 letters to basic Latin and drop combining marks.

    Example:
        >>> deburr("déjà vu")
        'deja vu'
        >>> deburr("Æsir")
        'Aesir'
    """
    return purify(str(text).translate(_LIGATURES))


def capitalize(text: Any) -> str:
    """Upper-case the first character of ``text``, leaving the rest unchanged.

    Example:
        >>> capitalize("hello")
        'Hello'
        >>> capitalize("WORLD")
        'WORLD'
    """
    text = str(text)
    return text[:1].upper() + text[1:]


def upper_first(text: Any) -> str:
    """Upper-case the first character of ``text``."""
    text = str(text)
    return text[:1].upper() + text[1:]


def lower_first(text: Any) -> str:
    """Lower-case the first character of ``text``."""
    text = str(text)
    return text[:1].lower() + text[1:]


def _title(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def camel_case(text: Any) -> str:
    """Convert ``text`` to camelCase.

    Example:
        >>> camel_case("Foo Bar")
        'fooBar'
        >>> camel_case("__FOO_BAR__")
        'fooBar'
    """
    parts = words(deburr(text))
    if not parts:
        return ""
    return parts[0].lower() + "".join(_title(part) for part in parts[1:])


def pascal_case(text: Any) -> str:
    """Convert ``text`` to PascalCase.

    Example:
        >>> pascal_case("hello world")
        'HelloWorld'
    """
    return "".join(_title(part) for part in words(deburr(text)))


def kebab_case(text: Any) -> str:
    """Convert ``text`` to kebab-case.

    Example:
        >>> kebab_case("HelloWorld")
        'hello-world'
    """
    return "-".join(part.lower() for part in words(deburr(text)))


def snake_case(text: Any) -> str:
    """Convert ``text`` to snake_case.

    Example:
        >>> snake_case("Hello World")
        'hello_world'
    """
    return "_".join(part.lower() for part in words(deburr(text)))


def lower_case(text: Any) -> str:
    """Convert ``text`` to space separated lower-case words.

    Example:
        >>> lower_case("Hello-World")
        'hello world'
    """
    return " ".join(part.lower() for part in words(deburr(text)))


def upper_case(text: Any) -> str:
    """Convert ``text`` to space separated upper-case words.

    Example:
        >>> upper_case("hello-world")
        'HELLO WORLD'
    """
    return " ".join(part.upper() for part in words(deburr(text)))


def start_case(text: Any) -> str:
    """Convert ``text`` to Start Case.

    Example:
        >>> start_case("--foo-bar--")
        'Foo Bar'
        >>> start_case("fooBar")
        'Foo Bar'
    """
    return " ".join(upper_first(part) for part in words(deburr(text)))


def to_lower(text: Any) -> str:
    """Convert ``text`` to lower case as a whole."""
    return str(text).lower()


def to_upper(text: Any) -> str:
    """Convert ``text`` to upper case as a whole."""
    return str(text).upper()


def to_upper_case(data: Any) -> Any:
    """Upper-case every string inside ``data``, recursing through lists and mappings.

    Non-string leaves are returned unchanged.

    Example:
        >>> to_upper_case({"a": ["x", 1], "b": "y"})
        {'a': ['X', 1], 'b': 'Y'}
    """
    if isinstance(data, str):
        return data.upper()
    if isinstance(data, Mapping):
        return {key: to_upper_case(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [to_upper_case(item) for item in data]
    return data


# ============================================================================
#                               Padding & trimming
# ============================================================================


def _padding(length: int, chars: str) -> str:
    if length <= 0 or not chars:
        return ""
    return (chars * (length // len(chars) + 1))[:length]


def pad(text: Any, length: int = 0, chars: str = " ") -> str:
    """Pad both sides of ``text`` up to ``length``; the right side gets the extra char.

    Example:
        >>> pad("abc", 8, "_-")
        '_-abc_-_'
    """
    text = str(text)
    missing = length - len(text)
    if missing <= 0:
        return text
    left = missing // 2
    return _padding(left, chars) + text + _padding(missing - left, chars)


def pad_start(text: Any, length: int = 0, chars: str = " ") -> str:
    """Pad the start of ``text`` up to ``length``.

    Example:
        >>> pad_start("abc", 6, "_-")
        '_-_abc'
    """
    text = str(text)
    return _padding(length - len(text), chars) + text


def pad_end(text: Any, length: int = 0, chars: str = " ") -> str:
    """Pad the end of ``text`` up to ``length``.

    Example:
        >>> pad_end("abc", 6, "_-")
        'abc_-_'
    """
    text = str(text)
    return text + _padding(length - len(text), chars)


def repeat(text: Any, n: int = 1) -> str:
    """Repeat ``text`` ``n`` times.

    Example:
        >>> repeat("abc", 2)
        'abcabc'
    """
    return str(text) * max(n, 0)


def trim(text: Any, chars: str | None = None) -> str:
    """Strip whitespace (or ``chars``) from both ends; non-strings give ``""``.

    Example:
        >>> trim("-_-abc-_-", "_-")
        'abc'
    """
    return text.strip(chars) if isinstance(text, str) else ""


def trim_start(text: Any, chars: str | None = None) -> str:
    """Strip whitespace (or ``chars``) from the start; non-strings give ``""``."""
    return text.lstrip(chars) if isinstance(text, str) else ""


def trim_end(text: Any, chars: str | None = None) -> str:
    """Strip whitespace (or ``chars``) from the end; non-strings give ``""``."""
    return text.rstrip(chars) if isinstance(text, str) else ""


def clean(text: Any) -> str:
    """Collapse whitespace runs into single spaces and trim; non-strings give ``""``.

    Example:
        >>> clean("  hello   world  ")
        'hello world'
    """
    return re.sub(r"\s+", " ", text).strip() if isinstance(text, str) else ""


def remove_break_lines(text: str) -> str:
    """Replace line breaks with single spaces.

    Example:
        >>> remove_break_lines("Hello\\r\\nWorld")
        'Hello World'
    """
    return re.sub(r" {2,}", " ", re.sub(r"[\r\n]+", " ", text)).strip()


def truncate(
    text: Any,
    length: int = 30,
    omission: str = "...",
    separator: str | re.Pattern[str] | None = None,
) -> str:
    """Truncate ``text`` so that, omission included, it is at most ``length`` long.

    With ``separator`` the cut backs up to the last separator occurrence.

    Example:
        >>> truncate("hi-diddly-ho there, neighborino", 24)
        'hi-diddly-ho there, n...'
        >>> truncate("hello world", 10, separator=" ")
        'hello...'
    """
    text = str(text)
    if len(text) <= length:
        return text
    end = length - len(omission)
    if end < 1:
        return omission[:length]
    result = text[:end]
    if isinstance(separator, re.Pattern):
        if cuts := [match.start() for match in separator.finditer(result)]:
            result = result[: cuts[-1]]
    elif separator:
        if (index := result.rfind(separator)) > -1:
            result = result[:index]
    return result + omission


# ============================================================================
#                               Escaping
# ============================================================================


def escape(text: Any) -> str:
    """Escape ``&``, ``<``, ``>``, ``"`` and ``'`` as HTML entities.

    Example:
        >>> escape("fred, barney, & pebbles")
        'fred, barney, &amp; pebbles'
    """
    return _HTML_ESCAPE_CHARS.sub(lambda m: _HTML_ESCAPES[m.group(0)], str(text))


def unescape(text: Any) -> str:
    """Inverse of :func:`escape`.

    Example:
        >>> unescape("&lt;div&gt;hello&lt;/div&gt;")
        '<div>hello</div>'
    """
    return _HTML_ENTITIES.sub(lambda m: _HTML_UNESCAPES[m.group(0)], str(text))


def decode_html_entities(text: str) -> str:
    """Decode every named and numeric HTML entity in ``text``.

    Example:
        >>> decode_html_entities("&amp; toto &eacute;t&#233;")
        '& toto été'
    """
    return html.unescape(text)


def escape_reg_exp(text: Any) -> str:
    r"""Escape the regular-expression special characters in ``text``.

    Example:
        >>> escape_reg_exp("a.b*c")
        'a\\.b\\*c'
    """
    return _REGEXP_CHARS.sub(lambda m: "\\" + m.group(0), str(text))


# ============================================================================
#                               Search & split
# ============================================================================


def starts_with(text: Any, target: str, position: int = 0) -> bool:
    """Check whether ``text`` starts with ``target`` at ``position``."""
    return str(text)[position:].startswith(target)


def ends_with(text: Any, target: str, position: int | None = None) -> bool:
    """Check whether ``text`` ends with ``target``, considering only ``text[:position]``.

    Example:
        >>> ends_with("hello world", "hello", 5)
        True
    """
    return str(text)[:position].endswith(target)


def replace(
    text: Any,
    pattern: str | re.Pattern[str],
    replacement: str | Callable[[re.Match[str]], str],
    count: int = 1,
) -> str:
    """Replace the first ``count`` occurrences of ``pattern`` (0 replaces all).

    Callable replacements are only supported for compiled patterns.

    Example:
        >>> replace("Hi Fred", "Fred", "Barney")
        'Hi Barney'
        >>> replace("a1b22c", re.compile(r"\\d+"), "#", count=0)
        'a#b#c'
    """
    text = str(text)
    if isinstance(pattern, re.Pattern):
        return pattern.sub(replacement, text, count=count)
    if callable(replacement):
        raise TypeError("Callable replacements require a compiled pattern")
    return text.replace(pattern, replacement, count if count > 0 else -1)


def split(
    text: Any,
    separator: str | re.Pattern[str] | None = None,
    limit: int | None = None,
) -> list[str]:
    """Split ``text`` by ``separator`` (a string or compiled pattern).

    Without a separator (or with ``""``) the result is the list of characters.
    ``limit`` caps the number of pieces returned.

    Example:
        >>> split("a-b-c", "-", 2)
        ['a', 'b']
    """
    text = str(text)
    if isinstance(separator, re.Pattern):
        pieces = separator.split(text)
    elif not separator:
        pieces = list(text)
    else:
        pieces = text.split(separator)
    return pieces if limit is None else pieces[: max(limit, 0)]


def parse_int(text: Any, radix: int | None = 10) -> int | None:
    """Parse the leading integer of ``text`` in base ``radix``.

    Leading whitespace and a sign are allowed, as is a ``0x`` prefix for base
    16 (or when ``radix`` is 0/None). Returns None when no digits lead the string.

    Example:
        >>> parse_int("08")
        8
        >>> parse_int("10", 2)
        2
        >>> parse_int("12px")
        12
    """
    body = str(text).strip()
    sign = 1
    if body and body[0] in "+-":
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if not radix:
        radix = 16 if body[:2].lower() == "0x" else 10
    if not 2 <= radix <= 36:
        return None
    if radix == 16 and body[:2].lower() == "0x":
        body = body[2:]
    digits = _DIGITS[:radix]
    prefix = ""
    for char in body:
        if char.lower() not in digits:
            break
        prefix += char
    return sign * int(prefix, radix) if prefix else None


def to_array(value: Any) -> list[Any]:
    """Convert ``value`` to a list: characters of a string, values of a mapping.

    Example:
        >>> to_array("abc")
        ['a', 'b', 'c']
        >>> to_array({"a": 1, "b": 2})
        [1, 2]
    """
    if value is None:
        return []
    if isinstance(value, str):
        return list(value)
    return [item for item, _ in iter_items(value)]


def get_initials(text: str) -> str:
    """Return up to four initials from the words of ``text``.

    Capital letters that start a word are kept. Lower-case starts are only
    kept (upper-cased) while no capital initial has been collected yet; words
    starting with a non-letter are skipped.

    Example:
        >>> get_initials("John Ronald Reuel Tolkien")
        'JRRT'
        >>> get_initials("jean de La Fontaine")
        'JLF'
    """
    initials: list[str] = []
    for word in text.strip().split():
        first = word[0]
        if not (first.isascii() and first.isalpha()) or len(initials) >= 4:
            continue
        if first.isupper():
            initials.append(first)
        elif not any(char.isupper() for char in initials):
            initials.append(first.upper())
    return "".join(initials)


# ============================================================================
#                               Templating
# ============================================================================


def template(
    text: str,
    escape_pattern: str | re.Pattern[str] | None = None,
    interpolate_pattern: str | re.Pattern[str] | None = None,
) -> Callable[..., str]:
    """Compile ``text`` into a function rendering it with data.

    Supported delimiters are ``<%= path %>`` (interpolate), ``<%- path %>``
    (HTML-escaped interpolate) and ``${path}``. Paths are resolved like
    :func:`~generic_functions.core.object.get`; missing values render as an
    empty string. Custom patterns must have exactly one capture group holding
    the path.

    Example:
        >>> template("hello <%= user.name %>!")({"user": {"name": "fred"}})
        'hello fred!'
        >>> template("<b><%- value %></b>")({"value": "<script>"})
        '<b>&lt;script&gt;</b>'
    """
    escape_source = getattr(escape_pattern, "pattern", escape_pattern) or _TEMPLATE_ESCAPE
    interpolate_source = (
        getattr(interpolate_pattern, "pattern", interpolate_pattern)
        or _TEMPLATE_INTERPOLATE
    )
    regex = re.compile(f"{escape_source}|{interpolate_source}|{_TEMPLATE_ES}")

    def render(data: Any = None) -> str:
        def substitute(match: re.Match[str]) -> str:
            escaped, interpolated, es_value = match.groups()
            path = next(part for part in (escaped, interpolated, es_value) if part is not None)
            value = base_get_path(data, to_path(path.strip()), None)
            rendered = "" if value is None else str(value)
            return escape(rendered) if escaped is not None else rendered

        return regex.sub(substitute, text)

    return render
