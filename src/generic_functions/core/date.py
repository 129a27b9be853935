"""Date helpers built on :mod:`datetime`.

Every helper accepting a date goes through :func:`to_datetime`, so it takes a
``datetime``, a ``date``, an ISO 8601 string, a bare year string or an epoch
timestamp in seconds. Timezone-aware values are converted to naive local time.
"""

from __future__ import annotations

import calendar
import logging
import re
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta
from typing import Any, Literal

from generic_functions.config import get_default_country
from generic_functions.constants import COUNTRY_DATE_FORMATS

from .arithmetic import round_

__all__ = [
    "add_time",
    "format_date",
    "get_format",
    "is_between",
    "is_date",
    "is_date_different",
    "min_and_max_years",
    "now",
    "seconds_to_tomorrow",
    "to_datetime",
]

logger = logging.getLogger(__name__)

TimeUnit = Literal["millisecond", "second", "minute", "hour", "day", "month", "year"]
FormatType = Literal["DATE", "TIME", "DATE_TIME"]

_FORMAT_TOKENS = re.compile(r"YYYY|MM|DD|HH|mm|ss")
_YEAR_ONLY = re.compile(r"^\d{4}$")
_TIME_FORMAT = "HH:mm:ss"

_TIMEDELTA_UNITS = {
    "millisecond": "milliseconds",
    "second": "seconds",
    "minute": "minutes",
    "hour": "hours",
    "day": "days",
}


def to_datetime(value: Any) -> datetime | None:
    """Convert ``value`` to a naive local ``datetime``.

    Args:
        value: A ``datetime``, a ``date``, an ISO 8601 string (a trailing ``Z`` is
            accepted), a four-digit year string or epoch seconds.

    Returns:
        The datetime, or None when ``value`` cannot be interpreted as a date.

    Example:
        >>> to_datetime("2024-03-05T10:30:00")
        datetime.datetime(2024, 3, 5, 10, 30)
        >>> to_datetime("2020")
        datetime.datetime(2020, 1, 1, 0, 0)
        >>> to_datetime("not a date") is None
        True
    """
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, date):
        result = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            result = datetime.fromtimestamp(value)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if _YEAR_ONLY.match(text):
            return datetime(int(text), 1, 1)
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            result = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if result.tzinfo is not None:
        result = result.astimezone().replace(tzinfo=None)
    return result


def is_date(value: Any) -> bool:
    """Check whether ``value`` is a ``datetime`` or ``date`` instance."""
    return isinstance(value, date)


def format_date(value: Any, fmt: str) -> str:
    """Format a date with the ``YYYY``, ``MM``, ``DD``, ``HH``, ``mm`` and ``ss`` tokens.

    Other characters of ``fmt`` are kept as they are.

    Args:
        value: Anything :func:`to_datetime` accepts.
        fmt: The pattern, e.g. ``"DD/MM/YYYY HH:mm"``.

    Returns:
        The formatted date, or an empty string when ``value`` is not a valid date.

    Example:
        >>> format_date("2024-03-05T09:07:02", "DD/MM/YYYY HH:mm:ss")
        '05/03/2024 09:07:02'
        >>> format_date("garbage", "YYYY")
        ''
    """
    moment = to_datetime(value)
    if moment is None:
        return ""
    replacements = {
        "YYYY": f"{moment.year}",
        "MM": f"{moment.month:02d}",
        "DD": f"{moment.day:02d}",
        "HH": f"{moment.hour:02d}",
        "mm": f"{moment.minute:02d}",
        "ss": f"{moment.second:02d}",
    }
    return _FORMAT_TOKENS.sub(lambda match: replacements[match.group()], fmt)


def now(fmt: str | None = None) -> datetime | str:
    """Current local time, formatted with :func:`format_date` when ``fmt`` is given."""
    current = datetime.now()
    return format_date(current, fmt) if fmt else current


def seconds_to_tomorrow() -> int:
    """Whole seconds left until next local midnight."""
    current = datetime.now()
    tomorrow = datetime.combine(current.date() + timedelta(days=1), datetime.min.time())
    return int((tomorrow - current).total_seconds())


def is_date_different(nb: int, unit: TimeUnit) -> bool:
    """Check whether ``nb`` differs from the current value of the calendar field ``unit``.

    Supported units are ``hour``, ``minute``, ``second``, ``day`` (day of the
    month), ``month`` (1-12) and ``year``; any other unit gives False.

    Example:
        >>> is_date_different(datetime.now().year, "year")
        False
    """
    current = datetime.now()
    fields = {
        "hour": current.hour,
        "minute": current.minute,
        "second": current.second,
        "day": current.day,
        "month": current.month,
        "year": current.year,
    }
    if unit not in fields:
        return False
    return nb != fields[unit]


def get_format(kind: FormatType, iso: str | None = None) -> str | None:
    """Get the display pattern for a date, a time or both in a given country.

    Args:
        kind: ``"DATE"``, ``"TIME"`` or ``"DATE_TIME"``.
        iso: ISO 3166 country code; defaults to the configured country
            (`GENERIC_FUNCTIONS_COUNTRY`, ``"FR"`` when unset).

    Returns:
        The pattern, or None for an unknown ``kind`` or an unknown country.

    Example:
        >>> get_format("DATE", "US"), get_format("DATE_TIME", "SE")
        ('MM/DD/YYYY', 'YYYY-MM-DD, HH:mm:ss')
        >>> get_format("TIME")
        'HH:mm:ss'
    """
    if kind == "TIME":
        return _TIME_FORMAT
    if kind not in ("DATE", "DATE_TIME"):
        return None
    code = (iso or get_default_country()).upper()
    if (date_format := COUNTRY_DATE_FORMATS.get(code)) is None:
        logger.debug("No date format for country code %r", code)
        return None
    return date_format if kind == "DATE" else f"{date_format}, {_TIME_FORMAT}"


def is_between(value: Any, start: Any, end: Any) -> bool:
    """Check whether ``start <= value <= end``; an invalid date gives False.

    Example:
        >>> is_between("2024-06-01", "2024-01-01", "2024-12-31")
        True
    """
    moment, lower, upper = to_datetime(value), to_datetime(start), to_datetime(end)
    if moment is None or lower is None or upper is None:
        return False
    return lower <= moment <= upper


def _add_months(moment: datetime, months: int) -> datetime:
    year, month = divmod(moment.year * 12 + moment.month - 1 + months, 12)
    day = min(moment.day, calendar.monthrange(year, month + 1)[1])
    return moment.replace(year=year, month=month + 1, day=day)


def add_time(value: Any, amount: float, unit: TimeUnit) -> datetime | None:
    """Add ``amount`` of ``unit`` to a date.

    Month and year arithmetic keeps the day of the month, clamped to the last
    day of the target month. An unknown ``unit`` leaves the date unchanged.

    Args:
        value: Anything :func:`to_datetime` accepts.
        amount: How many units to add (negative to subtract).
        unit: One of ``millisecond``, ``second``, ``minute``, ``hour``, ``day``,
            ``month`` or ``year``.

    Returns:
        The shifted datetime, or None when ``value`` is not a valid date.

    Example:
        >>> add_time("2024-01-31", 1, "month")
        datetime.datetime(2024, 2, 29, 0, 0)
        >>> add_time("2024-01-01T00:00:00", 90, "minute")
        datetime.datetime(2024, 1, 1, 1, 30)
    """
    moment = to_datetime(value)
    if moment is None:
        return None
    if unit in _TIMEDELTA_UNITS:
        return moment + timedelta(**{_TIMEDELTA_UNITS[unit]: amount})
    if unit == "month":
        return _add_months(moment, int(amount))
    if unit == "year":
        return _add_months(moment, int(amount) * 12)
    return moment


def min_and_max_years(items: Iterable[Mapping[str, Any]], prop: str) -> dict[str, int]:
    """Decade bounds for a year selector over dated records.

    Args:
        items: Records holding a date under ``prop``.
        prop: Key of the date in each record.

    Returns:
        ``{"min": oldest year rounded to the nearest decade, "max": current year
        rounded to the nearest decade, plus ten}``. Records without a valid date
        are ignored; ``min`` is 0 when none has one.

    Example:
        >>> min_and_max_years([{"ddeb": "1987-05-01"}, {"ddeb": "2003-01-01"}], "ddeb")["min"]
        1990
    """
    years = [
        moment.year
        for item in items
        if (moment := to_datetime(item.get(prop))) is not None
    ]
    oldest = min(years) if years else 0
    return {
        "min": round_(oldest, -1),
        "max": round_(datetime.now().year, -1) + 10,
    }
