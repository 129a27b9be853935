"""Shared constants: common regular expressions, date formats and status codes.

Every constant is a read-only mapping. ``DESCRIPTIONS`` holds a one-line
summary for each public constant and is what the catalog shows.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Final

__all__ = [
    "COUNTRY_DATE_FORMATS",
    "DATE_FORMATS",
    "REGEX",
    "RESPONSE_CODES",
    "STATUS_COLORS",
]

REGEX: Final = MappingProxyType(
    {
        "html_tag": re.compile(r".*?>([^<]*)"),
        "in_brackets": re.compile(r"\[[^\[\]]*\]"),
        "in_strings": re.compile(r'.*?"([^"]*)'),
        "tag_regex": re.compile(
            r"<([a-z][a-z0-9]*)[^>]*>([^<]*)</\1>|(\[(.*?)\])", re.IGNORECASE
        ),
        "open_parentheses": re.compile(r"^(.*?)\("),
        "all_spaces": re.compile(r"\S+"),
        "datetime": re.compile(
            r"^((?:(\d{4}-\d{2}-\d{2})T(\d{2}:\d{2}:\d{2}(?:\.\d+)?))(Z|[+-]\d{2}:\d{2})?)$"
        ),
        "email": re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$"),
        "url": re.compile(r"^https?://.+"),
        "number": re.compile(r"^-?\d+(\.\d+)?$"),
    }
)

DATE_FORMATS: Final = MappingProxyType(
    {
        "DATE": "DD/MM/YYYY",
        "TIME": "HH:mm",
        "DATE_TIME": "DD/MM/YYYY,HH:mm:ss",
    }
)

# fmt: off
COUNTRY_DATE_FORMATS: Final = MappingProxyType(
    {
        "AD": "DD/MM/YYYY", "AT": "DD.MM.YYYY", "BE": "DD/MM/YYYY", "BG": "DD.MM.YYYY",
        "CH": "DD.MM.YYYY", "CY": "DD/MM/YYYY", "CZ": "DD.MM.YYYY", "DE": "DD.MM.YYYY",
        "DK": "DD.MM.YYYY", "EE": "DD.MM.YYYY", "ES": "DD/MM/YYYY", "FI": "DD.MM.YYYY",
        "FR": "DD/MM/YYYY", "GB": "DD/MM/YYYY", "GR": "DD/MM/YYYY", "HR": "DD.MM.YYYY",
        "HU": "YYYY.MM.DD.", "IE": "DD/MM/YYYY", "IS": "DD.MM.YYYY", "IT": "DD/MM/YYYY",
        "LI": "DD.MM.YYYY", "LT": "YYYY.MM.DD", "LU": "DD/MM/YYYY", "LV": "DD.MM.YYYY",
        "MC": "DD/MM/YYYY", "MT": "DD/MM/YYYY", "NL": "DD-MM-YYYY", "NO": "DD.MM.YYYY",
        "PL": "DD.MM.YYYY", "PT": "DD/MM/YYYY", "RO": "DD.MM.YYYY", "SE": "YYYY-MM-DD",
        "SI": "DD.MM.YYYY", "SK": "DD.MM.YYYY", "SM": "DD/MM/YYYY", "TR": "DD.MM.YYYY",
        "US": "MM/DD/YYYY", "CA": "MM/DD/YYYY", "JP": "YYYY年MM月DD日",
        "CN": "YYYY年MM月DD日", "KR": "YYYY-MM-DD",
    }
)
# fmt: on

RESPONSE_CODES: Final = MappingProxyType(
    {
        "NOT_INIT": 0,
        "IS_INIT": 1,
        "NOT_FOUND_INIT": 2,
        "NOT_FOUND": 9,
    }
)

STATUS_COLORS: Final = MappingProxyType(
    {
        "ACTIVE": "green",
        "INACTIVE": "grey",
        "PENDING": "orange",
        "ERROR": "red",
        "WARNING": "yellow",
        "INFO": "blue",
    }
)

DESCRIPTIONS: Final = MappingProxyType(
    {
        "REGEX": "Common compiled regular expressions (HTML tags, emails, URLs, numbers, ...).",
        "DATE_FORMATS": "Default date, time and date-time format patterns.",
        "COUNTRY_DATE_FORMATS": "Date format pattern for each supported ISO country code.",
        "RESPONSE_CODES": "Numeric codes describing the initialisation state of a resource.",
        "STATUS_COLORS": "Colour names commonly used for status indicators.",
    }
)
