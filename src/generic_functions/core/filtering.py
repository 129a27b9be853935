"""Free-text, period and multi-select filtering of record lists.

:func:`filter_data` is the search behind list screens: a search box, an
optional range of years and any number of multi-select facets, all applied at
once to a list of mapping records.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .collection import includes
from .date import to_datetime
from .string import purify

__all__ = [
    "DEFAULT_SEARCH_PATTERN",
    "FilterParams",
    "Selection",
    "filter_data",
]

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_PATTERN = "[A-Za-zÀ-ÖØ-öø-ÿ0-9]+"


@dataclass(frozen=True, slots=True)
class Selection:
    """One multi-select facet.

    Attributes:
        property: Key of the record holding a sequence of entries.
        values: Selected values; every one of them must be found in every entry.
        key: Key of each entry holding the entry's values (a string or a sequence).
    """

    property: str
    values: Sequence[Any]
    key: str = "state"


@dataclass(frozen=True, slots=True)
class FilterParams:
    """What :func:`filter_data` filters on.

    Attributes:
        search: Free text. Every word of it must occur in ``record[search_field]``,
            ignoring case and accents.
        years: Empty, or ``(first, last)``: the record's date must fall between
            January 1st of ``first`` and the end of ``last``.
        selections: Facets that must all match.
        search_field: Key of the text searched by ``search``.
        date_field: Key of the date checked against ``years``.
        pattern: Regular expression extracting the words of ``search``.
    """

    search: str = ""
    years: tuple[int, int] | tuple[()] = ()
    selections: tuple[Selection, ...] = ()
    search_field: str = "field_search"
    date_field: str = "ddeb"
    pattern: str = DEFAULT_SEARCH_PATTERN


def _normalize(text: Any) -> str:
    return purify(text if isinstance(text, str) else "" if text is None else str(text))


def _search_terms(params: FilterParams) -> list[re.Pattern[str]]:
    found = (
        match.group(0)
        for match in re.finditer(params.pattern, params.search or "", re.IGNORECASE)
    )
    return [re.compile(re.escape(_normalize(word)), re.IGNORECASE) for word in found]


def _year_bounds(params: FilterParams) -> tuple[datetime, datetime] | None:
    if not params.years:
        return None
    first, last = sorted(params.years)
    return datetime(first, 1, 1), datetime(last + 1, 1, 1)


def _matches_selection(record: Mapping[str, Any], selection: Selection) -> bool:
    entries = record.get(selection.property)
    for selected in selection.values:
        if not entries:
            return False
        for entry in entries:
            values = entry.get(selection.key) if isinstance(entry, Mapping) else None
            if values is None or not includes(values, selected):
                return False
    return True


def filter_data(
    items: Sequence[Mapping[str, Any]], params: FilterParams
) -> list[Mapping[str, Any]]:
    """Filter ``items`` with the free text, the year range and the selections of ``params``.

    Input order is preserved and the records are returned as they are (not
    copied). A record whose date cannot be parsed fails an active year range.

    Args:
        items: The records.
        params: The filter to apply.

    Returns:
        The records matching every criterion.

    Example:
        >>> records = [
        ...     {"field_search": "Église Saint-Pierre", "ddeb": "1875-01-01", "state": [{"state": ["open"]}]},
        ...     {"field_search": "Musée des beaux-arts", "ddeb": "1921-06-01", "state": [{"state": ["closed"]}]},
        ... ]
        >>> [r["ddeb"] for r in filter_data(records, FilterParams(search="eglise"))]
        ['1875-01-01']
        >>> selections = (Selection("state", ["closed"]),)
        >>> [r["ddeb"] for r in filter_data(records, FilterParams(years=(1900, 1950), selections=selections))]
        ['1921-06-01']
    """
    terms = _search_terms(params)
    bounds = _year_bounds(params)

    def keep(record: Mapping[str, Any]) -> bool:
        if terms:
            text = _normalize(record.get(params.search_field))
            if not all(term.search(text) for term in terms):
                return False
        if not all(_matches_selection(record, selection) for selection in params.selections):
            return False
        if bounds is not None:
            moment = to_datetime(record.get(params.date_field))
            if moment is None or not bounds[0] <= moment < bounds[1]:
                return False
        return True

    result = [record for record in items if keep(record)]
    logger.debug(
        "filter_data kept %d of %d record(s) (%d search term(s), years=%s, %d selection(s))",
        len(result),
        len(items),
        len(terms),
        params.years or "-",
        len(params.selections),
    )
    return result
