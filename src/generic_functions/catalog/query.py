"""In-memory search, grouping and lookup over catalog entries."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

from generic_functions.core.collection import filter_, group_by, sort_by
from generic_functions.errors import CatalogEntryNotFoundError

from .models import Catalog, DocConstant, DocFunction

__all__ = [
    "filter_by_search",
    "find_entry",
    "format_category_name",
    "generate_id",
    "group_by_category",
    "sort_by_name",
]

_ID_CLEANUP = re.compile(r"[^a-z0-9]")
_CATEGORY_SEPARATORS = re.compile(r"[-_]")

DEFAULT_CATEGORY = "other"


class _Named(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def category(self) -> str: ...


EntryT = TypeVar("EntryT", bound=_Named)


def filter_by_search(items: Iterable[EntryT], term: str) -> list[EntryT]:
    """Keep the entries whose name or description contains ``term``, ignoring case.

    A blank term keeps everything.
    """
    needle = term.strip().casefold()
    if not needle:
        return list(items)
    return filter_(
        list(items),
        lambda item: needle in item.name.casefold()
        or needle in item.description.casefold(),
    )


def sort_by_name(items: Iterable[EntryT]) -> list[EntryT]:
    """Sort entries alphabetically by name, ignoring case."""
    return sort_by(list(items), lambda item: (item.name.casefold(), item.name))


def group_by_category(items: Iterable[EntryT]) -> dict[str, list[EntryT]]:
    """Group entries by category in encounter order; entries without one go to ``"other"``."""
    return group_by(list(items), lambda item: item.category or DEFAULT_CATEGORY)


def format_category_name(category: str) -> str:
    """Turn a category key into a display title.

    Example:
        >>> format_category_name("array"), format_category_name("date-time")
        ('Array', 'Date Time')
    """
    return " ".join(
        word[:1].upper() + word[1:] for word in _CATEGORY_SEPARATORS.split(category)
    )


def generate_id(prefix: str, name: str) -> str:
    """Build a stable anchor id for an entry.

    Example:
        >>> generate_id("function", "sortBy")
        'function-sortby'
        >>> generate_id("constant", "DATE_FORMATS")
        'constant-date-formats'
    """
    return f"{prefix}-{_ID_CLEANUP.sub('-', name.lower())}"


def find_entry(catalog: Catalog, name: str) -> DocFunction | DocConstant:
    """Look up a function, then a constant, by exact name.

    Raises:
        CatalogEntryNotFoundError: If nothing in the catalog has this name.
    """
    entries: Sequence[DocFunction | DocConstant] = (*catalog.functions, *catalog.constants)
    for entry in entries:
        if entry.name == name:
            return entry
    raise CatalogEntryNotFoundError(name)
