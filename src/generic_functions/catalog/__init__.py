"""Self-description of the library: its functions, constants and metadata."""

from .introspect import build_catalog
from .models import Catalog, DocConstant, DocFunction, DocParam, DocReturn, PackageInfo
from .query import (
    filter_by_search,
    find_entry,
    format_category_name,
    generate_id,
    group_by_category,
    sort_by_name,
)

__all__ = [
    "Catalog",
    "DocConstant",
    "DocFunction",
    "DocParam",
    "DocReturn",
    "PackageInfo",
    "build_catalog",
    "filter_by_search",
    "find_entry",
    "format_category_name",
    "generate_id",
    "group_by_category",
    "sort_by_name",
]
