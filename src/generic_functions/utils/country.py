"""Country lookup in a list of country records."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from generic_functions.core.string import purify

__all__ = ["get_country"]


def get_country(
    countries: Sequence[Mapping[str, Any]],
    cc: str | None = None,
    cn: str | None = None,
    cf: str | None = None,
) -> Mapping[str, Any]:
    """Find a country by code, name or flag.

    Records look like ``{"cca2": "FR", "name": {"common": ..., "official": ...},
    "altNames": "...", "flag": "🇫🇷"}``; every key is optional. Records are
    scanned in ``cca2`` order and the first one matching any criterion wins.

    Args:
        countries: The country records.
        cc: ISO 3166-1 alpha-2 code, compared exactly.
        cn: Name. Accents are stripped from it, then it is compared exactly with
            the common and official names, or searched as a whole word
            (ignoring case) in ``altNames``.
        cf: Flag emoji, compared exactly.

    Returns:
        The matching record, or an empty dict.

    Example:
        >>> countries = [{"cca2": "FR", "name": {"common": "France", "official": "French Republic"}}]
        >>> get_country(countries, cc="FR")["name"]["common"]
        'France'
        >>> get_country(countries, cn="Germany")
        {}
    """
    if not countries:
        return {}
    name = purify(cn) if cn else ""
    alt_name = re.compile(rf"\b{re.escape(name)}\b", re.IGNORECASE) if name else None

    def matches(country: Mapping[str, Any]) -> bool:
        if cc and country.get("cca2") == cc:
            return True
        if cf and country.get("flag") == cf:
            return True
        names = country.get("name")
        if alt_name is not None and names:
            if name in (names.get("common"), names.get("official")):
                return True
            alt_names = country.get("altNames")
            if alt_names and alt_name.search(alt_names):
                return True
        return False

    ordered = sorted(countries, key=lambda country: country.get("cca2") or "")
    return next((country for country in ordered if matches(country)), {})
