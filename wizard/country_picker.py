"""Filtering for the phone step's country picker."""

from __future__ import annotations

from collections.abc import Sequence

from models.country import Country
from wizard.countries import COUNTRIES


def country_matches(country: Country, query: str) -> bool:
    """Return ``True`` when ``query`` matches the name (any case) or the dial code."""

    return query.lower() in country.display_name.lower() or query in country.dial_code


def filter_countries(query: str | None, countries: Sequence[Country] = COUNTRIES) -> tuple[Country, ...]:
    """Return the countries matching ``query`` in their declared order.

    An empty query returns the whole directory; no match yields an empty tuple.
    """

    if not query:
        return tuple(countries)
    return tuple(country for country in countries if country_matches(country, query))


__all__ = ["country_matches", "filter_countries"]
