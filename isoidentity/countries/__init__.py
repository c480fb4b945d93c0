"""Country resolution and lookup."""

from isoidentity.countries.countryapi import (
    country_code,
    country_codes,
    country_name,
    find_country,
    countries,
    is_territory,
    list_countries,
)
from isoidentity.countries.countryidentity import resolve_country

__all__ = [
    "country_code",
    "country_codes",
    "country_name",
    "find_country",
    "countries",
    "is_territory",
    "list_countries",
    "resolve_country",
]
