"""Country resolution API.

Thin wrappers around countryidentity that bind the default ISO-3166 dataset.
This provides a clean, simple API for users who just want alpha-2 codes and
country names.
"""

from typing import Dict, Iterable, List, Optional, Tuple
import pandas as pd

from isoidentity.countries.countryidentity import resolve_country
from isoidentity.dataset.isoloader import load_iso
from isoidentity.dataset.isomodel import COUNTRY_CODE_PATTERN, Country
from isoidentity.utils.normalize import strip_parenthetical_suffix, unaccent


NAME_KINDS = (None, "short_name", "informal")


def country_code(name: str) -> Optional[str]:
    """Get the ISO 3166-1 alpha-2 code for a country name.

    Checks a table of historical and colloquial names first, then compares
    against each country's official, short, full and common names. Matching
    ignores case, accents and punctuation, but is otherwise exact.

    Args:
        name: Country name (e.g. "United States", "MEXICO", "Iran")

    Returns:
        Alpha-2 code (e.g. "US") or None if not recognized

    Examples:
        >>> country_code("United States")
        'US'

        >>> country_code("UNITED STATES OF AMERICA")
        'US'

        >>> country_code("Venezuela")
        'VE'

        >>> country_code("Not a country.") is None
        True
    """
    return resolve_country(name, load_iso())


def country_codes(names: Iterable[str]) -> List[Optional[str]]:
    """Batch resolve country names to alpha-2 codes.

    Examples:
        >>> country_codes(["Mexico", "Taiwan", "Nowhere"])
        ['MX', 'TW', None]
    """
    dataset = load_iso()
    return [resolve_country(name, dataset) for name in names]


def country_name(code: str, kind: Optional[str] = None) -> Optional[str]:
    """Name of a country by alpha-2 code.

    Args:
        code: Alpha-2 code (e.g. "BO")
        kind: None for the ISO name, "short_name" for the upper-case short
              name, "informal" for the name without its parenthetical
              qualifier and accents

    Returns:
        The requested name, or None for an unknown code

    Raises:
        ValueError: If kind is not one of None, "short_name", "informal"

    Examples:
        >>> country_name("US")
        'United States'
        >>> country_name("US", "short_name")
        'UNITED STATES'
        >>> country_name("TW", "informal")
        'Taiwan, Province of China'
    """
    if kind not in NAME_KINDS:
        raise ValueError(f"Unknown name kind: {kind!r}. Use one of {NAME_KINDS}")

    country = load_iso().get(code)
    if country is None:
        return None

    if kind == "short_name":
        return country.short_name
    if kind == "informal":
        return unaccent(strip_parenthetical_suffix(country.name)).strip()
    return country.name


def find_country(query: str) -> Optional[Tuple[str, Country]]:
    """Look up a country by alpha-2 code (any case) or by name.

    Examples:
        >>> code, country = find_country("mx")
        >>> code, country.name
        ('MX', 'Mexico')
        >>> find_country("Mexico")[0]
        'MX'
    """
    if not isinstance(query, str):
        return None

    dataset = load_iso()
    candidate = query.strip().upper()
    if COUNTRY_CODE_PATTERN.match(candidate) and candidate in dataset:
        return candidate, dataset.get(candidate)

    code = resolve_country(query, dataset)
    if code is None:
        return None
    return code, dataset.get(code)


def countries(*, with_subdivisions: bool = False, exclude_territories: bool = False) -> Dict[str, dict]:
    """All countries as dataset-format dicts keyed by code.

    Each record includes its "subdivisions" mapping.

    Args:
        with_subdivisions: Only countries that have at least one subdivision
        exclude_territories: Leave out territories (e.g. PR, which is also US-PR)

    Examples:
        >>> "PR" in countries(exclude_territories=True)
        False
        >>> "PR" in countries(with_subdivisions=True)
        False
    """
    dataset = load_iso()
    result = {}
    for code, country in dataset.items():
        if with_subdivisions and not country.subdivisions:
            continue
        if exclude_territories and code in dataset.territories:
            continue
        result[code] = country.to_dict()
    return result


def is_territory(code: str) -> bool:
    """True when the country is also listed as another country's subdivision.

    Examples:
        >>> is_territory("PR")
        True
        >>> is_territory("US")
        False
    """
    return code in load_iso().territories


def list_countries() -> pd.DataFrame:
    """Countries as a DataFrame (one row per country) for exploration.

    Columns: code, name, short_name, full_name, common_name,
    subdivision_count, is_territory.

    Examples:
        >>> df = list_countries()
        >>> "PR" in df[df["is_territory"]]["code"].tolist()
        True
    """
    dataset = load_iso()
    rows = [
        {
            "code": code,
            "name": country.name,
            "short_name": country.short_name,
            "full_name": country.full_name,
            "common_name": country.common_name,
            "subdivision_count": len(country.subdivisions),
            "is_territory": code in dataset.territories,
        }
        for code, country in dataset.items()
    ]
    return pd.DataFrame(
        rows,
        columns=["code", "name", "short_name", "full_name", "common_name", "subdivision_count", "is_territory"],
    )


__all__ = [
    "country_code",
    "country_codes",
    "country_name",
    "find_country",
    "countries",
    "is_territory",
    "list_countries",
]
