"""Subdivision resolution API.

Public API for ISO-3166-2 subdivision lookup and resolution. Names are
resolved within a single country, using exact code lookup first and trigram
similarity as a fallback.
"""

from typing import Optional
import pandas as pd

from isoidentity.countries.countryapi import find_country
from isoidentity.dataset.isoloader import load_iso
from isoidentity.dataset.isomodel import Subdivision
from isoidentity.subdivisions.subdivisionidentity import (
    SUBDIVISION_THRESHOLD,
    resolve_subdivision as _resolve_subdivision,
    topk_matches as _topk_matches,
)


def subdivision_code(
    country_code: str,
    name: str,
    *,
    threshold: float = SUBDIVISION_THRESHOLD,
) -> Optional[str]:
    """Return the ISO-3166-2 code of a subdivision, or None.

    Resolution strategy:
      1. Exact code lookup ("TX" or "US-TX" in US)
      2. Trigram similarity against subdivision names and variations
         (case, accent and punctuation insensitive)

    Args:
        country_code: ISO 3166-1 alpha-2 code of the country (e.g. "US", "MX")
        name: Subdivision name or code
              Examples: "Texas", "TX", "US-TX", "YucatAN", "Co. Wicklow"
        threshold: Minimum similarity in [0, 1]. Default 0.5.

    Returns:
        Subdivision code, or None if nothing scores at or above threshold

    Examples:
        >>> subdivision_code("US", "Texas")
        'US-TX'

        >>> subdivision_code("MX", "YucatAN")
        'MX-YUC'

        >>> subdivision_code("IE", "Co. Wicklow")
        'IE-WW'

        >>> subdivision_code("US", "West Virginia")
        'US-WV'

        >>> subdivision_code("MX", "Not a subdivision.") is None
        True
    """
    return _resolve_subdivision(country_code, name, load_iso(), threshold=threshold)


def find_subdivision_code(country: str, name: str) -> str:
    """Resolve a subdivision, raising on failure.

    Args:
        country: Country code or country name (e.g. "US", "United States")
        name: Subdivision name or code

    Returns:
        Subdivision code

    Raises:
        ValueError: If the country or the subdivision cannot be resolved

    Examples:
        >>> find_subdivision_code("United States", "Texas")
        'US-TX'
        >>> find_subdivision_code("Narnia", "Texas")
        Traceback (most recent call last):
        ...
        ValueError: Invalid country: Narnia
    """
    found = find_country(country)
    if found is None:
        raise ValueError(f"Invalid country: {country}")

    code, _ = found
    result = _resolve_subdivision(code, name, load_iso())
    if result is None:
        raise ValueError(f"Invalid subdivision '{name}' for country: {country} ({code})")
    return result


def get_subdivision(code: str) -> Optional[Subdivision]:
    """Subdivision record by full code.

    Examples:
        >>> get_subdivision("SG-01").name
        'Central Singapore'
        >>> get_subdivision("SG-Invalid") is None
        True
        >>> get_subdivision("Invalid") is None
        True
    """
    return load_iso().get_subdivision(code)


def match_subdivision(country_code: str, name: str, *, k: int = 5) -> list[dict]:
    """Top-K candidates + scores (for review UIs).

    Args:
        country_code: ISO 3166-1 alpha-2 code
        name: Subdivision name to match
        k: Number of top candidates to return. Default 5.

    Returns:
        List of dicts with code, name, category, variation, parent and
        score (0.0-1.0), ordered by descending score.

    Examples:
        >>> for m in match_subdivision("US", "Virginia", k=2):
        ...     print(f"{m['code']} {m['name']} - score: {m['score']}")
        US-VA Virginia - score: 1.0
        US-WV West Virginia - score: 1.0
    """
    return [
        {"code": sub.code, **sub.to_dict(), "variation": sub.variation, "parent": sub.parent, "score": score}
        for sub, score in _topk_matches(country_code, name, load_iso(), k=k)
    ]


def list_subdivisions(country: Optional[str] = None) -> pd.DataFrame:
    """List subdivisions, optionally for one country.

    Args:
        country: Optional ISO 3166-1 alpha-2 code (any case). If None,
                 returns every subdivision.

    Returns:
        DataFrame with columns country, code, name, category, variation, parent

    Examples:
        >>> ie = list_subdivisions(country="IE")
        >>> ie[ie["code"] == "IE-WW"]["name"].tolist()
        ['Wicklow']
    """
    dataset = load_iso()
    rows = [
        {
            "country": country_code,
            "code": sub.code,
            "name": sub.name,
            "category": sub.category,
            "variation": sub.variation,
            "parent": sub.parent,
        }
        for country_code, record in dataset.items()
        for sub in record.subdivisions.values()
    ]
    df = pd.DataFrame(rows, columns=["country", "code", "name", "category", "variation", "parent"])

    # Apply country filter
    if country is not None:
        df = df[df["country"] == country.upper()]

    return df


__all__ = [
    "subdivision_code",
    "find_subdivision_code",
    "get_subdivision",
    "match_subdivision",
    "list_subdivisions",
]
