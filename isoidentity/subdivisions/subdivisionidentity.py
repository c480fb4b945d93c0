"""Subdivision Resolution
----------------------

Resolves a subdivision name within one country to its ISO-3166-2 code:
  1. Exact key "{country}-{query}" (e.g. "TX" in US -> "US-TX")
  2. Exact key equal to the query itself ("US-TX" in US)
  3. Trigram scoring against each subdivision's name and variation;
     best score >= threshold wins
  4. Otherwise None

Field scoring takes the best of three comparisons, so both extra words in
the query ("Co. Wicklow" vs "Wicklow") and extra words in the name
("Veracruz" vs "Veracruz de Ignacio de la Llave") are tolerated:
  - similarity(query, field)
  - word_similarity(query, field)   query vs each word of the field
  - word_similarity(field, query)   field vs each word of the query

Equal scores are ordered by whole-phrase similarity ("West Virginia" prefers
US-WV over US-VA), then by subdivision code.

API:
  resolve_subdivision(country_code, query, dataset, threshold=0.5) -> str | None
  topk_matches(country_code, query, dataset, k=5) -> list[(Subdivision, score)]
"""

from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from isoidentity.dataset.isomodel import Country, ISODataset, Subdivision
from isoidentity.utils.similarity import similarity, word_similarity

logger = logging.getLogger(__name__)


SUBDIVISION_THRESHOLD = 0.5


# ---- Helper: Score a single field ----
def _score_field(query: str, field: Optional[str]) -> Tuple[float, float]:
    """(best score, whole-phrase similarity) of a query against one field."""
    if not field:
        return 0.0, 0.0

    phrase = similarity(query, field)
    return max(phrase, word_similarity(query, field), word_similarity(field, query)), phrase


def score_subdivision(query: str, subdivision: Subdivision) -> Tuple[float, float]:
    """
    Score a subdivision against a query using its name and variation.

    Args:
        query: Raw query string (normalized inside similarity())
        subdivision: Candidate subdivision

    Returns:
        (score, phrase_score) where score is the best field score and
        phrase_score the best whole-phrase similarity, used to break ties

    Examples:
        >>> score_subdivision("Co. Wicklow", Subdivision("IE-WW", "Wicklow"))
        (1.0, 0.625)
    """
    name_score = _score_field(query, subdivision.name)
    variation_score = _score_field(query, subdivision.variation)
    return max(name_score, variation_score)


# ---- Helper: Exact key lookup ----
def _exact_match(country: Country, query: str) -> Optional[str]:
    prefixed = f"{country.code}-{query}"
    if prefixed in country.subdivisions:
        return prefixed
    if query in country.subdivisions:
        return query
    return None


def _ranked(country: Country, query: str) -> List[Tuple[Subdivision, float]]:
    """All subdivisions with their scores, best first.

    Subdivisions are held in code order and the sort is stable, so equal
    (score, phrase_score) pairs keep ascending code order.
    """
    scored = [(sub, score_subdivision(query, sub)) for sub in country.subdivisions.values()]
    scored.sort(key=lambda x: x[1], reverse=True)
    return [(sub, score) for sub, (score, _) in scored]


# ---- Main resolution function ----
def resolve_subdivision(
    country_code: str,
    query: str,
    dataset: ISODataset,
    threshold: float = SUBDIVISION_THRESHOLD,
) -> Optional[str]:
    """
    Resolve a subdivision name to its ISO-3166-2 code.

    Args:
        country_code: Alpha-2 code of the country to search (e.g. "MX")
        query: Subdivision name or code (e.g. "Veracruz", "TX", "US-TX")
        dataset: ISODataset from load_iso()
        threshold: Minimum trigram score in [0, 1] (default 0.5)

    Returns:
        Subdivision code, or None for an unknown country or no match

    Examples:
        >>> ds = load_iso()
        >>> resolve_subdivision("MX", "Veracruz", ds)
        'MX-VER'
        >>> resolve_subdivision("IE", "Co. Wicklow", ds)
        'IE-WW'
        >>> resolve_subdivision("CA", "US-TX", ds) is None
        True
    """
    country = dataset.get(country_code)
    if country is None or not isinstance(query, str) or not query.strip():
        return None

    code = _exact_match(country, query)
    if code is not None:
        logger.debug(f"Subdivision {query!r} in {country.code} -> {code} (exact)")
        return code

    ranked = _ranked(country, query)
    if not ranked or ranked[0][1] < threshold:
        return None

    best, score = ranked[0]
    logger.debug(f"Subdivision {query!r} in {country.code} -> {best.code} (score {score:.3f})")
    return best.code


# ---- Top-k matches function ----
def topk_matches(
    country_code: str,
    query: str,
    dataset: ISODataset,
    k: int = 5,
) -> List[Tuple[Subdivision, float]]:
    """
    Return top-k subdivision matches with scores, without thresholding.

    Args:
        country_code: Alpha-2 code of the country to search
        query: Subdivision name
        dataset: ISODataset
        k: Number of top matches to return (default 5)

    Returns:
        List of (Subdivision, score) tuples, sorted by score descending

    Examples:
        >>> topk_matches("US", "Virginia", load_iso(), k=2)
        [(Subdivision(code='US-VA', ...), 1.0), (Subdivision(code='US-WV', ...), 1.0)]
    """
    country = dataset.get(country_code)
    if country is None or not isinstance(query, str) or not query.strip():
        return []

    return _ranked(country, query)[:k]


__all__ = [
    "SUBDIVISION_THRESHOLD",
    "score_subdivision",
    "resolve_subdivision",
    "topk_matches",
]
