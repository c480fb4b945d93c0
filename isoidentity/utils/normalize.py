"""Shared text normalization utilities.

This module provides the normalization functions used by both the
country and subdivision resolvers. Everything here is pure and
deterministic so results can be memoised safely.
"""

import re
import unicodedata
from typing import Optional


_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_NON_LETTERS = re.compile(r"[^A-Za-z\s]")
_PARENTHETICAL_SUFFIX = re.compile(r"\(([\w\s]+)\)$", re.IGNORECASE)


def unaccent(s: Optional[str]) -> str:
    """Remove accents from letters, leaving everything else alone.

    Args:
        s: Raw text

    Returns:
        Text with combining diacritical marks removed

    Examples:
        >>> unaccent("Curaçao")
        'Curacao'

        >>> unaccent("Republic of Foo (the)")
        'Republic of Foo (the)'

        >>> unaccent("Åland Islands")
        'Aland Islands'
    """
    if not s:
        return ""

    s = unicodedata.normalize("NFD", s)
    s = _COMBINING_MARKS.sub("", s)
    return unicodedata.normalize("NFC", s)


def normalize(s: Optional[str]) -> str:
    """Normalization for trigram comparison.

    Transformations:
      1. Trim whitespace
      2. Uppercase
      3. Unicode decomposition (NFD) and removal of combining marks
      4. Remove everything except ASCII letters and whitespace
      5. Trim again (punctuation at the edges can leave spaces behind)

    Args:
        s: Raw text. None is treated as the empty string.

    Returns:
        Normalized string for matching

    Examples:
        >>> normalize("Curaçao")
        'CURACAO'

        >>> normalize("  Co. Wicklow ")
        'CO WICKLOW'

        >>> normalize("US-TX")
        'USTX'
    """
    if not s:
        return ""

    s = s.strip().upper()
    s = unicodedata.normalize("NFD", s)
    s = _COMBINING_MARKS.sub("", s)
    s = _NON_LETTERS.sub("", s)

    return s.strip()


def strip_parenthetical_suffix(s: Optional[str]) -> str:
    """Remove a trailing parenthetical qualifier.

    Used to derive informal country names from formal ones, e.g.
    "Saint Martin (French part)" -> "Saint Martin".

    Examples:
        >>> strip_parenthetical_suffix("Republic of Foo (the)")
        'Republic of Foo'

        >>> strip_parenthetical_suffix("Mexico")
        'Mexico'
    """
    if not s:
        return ""

    return _PARENTHETICAL_SUFFIX.sub("", s).strip()


def country_key(s: Optional[str]) -> str:
    """Comparison key for exact country name lookups.

    Same as normalize() with runs of whitespace collapsed to a single space,
    so "Korea,  Republic of" and "KOREA REPUBLIC OF" compare equal.

    Examples:
        >>> country_key("Côte d'Ivoire")
        'COTE DIVOIRE'

        >>> country_key("Korea,  Republic of")
        'KOREA REPUBLIC OF'
    """
    return " ".join(normalize(s).split())


__all__ = [
    "normalize",
    "unaccent",
    "strip_parenthetical_suffix",
    "country_key",
]
