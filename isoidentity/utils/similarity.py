"""Trigram similarity scoring.

Implements the set-based (Jaccard) trigram similarity used by the
subdivision resolver:

  similarity(a, b) = |T(a) & T(b)| / |T(a) | T(b)|

where T(s) is the set of 3-grapheme windows of normalize(s).

API:
  graphemes(s) -> list[str]
  trigrams(s) -> frozenset[str]
  similarity(a, b) -> float
  word_similarity(candidate, target_phrase) -> float

Examples:
  >>> similarity("Yucatán", "YUCATAN")
  1.0
  >>> word_similarity("Virginia", "West Virginia")
  1.0
"""

from __future__ import annotations
from functools import lru_cache
from typing import FrozenSet, List, Optional
import unicodedata

from isoidentity.utils.normalize import normalize


N = 3


def graphemes(s: str) -> List[str]:
    """Split text into user-perceived characters.

    A grapheme here is a base code point followed by any combining marks,
    so a decomposed "a" + U+0301 counts as one character.

    Examples:
        >>> graphemes("TEXAS")
        ['T', 'E', 'X', 'A', 'S']
    """
    clusters: List[str] = []
    for ch in s:
        if clusters and unicodedata.combining(ch):
            clusters[-1] += ch
        else:
            clusters.append(ch)
    return clusters


def trigrams(s: str) -> FrozenSet[str]:
    """Set of overlapping 3-grapheme windows.

    Strings with fewer than 3 graphemes have no trigrams.

    Examples:
        >>> sorted(trigrams("TEXAS"))
        ['EXA', 'TEX', 'XAS']
        >>> trigrams("TX")
        frozenset()
    """
    chars = graphemes(s)
    return frozenset("".join(chars[i:i + N]) for i in range(len(chars) - N + 1))


@lru_cache(maxsize=16384)
def _normalized_trigrams(s: str) -> FrozenSet[str]:
    """Trigram set of normalize(s), cached."""
    return trigrams(normalize(s))


def similarity(a: Optional[str], b: Optional[str]) -> float:
    """Jaccard similarity of the trigram sets of two strings.

    Both inputs are normalized first (case, accents and punctuation are
    ignored). Returns 0.0 when neither string has any trigrams.

    Args:
        a: First string
        b: Second string

    Returns:
        Score in [0.0, 1.0]; symmetric in its arguments

    Examples:
        >>> similarity("Texas", "TEXAS")
        1.0
        >>> similarity("ab", "ab")
        0.0
    """
    t1 = _normalized_trigrams(a or "")
    t2 = _normalized_trigrams(b or "")

    total = len(t1 | t2)
    if total == 0:
        return 0.0

    return len(t1 & t2) / total


def word_similarity(candidate: Optional[str], target_phrase: Optional[str]) -> float:
    """Similarity of a candidate to the most similar word of a phrase.

    The phrase is split on whitespace and each word is scored against the
    whole candidate; the best score wins. This finds the most similar word,
    not the most similar substring.

    Args:
        candidate: String to look for
        target_phrase: Phrase whose words are compared against the candidate

    Returns:
        Score in [0.0, 1.0]; 0.0 if the phrase has no words

    Examples:
        >>> word_similarity("Wicklow", "Co. Wicklow")
        1.0
        >>> word_similarity("Virginia", "")
        0.0
    """
    words = (target_phrase or "").split()
    if not words:
        return 0.0

    return max(similarity(candidate, word) for word in words)


__all__ = [
    "graphemes",
    "trigrams",
    "similarity",
    "word_similarity",
]
