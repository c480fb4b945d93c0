"""Shared utilities for isoidentity package."""

from isoidentity.utils.dataloader import (
    find_data_file,
    load_yaml_file,
    load_json_file,
    format_not_found_error,
)
from isoidentity.utils.normalize import (
    normalize,
    unaccent,
    strip_parenthetical_suffix,
    country_key,
)
from isoidentity.utils.similarity import (
    graphemes,
    trigrams,
    similarity,
    word_similarity,
)

__all__ = [
    # Data loading
    "find_data_file",
    "load_yaml_file",
    "load_json_file",
    "format_not_found_error",
    # Normalization
    "normalize",
    "unaccent",
    "strip_parenthetical_suffix",
    "country_key",
    # Similarity
    "graphemes",
    "trigrams",
    "similarity",
    "word_similarity",
]
