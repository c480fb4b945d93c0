"""ISO Identity - ISO-3166 country and subdivision resolution

Public API for resolving free-text country and subdivision names to
ISO 3166-1 alpha-2 and ISO 3166-2 codes.

Usage:
    from isoidentity import country_code, subdivision_code

    # Resolve country names (exact after normalization, plus known aliases)
    country_code("United States")           # Returns: 'US'
    country_code("Iran")                    # Returns: 'IR'

    # Resolve subdivision names within a country (trigram similarity)
    subdivision_code("MX", "Veracruz")      # Returns: 'MX-VER'
    subdivision_code("IE", "Co. Wicklow")   # Returns: 'IE-WW'

    # Review candidates
    match_subdivision("US", "Virginia", k=3)

The dataset is built from pycountry's ISO-3166 tables on first use, or read
from the JSON file named by ISOIDENTITY_DATA_PATH.
"""

__version__ = "0.0.1"

# ============================================================================
# Country Resolution API
# ============================================================================

from .countries.countryapi import (
    country_code,       # Primary API - resolve country name to alpha-2 code
    country_codes,      # Batch resolution of multiple countries
    country_name,       # Name of a country by code
    find_country,       # Look up by code or name -> (code, Country)
    countries,          # All countries as dicts
    is_territory,       # Country that is also another country's subdivision
    list_countries,     # Countries as a DataFrame
)
from .countries.countryidentity import resolve_country

# ============================================================================
# Subdivision Resolution API
# ============================================================================

from .subdivisions.subdivisionapi import (
    subdivision_code,       # Primary API - resolve subdivision name to code
    find_subdivision_code,  # Same, raising ValueError on failure
    get_subdivision,        # Subdivision record by code
    match_subdivision,      # Get top-K candidate matches
    list_subdivisions,      # Subdivisions as a DataFrame
)
from .subdivisions.subdivisionidentity import resolve_subdivision

# ============================================================================
# Dataset
# ============================================================================

from .dataset import (
    Country,
    Subdivision,
    ISODataset,
    load_iso,
    clear_cache,
)

# ============================================================================
# Text Normalization & Similarity
# ============================================================================

from .utils.normalize import (
    normalize,
    unaccent,
    strip_parenthetical_suffix,
)
from .utils.similarity import (
    trigrams,
    similarity,
    word_similarity,
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "country_code",       # Resolve country name -> alpha-2 code
    "subdivision_code",   # Resolve subdivision name -> ISO-3166-2 code

    # ========================================================================
    # Country Resolution
    # ========================================================================
    "country_codes",
    "country_name",
    "find_country",
    "countries",
    "is_territory",
    "list_countries",
    "resolve_country",

    # ========================================================================
    # Subdivision Resolution
    # ========================================================================
    "find_subdivision_code",
    "get_subdivision",
    "match_subdivision",
    "list_subdivisions",
    "resolve_subdivision",

    # ========================================================================
    # Dataset
    # ========================================================================
    "Country",
    "Subdivision",
    "ISODataset",
    "load_iso",
    "clear_cache",

    # ========================================================================
    # Normalization & Similarity
    # ========================================================================
    "normalize",
    "unaccent",
    "strip_parenthetical_suffix",
    "trigrams",
    "similarity",
    "word_similarity",
]
