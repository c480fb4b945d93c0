"""ISO-3166-2 subdivision resolution and lookup."""

from isoidentity.subdivisions.subdivisionapi import (
    subdivision_code,
    find_subdivision_code,
    get_subdivision,
    match_subdivision,
    list_subdivisions,
)
from isoidentity.subdivisions.subdivisionidentity import resolve_subdivision

__all__ = [
    "subdivision_code",
    "find_subdivision_code",
    "get_subdivision",
    "match_subdivision",
    "list_subdivisions",
    "resolve_subdivision",
]
