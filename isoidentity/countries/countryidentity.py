"""
Country Name Resolution
-----------------------

Pipeline (first hit wins):
  1) Ordered alias table (country_aliases.yaml): historical names and
     common prefixes, e.g. "UNITED STATES ..." -> US, "SWAZILAND" -> SZ
  2) Exact comparison against every country's short name, name, full name,
     common name and informal name (parenthetical qualifier removed)

Comparison is exact after normalization (case, accents, punctuation and
repeated whitespace are ignored). There is no fuzzy fallback for
countries: "Not a country." resolves to None, not to the nearest-looking
name.

API:
  resolve_country(query, dataset) -> str | None
  country_aliases() -> tuple[CountryAlias, ...]
  match_alias(key, aliases) -> str | None
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import logging
from typing import FrozenSet, Iterable, Optional, Tuple

from isoidentity.dataset.isomodel import Country, ISODataset
from isoidentity.utils.dataloader import format_not_found_error, load_yaml_file
from isoidentity.utils.normalize import country_key, strip_parenthetical_suffix

logger = logging.getLogger(__name__)


ALIASES_PATH = Path(__file__).parent / "data" / "country_aliases.yaml"


@dataclass(frozen=True)
class CountryAlias:
    """One row of the alias table; `key` is the normalized name."""

    key: str
    code: str
    prefix: bool = False

    def matches(self, query_key: str) -> bool:
        if self.prefix:
            return query_key.startswith(self.key)
        return query_key == self.key


# ---- Alias table ----
def parse_aliases(entries: Iterable[dict]) -> Tuple[CountryAlias, ...]:
    """Convert raw YAML entries into CountryAlias rows, preserving order.

    Raises:
        ValueError: On an unknown `match` mode or an entry without name/code
    """
    aliases = []
    for entry in entries:
        name, code = entry.get("name"), entry.get("code")
        mode = entry.get("match", "exact")
        if not name or not code:
            raise ValueError(f"Alias entry needs a name and a code: {entry}")
        if mode not in ("exact", "prefix"):
            raise ValueError(f"Unknown alias match mode: {mode}. Use 'exact' or 'prefix'")
        aliases.append(CountryAlias(key=country_key(name), code=str(code).upper(), prefix=mode == "prefix"))
    return tuple(aliases)


@lru_cache(maxsize=1)
def country_aliases(path: Optional[Path] = None) -> Tuple[CountryAlias, ...]:
    """Load the ordered alias table.

    Args:
        path: Optional alias YAML path. Defaults to countries/data/country_aliases.yaml

    Returns:
        Tuple of CountryAlias in match order
    """
    path = Path(path) if path is not None else ALIASES_PATH
    if not path.exists():
        raise FileNotFoundError(
            format_not_found_error(
                subdirectory="country alias",
                searched_locations=[("Alias table", path)],
                fix_instructions=["Reinstall isoidentity or pass an explicit alias YAML path."],
            )
        )

    data = load_yaml_file(path) or {}
    return parse_aliases(data.get("aliases") or [])


def match_alias(query_key: str, aliases: Iterable[CountryAlias]) -> Optional[str]:
    """Code of the first alias matching a normalized query, or None."""
    for alias in aliases:
        if alias.matches(query_key):
            return alias.code
    return None


# ---- Exact name comparison ----
@lru_cache(maxsize=1024)
def comparable_names(country: Country) -> FrozenSet[str]:
    """Every normalized name a country answers to."""
    names = (
        country.short_name,
        country.name,
        country.full_name,
        country.common_name,
        strip_parenthetical_suffix(country.name),
        strip_parenthetical_suffix(country.short_name),
    )
    return frozenset(k for k in (country_key(n) for n in names if n) if k)


def resolve_country(
    query: Optional[str],
    dataset: ISODataset,
    aliases: Optional[Iterable[CountryAlias]] = None,
) -> Optional[str]:
    """
    Resolve a country name to its 2-letter code.

    Args:
        query: Country name, e.g. 'United States', 'MEXICO', 'Iran'
        dataset: ISODataset from load_iso()
        aliases: Alias table; defaults to country_aliases()

    Returns:
        ISO 3166-1 alpha-2 code, or None if the name is not recognised

    Examples:
        >>> ds = load_iso()
        >>> resolve_country("United States", ds)
        'US'
        >>> resolve_country("Bolivia", ds)
        'BO'
        >>> resolve_country("Not a country.", ds) is None
        True
    """
    if not isinstance(query, str):
        return None

    key = country_key(query)
    if not key:
        return None

    code = match_alias(key, country_aliases() if aliases is None else aliases)
    if code is not None and code in dataset:
        logger.debug(f"Country {query!r} -> {code} (alias)")
        return code

    for code, country in dataset.items():
        if key in comparable_names(country):
            logger.debug(f"Country {query!r} -> {code} (name)")
            return code

    return None


__all__ = [
    "CountryAlias",
    "parse_aliases",
    "country_aliases",
    "match_alias",
    "comparable_names",
    "resolve_country",
]
