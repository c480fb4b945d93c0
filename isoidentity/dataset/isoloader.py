"""ISO-3166 dataset loader.

Builds the immutable ISODataset used by the country and subdivision
resolvers, either from the ISO-3166 database bundled with pycountry or from
a JSON file in the dataset format:

    {
      "US": {
        "name": "United States",
        "short_name": "UNITED STATES",
        "full_name": "United States of America",
        "subdivisions": {
          "US-TX": {"name": "Texas", "category": "state"},
          ...
        }
      },
      ...
    }

The dataset is loaded once per process and cached.
"""

from __future__ import annotations
import logging
import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple, Union

try:
    import pycountry
except ImportError as e:
    raise ImportError("pycountry not installed. pip install pycountry") from e

from isoidentity.dataset.isomodel import (
    COUNTRY_CODE_PATTERN,
    Country,
    ISODataset,
    Subdivision,
)
from isoidentity.utils.dataloader import find_data_file, load_json_file, load_yaml_file
from isoidentity.utils.normalize import normalize, unaccent

logger = logging.getLogger(__name__)


DATA_PATH_ENV = "ISOIDENTITY_DATA_PATH"
DATASET_FILENAMES = ["iso-3166-2.json"]
VARIATIONS_PATH = Path(__file__).parent / "data" / "variations.yaml"

# "Girona [Gerona]" -> ("Girona", "Gerona")
_BRACKETED_ALTERNATE = re.compile(r"^(.*?)\s*\[([^\]]+)\]$")
# "Cymru GB-CYM" -> "Cymru", "SE-01" -> ""
_TRAILING_CODE = re.compile(r"\s*\b[A-Z]{2}-[A-Z0-9]{1,3}$")


# ---- Helpers: pycountry -> records ----
def split_bracketed_name(name: str) -> Tuple[str, Optional[str]]:
    """Split an ISO name with a bracketed alternate into (name, variation).

    Examples:
        >>> split_bracketed_name("Girona [Gerona]")
        ('Girona', 'Gerona')
        >>> split_bracketed_name("Wales [Cymru GB-CYM]")
        ('Wales', 'Cymru')
        >>> split_bracketed_name("Barcelona [Barcelona]")
        ('Barcelona', None)
        >>> split_bracketed_name("Texas")
        ('Texas', None)
    """
    m = _BRACKETED_ALTERNATE.match(name.strip())
    if not m:
        return name.strip(), None

    base = m.group(1).strip()
    alternate = _TRAILING_CODE.sub("", m.group(2)).strip()
    if not alternate or alternate == base:
        return base, None
    return base, alternate


def load_variations(path: Path = VARIATIONS_PATH) -> Dict[str, str]:
    """Load curated alternate subdivision names (code -> variation)."""
    data = load_yaml_file(path) or {}
    return {str(code): str(name) for code, name in (data.get("variations") or {}).items()}


def _country_from_pycountry(c, subdivisions: Mapping[str, Subdivision]) -> Country:
    name = c.name
    return Country(
        code=c.alpha_2,
        name=name,
        short_name=unaccent(name).upper(),
        full_name=getattr(c, "official_name", None) or name,
        common_name=getattr(c, "common_name", None),
        subdivisions=subdivisions,
    )


def _subdivision_from_pycountry(s, variations: Mapping[str, str]) -> Subdivision:
    name, variation = split_bracketed_name(s.name)
    return Subdivision(
        code=s.code,
        name=name,
        category=(getattr(s, "type", None) or "").lower(),
        variation=variations.get(s.code, variation),
        parent=getattr(s, "parent_code", None),
    )


def build_from_pycountry(variations: Optional[Mapping[str, str]] = None) -> ISODataset:
    """Build the dataset from pycountry's ISO-3166-1 and ISO-3166-2 tables.

    Args:
        variations: Optional code -> alternate name overrides (see variations.yaml)

    Returns:
        Frozen ISODataset
    """
    variations = variations or {}
    subdivisions: Dict[str, Dict[str, Subdivision]] = {c.alpha_2: {} for c in pycountry.countries}

    for s in pycountry.subdivisions:
        if s.country_code not in subdivisions:
            logger.debug(f"Skipping subdivision {s.code}: unknown country {s.country_code}")
            continue
        subdivisions[s.country_code][s.code] = _subdivision_from_pycountry(s, variations)

    unused = set(variations) - {code for subs in subdivisions.values() for code in subs}
    if unused:
        logger.debug(f"Ignoring variations for unknown subdivisions: {sorted(unused)}")

    records = {c.alpha_2: _country_from_pycountry(c, subdivisions[c.alpha_2]) for c in pycountry.countries}
    return ISODataset.from_records(records, find_territories(records))


# ---- Helpers: JSON dataset format ----
def validate_dataset(data: Mapping) -> List[str]:
    """Check a dataset-format mapping and return a list of issues (empty if valid)."""
    issues = []
    if not isinstance(data, Mapping):
        return [f"Dataset must be a mapping of country code -> record, got {type(data).__name__}"]

    for code, record in data.items():
        if not isinstance(code, str) or not COUNTRY_CODE_PATTERN.match(code):
            issues.append(f"Invalid country code (not 2 uppercase letters): {code!r}")
        if not isinstance(record, Mapping):
            issues.append(f"Country {code!r}: record must be a mapping")
            continue
        if not record.get("name"):
            issues.append(f"Country {code!r}: missing name")

        for sub_code, sub in (record.get("subdivisions") or {}).items():
            if not str(sub_code).startswith(f"{code}-"):
                issues.append(f"Subdivision {sub_code!r} is not prefixed by '{code}-'")
            if not isinstance(sub, Mapping) or not sub.get("name"):
                issues.append(f"Subdivision {sub_code!r}: missing name")

    return issues


def dataset_from_dict(data: Mapping) -> ISODataset:
    """Build the dataset from a dataset-format mapping (e.g. parsed JSON).

    Raises:
        ValueError: If the mapping violates the dataset invariants
    """
    issues = validate_dataset(data)
    if issues:
        raise ValueError("Invalid ISO dataset:\n  " + "\n  ".join(issues))

    records: Dict[str, Country] = {}
    for code, record in data.items():
        name = record["name"]
        subdivisions = {
            sub_code: Subdivision(
                code=sub_code,
                name=sub["name"],
                category=sub.get("category") or "",
                variation=sub.get("variation") or None,
                parent=sub.get("parent") or None,
            )
            for sub_code, sub in (record.get("subdivisions") or {}).items()
        }
        records[code] = Country(
            code=code,
            name=name,
            short_name=record.get("short_name") or unaccent(name).upper(),
            full_name=record.get("full_name") or name,
            common_name=record.get("common_name") or None,
            subdivisions=subdivisions,
        )

    return ISODataset.from_records(records, find_territories(records))


def dataset_to_dict(dataset: ISODataset) -> dict:
    """Inverse of dataset_from_dict."""
    return {code: country.to_dict() for code, country in dataset.items()}


# ---- Territory classification ----
def find_territories(countries: Mapping[str, Country]) -> FrozenSet[str]:
    """Country codes that are also a subdivision of another country.

    A code X is a territory when some country A has a subdivision "A-X" whose
    name matches X's name, full name or short name (e.g. PR <- US-PR).
    """
    territories = set()
    for code, country in countries.items():
        for sub_code, sub in country.subdivisions.items():
            local = sub_code.split("-", 1)[1]
            other = countries.get(local)
            if other is None or local == code:
                continue

            sub_name = normalize(sub.name)
            names = {normalize(other.name), normalize(other.full_name), normalize(other.short_name)}
            if sub_name and sub_name in names:
                territories.add(local)

    return frozenset(territories)


# ---- Main loader ----
def _load_json_dataset(path: Path, source: str) -> ISODataset:
    dataset = dataset_from_dict(load_json_file(path))
    logger.info(f"Loaded {len(dataset)} countries from {source}: {path}")
    return dataset


@lru_cache(maxsize=1)
def load_iso(path: Optional[Union[str, Path]] = None) -> ISODataset:
    """Load the ISO-3166 dataset into memory.

    Uses LRU cache so the dataset is built once and shared by every lookup.

    Loading priority:
    1. Explicit path if provided
    2. ISOIDENTITY_DATA_PATH environment variable
    3. Module-local JSON (isoidentity/dataset/data/iso-3166-2.json)
    4. pycountry's bundled ISO-3166 database + variations.yaml

    Args:
        path: Optional path to a dataset-format JSON file

    Returns:
        Immutable ISODataset

    Examples:
        >>> ds = load_iso()
        >>> ds.get("MX").subdivisions["MX-YUC"].name
        'Yucatán'
    """
    if path is not None:
        path = Path(path)
        if path.exists():
            return _load_json_dataset(path, "explicit path")
        logger.warning(f"ISO dataset not found at explicit path: {path}")

    env_path = os.environ.get(DATA_PATH_ENV)
    if env_path:
        env_path = Path(env_path)
        if env_path.exists():
            return _load_json_dataset(env_path, DATA_PATH_ENV)
        logger.warning(f"ISO dataset not found at {DATA_PATH_ENV}: {env_path}")

    found_path = find_data_file(module_file=__file__, filenames=DATASET_FILENAMES)
    if found_path:
        return _load_json_dataset(found_path, "package data")

    dataset = build_from_pycountry(load_variations())
    n_subdivisions = sum(len(c.subdivisions) for _, c in dataset.items())
    logger.info(f"Built {len(dataset)} countries / {n_subdivisions} subdivisions from pycountry")
    return dataset


def clear_cache():
    """Clear the LRU cache for load_iso.

    Useful for testing or after changing ISOIDENTITY_DATA_PATH.
    """
    load_iso.cache_clear()


__all__ = [
    "DATA_PATH_ENV",
    "split_bracketed_name",
    "load_variations",
    "build_from_pycountry",
    "validate_dataset",
    "dataset_from_dict",
    "dataset_to_dict",
    "find_territories",
    "load_iso",
    "clear_cache",
]
