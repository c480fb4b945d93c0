"""Typed records for the ISO-3166 reference dataset.

The dataset is built once (see isoloader) and never mutated afterwards:
records are frozen dataclasses and every mapping is exposed read-only.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
import re
from typing import Dict, FrozenSet, Iterator, Mapping, Optional, Tuple


COUNTRY_CODE_PATTERN = re.compile(r"^[A-Z]{2}$")


@dataclass(frozen=True)
class Subdivision:
    """ISO-3166-2 subdivision (state, province, county, ...)."""

    code: str
    name: str
    category: str = ""
    variation: Optional[str] = None
    parent: Optional[str] = None

    @property
    def country_code(self) -> str:
        return self.code.split("-", 1)[0]

    def to_dict(self) -> dict:
        """Dataset-format record (the code is the key, not a field)."""
        d = {"name": self.name, "category": self.category}
        if self.variation:
            d["variation"] = self.variation
        if self.parent:
            d["parent"] = self.parent
        return d


@dataclass(frozen=True)
class Country:
    """ISO-3166-1 country with its subdivisions."""

    code: str
    name: str
    short_name: str
    full_name: str
    common_name: Optional[str] = None
    subdivisions: Mapping[str, Subdivision] = field(
        default_factory=lambda: MappingProxyType({}), compare=False, repr=False
    )

    def to_dict(self) -> dict:
        d = {
            "name": self.name,
            "short_name": self.short_name,
            "full_name": self.full_name,
        }
        if self.common_name:
            d["common_name"] = self.common_name
        d["subdivisions"] = {code: sub.to_dict() for code, sub in self.subdivisions.items()}
        return d


@dataclass(frozen=True)
class ISODataset:
    """Read-only mapping of country code -> Country.

    Countries and their subdivisions are held in ascending code order; that
    order is the tie-break order for fuzzy resolution.

    Examples:
        >>> ds = load_iso()
        >>> "US" in ds
        True
        >>> ds.get_subdivision("US-TX").name
        'Texas'
    """

    countries: Mapping[str, Country] = field(compare=False)
    territories: FrozenSet[str] = frozenset()

    def __post_init__(self):
        issues = _check_invariants(self.countries)
        if issues:
            raise ValueError("Invalid ISO dataset:\n  " + "\n  ".join(issues))

    def __len__(self) -> int:
        return len(self.countries)

    def __contains__(self, code: object) -> bool:
        return code in self.countries

    def __iter__(self) -> Iterator[str]:
        return iter(self.countries)

    def items(self) -> Iterator[Tuple[str, Country]]:
        return iter(self.countries.items())

    def get(self, code: Optional[str]) -> Optional[Country]:
        if not isinstance(code, str):
            return None
        return self.countries.get(code)

    def get_subdivision(self, code: Optional[str]) -> Optional[Subdivision]:
        """Subdivision by full code ("US-TX"); None unless prefixed "CC-"."""
        if not isinstance(code, str) or len(code) < 4 or code[2] != "-":
            return None

        country = self.countries.get(code[:2])
        if country is None:
            return None
        return country.subdivisions.get(code)

    @classmethod
    def from_records(
        cls,
        countries: Mapping[str, Country],
        territories: FrozenSet[str] = frozenset(),
    ) -> "ISODataset":
        """Freeze a mapping of countries, sorting countries and subdivisions by code."""
        frozen: Dict[str, Country] = {}
        for code in sorted(countries):
            country = countries[code]
            subs = {k: country.subdivisions[k] for k in sorted(country.subdivisions)}
            frozen[code] = Country(
                code=country.code,
                name=country.name,
                short_name=country.short_name,
                full_name=country.full_name,
                common_name=country.common_name,
                subdivisions=MappingProxyType(subs),
            )
        return cls(countries=MappingProxyType(frozen), territories=frozenset(territories))


def _check_invariants(countries: Mapping[str, Country]) -> list:
    issues = []
    for code, country in countries.items():
        if not COUNTRY_CODE_PATTERN.match(code):
            issues.append(f"Invalid country code (not 2 uppercase letters): {code!r}")
        if country.code != code:
            issues.append(f"Country {code!r} holds mismatched code {country.code!r}")
        for sub_code, sub in country.subdivisions.items():
            if not sub_code.startswith(f"{code}-"):
                issues.append(f"Subdivision {sub_code!r} is not prefixed by '{code}-'")
            if sub.code != sub_code:
                issues.append(f"Subdivision {sub_code!r} holds mismatched code {sub.code!r}")
    return issues


__all__ = [
    "COUNTRY_CODE_PATTERN",
    "Subdivision",
    "Country",
    "ISODataset",
]
