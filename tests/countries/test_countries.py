"""Test suite for country resolution.

Tests cover:
1. Exact (normalized) name matching across name fields
2. The ordered alias table (prefixes, historical and colloquial names)
3. No fuzzy fallback
4. Lookup helpers: country_name, find_country, countries, is_territory
5. Listing
"""

import pandas as pd
import pytest

from isoidentity.countries.countryapi import (
    countries,
    country_code,
    country_codes,
    country_name,
    find_country,
    is_territory,
    list_countries,
)
from isoidentity.countries.countryidentity import (
    CountryAlias,
    comparable_names,
    country_aliases,
    match_alias,
    parse_aliases,
    resolve_country,
)


# ---- Resolver against a fixture dataset ----

class TestResolveCountry:
    """resolve_country() with an explicit dataset"""

    @pytest.mark.parametrize("query,expected", [
        ("United States", "US"),
        ("UNITED STATES", "US"),
        ("united states of america", "US"),
        ("Mexico", "MX"),
        ("MÉXICO", "MX"),
        ("United Mexican States", "MX"),
        ("Bolivia", "BO"),
        ("Plurinational State of Bolivia", "BO"),
        ("Ireland", "IE"),
        ("Puerto Rico", "PR"),
    ])
    def test_names(self, sample_dataset, query, expected):
        assert resolve_country(query, sample_dataset) == expected

    @pytest.mark.parametrize("query", ["Not a country.", "Untied States", "Mexic", "Canad", "", "  ", None, 42])
    def test_no_fuzzy_fallback(self, sample_dataset, query):
        assert resolve_country(query, sample_dataset) is None

    def test_alias_code_must_exist(self, sample_dataset):
        # Taiwan is in the alias table but not in the fixture dataset
        assert resolve_country("Taiwan", sample_dataset) is None

    def test_custom_alias_table(self, sample_dataset):
        aliases = parse_aliases([{"name": "The States", "code": "US"}])
        assert resolve_country("the states", sample_dataset, aliases=aliases) == "US"
        assert resolve_country("The States", sample_dataset, aliases=()) is None

    def test_comparable_names(self, sample_dataset):
        names = comparable_names(sample_dataset.get("BO"))
        assert "BOLIVIA" in names
        assert "BOLIVIA PLURINATIONAL STATE OF" in names
        assert "PLURINATIONAL STATE OF BOLIVIA" in names


# ---- Alias table ----

class TestAliases:
    def test_table_loads_in_order(self):
        aliases = country_aliases()
        assert len(aliases) > 20
        assert all(isinstance(a, CountryAlias) for a in aliases)
        assert aliases[0].code == "UM"

    def test_keys_are_normalized(self):
        for alias in country_aliases():
            assert alias.key == alias.key.upper().strip()
            assert len(alias.code) == 2

    def test_prefix_and_exact(self):
        aliases = parse_aliases([
            {"name": "United States", "code": "US", "match": "prefix"},
            {"name": "UK", "code": "GB"},
        ])
        assert match_alias("UNITED STATES OF AMERICA", aliases) == "US"
        assert match_alias("UK", aliases) == "GB"
        assert match_alias("UKRAINE", aliases) is None

    def test_first_match_wins(self):
        aliases = parse_aliases([
            {"name": "United States Minor Outlying Islands", "code": "UM", "match": "exact"},
            {"name": "United States", "code": "US", "match": "prefix"},
        ])
        assert match_alias("UNITED STATES MINOR OUTLYING ISLANDS", aliases) == "UM"
        assert match_alias("UNITED STATES", aliases) == "US"

    @pytest.mark.parametrize("key,expected", [
        ("UNITED STATES MINOR OUTLYING ISLANDS", "UM"),
        ("UNITED STATES VIRGIN ISLANDS", "VI"),
        ("US VIRGIN ISLANDS", "VI"),
        ("UNITED STATES OF AMERICA", "US"),
    ])
    def test_us_territories_precede_us_prefix(self, key, expected):
        assert match_alias(key, country_aliases()) == expected

    @pytest.mark.parametrize("entry", [
        {"name": "Nowhere"},
        {"code": "US"},
        {"name": "Nowhere", "code": "NW", "match": "fuzzy"},
    ])
    def test_bad_entries(self, entry):
        with pytest.raises(ValueError):
            parse_aliases([entry])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="country alias"):
            country_aliases(tmp_path / "missing.yaml")


# ---- Public API (default dataset) ----

class TestCountryCode:
    """country_code() against the default pycountry dataset"""

    @pytest.mark.parametrize("query,expected", [
        ("United States", "US"),
        ("UNITED STATES", "US"),
        ("United States of America", "US"),
        ("Mexico", "MX"),
        ("Venezuela", "VE"),
        ("Iran", "IR"),
        ("Taiwan", "TW"),
        ("Bolivia", "BO"),
        ("Great Britain", "GB"),
        ("United Kingdom", "GB"),
        ("Swaziland", "SZ"),
        ("Syria", "SY"),
        ("Holland", "NL"),
        ("Côte d'Ivoire", "CI"),
        ("Korea, Republic of", "KR"),
        ("South Korea", "KR"),
        ("Åland Islands", "AX"),
        ("United States Minor Outlying Islands", "UM"),
        ("United States Virgin Islands", "VI"),
        ("US Virgin Islands", "VI"),
        ("U.S. Virgin Islands", "VI"),
        ("Virgin Islands, U.S.", "VI"),
        ("British Virgin Islands", "VG"),
    ])
    def test_known_names(self, query, expected):
        assert country_code(query) == expected

    def test_not_a_country(self):
        assert country_code("Not a country.") is None

    def test_batch(self):
        assert country_codes(["Mexico", "Taiwan", "Nowhere"]) == ["MX", "TW", None]


class TestCountryName:
    def test_default(self):
        assert country_name("US") == "United States"
        assert country_name("MX") == "Mexico"

    def test_short_name(self):
        assert country_name("US", "short_name") == "UNITED STATES"
        assert country_name("AX", "short_name") == "ALAND ISLANDS"

    def test_informal(self):
        assert country_name("MF", "informal") == "Saint Martin"
        assert country_name("AX", "informal") == "Aland Islands"

    def test_unknown_code(self):
        assert country_name("ZZ") is None

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown name kind"):
            country_name("US", "nickname")


class TestFindCountry:
    @pytest.mark.parametrize("query", ["MX", "mx", " Mx ", "Mexico", "MEXICO"])
    def test_code_or_name(self, query):
        code, country = find_country(query)
        assert code == "MX"
        assert country.name == "Mexico"

    @pytest.mark.parametrize("query", ["ZZ", "Not a country.", "", None])
    def test_not_found(self, query):
        assert find_country(query) is None


class TestCountriesAndTerritories:
    def test_countries(self):
        all_countries = countries()
        assert all_countries["US"]["name"] == "United States"
        assert all_countries["US"]["subdivisions"]["US-TX"]["name"] == "Texas"
        assert all_countries["PR"]["subdivisions"] == {}

    def test_with_subdivisions_filters(self):
        """Countries without subdivisions are left out"""
        with_subs = countries(with_subdivisions=True)
        assert "PR" not in with_subs
        assert "US" in with_subs
        assert with_subs["US"]["subdivisions"]["US-TX"]["name"] == "Texas"
        assert all(record["subdivisions"] for record in with_subs.values())
        assert len(with_subs) < len(countries())

    def test_filters_combine(self):
        both = countries(with_subdivisions=True, exclude_territories=True)
        assert "PR" not in both
        assert "US" in both
        assert "MX" in both

    def test_exclude_territories(self):
        assert "PR" in countries()
        remaining = countries(exclude_territories=True)
        assert "PR" not in remaining
        assert "US" in remaining
        assert "MX" in remaining

    def test_is_territory(self):
        assert is_territory("PR") is True
        assert is_territory("US") is False
        assert is_territory("ZZ") is False


class TestListCountries:
    def test_dataframe(self):
        df = list_countries()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == [
            "code", "name", "short_name", "full_name", "common_name", "subdivision_count", "is_territory",
        ]
        assert len(df) > 240
        assert df["code"].is_unique

    def test_values(self):
        df = list_countries().set_index("code")
        assert df.loc["US", "full_name"] == "United States of America"
        assert df.loc["US", "subdivision_count"] > 50
        assert bool(df.loc["PR", "is_territory"]) is True
