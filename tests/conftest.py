"""Shared test fixtures and utilities for isoidentity tests."""

import json

import pytest

from isoidentity.dataset import clear_cache, dataset_from_dict
from isoidentity.dataset.isoloader import DATA_PATH_ENV


@pytest.fixture
def sample_dataset_dict():
    """Small dataset in the JSON dataset format.

    Covers the shapes the resolvers care about: accented names, a variation,
    a long official name, two subdivisions sharing a word (Virginia) and a
    territory (PR, also listed as US-PR).
    """
    return {
        "US": {
            "name": "United States",
            "short_name": "UNITED STATES",
            "full_name": "United States of America",
            "subdivisions": {
                "US-CA": {"name": "California", "category": "state"},
                "US-PR": {"name": "Puerto Rico", "category": "outlying area"},
                "US-TX": {"name": "Texas", "category": "state"},
                "US-VA": {"name": "Virginia", "category": "state"},
                "US-WV": {"name": "West Virginia", "category": "state"},
            },
        },
        "MX": {
            "name": "Mexico",
            "short_name": "MEXICO",
            "full_name": "United Mexican States",
            "subdivisions": {
                "MX-CMX": {"name": "Ciudad de México", "category": "federal entity", "variation": "Mexico City"},
                "MX-VER": {"name": "Veracruz de Ignacio de la Llave", "category": "state"},
                "MX-YUC": {"name": "Yucatán", "category": "state"},
            },
        },
        "IE": {
            "name": "Ireland",
            "short_name": "IRELAND",
            "full_name": "Ireland",
            "subdivisions": {
                "IE-D": {"name": "Dublin", "category": "county"},
                "IE-WW": {"name": "Wicklow", "category": "county"},
            },
        },
        "CA": {
            "name": "Canada",
            "short_name": "CANADA",
            "full_name": "Canada",
            "subdivisions": {
                "CA-AB": {"name": "Alberta", "category": "province"},
                "CA-ON": {"name": "Ontario", "category": "province"},
            },
        },
        "PR": {
            "name": "Puerto Rico",
            "short_name": "PUERTO RICO",
            "full_name": "Puerto Rico",
            "subdivisions": {},
        },
        "BO": {
            "name": "Bolivia, Plurinational State of",
            "short_name": "BOLIVIA, PLURINATIONAL STATE OF",
            "full_name": "Plurinational State of Bolivia",
            "common_name": "Bolivia",
            "subdivisions": {},
        },
    }


@pytest.fixture
def sample_dataset(sample_dataset_dict):
    """ISODataset built from sample_dataset_dict."""
    return dataset_from_dict(sample_dataset_dict)


@pytest.fixture
def sample_dataset_file(tmp_path, sample_dataset_dict):
    """sample_dataset_dict written to a JSON file."""
    path = tmp_path / "iso-3166-2.json"
    path.write_text(json.dumps(sample_dataset_dict, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def fresh_cache(monkeypatch):
    """Clear the dataset cache around a test and unset the data path variable."""
    monkeypatch.delenv(DATA_PATH_ENV, raising=False)
    clear_cache()
    yield
    clear_cache()
