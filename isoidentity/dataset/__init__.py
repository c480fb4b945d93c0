"""ISO-3166 reference dataset: typed records and loader."""

from isoidentity.dataset.isomodel import (
    Subdivision,
    Country,
    ISODataset,
)
from isoidentity.dataset.isoloader import (
    load_iso,
    clear_cache,
    build_from_pycountry,
    dataset_from_dict,
    dataset_to_dict,
    validate_dataset,
)

__all__ = [
    "Subdivision",
    "Country",
    "ISODataset",
    "load_iso",
    "clear_cache",
    "build_from_pycountry",
    "dataset_from_dict",
    "dataset_to_dict",
    "validate_dataset",
]
