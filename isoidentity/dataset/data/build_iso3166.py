#!/usr/bin/env python3
"""
Build iso-3166-2.json from pycountry's ISO-3166 database.

This script:
1. Builds the dataset from pycountry (ISO-3166-1 countries, ISO-3166-2 subdivisions)
2. Applies curated alternate names from variations.yaml
3. Validates the result (country codes, subdivision prefixes, required names)
4. Writes iso-3166-2.json next to this script, pinning the dataset so later
   pycountry upgrades do not change resolution results
5. Prints a summary report

Once written, load_iso() picks the JSON file up in preference to pycountry.

Usage:
    python isoidentity/dataset/data/build_iso3166.py [--output PATH]
"""

import argparse
import json
import sys
from collections import Counter
from pathlib import Path

from isoidentity.dataset.isoloader import (
    build_from_pycountry,
    dataset_to_dict,
    load_variations,
    validate_dataset,
)


def generate_summary(data: dict, territories) -> None:
    """Print dataset summary statistics."""
    n_subdivisions = sum(len(c["subdivisions"]) for c in data.values())
    with_subdivisions = sum(1 for c in data.values() if c["subdivisions"])
    with_variations = sum(
        1 for c in data.values() for s in c["subdivisions"].values() if s.get("variation")
    )

    print(f"Countries: {len(data)} ({with_subdivisions} with subdivisions)")
    print(f"Subdivisions: {n_subdivisions} ({with_variations} with variations)")
    print(f"Territories: {', '.join(sorted(territories))}")

    print("\nSubdivision categories (top 10):")
    categories = Counter(
        s["category"] for c in data.values() for s in c["subdivisions"].values()
    )
    for category, count in categories.most_common(10):
        print(f"  {category}: {count}")


def main():
    """Main build process."""
    parser = argparse.ArgumentParser(description=__doc__.split("\n")[1])
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(__file__).parent / "iso-3166-2.json",
        help="Output JSON path",
    )
    args = parser.parse_args()

    print("Building ISO-3166 dataset from pycountry...")
    dataset = build_from_pycountry(load_variations())
    data = dataset_to_dict(dataset)

    print("\nValidating data...")
    issues = validate_dataset(data)
    if issues:
        print("\n⚠️  Validation issues found:")
        for issue in issues:
            print(f"  - {issue}")
    else:
        print("✅ All validations passed")

    print(f"\nWriting {len(data)} countries to {args.output}")
    with open(args.output, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2, sort_keys=True)

    print("\n" + "=" * 60)
    print("BUILD SUMMARY")
    print("=" * 60)
    generate_summary(data, dataset.territories)
    print(f"File size: {args.output.stat().st_size / 1024:.1f} KB")

    if issues:
        print(f"\n⚠️  Build completed with {len(issues)} validation issues")
        return 1
    print("\n✅ Build completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
