"""Shared data loading utilities for the dataset, countries and subdivisions modules.

This module provides file discovery in module-local data directories, plus
thin YAML/JSON readers.
"""

import json
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union


def find_data_file(module_file: str, filenames: List[str]) -> Optional[Path]:
    """Find a data file in the calling module's data/ directory.

    Args:
        module_file: __file__ from the calling module
        filenames: Candidate filenames in priority order

    Returns:
        Path to the first existing file in {module_dir}/data/, or None

    Examples:
        >>> # From dataset/isoloader.py
        >>> path = find_data_file(__file__, ['iso-3166-2.json'])
    """
    data_dir = Path(module_file).parent / "data"
    for filename in filenames:
        p = data_dir / filename
        if p.exists():
            return p

    return None


def load_yaml_file(path: Path) -> Any:
    """Load and parse YAML file.

    Raises:
        FileNotFoundError: If file does not exist
    """
    import yaml

    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_json_file(path: Union[str, Path]) -> Any:
    """Load and parse a UTF-8 JSON file.

    Raises:
        FileNotFoundError: If file does not exist
        ValueError: If the file is not valid JSON
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e


def format_not_found_error(
    subdirectory: str,
    searched_locations: List[Tuple[str, Path]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful FileNotFoundError message.

    Args:
        subdirectory: Data subdirectory name (e.g., 'countries')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of commands/instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {subdirectory} data found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


__all__ = [
    "find_data_file",
    "load_yaml_file",
    "load_json_file",
    "format_not_found_error",
]
