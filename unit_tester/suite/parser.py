"""YAML suite parser.

Parses suite files into Suite dataclass objects.
"""

import logging
from pathlib import Path
from typing import Union

import yaml

from ..errors import SuiteError
from .schema import Suite, SuiteMeta, UnitEntry

logger = logging.getLogger(__name__)


def parse_suite(file_path: Union[str, Path]) -> Suite:
    """Parse a YAML suite file into a Suite object.

    Args:
        file_path: Path to the YAML suite file.

    Returns:
        Parsed Suite object.

    Raises:
        SuiteError: If the file doesn't exist, the YAML is malformed or
            required fields are missing.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise SuiteError(f"Suite file not found: {file_path}")

    if file_path.suffix not in (".yaml", ".yml"):
        raise SuiteError(f"Expected .yaml or .yml file, got: {file_path.suffix}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise SuiteError(f"Suite file {file_path} is not valid UTF-8: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SuiteError(f"Malformed YAML in {file_path}: {e}") from e

    if data is None:
        raise SuiteError(f"Empty suite file: {file_path}")

    suite = parse_suite_data(data, source=str(file_path))
    logger.debug("Parsed suite '%s' with %d units", suite.meta.name, suite.total_units)
    return suite


def parse_suite_data(data: dict, source: str = "<inline>") -> Suite:
    """Parse a suite from a dictionary (already loaded YAML).

    Args:
        data: Dictionary with suite data.
        source: Source identifier for error messages.

    Returns:
        Parsed Suite object.

    Raises:
        SuiteError: If required fields are missing or malformed.
    """
    if not isinstance(data, dict):
        raise SuiteError(f"Suite must be a YAML mapping, got {type(data).__name__}")

    if "meta" not in data:
        raise SuiteError(f"Missing required field 'meta' in {source}")

    meta_data = data["meta"]
    if not isinstance(meta_data, dict):
        raise SuiteError(f"'meta' must be a mapping in {source}")

    _require_fields(meta_data, ["name"], "meta", source)
    meta = SuiteMeta(**{
        k: str(v) for k, v in meta_data.items()
        if k in SuiteMeta.__dataclass_fields__ and v is not None
    })

    if "units" not in data:
        raise SuiteError(f"Missing required field 'units' in {source}")

    units_data = data["units"] or []
    if not isinstance(units_data, list):
        raise SuiteError(f"'units' must be a list in {source}")

    units = []
    for i, unit_data in enumerate(units_data):
        if not isinstance(unit_data, dict):
            raise SuiteError(f"Unit {i} must be a mapping in {source}")
        _require_fields(unit_data, ["name", "target"], f"units[{i}]", source)
        units.append(UnitEntry(**{
            k: str(v) for k, v in unit_data.items()
            if k in UnitEntry.__dataclass_fields__ and v is not None
        }))

    return Suite(meta=meta, units=units)


def _require_fields(
    data: dict, fields: list[str], context: str, source: str
) -> None:
    """Check that required fields exist in a dictionary."""
    for field_name in fields:
        if field_name not in data:
            raise SuiteError(
                f"Missing required field '{field_name}' in {context} ({source})"
            )
