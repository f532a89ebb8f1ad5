"""Suite module - YAML suite files."""

from .schema import (
    Suite,
    SuiteMeta,
    UnitEntry,
    ValidationError,
    ValidationResult,
)
from .parser import parse_suite, parse_suite_data
from .validator import validate_suite
from .loader import load_suite, load_unit

__all__ = [
    "Suite",
    "SuiteMeta",
    "UnitEntry",
    "ValidationError",
    "ValidationResult",
    "parse_suite",
    "parse_suite_data",
    "validate_suite",
    "load_suite",
    "load_unit",
]
