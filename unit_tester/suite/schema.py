"""Suite data models.

A suite file lists named test units by import target.
"""

from dataclasses import dataclass, field
from typing import Optional

TARGET_SEPARATOR = ":"


@dataclass
class SuiteMeta:
    """Metadata for a suite."""
    name: str
    description: str = ""


@dataclass
class UnitEntry:
    """A single unit declared in a suite."""
    name: str
    target: str
    description: Optional[str] = None

    @property
    def module(self) -> str:
        return self.target.partition(TARGET_SEPARATOR)[0]

    @property
    def attribute(self) -> str:
        return self.target.partition(TARGET_SEPARATOR)[2]


@dataclass
class Suite:
    """A complete suite of test units."""
    meta: SuiteMeta
    units: list[UnitEntry] = field(default_factory=list)

    @property
    def total_units(self) -> int:
        return len(self.units)

    @property
    def unit_names(self) -> list[str]:
        return [u.name for u in self.units]


@dataclass
class ValidationError:
    """A single validation error."""
    path: str
    message: str
    severity: str = "error"  # "error" or "warning"


@dataclass
class ValidationResult:
    """Result of suite validation."""
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def __str__(self) -> str:
        if self.valid:
            msg = "Valid"
            if self.warnings:
                msg += f" ({self.warning_count} warnings)"
            return msg
        return f"Invalid: {self.error_count} errors, {self.warning_count} warnings"
