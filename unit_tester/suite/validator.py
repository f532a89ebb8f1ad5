"""Suite validator.

Validates parsed Suite objects before any unit is loaded.
"""

import re

from .schema import TARGET_SEPARATOR, Suite, ValidationError, ValidationResult

# Unit names are matched against '--exec { ... }' tokens
INVALID_NAME_CHARS = re.compile(r"[\s{}]")
DOTTED_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


def validate_suite(suite: Suite) -> ValidationResult:
    """Validate a parsed Suite object.

    Checks:
    - Suite name is not empty
    - Unit names are non-empty, unique and selectable from the command line
    - Unit targets have the form 'package.module:attribute'

    Args:
        suite: Parsed Suite to validate.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    if not suite.meta.name:
        errors.append(ValidationError(
            path="meta.name",
            message="'name' is required and must not be empty.",
        ))

    seen: set[str] = set()
    for i, unit in enumerate(suite.units):
        path = f"units[{i}]"

        if not unit.name:
            errors.append(ValidationError(
                path=f"{path}.name",
                message="Unit 'name' is required and must not be empty.",
            ))
        elif INVALID_NAME_CHARS.search(unit.name) or unit.name.startswith("--"):
            errors.append(ValidationError(
                path=f"{path}.name",
                message=f"Unit name '{unit.name}' cannot be selected with '--exec {{ ... }}'.",
            ))
        elif unit.name in seen:
            errors.append(ValidationError(
                path=f"{path}.name",
                message=f"Duplicate unit name '{unit.name}'.",
            ))
        seen.add(unit.name)

        module, sep, attribute = unit.target.partition(TARGET_SEPARATOR)
        if not sep or not DOTTED_NAME.match(module) or not DOTTED_NAME.match(attribute):
            errors.append(ValidationError(
                path=f"{path}.target",
                message=f"Invalid target '{unit.target}'. Expected 'package.module:attribute'.",
            ))

    if not suite.units:
        warnings.append(ValidationError(
            path="units",
            message="No units defined.",
            severity="warning",
        ))

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )
