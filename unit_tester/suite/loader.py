"""Resolves suite entries to TestUnit objects."""

import importlib
import inspect
import logging
from functools import reduce

from ..errors import SuiteError
from ..runner.unit import FunctionUnit, TestUnit, describe_callable
from .schema import Suite, UnitEntry

logger = logging.getLogger(__name__)


class _DescribedUnit(TestUnit):
    """Wraps a unit, replacing its description."""

    def __init__(self, unit: TestUnit, description: str):
        self.unit = unit
        self._description = description

    def execute(self, options):
        return self.unit.execute(options)

    def description(self) -> str:
        return self._description


def load_unit(entry: UnitEntry) -> TestUnit:
    """Import the entry's target and turn it into a TestUnit.

    A TestUnit subclass is instantiated, a TestUnit instance is used as is,
    and any other callable is wrapped in a FunctionUnit.

    Raises:
        SuiteError: If the target cannot be imported or is not usable.
    """
    try:
        module = importlib.import_module(entry.module)
    except Exception as e:
        raise SuiteError(f"Cannot import '{entry.module}' for unit '{entry.name}': {e}") from e

    try:
        target = reduce(getattr, entry.attribute.split("."), module)
    except AttributeError as e:
        raise SuiteError(
            f"'{entry.module}' has no attribute '{entry.attribute}' for unit '{entry.name}'"
        ) from e

    if inspect.isclass(target) and issubclass(target, TestUnit):
        try:
            unit = target()
        except Exception as e:
            raise SuiteError(f"Cannot instantiate '{entry.target}' for unit '{entry.name}': {e}") from e
    elif isinstance(target, TestUnit):
        unit = target
    elif callable(target):
        return FunctionUnit(target, entry.description or describe_callable(target))
    else:
        raise SuiteError(f"Target '{entry.target}' of unit '{entry.name}' is not callable")

    if entry.description:
        return _DescribedUnit(unit, entry.description)
    return unit


def load_suite(suite: Suite) -> list[tuple[str, TestUnit]]:
    """Load every unit of a suite, in declaration order."""
    units = [(entry.name, load_unit(entry)) for entry in suite.units]
    logger.debug("Loaded %d units from suite '%s'", len(units), suite.meta.name)
    return units
