"""unit-tester - register named test units and describe or run them from the command line."""

from .errors import OptionsError, SuiteError, UnitError, UnitTesterError
from .options import Options
from .runner import (
    FunctionUnit,
    Outcome,
    OutcomeKind,
    RunMode,
    Tester,
    TesterConfig,
    TestUnit,
    as_unit,
)

__version__ = "0.1.0"

__all__ = [
    "OptionsError",
    "SuiteError",
    "UnitError",
    "UnitTesterError",
    "Options",
    "FunctionUnit",
    "Outcome",
    "OutcomeKind",
    "RunMode",
    "Tester",
    "TesterConfig",
    "TestUnit",
    "as_unit",
]
