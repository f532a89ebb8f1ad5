"""Runner module - test selection and execution."""

from .mode import ModeState, RunMode, resolve_mode
from .outcome import Outcome, OutcomeKind
from .tester import Tester, TesterConfig
from .unit import FunctionUnit, TestUnit, as_unit
from .usage import usage_text

__all__ = [
    "ModeState",
    "RunMode",
    "resolve_mode",
    "Outcome",
    "OutcomeKind",
    "Tester",
    "TesterConfig",
    "FunctionUnit",
    "TestUnit",
    "as_unit",
    "usage_text",
]
