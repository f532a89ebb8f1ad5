"""Exception hierarchy for unit-tester."""


class UnitTesterError(Exception):
    """Base class for errors raised by unit-tester."""


class OptionsError(UnitTesterError):
    """Raised when process arguments cannot be parsed."""


class UnitError(UnitTesterError):
    """Raised by a test unit to signal that it could not complete."""


class SuiteError(UnitTesterError):
    """Raised when a suite file cannot be parsed or a unit target cannot be loaded."""
