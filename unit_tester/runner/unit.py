"""Test unit contract.

A test unit is a named check. The name is supplied at registration time;
the unit itself only knows how to run and how to describe itself.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..options import Options


class TestUnit(ABC):
    """Base class for test units.

    Example:
        class TestOk(TestUnit):
            def execute(self, options):
                return True

            def description(self):
                return "an ok test"
    """

    # keeps pytest from collecting subclasses named Test*
    __test__ = False

    @abstractmethod
    def execute(self, options: Options) -> bool:
        """Run the check and return its verdict. May raise on error."""

    @abstractmethod
    def description(self) -> str:
        """Human readable description, constant for the unit."""


class FunctionUnit(TestUnit):
    """Adapts a plain callable taking Options into a TestUnit."""

    def __init__(self, func: Callable[[Options], bool], description: str):
        self.func = func
        self._description = description

    def execute(self, options: Options) -> bool:
        return bool(self.func(options))

    def description(self) -> str:
        return self._description

    def __repr__(self) -> str:
        return f"FunctionUnit({getattr(self.func, '__name__', self.func)!r})"


def as_unit(description: Optional[str] = None) -> Callable[[Callable[[Options], bool]], FunctionUnit]:
    """Decorator turning a function into a FunctionUnit.

    Args:
        description: Unit description. Defaults to the first line of the
            function's docstring, then to the function name.
    """

    def decorator(func: Callable[[Options], bool]) -> FunctionUnit:
        return FunctionUnit(func, description or describe_callable(func))

    return decorator


def describe_callable(func: Callable) -> str:
    """First docstring line of a callable, or its name."""
    doc = (getattr(func, "__doc__", None) or "").strip()
    if doc:
        return doc.splitlines()[0].strip()
    return getattr(func, "__name__", repr(func))
