"""Command line option parser for test programs.

Understands three kinds of parameters:

    --name                 boolean flag
    --name value           single value
    --name { v1 v2 ... }   set of values
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from ..errors import OptionsError

logger = logging.getLogger(__name__)

PREFIX = "--"
SET_OPEN = "{"
SET_CLOSE = "}"

ParamValue = Union[bool, str, list[str]]


@dataclass
class Options:
    """Parsed options, keyed by name without the leading '--'."""
    params: dict[str, ParamValue] = field(default_factory=dict)

    @classmethod
    def parse(
        cls,
        args: Iterable[str],
        mandatory: Iterable[str] = (),
    ) -> "Options":
        """Parse arguments (program name excluded) into an Options object.

        Args:
            args: Raw arguments, e.g. sys.argv[1:].
            mandatory: Names (without '--') that must be present.

        Returns:
            Parsed Options.

        Raises:
            OptionsError: If the arguments are malformed or a mandatory
                option is missing.
        """
        argv = list(args)
        params: dict[str, ParamValue] = {}
        i = 0

        while i < len(argv):
            arg = argv[i]

            if not arg.startswith(PREFIX):
                raise OptionsError(
                    f"Value '{arg}' is not associated to a parameter"
                )

            name = arg[len(PREFIX):]
            if not name:
                raise OptionsError(f"Invalid parameter name '{arg}'")
            if name in params:
                raise OptionsError(f"Parameter '{arg}' given more than once")

            nxt = argv[i + 1] if i + 1 < len(argv) else None

            if nxt is None or nxt.startswith(PREFIX):
                params[name] = True
                i += 1
            elif nxt == SET_OPEN:
                values, i = _read_set(argv, i + 2, arg)
                params[name] = values
            elif nxt == SET_CLOSE:
                raise OptionsError(f"'{SET_CLOSE}' without '{SET_OPEN}' after '{arg}'")
            else:
                params[name] = nxt
                i += 2

        missing = [name for name in mandatory if name not in params]
        if missing:
            names = ", ".join(f"'{PREFIX}{name}'" for name in missing)
            raise OptionsError(f"Mandatory parameter(s) not provided: {names}")

        logger.debug("Parsed options: %s", params)
        return cls(params=params)

    @property
    def names(self) -> list[str]:
        """Names of all parameters given."""
        return list(self.params)

    def has(self, name: str) -> bool:
        return name in self.params

    def get_bool_param(self, name: str) -> bool:
        """True if '--name' was given as a flag."""
        return self.params.get(name) is True

    def get_single_param(self, name: str) -> Optional[str]:
        """Value of '--name value', or None."""
        value = self.params.get(name)
        return value if isinstance(value, str) else None

    def get_set_param(self, name: str) -> Optional[list[str]]:
        """Values of '--name { ... }' in the given order, or None."""
        value = self.params.get(name)
        return list(value) if isinstance(value, list) else None


def _read_set(argv: list[str], start: int, owner: str) -> tuple[list[str], int]:
    """Collect values up to the closing brace.

    Returns:
        The values and the index just past the closing brace.
    """
    values: list[str] = []
    i = start

    while i < len(argv):
        token = argv[i]
        if token == SET_CLOSE:
            return values, i + 1
        if token == SET_OPEN:
            raise OptionsError(f"Nested '{SET_OPEN}' in set of '{owner}'")
        values.append(token)
        i += 1

    raise OptionsError(f"Set of '{owner}' not closed with '{SET_CLOSE}'")
