"""Run mode resolution.

The mode is decided once from the parsed options:

1. '--exec'              -> EXECUTE_ALL
2. '--desc'              -> DESCRIBE
3. '--exec { a b ... }'  -> EXECUTE_SUBSET, when the set is not empty
4. otherwise             -> IDLE
"""

from dataclasses import dataclass, field
from enum import Enum

from ..options import Options

EXEC_PARAM = "exec"
DESC_PARAM = "desc"


class RunMode(str, Enum):
    """What a Tester does with registered units."""
    DESCRIBE = "describe"
    EXECUTE_ALL = "execute_all"
    EXECUTE_SUBSET = "execute_subset"
    IDLE = "idle"


@dataclass(frozen=True)
class ModeState:
    """Resolved mode plus the selected unit names for EXECUTE_SUBSET."""
    mode: RunMode
    selected: frozenset[str] = field(default_factory=frozenset)

    @property
    def executes(self) -> bool:
        return self.mode in (RunMode.EXECUTE_ALL, RunMode.EXECUTE_SUBSET)

    def selects(self, name: str) -> bool:
        """Whether a unit with this name should be executed."""
        if self.mode is RunMode.EXECUTE_ALL:
            return True
        if self.mode is RunMode.EXECUTE_SUBSET:
            return name in self.selected
        return False


IDLE = ModeState(RunMode.IDLE)


def resolve_mode(options: Options) -> ModeState:
    """Resolve the run mode from parsed options, first match wins."""
    if options.get_bool_param(EXEC_PARAM):
        return ModeState(RunMode.EXECUTE_ALL)

    if options.get_bool_param(DESC_PARAM):
        return ModeState(RunMode.DESCRIBE)

    names = options.get_set_param(EXEC_PARAM)
    if names:
        return ModeState(RunMode.EXECUTE_SUBSET, frozenset(names))

    return IDLE
