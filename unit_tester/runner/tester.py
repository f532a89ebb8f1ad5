"""Tester - decides, per registered unit, whether to describe, run or skip it.

Typical test program:

    tester = Tester(sys.argv)
    tester.run("test_ok", TestOk())
    tester.run("test_fail", TestFail())

Started with '--desc' it prints the descriptions, with '--exec' it runs every
unit, with '--exec { test_ok }' only the named ones, and with nothing it
prints a usage text.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, TextIO

from ..options import Options
from .mode import IDLE, ModeState, RunMode, resolve_mode
from .outcome import Outcome, OutcomeKind
from .unit import TestUnit
from .usage import usage_text

logger = logging.getLogger(__name__)

FRAME = "############"


@dataclass
class TesterConfig:
    """Configuration for a Tester."""

    __test__ = False

    out: Optional[TextIO] = None  # None = sys.stdout at write time
    err: Optional[TextIO] = None  # None = sys.stderr at write time
    program_name: Optional[str] = None


class Tester:
    """Runs registered test units according to the command line.

    The run mode is resolved once, in the constructor, and never changes.
    Neither the constructor nor run() let a parsing or unit failure escape;
    failures are reported as lines on the output stream instead.
    """

    __test__ = False

    def __init__(
        self,
        argv: Optional[Sequence[str]] = None,
        mandatory: Iterable[str] = (),
        config: Optional[TesterConfig] = None,
    ):
        """Initialize tester and resolve the run mode.

        Args:
            argv: Full argument vector, program name first. Default: sys.argv.
            mandatory: Option names (without '--') that must be given.
            config: Output streams and program name override.
        """
        argv = list(sys.argv if argv is None else argv)
        self.config = config or TesterConfig()
        self.program_name = self.config.program_name or (argv[0] if argv else "")
        self.options = Options()
        self._state = IDLE

        try:
            self.options = Options.parse(argv[1:], mandatory)
            self._state = resolve_mode(self.options)
        except Exception as e:
            self._write_out(f"EXCEPTION '{e}'")
            logger.debug("Option parsing failed, tester is inert", exc_info=True)
            return

        logger.debug("Run mode: %s %s", self._state.mode.value, sorted(self._state.selected))

        if self._state.mode is RunMode.IDLE:
            self._write_out(usage_text(self.program_name))

    @property
    def mode(self) -> RunMode:
        return self._state.mode

    @property
    def selected(self) -> frozenset[str]:
        """Names given with '--exec { ... }'; empty in other modes."""
        return self._state.selected

    @property
    def state(self) -> ModeState:
        return self._state

    def run(self, name: str, unit: TestUnit) -> Outcome:
        """Describe, execute or skip a unit, depending on the run mode.

        Args:
            name: Name the unit is registered under.
            unit: The unit.

        Returns:
            What happened to the unit. Nothing is kept by the tester.
        """
        try:
            if self._state.mode is RunMode.DESCRIBE:
                self._write_out(f"{name}: {unit.description()}\n")
                return Outcome(name, OutcomeKind.DESCRIBED)

            if not self._state.executes:
                return Outcome(name, OutcomeKind.IGNORED)

            if not self._state.selects(name):
                logger.debug("Skipping %s", name)
                return Outcome(name, OutcomeKind.SKIPPED)

            return self._execute(name, unit)

        except Exception as e:
            self._write_out(f"EXCEPTION '{e}'")
            return Outcome(name, OutcomeKind.ERROR, str(e))

    def _execute(self, name: str, unit: TestUnit) -> Outcome:
        """Execute a unit, reporting its verdict or its error."""
        try:
            self._write_err(f"\n{FRAME} -> {name} - {unit.description()}")
            logger.debug("Executing %s", name)
            passed = unit.execute(self.options)
            self._write_out(f"{name} {'SUCCESS' if passed else 'FAIL'}")
            return Outcome(name, OutcomeKind.SUCCESS if passed else OutcomeKind.FAIL)

        except Exception as e:
            self._write_out(f"ERROR for {name} '{e}'")
            logger.debug("%s raised %s", name, type(e).__name__, exc_info=True)
            return Outcome(name, OutcomeKind.ERROR, str(e))

        finally:
            self._write_err(f"{FRAME} <- {name}")

    def _write_out(self, line: str) -> None:
        out = self.config.out or sys.stdout
        print(line, file=out, flush=True)

    def _write_err(self, line: str) -> None:
        err = self.config.err or sys.stderr
        print(line, file=err, flush=True)
