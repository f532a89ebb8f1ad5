"""Outcome of a single registration."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OutcomeKind(str, Enum):
    """What happened to a registered unit."""
    DESCRIBED = "described"
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"
    SKIPPED = "skipped"
    IGNORED = "ignored"


@dataclass(frozen=True)
class Outcome:
    """Result of registering one unit with a Tester."""
    name: str
    kind: OutcomeKind
    message: Optional[str] = None

    @property
    def executed(self) -> bool:
        return self.kind in (OutcomeKind.SUCCESS, OutcomeKind.FAIL, OutcomeKind.ERROR)

    @property
    def passed(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS
