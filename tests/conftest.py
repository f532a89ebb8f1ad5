"""Shared pytest fixtures."""

import io

import pytest

from unit_tester import Tester, TesterConfig


class Streams:
    """Captured primary and diagnostic streams."""

    def __init__(self):
        self.out = io.StringIO()
        self.err = io.StringIO()

    @property
    def config(self) -> TesterConfig:
        return TesterConfig(out=self.out, err=self.err)

    def out_lines(self) -> list[str]:
        return self.out.getvalue().splitlines()

    def err_lines(self) -> list[str]:
        return self.err.getvalue().splitlines()


@pytest.fixture
def streams() -> Streams:
    return Streams()


@pytest.fixture
def make_tester(streams):
    """Build a Tester writing to the captured streams.

    Example:
        tester = make_tester("--exec", "{", "a", "}")
    """

    def factory(*args: str, mandatory=()) -> Tester:
        return Tester(["prog", *args], mandatory=mandatory, config=streams.config)

    return factory
