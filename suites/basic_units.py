"""Example test program.

Run it directly:
    python suites/basic_units.py --desc
    python suites/basic_units.py --exec
    python suites/basic_units.py --exec { test_ok test_error }

or through the suite file:
    unit-tester suites/basic.yaml --exec
"""

import sys

from unit_tester import Options, Tester, TestUnit, UnitError, as_unit


class TestOk(TestUnit):
    def execute(self, options: Options) -> bool:
        return True

    def description(self) -> str:
        return "an ok test"


class TestFail(TestUnit):
    def execute(self, options: Options) -> bool:
        return False

    def description(self) -> str:
        return "a fail test"


class TestError(TestUnit):
    def execute(self, options: Options) -> bool:
        raise UnitError("test function raised an exception")

    def description(self) -> str:
        return "an error test"


@as_unit()
def test_greeting(options: Options) -> bool:
    """Checks that '--greeting' is a non-empty value, when given."""
    greeting = options.get_single_param("greeting")
    if greeting is None:
        print("no '--greeting' given, nothing to check", file=sys.stderr)
        return True
    print(f"greeting is '{greeting}'", file=sys.stderr)
    return bool(greeting.strip())


def main() -> None:
    tester = Tester(sys.argv)
    tester.run("test_ok", TestOk())
    tester.run("test_fail", TestFail())
    tester.run("test_error", TestError())
    tester.run("test_greeting", test_greeting)


if __name__ == "__main__":
    main()
