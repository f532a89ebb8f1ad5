"""CLI entry point for unit-tester.

Runs the units listed in a suite file:
    unit-tester <suite.yaml> --exec
    unit-tester <suite.yaml> --exec { test_ok test_error }
    unit-tester <suite.yaml> --desc
"""

import logging
import sys
from pathlib import Path

import click

from .errors import SuiteError
from .runner import Tester
from .suite import load_suite, parse_suite, validate_suite

logger = logging.getLogger(__name__)

PROGRAM = "unit-tester"


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages to stderr.")
@click.option(
    "-m", "--mandatory",
    multiple=True,
    metavar="NAME",
    help="Option name (without '--') the test arguments must contain. Repeatable.",
)
@click.argument("suite_file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(verbose: bool, mandatory: tuple[str, ...], suite_file: Path, args: tuple[str, ...]):
    """Describe or execute the test units listed in SUITE_FILE.

    ARGS are handed to the units untouched: '--desc', '--exec',
    '--exec { name ... }' and any option the units read.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        suite = parse_suite(suite_file)
        validation = validate_suite(suite)

        if not validation.valid:
            errors_str = "; ".join(f"{e.path}: {e.message}" for e in validation.errors)
            raise SuiteError(f"Invalid suite: {errors_str}")

    except SuiteError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for warning in validation.warnings:
        click.echo(f"Warning: {warning.path}: {warning.message}", err=True)

    # targets are importable relative to the suite file, like scripts, for
    # the duration of the run only
    suite_dir = str(suite_file.resolve().parent)
    added = suite_dir not in sys.path
    if added:
        sys.path.insert(0, suite_dir)

    try:
        try:
            units = load_suite(suite)
        except SuiteError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        logger.debug("Suite '%s': %d units, args=%s", suite.meta.name, len(units), list(args))
        tester = Tester([f"{PROGRAM} {suite_file}", *args], mandatory=mandatory)
        for name, unit in units:
            tester.run(name, unit)

    finally:
        if added and suite_dir in sys.path:
            sys.path.remove(suite_dir)


if __name__ == "__main__":
    main()
