"""Allows 'python -m unit_tester <suite.yaml> [ARGS]'."""

from .cli import main

main(prog_name="unit-tester")
