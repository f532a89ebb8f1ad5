"""Tests for the unit-tester command line."""

import logging
import sys
import textwrap
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from unit_tester.cli import main

SUITE_YAML = """\
meta:
  name: cli
units:
  - name: ok
    target: tests.units:OkUnit
  - name: fail
    target: tests.units:FailUnit
  - name: boom
    target: tests.units:BoomUnit
"""


@pytest.fixture
def suite_file(tmp_path):
    path = tmp_path / "suite.yaml"
    path.write_text(SUITE_YAML, encoding="utf-8")
    return path


def invoke(*args):
    return CliRunner().invoke(main, [str(a) for a in args])


class TestRunSuite:
    def test_exec_all(self, suite_file):
        result = invoke(suite_file, "--exec")

        assert result.exit_code == 0
        assert "ok SUCCESS" in result.output
        assert "fail FAIL" in result.output
        assert "ERROR for boom 'boom'" in result.output

    def test_exec_subset(self, suite_file):
        result = invoke(suite_file, "--exec", "{", "ok", "boom", "}")

        assert result.exit_code == 0
        assert "ok SUCCESS" in result.output
        assert "ERROR for boom 'boom'" in result.output
        assert "fail" not in result.output

    def test_desc(self, suite_file):
        result = invoke(suite_file, "--desc")

        assert result.exit_code == 0
        assert "ok: an ok test\n\n" in result.output
        assert "fail: a fail test\n\n" in result.output
        assert "ok SUCCESS" not in result.output

    def test_usage_without_mode(self, suite_file):
        result = invoke(suite_file)

        assert result.exit_code == 0
        assert f"'unit-tester {suite_file} --desc'" in result.output

    def test_malformed_arguments(self, suite_file):
        result = invoke(suite_file, "--exec", "{", "ok")

        assert result.exit_code == 0
        assert "EXCEPTION 'Set of '--exec' not closed with '}''" in result.output
        assert "SUCCESS" not in result.output

    def test_mandatory_option(self, suite_file):
        result = invoke("--mandatory", "host", suite_file, "--exec")

        assert result.exit_code == 0
        assert "EXCEPTION 'Mandatory parameter(s) not provided: '--host''" in result.output
        assert "ok SUCCESS" not in result.output

    def test_verbose(self, suite_file):
        with patch("unit_tester.cli.logging.basicConfig") as basic_config:
            result = invoke("--verbose", suite_file, "--exec")

        assert result.exit_code == 0
        assert "ok SUCCESS" in result.output
        assert basic_config.call_args.kwargs["level"] == logging.DEBUG


class TestSuiteErrors:
    def test_missing_suite(self, tmp_path):
        result = invoke(tmp_path / "missing.yaml", "--exec")

        assert result.exit_code == 1
        assert "Error: Suite file not found" in result.output

    def test_invalid_suite(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(textwrap.dedent("""\
            meta:
              name: bad
            units:
              - name: a
                target: no-colon
            """), encoding="utf-8")

        result = invoke(path, "--exec")

        assert result.exit_code == 1
        assert "Error: Invalid suite: units[0].target" in result.output

    def test_unloadable_target(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(textwrap.dedent("""\
            meta:
              name: bad
            units:
              - name: a
                target: tests.units:Missing
            """), encoding="utf-8")

        result = invoke(path, "--exec")

        assert result.exit_code == 1
        assert "has no attribute 'Missing'" in result.output

    def test_suite_relative_targets(self, tmp_path):
        (tmp_path / "local_units_for_cli.py").write_text(textwrap.dedent("""\
            from unit_tester import as_unit

            @as_unit("local check")
            def check(options):
                return True
            """), encoding="utf-8")
        path = tmp_path / "local.yaml"
        path.write_text(textwrap.dedent("""\
            meta:
              name: local
            units:
              - name: local_check
                target: local_units_for_cli:check
            """), encoding="utf-8")

        result = invoke(path, "--exec")

        assert result.exit_code == 0
        assert "local_check SUCCESS" in result.output

    def test_module_raising_at_import(self, tmp_path):
        (tmp_path / "broken_units_for_cli.py").write_text(
            "raise RuntimeError('broken at import')\n", encoding="utf-8"
        )
        path = tmp_path / "broken.yaml"
        path.write_text(textwrap.dedent("""\
            meta:
              name: broken
            units:
              - name: a
                target: broken_units_for_cli:check
            """), encoding="utf-8")

        result = invoke(path, "--exec")

        assert result.exit_code == 1
        assert "Error: Cannot import 'broken_units_for_cli'" in result.output
        assert "broken at import" in result.output

    def test_invalid_utf8_suite(self, tmp_path):
        path = tmp_path / "latin1.yaml"
        path.write_bytes("meta:\n  name: caf\xe9\nunits: []\n".encode("latin-1"))

        result = invoke(path, "--exec")

        assert result.exit_code == 1
        assert "Error: Suite file" in result.output
        assert "not valid UTF-8" in result.output


class TestSysPath:
    def test_suite_dir_removed_after_run(self, suite_file):
        before = list(sys.path)

        result = invoke(suite_file, "--exec")

        assert result.exit_code == 0
        assert sys.path == before
        assert str(suite_file.resolve().parent) not in sys.path

    def test_suite_dir_removed_after_load_error(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(textwrap.dedent("""\
            meta:
              name: bad
            units:
              - name: a
                target: tests.units:Missing
            """), encoding="utf-8")
        before = list(sys.path)

        result = invoke(path, "--exec")

        assert result.exit_code == 1
        assert sys.path == before
