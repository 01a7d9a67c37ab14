"""Tests for the lint-report command line."""

import importlib
import json

import pytest
from typer.testing import CliRunner

from lint_report import __version__
from lint_report.cli import app

runner = CliRunner()

EXPECTED = (
    "\nfoo.scss\n"
    "  5:10  error    Unexpected foo  foo\n"
    "  6:11  warning  Unexpected bar  bar\n\n"
    "✖ 2 problems (1 error, 1 warning)\n"
)


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for key in ("COLOR", "FORMATTER", "VERBOSITY"):
        monkeypatch.delenv(f"LINT_REPORT_{key}", raising=False)


@pytest.fixture
def results_file(tmp_path, raw_results):
    path = tmp_path / "results.json"
    path.write_text(json.dumps(raw_results), encoding="utf-8")
    return path


class TestReportCommand:
    def test_prints_report(self, results_file):
        result = runner.invoke(app, [str(results_file), "--no-color"])
        assert result.stdout == EXPECTED
        assert result.exit_code == 1

    def test_reads_stdin(self, raw_results):
        result = runner.invoke(app, ["--no-color"], input=json.dumps(raw_results))
        assert result.stdout == EXPECTED

    def test_dash_reads_stdin(self, raw_results):
        result = runner.invoke(app, ["-", "--no-color"], input=json.dumps(raw_results))
        assert result.stdout == EXPECTED

    def test_warnings_exit_clean(self, raw_results):
        raw_results[0]["errorCount"] = 0
        raw_results[0]["warningCount"] = 2
        result = runner.invoke(app, ["--no-color"], input=json.dumps(raw_results))
        assert result.exit_code == 0
        assert result.stdout.endswith("✖ 2 problems (0 errors, 2 warnings)\n")

    def test_clean_results_print_nothing(self):
        payload = [{"filePath": "a.scss", "errorCount": 0, "warningCount": 0, "messages": []}]
        result = runner.invoke(app, ["--no-color"], input=json.dumps(payload))
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_forced_color(self, results_file):
        result = runner.invoke(app, [str(results_file), "--color"])
        assert "\x1b[1;31m✖ 2 problems" in result.stdout

    def test_color_from_config_file(self, tmp_path, results_file):
        config = tmp_path / "custom.toml"
        config.write_text("color = true\n")
        result = runner.invoke(app, [str(results_file), "--config", str(config)])
        assert "\x1b[" in result.stdout

    def test_flag_beats_config_file(self, tmp_path, results_file):
        (tmp_path / "lint-report.toml").write_text("color = true\n")
        result = runner.invoke(app, [str(results_file), "--no-color"])
        assert result.stdout == EXPECTED

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestReportCommandErrors:
    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "missing.json")])
        assert result.exit_code == 2
        assert "Cannot read results" in result.output

    def test_invalid_json(self):
        result = runner.invoke(app, ["--no-color"], input="not json")
        assert result.exit_code == 2
        assert "invalid JSON" in result.output

    def test_file_not_utf8(self, tmp_path):
        path = tmp_path / "results.json"
        path.write_bytes(b'[{"filePath": "\xff.scss", "messages": []}]')
        result = runner.invoke(app, [str(path), "--no-color"])
        assert result.exit_code == 2
        assert "invalid UTF-8" in result.output

    def test_stdin_not_utf8(self):
        result = runner.invoke(app, ["--no-color"], input=b"[\xff]")
        assert result.exit_code == 2
        assert "invalid UTF-8" in result.output

    def test_unsupported_severity(self):
        payload = [
            {
                "filePath": "a.scss",
                "errorCount": 1,
                "messages": [{"message": "m", "severity": 5, "line": 1, "column": 1}],
            }
        ]
        result = runner.invoke(app, ["--no-color"], input=json.dumps(payload))
        assert result.exit_code == 2
        assert "Unsupported severity" in result.output

    def test_unknown_format(self, results_file):
        result = runner.invoke(app, [str(results_file), "--format", "junit"])
        assert result.exit_code == 2
        assert "Unknown formatter" in result.output

    def test_interrupt(self, monkeypatch, results_file):
        report_module = importlib.import_module("lint_report.cli.report")

        def interrupted(results_file):
            raise KeyboardInterrupt

        monkeypatch.setattr(report_module, "read_input", interrupted)
        result = runner.invoke(app, [str(results_file), "--no-color"])
        assert result.exit_code == 130
        assert result.stdout == ""


class TestReportCommandLogging:
    def test_verbose_logs_to_stderr_only(self, raw_results):
        result = runner.invoke(app, ["-v", "--no-color"], input=json.dumps(raw_results))
        assert result.exit_code == 1
        assert result.stdout == EXPECTED
        assert "DEBUG" in result.stderr
        assert "Loaded" in result.stderr

    def test_default_hides_debug(self, raw_results):
        result = runner.invoke(app, ["--no-color"], input=json.dumps(raw_results))
        assert result.stdout == EXPECTED
        assert "DEBUG" not in result.stderr

    def test_quiet(self, raw_results):
        result = runner.invoke(app, ["-q", "--no-color"], input=json.dumps(raw_results))
        assert result.stdout == EXPECTED
        assert result.stderr == ""

    def test_verbosity_from_env(self, raw_results, monkeypatch):
        monkeypatch.setenv("LINT_REPORT_VERBOSITY", "verbose")
        result = runner.invoke(app, ["--no-color"], input=json.dumps(raw_results))
        assert result.stdout == EXPECTED
        assert "DEBUG" in result.stderr
