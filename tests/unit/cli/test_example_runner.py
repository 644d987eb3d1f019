"""Tests for the shared example entry helper and output formatters."""

import json
import logging

import yaml

from vehicle_patterns.cli.example import parse_args, run_example
from vehicle_patterns.cli.formatters import format_output
from vehicle_patterns.domain.exceptions import ValidationError
from vehicle_patterns.helpers.logger import get_logger, setup_logging
from vehicle_patterns.config.schemas import LoggingConfig

LINES = ["first step", "second step"]


class TestFormatters:
    def test_text_format_with_title(self):
        output = format_output(LINES, "Demo", "text")
        assert output.splitlines() == ["Demo", "====", "first step", "second step"]

    def test_text_format_without_title(self):
        assert format_output(LINES) == "first step\nsecond step"

    def test_json_format(self):
        data = json.loads(format_output(LINES, "Demo", "json"))
        assert data == {"example": "Demo", "output": LINES}

    def test_yaml_format(self):
        data = yaml.safe_load(format_output(LINES, "Demo", "yaml"))
        assert data == {"example": "Demo", "output": LINES}

    def test_table_format_contains_lines(self):
        output = format_output(LINES, "Demo", "table")
        assert "first step" in output
        assert "second step" in output

    def test_table_format_empty(self):
        assert format_output([], "Demo", "table") == "No output."


class TestRunExample:
    def test_parse_args_defaults(self):
        args = parse_args("Demo", [])
        assert args.config is None
        assert args.format is None
        assert args.quiet is False

    def test_prints_output(self, capsys):
        assert run_example(lambda: LINES, "Demo", []) == 0
        assert capsys.readouterr().out.splitlines()[-1] == "second step"

    def test_format_option(self, capsys):
        assert run_example(lambda: LINES, "Demo", ["--format", "json"]) == 0
        assert json.loads(capsys.readouterr().out)["output"] == LINES

    def test_quiet_prints_nothing(self, capsys):
        assert run_example(lambda: LINES, "Demo", ["--quiet"]) == 0
        assert capsys.readouterr().out == ""

    def test_pattern_error_returns_failure(self, capsys):
        def failing_demo():
            raise ValidationError("bad input")

        assert run_example(failing_demo, "Demo", []) == 1
        assert "bad input" in capsys.readouterr().err

    def test_missing_config_file_returns_failure(self, capsys):
        assert run_example(lambda: LINES, "Demo", ["--config", "/nonexistent.json"]) == 1
        assert "not found" in capsys.readouterr().err


class TestLogging:
    def test_get_logger_routes_through_stdlib(self, caplog):
        caplog.set_level(logging.INFO)
        get_logger("vehicle_patterns.test").info("Something happened", vehicle="car")
        assert "Something happened" in caplog.text
        assert "vehicle='car'" in caplog.text

    def test_setup_logging_writes_file(self, tmp_path):
        log_file = tmp_path / "logs" / "examples.log"
        setup_logging(LoggingConfig(level="INFO", destination="file", file_path=str(log_file)))

        get_logger("vehicle_patterns.test").info("Written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "Written to file" in log_file.read_text()
        setup_logging(LoggingConfig())
