"""
Tests for the Structured Logger
===============================
Tests for ForgeLogger in shared/logger.py.
"""

import json
import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from shared.logger import ForgeLogger


def _read_json_lines(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


class TestLoggerSetup:

    def test_logger_name_and_level(self):
        log = ForgeLogger("setup", log_level="info", console_output=False)
        assert log.component == "setup"
        assert log.underlying.name == "passforge.setup"
        assert log.underlying.level == logging.INFO
        assert log.underlying.propagate is False

    def test_reinitialising_replaces_handlers(self):
        ForgeLogger("dup")
        log = ForgeLogger("dup")
        assert len(log.underlying.handlers) == 1

    def test_unknown_level_falls_back_to_warning(self):
        log = ForgeLogger("fallback", log_level="chatty", console_output=False)
        assert log.underlying.level == logging.WARNING


class TestJsonFile:

    @pytest.fixture
    def log_path(self, tmp_path):
        return tmp_path / "logs" / "forge.jsonl"

    def test_json_record_fields(self, log_path):
        log = ForgeLogger(
            "jsonfile", log_level="DEBUG", log_file=log_path, json_logs=True, console_output=False
        )
        with log.operation("generate"):
            log.info("Generated %d password(s)", 3, length=16)

        entry = _read_json_lines(log_path)[-1]
        assert entry["level"] == "INFO"
        assert entry["logger"] == "passforge.jsonfile"
        assert entry["message"] == "Generated 3 password(s)"
        assert entry["component"] == "jsonfile"
        assert entry["operation"] == "generate"
        assert entry["extra"] == {"length": 16}

    def test_operation_scope_restored(self, log_path):
        log = ForgeLogger(
            "scope", log_level="DEBUG", log_file=log_path, json_logs=True, console_output=False
        )
        with log.operation("outer"):
            with log.operation("inner"):
                log.debug("inside")
            log.debug("after inner")
        log.debug("outside")

        entries = _read_json_lines(log_path)
        assert [e.get("operation") for e in entries] == ["inner", "outer", None]

    def test_exception_logged_with_traceback(self, log_path):
        log = ForgeLogger(
            "errors", log_level="DEBUG", log_file=log_path, json_logs=True, console_output=False
        )
        try:
            raise ValueError("bad bound")
        except ValueError:
            log.exception("Failed")

        entry = _read_json_lines(log_path)[-1]
        assert entry["level"] == "ERROR"
        assert "ValueError: bad bound" in entry["exc_info"]

    def test_plain_text_file(self, tmp_path):
        path = tmp_path / "forge.log"
        log = ForgeLogger("plain", log_level="WARNING", log_file=path, console_output=False)
        log.info("hidden")
        log.warning("visible")

        text = path.read_text(encoding="utf-8")
        assert "visible" in text
        assert "hidden" not in text
        assert "| WARNING  |" in text


class TestTimed:

    def test_completed_and_aborted(self, tmp_path):
        path = tmp_path / "timed.jsonl"
        log = ForgeLogger(
            "timed", log_level="DEBUG", log_file=path, json_logs=True, console_output=False
        )
        with log.timed("batch") as timer:
            pass
        assert timer.elapsed >= 0.0

        with pytest.raises(RuntimeError):
            with log.timed("failing"):
                raise RuntimeError("boom")

        messages = [e["message"] for e in _read_json_lines(path)]
        assert messages[0] == "Started: batch"
        assert messages[1].startswith("Completed: batch")
        assert messages[2] == "Started: failing"
        assert messages[3].startswith("Aborted: failing")
