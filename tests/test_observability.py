"""
Tests for observability — logging setup.
"""

import logging
from pathlib import Path

import pytest

from refsync.core.observability.logging_config import (
    LEVEL_ENV_VAR,
    _parse_level,
    resolve_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseLevel:
    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("INFO") == logging.INFO

    def test_empty_defaults_to_warning(self):
        assert _parse_level(None) == logging.WARNING
        assert _parse_level("") == logging.WARNING

    def test_unknown_defaults_to_warning(self):
        assert _parse_level("chatty") == logging.WARNING


class TestResolveLevel:
    def test_flag_precedence(self):
        assert resolve_level(debug=True, verbose=True, quiet=True) == "DEBUG"
        assert resolve_level(verbose=True, quiet=True) == "INFO"
        assert resolve_level(quiet=True) == "ERROR"

    def test_env_fallback(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(LEVEL_ENV_VAR, "INFO")
        assert resolve_level() == "INFO"

    def test_default_warning(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv(LEVEL_ENV_VAR, raising=False)
        assert resolve_level() == "WARNING"


class TestSetupLogging:
    def test_sets_root_level(self):
        setup_logging(level="INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "refsync.log"
        setup_logging(level="WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("refsync.test").debug("to file only")
        for h in root.handlers:
            h.flush()
        assert "to file only" in log_file.read_text(encoding="utf-8")

    def test_repeated_setup_replaces_handlers(self):
        setup_logging(level="INFO")
        setup_logging(level="DEBUG")
        assert len(logging.getLogger().handlers) == 1

    def test_missing_source_logged(self, empty_repo: Path, tmp_path: Path):
        from refsync.core.services.reference_sync import build_document

        log_file = tmp_path / "sync.log"
        setup_logging(level="ERROR", log_file=str(log_file), log_file_level="WARNING")
        build_document(empty_repo, today="2026-03-14")
        for h in logging.getLogger().handlers:
            h.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Source file not found: skills/fyso-rules/reference/dsl-reference.md" in text

    def test_console_format_by_level(self):
        setup_logging(level="WARNING")
        fmt = logging.getLogger().handlers[0].formatter._fmt
        assert fmt == "%(levelname)s: %(message)s"

        setup_logging(level="INFO")
        fmt = logging.getLogger().handlers[0].formatter._fmt
        assert "%(name)s:%(lineno)d" in fmt
