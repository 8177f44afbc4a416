"""Tests for setup_logger."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from inventory_manager import settings
from inventory_manager.logger import setup_logger


@pytest.fixture
def fresh_logger(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(settings, "LOG_FILENAME", "test.log")
    monkeypatch.setattr(settings, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(settings, "CONSOLE_LOG_LEVEL", "INFO")
    name = "inventory_manager.test_logger"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestSetupLogger:
    """Tests for console and file handler setup."""

    def test_adds_console_and_rotating_file_handlers(self, fresh_logger: str, tmp_path: Path) -> None:
        logger = setup_logger(fresh_logger, logging.DEBUG, logging.DEBUG)

        assert logger.level == logging.DEBUG
        assert [type(h) for h in logger.handlers] == [logging.StreamHandler, RotatingFileHandler]

        logger.info("hello")
        logger.handlers[1].flush()
        assert "INFO - hello" in (tmp_path / "logs" / "test.log").read_text(encoding="utf-8")

    def test_second_call_does_not_duplicate_handlers(self, fresh_logger: str) -> None:
        setup_logger(fresh_logger)
        logger = setup_logger(fresh_logger)

        assert len(logger.handlers) == 2

    def test_levels_default_to_settings(self, fresh_logger: str, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "LOG_LEVEL", "debug")
        monkeypatch.setattr(settings, "CONSOLE_LOG_LEVEL", "WARNING")

        logger = setup_logger(fresh_logger)
        console, log_file = logger.handlers

        assert logger.level == logging.DEBUG
        assert console.level == logging.WARNING
        assert log_file.level == logging.DEBUG

    def test_quiet_console_still_writes_file(
        self, fresh_logger: str, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        """Info messages skip the menu screen but are kept in the log file."""
        logger = setup_logger(fresh_logger, "INFO", "WARNING")

        logger.info("[Loaded] 3 items.")
        logger.handlers[1].flush()

        assert "[Loaded] 3 items." not in capsys.readouterr().out
        assert "[Loaded] 3 items." in (tmp_path / "logs" / "test.log").read_text(encoding="utf-8")

    def test_unknown_level_is_rejected(self, fresh_logger: str) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logger(fresh_logger, "LOUD")
