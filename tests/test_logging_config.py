"""Tests for logging setup."""

import logging
import logging.handlers
from pathlib import Path
from typing import Iterator

import pytest

from fantasy_engine.logging_config import (
    LOG_DIR_ENV_VAR,
    LOG_FILE_NAME,
    LOG_LEVEL_ENV_VAR,
    PACKAGE_LOGGER,
    default_log_dir,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Detach handlers added by setup_logging after each test."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


class TestDefaultLogDir:
    """Tests for default_log_dir function."""

    def test_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(LOG_DIR_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)

        assert default_log_dir() == tmp_path / "logs"

    def test_from_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_DIR_ENV_VAR, str(tmp_path / "elsewhere"))
        assert default_log_dir() == tmp_path / "elsewhere"


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_writes_rotating_file(self, tmp_path: Path) -> None:
        package_logger = setup_logging("WARNING", log_dir=tmp_path)
        logging.getLogger("fantasy_engine.scrapers.base").debug("cache hit")

        file_handlers = [
            h for h in package_logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        file_handlers[0].flush()
        assert "cache hit" in (tmp_path / LOG_FILE_NAME).read_text()

    def test_console_level(self, tmp_path: Path) -> None:
        package_logger = setup_logging("warning", log_dir=tmp_path)

        console = [
            h
            for h in package_logger.handlers
            if not isinstance(h, logging.handlers.RotatingFileHandler)
        ]
        assert console[0].level == logging.WARNING

    def test_console_only(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        package_logger = setup_logging("ERROR", log_to_file=False)

        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.ERROR
        assert not (tmp_path / "logs").exists()

    def test_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "DEBUG")
        package_logger = setup_logging(log_to_file=False)

        assert package_logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        package_logger = setup_logging("LOUD", log_to_file=False)
        assert package_logger.level == logging.INFO

    def test_second_call_is_noop(self, tmp_path: Path) -> None:
        setup_logging(log_dir=tmp_path)
        package_logger = setup_logging(log_dir=tmp_path / "other")

        assert len(package_logger.handlers) == 2
        assert not (tmp_path / "other").exists()

    def test_root_logger_untouched(self, tmp_path: Path) -> None:
        root_handlers = list(logging.getLogger().handlers)
        setup_logging(log_dir=tmp_path)

        assert logging.getLogger().handlers == root_handlers

    def test_quiets_urllib3(self) -> None:
        setup_logging(log_to_file=False)
        assert logging.getLogger("urllib3").level == logging.WARNING
