"""Tests for the package logger setup."""

from __future__ import annotations

import logging

import pytest

from lobby_api.app.core.config import settings
from lobby_api.app.core.logging_config import CONSOLE_HANDLER, FILE_HANDLER, PACKAGE_LOGGER, setup_logging


@pytest.fixture
def package_logger():
    """Yield the package logger and restore the application's setup afterwards."""

    yield logging.getLogger(PACKAGE_LOGGER)
    setup_logging(settings.log_level, settings.log_file)


def _names(logger: logging.Logger) -> list:
    return [h.get_name() for h in logger.handlers if h.get_name() in (CONSOLE_HANDLER, FILE_HANDLER)]


def test_setup_configures_the_package_logger_only(package_logger) -> None:
    root_handlers = list(logging.getLogger().handlers)

    logger = setup_logging("debug")

    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert _names(logger) == [CONSOLE_HANDLER]
    assert logging.getLogger().handlers == root_handlers


def test_repeated_setup_replaces_handlers(package_logger, tmp_path) -> None:
    setup_logging("INFO")
    setup_logging("WARNING", str(tmp_path / "logs" / "lobby.log"))

    assert _names(package_logger) == [CONSOLE_HANDLER, FILE_HANDLER]
    assert package_logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info(package_logger) -> None:
    assert setup_logging("chatty").level == logging.INFO


def test_module_loggers_write_to_the_log_file(package_logger, tmp_path) -> None:
    logfile = tmp_path / "lobby.log"
    setup_logging("INFO", str(logfile))

    logging.getLogger("lobby_api.app.services.example").info("profile %s created", 7)
    for handler in package_logger.handlers:
        handler.flush()

    line = logfile.read_text(encoding="utf-8").strip()
    assert line.endswith("lobby_api.app.services.example | profile 7 created")
    assert " INFO " in line
