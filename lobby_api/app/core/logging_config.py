"""
Logging for the ``lobby_api`` package.

Every module logs through a child of the ``lobby_api`` logger
(``logging.getLogger(__name__)`` or ``lobby_api.repository.<Class>``),
so ``setup_logging`` configures that one logger and leaves the root
logger, uvicorn's loggers and the test runner's capture alone.

Handlers installed here carry a fixed name.  Calling ``setup_logging``
again replaces them instead of stacking duplicates, which lets a second
``create_app`` pick up a changed level or log file.
"""

import logging
from pathlib import Path
from typing import List, Optional

PACKAGE_LOGGER = "lobby_api"
CONSOLE_HANDLER = "lobby_api.console"
FILE_HANDLER = "lobby_api.file"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def _level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _own_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [h for h in logger.handlers if h.get_name() in (CONSOLE_HANDLER, FILE_HANDLER)]


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Attach a console handler, and a file handler when *logfile* is set,
    to the package logger and return it.

    Unknown level names fall back to ``INFO``.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in _own_handlers(logger):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.set_name(CONSOLE_HANDLER)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if logfile:
        path = Path(logfile).expanduser().resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
