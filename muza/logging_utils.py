from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

_LOGGER = logging.getLogger("muza.logging")
_logging_configured = False
_CONSOLE_FORMAT = "%(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(threadName)s %(name)s: %(message)s"
_FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    *,
    console: Console | None = None,
    log_file: Path | None = None,
    level: int = logging.INFO,
    force: bool = False,
) -> None:
    """Attach console output, and a file handler only when ``log_file`` is given.

    Console records go through ``console`` so they print cleanly above a live
    rich status line drawn on the same console.
    """

    global _logging_configured
    if _logging_configured and not force:
        return

    logger = logging.getLogger("muza")
    logger.setLevel(logging.DEBUG)

    if force:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    root_has_handlers = bool(logging.getLogger().handlers)
    if force or not root_has_handlers:
        console_handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            show_time=False,
        )
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATE_FORMAT))
            logger.addHandler(file_handler)
        except OSError as exc:
            _LOGGER.warning("Failed to configure file logging: %s", exc, exc_info=True)

    # Allow test harness handlers to capture logs.
    logger.propagate = True
    _logging_configured = True


def log_exception(context: str, exc: BaseException, *, traceback: bool = True) -> None:
    _LOGGER.error(
        "%s failed: %s: %s",
        context,
        type(exc).__name__,
        exc,
        exc_info=exc if traceback else None,
    )
