"""Logging setup for the outset command line.

Records from every ``outset.*`` logger are echoed to stderr as
``LEVEL: message`` and, when the logs folder is writable, appended to
``outset.log`` there.
"""

import logging
import os
from pathlib import Path

import click

LOGGER_NAME = "outset"
LOG_FILENAME = "outset.log"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LEVEL_COLORS = {
    logging.ERROR: "red",
    logging.WARNING: "yellow",
    logging.DEBUG: "bright_black",
}


class ClickEchoHandler(logging.Handler):
    """Send records through click.echo so CliRunner captures them."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            click.echo(click.style(message, fg=_LEVEL_COLORS.get(record.levelno)), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(*, debug: bool, log_dir: Path | None = None) -> logging.Logger:
    """Install outset's handlers, replacing any from an earlier call.

    Args:
        debug: Emit debug records as well
        log_dir: Folder for outset.log; skipped if missing or not writable

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    console = ClickEchoHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_dir is not None and log_dir.is_dir() and os.access(log_dir, os.W_OK):
        file_handler = logging.FileHandler(log_dir / LOG_FILENAME, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger
