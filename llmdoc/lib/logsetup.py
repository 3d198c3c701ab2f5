"""Root logger configuration for the CLI."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    console_level: str = "info",
    log_file: Optional[Path] = None,
    file_level: str = "debug",
    verbose: bool = False,
) -> None:
    """Attach a console handler and, optionally, a rotating file handler.

    Replaces any handlers already on the root logger, so calling this twice
    does not duplicate output.
    """
    root = logging.getLogger()
    root.handlers.clear()

    console = logging.DEBUG if verbose else getattr(logging, console_level.upper())
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    root_level = console
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=20 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        root_level = min(root_level, file_handler.level)

    root.setLevel(root_level)
