"""
Configuration loaders for llmdoc.

Settings come from an optional llmdoc.env file; anything it leaves out
falls back to the defaults below.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import envparse

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = "llmdoc.env"

DEFAULT_STORE_DIR = "~/.llmdoc/store"
DEFAULT_DOCS_DIR = "docs"
DEFAULT_LOG_FILE = "~/.llmdoc/logs/llmdoc.log"
DEFAULT_LOG_LEVEL = "info"
DEFAULT_LOG_FILE_LEVEL = "debug"

VALID_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass
class Settings:
    """Runtime settings from llmdoc.env"""
    store_dir: Path
    docs_dir: Path
    log_level: str
    log_file: Optional[Path]  # None disables file logging
    log_file_level: str


def _expand(value: str) -> Path:
    return Path(os.path.expanduser(value))


def _log_level(env: dict, key: str, default: str) -> str:
    level = env.get(key, default).strip().lower()
    if level not in VALID_LOG_LEVELS:
        logger.warning(
            f"Unknown {key} '{level}', using '{default}'. "
            f"Valid levels: {', '.join(VALID_LOG_LEVELS)}"
        )
        return default
    return level


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from *path*, or ./llmdoc.env when present.

    An explicit path that does not exist is an error; the implicit default
    file is optional.
    """
    env: dict[str, str] = {}
    if path is not None:
        env = envparse.load_env(path)
    elif Path(DEFAULT_SETTINGS_FILE).exists():
        env = envparse.load_env(DEFAULT_SETTINGS_FILE)

    log_file = env.get("LOG_FILE", DEFAULT_LOG_FILE)

    return Settings(
        store_dir=_expand(env.get("STORE_DIR", DEFAULT_STORE_DIR)),
        docs_dir=_expand(env.get("DOCS_DIR", DEFAULT_DOCS_DIR)),
        log_level=_log_level(env, "LOG_LEVEL", DEFAULT_LOG_LEVEL),
        log_file=_expand(log_file) if log_file else None,
        log_file_level=_log_level(env, "LOG_FILE_LEVEL", DEFAULT_LOG_FILE_LEVEL),
    )
