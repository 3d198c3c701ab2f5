"""
Settings file parser for llmdoc.env.

Reads KEY=value lines as plain data. Values are never expanded or handed
to a shell, so '$', ';' and '|' are kept literally.
"""

import re
from pathlib import Path

KEY_PATTERN = re.compile(r'^[A-Z][A-Z0-9_]*$')


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def load_env(filepath: str | Path) -> dict[str, str]:
    """
    Parse a settings file and return its keys and values.

    Raises:
        FileNotFoundError: if the file doesn't exist
        ValueError: on a malformed line or a bad key
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {filepath}")

    settings: dict[str, str] = {}
    for lineno, raw in enumerate(path.read_text(encoding="utf-8").splitlines(), 1):
        line = raw.strip()
        if not line or line.startswith('#'):
            continue

        key, sep, value = line.partition('=')
        if not sep:
            raise ValueError(f"Line {lineno}: expected KEY=value")

        key = key.strip()
        if not KEY_PATTERN.match(key):
            raise ValueError(f"Line {lineno}: invalid key '{key}'")

        settings[key] = _unquote(value.strip())

    return settings
