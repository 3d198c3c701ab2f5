"""
JSON record store.

Records live one per file under the store directory:
  <store>/tasks/TASK-001.json
  <store>/adrs/ADR007.json
  ...

Inserting an id that already exists replaces the earlier record.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from llmdoc.lib.validate import SchemaValidationError, validate_before_write

logger = logging.getLogger(__name__)

KINDS = ("tasks", "sprints", "user_stories", "components", "adrs")


class StoreError(Exception):
    """The store refused or failed a write."""

    def __init__(self, kind: str, record_id: str, message: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(message)


class RecordStore:
    """File-backed store with insert/get/list per record kind."""

    def __init__(self, root: Path):
        self.root = root

    def _kind_dir(self, kind: str) -> Path:
        if kind not in KINDS:
            raise StoreError(kind, "", f"Unknown record kind: {kind}")
        return self.root / kind

    def _record_path(self, kind: str, record_id: str) -> Path:
        kind_dir = self._kind_dir(kind)
        if not record_id or '/' in record_id or '\\' in record_id or '..' in record_id:
            raise StoreError(kind, record_id, f"Unsafe record id: {record_id!r}")
        return kind_dir / f"{record_id}.json"

    def insert(self, kind: str, record_id: str, record: dict) -> None:
        """Validate and write a record, replacing any with the same id.

        Raises:
            StoreError: on an unknown kind, unsafe id, schema violation or I/O failure
        """
        path = self._record_path(kind, record_id)
        try:
            validate_before_write(record, kind, path)
        except SchemaValidationError as e:
            raise StoreError(kind, record_id, str(e)) from None

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if path.exists():
                logger.debug(f"Overwriting {kind}/{record_id}")
            path.write_text(json.dumps(record, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            raise StoreError(kind, record_id, f"Failed to write {path}: {e}") from e

    def get(self, kind: str, record_id: str) -> Optional[dict]:
        """Load a record by id, or None if there isn't one."""
        path = self._record_path(kind, record_id)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load {kind}/{record_id}: {e}")
            return None

    def list(self, kind: str) -> list[dict]:
        """All records of a kind, sorted by id."""
        kind_dir = self._kind_dir(kind)
        if not kind_dir.exists():
            return []

        records = []
        for f in sorted(kind_dir.glob("*.json")):
            try:
                records.append(json.loads(f.read_text(encoding="utf-8")))
            except (json.JSONDecodeError, OSError) as e:
                logger.warning(f"Failed to load record file {f}: {e}")
        return records
