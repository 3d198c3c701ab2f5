"""Exceptions raised by the migration engine."""

from pathlib import Path


class ExtractionError(Exception):
    """A span lacked a field the record cannot exist without.

    Collected into the run's error list; never aborts a migration.
    """

    def __init__(self, category: str, record_ref: str, message: str):
        self.category = category
        self.record_ref = record_ref
        self.message = message
        super().__init__(message)


class MigrationAborted(Exception):
    """A source confirmed to exist could not be read. Ends the whole run."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause}")
