"""Shared fixtures: a small documentation corpus and a recording store double."""

from pathlib import Path

import pytest

from llmdoc.store import StoreError

TASKS_MD = """\
# Tasks

### TASK-001: Set up CI
**Status:** In Progress
**Type:** Feature
**Assignee:** dana
**Story Points:** 3

### TASK-002: Write the user guide
**Status:** Someday, maybe
**Labels:** docs
"""

SPRINT_MD = """\
# Sprint 12: Export

2024-03-04 - 2024-03-15

## Goals
- Ship CSV export
- Close TASK-001
"""

USER_STORIES_MD = """\
# User Stories

## Export reports
As a project manager, I want to export reports, so that I can share progress.

### Acceptance Criteria
- [ ] CSV export
- [ ] JSON export
"""

COMPONENT_MD = """\
# Exporter

## Overview
Turns records into files.

## Dependencies
- comp-store
"""

ADR_MD = """\
# Use JSON files for storage

## Context
We need a store.

## Decision
One JSON file per record.

## Consequences
No concurrent writers.
"""


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def corpus(tmp_path) -> Path:
    """A docs tree with one or two documents in every category."""
    docs = tmp_path / "docs"
    write(docs / "agile" / "tasks.md", TASKS_MD)
    write(docs / "agile" / "sprints" / "archive" / "sprint-12.md", SPRINT_MD)
    write(docs / "agile" / "user-stories.md", USER_STORIES_MD)
    write(docs / "components" / "exporter.md", COMPONENT_MD)
    write(docs / "architecture" / "ADR001-json-storage.md", ADR_MD)
    write(docs / "architecture" / "README.md", "# Decisions\n")
    return docs


class RecordingStore:
    """Store double that remembers every insert and can refuse chosen ids."""

    def __init__(self, reject=()):
        self.inserts: list[tuple[str, str, dict]] = []
        self.reject = set(reject)

    def insert(self, kind: str, record_id: str, record: dict) -> None:
        if record_id in self.reject:
            raise StoreError(kind, record_id, "disk full")
        self.inserts.append((kind, record_id, record))


@pytest.fixture
def recording_store() -> RecordingStore:
    return RecordingStore()
