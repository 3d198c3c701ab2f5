"""
Markdown migration engine.

Pulls tasks, sprints, user stories, components and ADRs out of a project's
markdown documentation and stores them as typed records.
"""

from llmdoc.migration.coordinator import MarkdownMigrator, MigrationRun, migrate
from llmdoc.migration.errors import ExtractionError, MigrationAborted
from llmdoc.migration.markdown import extract_items, extract_section
from llmdoc.migration.models import (
    Adr,
    Category,
    Component,
    MigrationStats,
    Sprint,
    Task,
    UserStory,
)
from llmdoc.migration.report import format_report
from llmdoc.migration.vocab import normalize

__all__ = [
    "MarkdownMigrator",
    "MigrationRun",
    "migrate",
    "ExtractionError",
    "MigrationAborted",
    "extract_section",
    "extract_items",
    "normalize",
    "format_report",
    "Category",
    "MigrationStats",
    "Task",
    "Sprint",
    "UserStory",
    "Component",
    "Adr",
]
