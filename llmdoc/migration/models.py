"""
Data models for the migration engine.

One dataclass per document category, plus the span and statistics types
the coordinator passes around. Records serialize to plain dicts with
to_dict(): enums become their values, datetimes ISO 8601 strings.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import ClassVar, Optional, Union

from llmdoc.migration.vocab import (
    AdrStatus,
    ComponentType,
    Priority,
    SprintStatus,
    TaskStatus,
    TaskType,
)


class Category(Enum):
    """Document categories. Values double as store kinds."""
    TASK = "tasks"
    SPRINT = "sprints"
    USER_STORY = "user_stories"
    COMPONENT = "components"
    ADR = "adrs"

    @property
    def label(self) -> str:
        """Plural name used in the report."""
        return _LABELS[self]

    @property
    def noun(self) -> str:
        """Singular name used in messages."""
        return _NOUNS[self]


_LABELS = {
    Category.TASK: "Tasks",
    Category.SPRINT: "Sprints",
    Category.USER_STORY: "Stories",
    Category.COMPONENT: "Components",
    Category.ADR: "ADRs",
}

_NOUNS = {
    Category.TASK: "task",
    Category.SPRINT: "sprint",
    Category.USER_STORY: "story",
    Category.COMPONENT: "component",
    Category.ADR: "ADR",
}

# Coordinator order
CATEGORY_ORDER = (
    Category.TASK,
    Category.SPRINT,
    Category.USER_STORY,
    Category.COMPONENT,
    Category.ADR,
)


def utcnow() -> datetime:
    """Extraction timestamp. Source documents rarely carry their own."""
    return datetime.now(timezone.utc)


def _serialize(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, list):
        return [_serialize(v) for v in value]
    return value


class _Record:
    category: ClassVar[Category]

    @property
    def display_name(self) -> str:
        return getattr(self, "title", None) or getattr(self, "name", None) or self.id

    def to_dict(self) -> dict:
        return {f.name: _serialize(getattr(self, f.name)) for f in fields(self)}


@dataclass
class Task(_Record):
    category: ClassVar[Category] = Category.TASK

    id: str                                    # TASK-001
    title: str
    status: TaskStatus = TaskStatus.TODO
    task_type: TaskType = TaskType.TASK
    priority: Priority = Priority.MEDIUM
    description: Optional[str] = None
    sprint_id: Optional[str] = None            # sprint-3
    assignee: Optional[str] = None
    story_points: Optional[int] = None
    labels: list[str] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)


@dataclass
class Sprint(_Record):
    category: ClassVar[Category] = Category.SPRINT

    id: str                                    # sprint-3
    name: str
    status: SprintStatus
    start_date: datetime = field(default_factory=utcnow)
    end_date: datetime = field(default_factory=utcnow)
    goals: list[str] = field(default_factory=list)
    task_refs: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)


@dataclass
class UserStory(_Record):
    category: ClassVar[Category] = Category.USER_STORY

    id: str                                    # US-001
    title: str
    persona: str = "user"
    want: str = ""
    benefit: str = "value is delivered"
    acceptance_criteria: list[str] = field(default_factory=list)
    priority: Priority = Priority.MEDIUM
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)


@dataclass
class Component(_Record):
    category: ClassVar[Category] = Category.COMPONENT

    id: str                                    # comp-auth-service
    name: str
    component_type: ComponentType = ComponentType.MODULE
    description: str = ""
    dependencies: list[str] = field(default_factory=list)
    interfaces: list[str] = field(default_factory=list)
    tech_stack: list[str] = field(default_factory=list)
    owner: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)


@dataclass
class Adr(_Record):
    category: ClassVar[Category] = Category.ADR

    id: str                                    # ADR007
    title: str = ""
    status: AdrStatus = AdrStatus.ACCEPTED
    context: str = ""
    decision: str = ""
    consequences: str = ""
    alternatives: list[str] = field(default_factory=list)
    related_adrs: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)


DocumentRecord = Union[Task, Sprint, UserStory, Component, Adr]


@dataclass
class Span:
    """A slice of source text holding exactly one record."""
    source: Path
    ref: str           # what to call the span in messages (id, heading, filename)
    text: str
    title: str = ""
    index: int = 0     # position within its source, 0-based


@dataclass
class CategoryStats:
    found: int = 0
    migrated: int = 0

    @property
    def failed(self) -> int:
        return self.found - self.migrated


@dataclass
class MigrationStats:
    """Counts and collected errors for one migration run. Never persisted."""
    categories: dict[Category, CategoryStats] = field(
        default_factory=lambda: {c: CategoryStats() for c in CATEGORY_ORDER}
    )
    errors: list[str] = field(default_factory=list)

    def __getitem__(self, category: Category) -> CategoryStats:
        return self.categories[category]

    @property
    def total_found(self) -> int:
        return sum(s.found for s in self.categories.values())

    @property
    def total_migrated(self) -> int:
        return sum(s.migrated for s in self.categories.values())
