"""
Closed vocabularies and their synonym tables.

Legacy docs spell statuses and types however their authors liked. Each
table maps collapsed spellings to one enum member; anything unknown maps
to the table's default instead of failing, so a record is never rejected
over a status word.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TaskStatus(Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    BLOCKED = "blocked"
    CANCELLED = "cancelled"


class TaskType(Enum):
    BUG = "bug"
    FEATURE = "feature"
    TASK = "task"
    EPIC = "epic"
    STORY = "story"
    SPIKE = "spike"


class Priority(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class SprintStatus(Enum):
    PLANNING = "planning"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class AdrStatus(Enum):
    PROPOSED = "proposed"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    DEPRECATED = "deprecated"
    SUPERSEDED = "superseded"
    UNSPECIFIED = "unspecified"


class ComponentType(Enum):
    MODULE = "module"
    SERVICE = "service"
    LIBRARY = "library"
    DATABASE = "database"
    API = "api"
    OTHER = "other"


_SEPARATORS_RE = re.compile(r'[\s_\-]+')
_PUNCTUATION_RE = re.compile(r'[^\w\s\-]')


def collapse(raw: str) -> str:
    """Lower-case *raw*, drop punctuation, and fold '-', '_' and runs of
    whitespace into single spaces."""
    text = _PUNCTUATION_RE.sub('', raw.strip().lower())
    return _SEPARATORS_RE.sub(' ', text).strip()


@dataclass(frozen=True)
class Vocabulary:
    """Synonym table for one enumeration."""
    name: str
    synonyms: dict[str, Enum]
    default: Enum

    def lookup(self, raw: Optional[str]) -> Optional[Enum]:
        """Member for *raw*, or None when it isn't in the table."""
        if raw is None:
            return None
        return self.synonyms.get(collapse(raw))

    def normalize(self, raw: Optional[str]) -> Enum:
        """Member for *raw*, or the default when it isn't in the table."""
        member = self.lookup(raw)
        return member if member is not None else self.default


def _table(name: str, default: Enum, entries: dict[Enum, tuple[str, ...]]) -> Vocabulary:
    synonyms = {}
    for member, words in entries.items():
        # Every member answers to its own value
        for word in (member.value,) + words:
            synonyms[collapse(word)] = member
    return Vocabulary(name=name, synonyms=synonyms, default=default)


TASK_STATUS = _table("task status", TaskStatus.TODO, {
    TaskStatus.TODO: ("todo", "to do", "to-do", "open", "new", "backlog"),
    TaskStatus.IN_PROGRESS: ("in progress", "in_progress", "in-progress", "doing", "wip", "started"),
    TaskStatus.DONE: ("done", "completed", "complete", "finished", "closed"),
    TaskStatus.BLOCKED: ("blocked", "on hold"),
    TaskStatus.CANCELLED: ("cancelled", "canceled", "wontfix", "won't fix"),
})

TASK_TYPE = _table("task type", TaskType.TASK, {
    TaskType.FEATURE: ("feature", "enhancement"),
    TaskType.BUG: ("bug", "bugfix", "fix", "defect"),
    TaskType.TASK: ("task", "chore"),
    TaskType.EPIC: ("epic",),
    TaskType.STORY: ("story", "user story", "userstory"),
    TaskType.SPIKE: ("spike", "research", "investigation"),
})

PRIORITY = _table("priority", Priority.MEDIUM, {
    Priority.LOW: ("low", "minor", "p3"),
    Priority.MEDIUM: ("medium", "normal", "p2"),
    Priority.HIGH: ("high", "major", "p1"),
    Priority.CRITICAL: ("critical", "urgent", "blocker", "p0"),
})

SPRINT_STATUS = _table("sprint status", SprintStatus.PLANNING, {
    SprintStatus.PLANNING: ("planning", "planned", "upcoming"),
    SprintStatus.ACTIVE: ("active", "current", "in progress", "ongoing"),
    SprintStatus.COMPLETED: ("completed", "complete", "done", "closed", "archived"),
    SprintStatus.CANCELLED: ("cancelled", "canceled", "aborted"),
})

ADR_STATUS = _table("ADR status", AdrStatus.UNSPECIFIED, {
    AdrStatus.PROPOSED: ("proposed", "draft", "under review"),
    AdrStatus.ACCEPTED: ("accepted", "approved", "adopted"),
    AdrStatus.REJECTED: ("rejected", "declined"),
    AdrStatus.DEPRECATED: ("deprecated", "obsolete"),
    AdrStatus.SUPERSEDED: ("superseded", "replaced"),
})

COMPONENT_TYPE = _table("component type", ComponentType.OTHER, {
    ComponentType.MODULE: ("module", "package"),
    ComponentType.SERVICE: ("service", "microservice", "daemon"),
    ComponentType.LIBRARY: ("library", "lib", "crate"),
    ComponentType.DATABASE: ("database", "db", "datastore", "store"),
    ComponentType.API: ("api", "interface", "endpoint"),
})


def normalize(raw: Optional[str], table: Vocabulary) -> Enum:
    """Map *raw* onto *table*'s enumeration, falling back to its default."""
    return table.normalize(raw)
