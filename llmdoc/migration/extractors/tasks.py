"""
Task extraction from the aggregate tasks file.

Each task is a heading block:

    ### TASK-012: Wire up the export command

    **Status:** In progress
    **Type:** Feature
    **Priority:** High
    **Assignee:** dana
    **Sprint:** sprint-4
    **Story Points:** 5
    **Dependencies:** TASK-010, TASK-011
    **Labels:** cli, export
    **Description:** Free text up to the next bold marker.

The block runs until the next heading of depth 1-3. HTML comments are
removed first, and headings inside fenced code blocks are ignored.
"""

import re
from pathlib import Path
from typing import Iterator, Optional

from llmdoc.migration import vocab
from llmdoc.migration.extractors.base import Extractor
from llmdoc.migration.markdown import (
    extract_field,
    scan_lines,
    split_csv,
    strip_html_comments,
)
from llmdoc.migration.models import Category, Span, Task

TASK_HEADING_RE = re.compile(r'^#{1,3}\s+(\w+-\d+):\s*(.+?)\s*$')
DESCRIPTION_RE = re.compile(r'\*\*Description:\*\*\s*([^*]+)')
SPRINT_REF_RE = re.compile(r'\*\*Sprint:\*\*\s*sprint[-\s]?(\d+)', re.IGNORECASE)

MAX_STORY_POINTS = 255


def parse_story_points(value: Optional[str]) -> Optional[int]:
    """Story points as an int, or None if absent or not a small whole number."""
    if not value or not value.strip():
        return None
    token = value.split()[0]
    if not token.isdecimal():
        return None
    points = int(token)
    return points if points <= MAX_STORY_POINTS else None


class TaskExtractor(Extractor):
    category = Category.TASK

    def source_root(self) -> Path:
        return self.layout.tasks_file

    def find_sources(self) -> list[Path]:
        return [self.layout.tasks_file]

    def split_spans(self, source: Path, text: str) -> Iterator[Span]:
        current = None
        body: list[str] = []
        index = 0

        for line, heading in scan_lines(strip_html_comments(text)):
            if heading and heading.level <= 3:
                if current:
                    current.text = '\n'.join(body)
                    yield current
                    index += 1
                current = None
                body = []
                match = TASK_HEADING_RE.match(line)
                if match:
                    current = Span(
                        source=source,
                        ref=match.group(1),
                        title=match.group(2),
                        text="",
                        index=index,
                    )
            elif current:
                body.append(line)

        if current:
            current.text = '\n'.join(body)
            yield current

    def parse_span(self, span: Span) -> Task:
        body = span.text
        task = Task(id=span.ref, title=span.title.strip())

        status = extract_field(body, "Status")
        if status:
            task.status = vocab.TASK_STATUS.normalize(status)

        task_type = extract_field(body, "Type")
        if task_type:
            task.task_type = vocab.TASK_TYPE.normalize(task_type)

        priority = extract_field(body, "Priority")
        if priority:
            task.priority = vocab.PRIORITY.normalize(priority)

        description = DESCRIPTION_RE.search(body)
        if description and description.group(1).strip():
            task.description = description.group(1).strip()

        task.assignee = extract_field(body, "Assignee")

        sprint = SPRINT_REF_RE.search(body)
        if sprint:
            task.sprint_id = f"sprint-{sprint.group(1)}"

        task.story_points = parse_story_points(extract_field(body, "Story Points"))
        task.dependencies = split_csv(extract_field(body, "Dependencies"))
        task.labels = split_csv(extract_field(body, "Labels"))

        return task
