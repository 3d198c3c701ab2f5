"""
Sprint extraction.

The current sprint plan is always Active and every file in the archive
directory is Completed; whatever status the prose claims is not consulted.
The sprint number comes from the filename (sprint-7-review.md -> sprint-7).
"""

import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional

from llmdoc.migration.extractors.base import Extractor, list_markdown
from llmdoc.migration.markdown import extract_items, extract_section, first_heading
from llmdoc.migration.models import Category, Span, Sprint, utcnow
from llmdoc.migration.vocab import SprintStatus

logger = logging.getLogger(__name__)

SPRINT_FILE_RE = re.compile(r'sprint-(\d+)', re.IGNORECASE)
DATE_RANGE_RE = re.compile(r'(\d{4}-\d{2}-\d{2})\s*-\s*(\d{4}-\d{2}-\d{2})')
TASK_REF_RE = re.compile(r'\b([A-Z]+-\d+)\b')

GOAL_SECTIONS = ("Goals", "Goal")


def parse_date_range(text: str) -> Optional[tuple[datetime, datetime]]:
    """First 'YYYY-MM-DD - YYYY-MM-DD' in *text* as a UTC (start, end) pair.

    Start is midnight, end is 23:59:59. None if there is no range or either
    date is not a real calendar date.
    """
    match = DATE_RANGE_RE.search(text)
    if not match:
        return None
    try:
        start = datetime.strptime(match.group(1), "%Y-%m-%d")
        end = datetime.strptime(match.group(2), "%Y-%m-%d")
    except ValueError:
        return None
    return (
        start.replace(tzinfo=timezone.utc),
        end.replace(hour=23, minute=59, second=59, tzinfo=timezone.utc),
    )


class SprintExtractor(Extractor):
    category = Category.SPRINT

    def source_root(self) -> Path:
        return self.layout.sprints_dir

    def find_sources(self) -> list[Path]:
        sources = []
        current = self.layout.current_sprint_file
        if current.exists():
            sources.append(current)
        else:
            logger.debug(f"No current sprint plan at {current}")

        archive = self.layout.sprint_archive_dir
        if archive.is_dir():
            sources.extend(list_markdown(archive))
        return sources

    def split_spans(self, source: Path, text: str) -> Iterator[Span]:
        yield Span(source=source, ref=source.name, text=text)

    def status_for(self, source: Path) -> SprintStatus:
        if self.layout.sprint_archive_dir in source.parents:
            return SprintStatus.COMPLETED
        return SprintStatus.ACTIVE

    def parse_span(self, span: Span) -> Sprint:
        match = SPRINT_FILE_RE.search(span.source.name)
        if not match:
            raise self.fail(span, "Could not extract sprint ID from filename")

        number = match.group(1)
        now = utcnow()
        sprint = Sprint(
            id=f"sprint-{number}",
            name=first_heading(span.text) or f"Sprint {number}",
            status=self.status_for(span.source),
            start_date=now,
            end_date=now,
            created_at=now,
            updated_at=now,
        )

        dates = parse_date_range(span.text)
        if dates:
            sprint.start_date, sprint.end_date = dates

        for name in GOAL_SECTIONS:
            goals = extract_section(span.text, name)
            if goals is not None:
                sprint.goals = extract_items(goals)
                break

        sprint.task_refs = sorted(set(TASK_REF_RE.findall(span.text)))
        return sprint
