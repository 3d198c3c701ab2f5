"""
User story extraction from the aggregate user stories file.

Every second-level heading starts a story. Ids are handed out in document
order (US-001, US-002, ...) whatever the heading says. The narrative is
looked for in the usual form:

    As a <persona>, I want <want>, so that <benefit>.

and placeholders stand in when a story doesn't follow it.
"""

import re
from pathlib import Path
from typing import Iterator, Optional

from llmdoc.migration import vocab
from llmdoc.migration.extractors.base import Extractor
from llmdoc.migration.markdown import (
    extract_field,
    extract_items,
    extract_section,
    scan_lines,
)
from llmdoc.migration.models import Category, Span, UserStory

STORY_RE = re.compile(
    r'\bas\s+an?\s+(.+?),?\s+i\s+want\s+(.+?),?\s+so\s+that\s+(.+?)(?:\.|$)',
    re.IGNORECASE | re.MULTILINE,
)
CRITERIA_LINE_RE = re.compile(
    r'^\s*(?:\*\*)?Acceptance Criteria:?(?:\*\*)?:?\s*$',
    re.IGNORECASE | re.MULTILINE,
)


def story_id(index: int) -> str:
    return f"US-{index + 1:03d}"


def _criteria_body(body: str) -> Optional[str]:
    section = extract_section(body, "Acceptance Criteria")
    if section is not None:
        return section

    match = CRITERIA_LINE_RE.search(body)
    if not match:
        return None
    lines = []
    for line, heading in scan_lines(body[match.end():]):
        if heading:
            break
        lines.append(line)
    return '\n'.join(lines)


class UserStoryExtractor(Extractor):
    category = Category.USER_STORY

    def source_root(self) -> Path:
        return self.layout.user_stories_file

    def find_sources(self) -> list[Path]:
        return [self.layout.user_stories_file]

    def split_spans(self, source: Path, text: str) -> Iterator[Span]:
        current = None
        body: list[str] = []
        index = 0

        for line, heading in scan_lines(text):
            if heading and heading.level <= 2:
                if current:
                    current.text = '\n'.join(body)
                    yield current
                    index += 1
                current = None
                body = []
                if heading.level == 2:
                    current = Span(
                        source=source,
                        ref=story_id(index),
                        title=heading.text,
                        text="",
                        index=index,
                    )
            elif current:
                body.append(line)

        if current:
            current.text = '\n'.join(body)
            yield current

    def parse_span(self, span: Span) -> UserStory:
        title = span.title.strip()
        story = UserStory(id=story_id(span.index), title=title, want=title)

        match = STORY_RE.search(span.text.replace('**', ''))
        if match:
            story.persona = match.group(1).strip()
            story.want = match.group(2).strip()
            story.benefit = match.group(3).strip()

        criteria = _criteria_body(span.text)
        if criteria:
            story.acceptance_criteria = extract_items(criteria)

        priority = extract_field(span.text, "Priority")
        if priority:
            story.priority = vocab.PRIORITY.normalize(priority)

        return story
