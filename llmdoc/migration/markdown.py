"""
Markdown primitives shared by every extractor.

Only what the documentation conventions need: ATX headings, sections
delimited by them, bullet lists and bold key-value lines.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional

HEADING_RE = re.compile(r'^(#{1,6})\s+(.*?)(?:\s+#+)?\s*$')
# Opening or closing line of a fenced code block
FENCE_RE = re.compile(r'^\s{0,3}(`{3,}|~{3,})')
HTML_COMMENT_RE = re.compile(r'<!--.*?(?:-->|\Z)', re.DOTALL)
# "**bold**" and "---" are not bullets
BULLET_RE = re.compile(r'^(?:[-*](?=\s|$)|\[[ xX]?\])\s*(.*)$')


@dataclass
class Heading:
    level: int
    text: str
    line_index: int


def parse_heading(line: str) -> Optional[Heading]:
    """Return the heading on *line*, or None if it isn't one."""
    match = HEADING_RE.match(line)
    if not match:
        return None
    return Heading(level=len(match.group(1)), text=match.group(2).strip(), line_index=-1)


def strip_html_comments(text: str) -> str:
    """Remove HTML comments, keeping the text around them.

    An unclosed comment runs to the end of the text.
    """
    return HTML_COMMENT_RE.sub('', text)


def scan_lines(text: str) -> Iterator[tuple[str, Optional[Heading]]]:
    """Yield each line of *text* with the heading it holds, or None.

    Lines inside fenced code blocks (``` or ~~~) never count as headings.
    """
    fence = None
    for i, line in enumerate(text.splitlines()):
        match = FENCE_RE.match(line)
        if fence:
            marker = match.group(1) if match else ''
            if marker[:1] == fence[0] and len(marker) >= len(fence):
                fence = None
            yield line, None
            continue
        if match:
            fence = match.group(1)
            yield line, None
            continue

        heading = parse_heading(line)
        if heading:
            heading.line_index = i
        yield line, heading


def iter_headings(text: str) -> list[Heading]:
    """All headings in *text* outside code fences, in document order."""
    return [heading for _, heading in scan_lines(text) if heading]


def first_heading(text: str, level: int = 1) -> Optional[str]:
    """Text of the first heading at exactly *level*, or None."""
    for heading in iter_headings(text):
        if heading.level == level and heading.text:
            return heading.text
    return None


def extract_section(text: str, section_name: str) -> Optional[str]:
    """Return the body under the heading named *section_name*.

    The heading text must equal *section_name* exactly (case-sensitive,
    surrounding whitespace ignored). The body runs from the line after the
    heading to the next heading at the same or a shallower depth, or to the
    end of the text, and is returned trimmed. Returns None when no such
    heading exists. Mentions of the name outside a heading line, and
    heading-like lines inside code fences, are ignored.
    """
    scanned = list(scan_lines(text))
    wanted = section_name.strip()

    for i, (_, heading) in enumerate(scanned):
        if heading is None or heading.text != wanted:
            continue
        body = []
        for line, nested in scanned[i + 1:]:
            if nested and nested.level <= heading.level:
                break
            body.append(line)
        return '\n'.join(body).strip()

    return None


def extract_items(body: str) -> list[str]:
    """Bullet items in *body*, marker stripped, empties dropped.

    Recognized markers are '-', '*' and checkboxes ('[ ]', '[x]').
    Lines that are not bullets are ignored.
    """
    items = []
    for line in body.splitlines():
        stripped = line.strip()
        match = BULLET_RE.match(stripped)
        if not match:
            continue
        item = match.group(1).strip()
        # "- [ ] thing" carries a second marker
        nested = BULLET_RE.match(item)
        if nested and item.startswith('['):
            item = nested.group(1).strip()
        if item:
            items.append(item)
    return items


def extract_field(body: str, name: str) -> Optional[str]:
    """Value of a bold key-value line such as '**Status:** In progress'."""
    match = re.search(rf'\*\*{re.escape(name)}:\*\*[ \t]*([^\n]+)', body)
    if not match:
        return None
    value = match.group(1).strip()
    return value or None


def split_csv(value: Optional[str]) -> list[str]:
    """Split a comma-separated value, trimming and dropping empties."""
    if not value:
        return []
    return [part.strip() for part in value.split(',') if part.strip()]
