"""
Architecture Decision Record extraction.

Only files named like ADR007-use-sqlite.md count as ADRs; anything else in
the directory (README.md, notes.md, ADR-template.md) is passed over
without being counted.
"""

import logging
import re
from pathlib import Path
from typing import Iterator, Optional

from llmdoc.migration import vocab
from llmdoc.migration.extractors.base import Extractor, list_markdown
from llmdoc.migration.markdown import (
    extract_field,
    extract_items,
    extract_section,
    first_heading,
)
from llmdoc.migration.models import Adr, Category, Span
from llmdoc.migration.vocab import AdrStatus

logger = logging.getLogger(__name__)

ADR_FILE_RE = re.compile(r'^ADR[-_]?(\d+)', re.IGNORECASE)
ADR_REF_RE = re.compile(r'\bADR[-_ ]?(\d+)\b')


def adr_id(number: str) -> str:
    return f"ADR{int(number):03d}"


def adr_id_from_filename(name: str) -> Optional[str]:
    match = ADR_FILE_RE.match(name)
    return adr_id(match.group(1)) if match else None


def _status_member(status: str) -> AdrStatus:
    member = vocab.ADR_STATUS.lookup(status)
    if member is None:
        # "Superseded by ADR012", "Accepted (2024-01-10)"
        member = vocab.ADR_STATUS.lookup(status.split()[0])
    return member or AdrStatus.UNSPECIFIED


def _declared_status(text: str) -> Optional[str]:
    section = extract_section(text, "Status")
    if section:
        return section.splitlines()[0].strip()
    return extract_field(text, "Status")


class AdrExtractor(Extractor):
    category = Category.ADR

    def source_root(self) -> Path:
        return self.layout.adrs_dir

    def find_sources(self) -> list[Path]:
        sources = []
        for path in list_markdown(self.layout.adrs_dir):
            if adr_id_from_filename(path.name) is None:
                logger.debug(f"Skipping {path.name}: not an ADR file")
                continue
            sources.append(path)
        return sources

    def split_spans(self, source: Path, text: str) -> Iterator[Span]:
        yield Span(source=source, ref=adr_id_from_filename(source.name), text=text)

    def parse_span(self, span: Span) -> Adr:
        text = span.text
        adr = Adr(id=span.ref, title=first_heading(text) or "")

        status = _declared_status(text)
        adr.status = _status_member(status) if status else AdrStatus.ACCEPTED

        adr.context = extract_section(text, "Context") or ""
        adr.decision = extract_section(text, "Decision") or ""
        adr.consequences = extract_section(text, "Consequences") or ""

        alternatives = extract_section(text, "Alternatives")
        if alternatives:
            adr.alternatives = extract_items(alternatives)

        related = {adr_id(n) for n in ADR_REF_RE.findall(text)}
        related.discard(adr.id)
        adr.related_adrs = sorted(related)
        return adr
