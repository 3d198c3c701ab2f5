"""
Common shape of a category extractor.

An extractor finds its source files, cuts each into spans holding one
record apiece, and turns every span into a record or an ExtractionError.
extract() strings the three steps together lazily, in document order.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from llmdoc.lib.layout import SourceLayout
from llmdoc.migration.errors import ExtractionError, MigrationAborted
from llmdoc.migration.models import Category, DocumentRecord, Span

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """One span and what became of it. Exactly one of record/error is set."""
    span: Span
    record: Optional[DocumentRecord] = None
    error: Optional[ExtractionError] = None


def read_source(path: Path) -> str:
    """Read a source file that is known to exist.

    Raises:
        MigrationAborted: on any I/O or decoding failure
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MigrationAborted(path, e) from e


def list_markdown(directory: Path) -> list[Path]:
    """Markdown files directly inside *directory*, sorted by name.

    Raises:
        MigrationAborted: if the directory can't be listed
    """
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise MigrationAborted(directory, e) from e
    return sorted(p for p in entries if p.suffix == ".md" and p.is_file())


class Extractor:
    """Base class; subclasses supply the category's grammar."""

    category: Category

    def __init__(self, layout: SourceLayout):
        self.layout = layout

    def source_root(self) -> Path:
        """File or directory whose absence means the corpus has no such documents."""
        raise NotImplementedError

    def available(self) -> bool:
        return self.source_root().exists()

    def find_sources(self) -> list[Path]:
        raise NotImplementedError

    def split_spans(self, source: Path, text: str) -> Iterator[Span]:
        raise NotImplementedError

    def parse_span(self, span: Span) -> DocumentRecord:
        """Build one record from *span*.

        Raises:
            ExtractionError: when a required field can't be recovered
        """
        raise NotImplementedError

    def fail(self, span: Span, message: str) -> ExtractionError:
        return ExtractionError(self.category.noun, span.ref, message)

    def extract(self) -> Iterator[ExtractionResult]:
        """Yield a result per span across all sources.

        Raises:
            MigrationAborted: if a source can't be read
        """
        for source in self.find_sources():
            text = read_source(source)
            for span in self.split_spans(source, text):
                try:
                    record = self.parse_span(span)
                except ExtractionError as e:
                    yield ExtractionResult(span=span, error=e)
                    continue
                logger.debug(f"Parsed {self.category.noun} {record.id} from {source.name}")
                yield ExtractionResult(span=span, record=record)
