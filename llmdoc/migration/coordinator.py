"""
Migration coordinator.

Runs the category extractors in a fixed order (tasks, sprints, user
stories, components, ADRs), hands each record to the store or, in a dry
run, just announces it, and finishes with a report.

Failures are per record: a span that can't be parsed or a write the store
refuses is noted and the run moves on. The one exception is a source file
that exists but can't be read, which aborts the whole run with
MigrationAborted.

Runs are strictly sequential and take no locks; two runs against the same
store at once may interleave their writes.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

from tqdm import tqdm

from llmdoc.lib.layout import SourceLayout, load_layout
from llmdoc.migration.errors import MigrationAborted
from llmdoc.migration.extractors import Extractor, build_extractors
from llmdoc.migration.models import CategoryStats, DocumentRecord, MigrationStats
from llmdoc.migration.report import format_report
from llmdoc.store import StoreError

logger = logging.getLogger(__name__)


@dataclass
class MigrationRun:
    """Context for one migration invocation."""
    docs_dir: Path
    dry_run: bool
    store: Any  # anything with insert(kind, record_id, record)


class MarkdownMigrator:
    """
    Migrates a documentation corpus into the record store.

    Usage:
        run = MigrationRun(docs_dir=Path("docs"), dry_run=True, store=store)
        stats = MarkdownMigrator(run).migrate()
    """

    def __init__(
        self,
        run: MigrationRun,
        out: Callable[[str], None] = print,
        show_progress: bool = False,
        layout: Optional[SourceLayout] = None,
    ):
        self.run = run
        self.out = out
        self.show_progress = show_progress
        self.layout = layout or load_layout(run.docs_dir)

    def migrate(self) -> MigrationStats:
        """Migrate every category and print the report.

        Returns:
            The run's statistics and collected errors

        Raises:
            MigrationAborted: if a source file can't be read
        """
        logger.info(f"Starting migration from {self.run.docs_dir} (dry_run={self.run.dry_run})")
        if self.run.dry_run:
            self.out("Running in DRY RUN mode - no changes will be made")

        stats = MigrationStats()
        for extractor in build_extractors(self.layout):
            category = extractor.category
            if not extractor.available():
                logger.warning(
                    f"{category.label}: {extractor.source_root()} not found, skipping"
                )
                continue

            try:
                counts, errors = self.migrate_category(extractor)
            except MigrationAborted as e:
                logger.error(f"Migration aborted while reading {category.label.lower()}: {e}")
                raise

            stats.categories[category] = counts
            stats.errors.extend(errors)
            logger.info(
                f"{category.label}: {counts.found} found, {counts.migrated} migrated"
            )

        for line in format_report(stats, self.run.dry_run):
            self.out(line)
        return stats

    def migrate_category(self, extractor: Extractor) -> tuple[CategoryStats, list[str]]:
        """Extract and persist one category.

        Returns:
            Counts for the category and the errors collected along the way
        """
        category = extractor.category
        counts = CategoryStats()
        errors: list[str] = []

        self.out(f"Migrating {category.label.lower()}...")
        results = tqdm(
            extractor.extract(),
            desc=category.label,
            unit="doc",
            leave=False,
            disable=not self.show_progress,
        )

        for result in results:
            counts.found += 1

            if result.error is not None:
                message = f"Failed to parse {category.noun} {result.span.ref}: {result.error}"
                logger.warning(message)
                errors.append(message)
                continue

            error = self.persist(result.record)
            if error:
                logger.warning(error)
                errors.append(error)
            else:
                counts.migrated += 1

        return counts, errors

    def persist(self, record: DocumentRecord) -> Optional[str]:
        """Write one record, or announce it in a dry run.

        Returns:
            An error message if the store refused the record, else None
        """
        category = record.category
        if self.run.dry_run:
            self.out(f"  Would create {category.noun}: {record.id} - {record.display_name}")
            return None

        try:
            self.run.store.insert(category.value, record.id, record.to_dict())
        except StoreError as e:
            return f"Failed to create {category.noun} {record.id}: {e}"
        return None


def migrate(docs_dir: Path, store: Any, dry_run: bool = False, **kwargs) -> MigrationStats:
    """Convenience wrapper: build a run and migrate it."""
    run = MigrationRun(docs_dir=docs_dir, dry_run=dry_run, store=store)
    return MarkdownMigrator(run, **kwargs).migrate()
