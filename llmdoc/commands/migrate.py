"""
llmdoc migrate - Import markdown documentation into the record store.
"""

import sys
from pathlib import Path

from llmdoc.lib.config import Settings
from llmdoc.migration import MarkdownMigrator, MigrationAborted, MigrationRun
from llmdoc.store import RecordStore


def cmd_migrate(args, settings: Settings) -> int:
    """Migrate the document tree at args.docs_dir (or the configured default).

    Returns 1 only when a source could not be read; per-record problems
    show up in the report instead.
    """
    docs_dir = Path(args.docs_dir) if args.docs_dir else settings.docs_dir
    if not docs_dir.is_dir():
        print(f"ERROR: Documentation directory not found: {docs_dir}")
        return 1

    run = MigrationRun(
        docs_dir=docs_dir,
        dry_run=args.dry_run,
        store=RecordStore(settings.store_dir),
    )

    print(f"Migrating documentation from: {docs_dir}")
    if not args.dry_run:
        print(f"Store: {settings.store_dir}")
    print()

    migrator = MarkdownMigrator(run, show_progress=not args.no_progress and sys.stderr.isatty())
    try:
        migrator.migrate()
    except MigrationAborted as e:
        print(f"ERROR: Migration aborted: {e}")
        return 1

    return 0
