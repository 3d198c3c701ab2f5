"""Migration report rendering."""

from llmdoc.migration.models import CATEGORY_ORDER, MigrationStats

RULE_WIDTH = 50


def format_report(stats: MigrationStats, dry_run: bool) -> list[str]:
    """Format the end-of-run report as a list of lines for display."""
    lines = ["", "Migration Report", "=" * RULE_WIDTH]
    if dry_run:
        lines.append("Mode: DRY RUN")

    for category in CATEGORY_ORDER:
        counts = stats[category]
        lines.append(f"{category.label}: {counts.found} found, {counts.migrated} migrated")

    if stats.errors:
        lines.append("")
        lines.append(f"Errors encountered ({len(stats.errors)}):")
        for i, error in enumerate(stats.errors, 1):
            lines.append(f"  {i}. {error}")

    lines.append("")
    lines.append(
        f"Total: {stats.total_found} documents found, "
        f"{stats.total_migrated} migrated successfully"
    )

    if dry_run:
        lines.append("")
        lines.append("This was a DRY RUN - no changes were made")
        lines.append("  Run without --dry-run to perform the actual migration")

    return lines
