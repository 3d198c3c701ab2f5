"""
llmdoc list / llmdoc show - Inspect migrated records.
"""

import json

from llmdoc.lib.config import Settings
from llmdoc.migration import vocab
from llmdoc.store import RecordStore, StoreError

# Status field and vocabulary per kind, for --status filtering
STATUS_FIELDS = {
    "tasks": ("status", vocab.TASK_STATUS),
    "sprints": ("status", vocab.SPRINT_STATUS),
    "adrs": ("status", vocab.ADR_STATUS),
    "components": ("component_type", vocab.COMPONENT_TYPE),
    "user_stories": ("priority", vocab.PRIORITY),
}


def _label(record: dict) -> str:
    return record.get("title") or record.get("name") or ""


def cmd_list(args, settings: Settings) -> int:
    """List stored records of one kind, optionally filtered by status."""
    store = RecordStore(settings.store_dir)
    records = store.list(args.kind)

    if args.status:
        field_name, table = STATUS_FIELDS[args.kind]
        wanted = table.lookup(args.status)
        if wanted is None:
            print(f"ERROR: Unknown {table.name} '{args.status}'")
            return 1
        records = [r for r in records if r.get(field_name) == wanted.value]

    if not records:
        print(f"No {args.kind} found.")
        return 0

    field_name = STATUS_FIELDS[args.kind][0]
    width = max(len(r.get("id", "")) for r in records)
    for record in records:
        print(f"{record.get('id', ''):<{width}}  {record.get(field_name, ''):<12}  {_label(record)}")
    print()
    print(f"{len(records)} {args.kind}")
    return 0


def cmd_show(args, settings: Settings) -> int:
    """Print one stored record as JSON."""
    store = RecordStore(settings.store_dir)
    try:
        record = store.get(args.kind, args.id)
    except StoreError as e:
        print(f"ERROR: {e}")
        return 1
    if record is None:
        print(f"ERROR: {args.kind}/{args.id} not found")
        return 1

    print(json.dumps(record, indent=2, ensure_ascii=False))
    return 0
