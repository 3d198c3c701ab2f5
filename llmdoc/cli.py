#!/usr/bin/env python3
"""llmdoc CLI entrypoint."""

import sys
import argparse
from pathlib import Path

from llmdoc.lib.config import load_settings
from llmdoc.lib.logsetup import setup_logging
from llmdoc.commands import migrate as cmd_migrate_module
from llmdoc.commands import records as cmd_records_module
from llmdoc.store import KINDS


def get_settings(args):
    """Load settings from --config or ./llmdoc.env and set up logging."""
    try:
        settings = load_settings(Path(args.config) if args.config else None)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: {e}")
        sys.exit(2)

    setup_logging(
        console_level=settings.log_level,
        log_file=settings.log_file,
        file_level=settings.log_file_level,
        verbose=args.verbose,
    )
    return settings


def cmd_migrate(args):
    settings = get_settings(args)
    return cmd_migrate_module.cmd_migrate(args, settings)


def cmd_list(args):
    settings = get_settings(args)
    return cmd_records_module.cmd_list(args, settings)


def cmd_show(args):
    settings = get_settings(args)
    return cmd_records_module.cmd_show(args, settings)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='llmdoc', description='Project documentation records')
    parser.add_argument('--config', '-c', help='Settings file (default: ./llmdoc.env if present)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging on the console')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # llmdoc migrate
    p_migrate = subparsers.add_parser('migrate', help='Import markdown docs into the store')
    p_migrate.add_argument('docs_dir', nargs='?', help='Documentation root (default: DOCS_DIR setting)')
    p_migrate.add_argument('--dry-run', action='store_true', help='Parse everything but write nothing')
    p_migrate.add_argument('--no-progress', action='store_true', help='Hide progress bars')
    p_migrate.set_defaults(func=cmd_migrate)

    # llmdoc list
    p_list = subparsers.add_parser('list', help='List stored records')
    p_list.add_argument('kind', choices=KINDS, help='Record kind')
    p_list.add_argument('--status', '-s', help='Only records with this status (any common spelling)')
    p_list.set_defaults(func=cmd_list)

    # llmdoc show
    p_show = subparsers.add_parser('show', help='Show one stored record')
    p_show.add_argument('kind', choices=KINDS, help='Record kind')
    p_show.add_argument('id', help='Record ID (e.g., TASK-001, ADR007)')
    p_show.set_defaults(func=cmd_show)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
