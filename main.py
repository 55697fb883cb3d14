#!/usr/bin/env python3
"""
WebGrid - sort and page a JSON record file from the command line.

Usage:
    python main.py rows <file.json> [--sort <column>] [--dir asc|desc] [--page N] [--rows N]
                                    [--default-sort <column>] [--no-paging] [--no-sorting]
    python main.py count <file.json> [--rows N]
"""

import argparse
import json
import logging
import sys

from config.settings import DEFAULT_ROWS_PER_PAGE, LOG_FORMAT, LOG_LEVEL
from webgrid import SortDirection, SortInfo, WebGrid

logger = logging.getLogger(__name__)


def _load_records(path):
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of records")
    return data


def _build_grid(args):
    records = _load_records(args.file)
    return WebGrid(
        records,
        default_sort=getattr(args, "default_sort", None) or None,
        rows_per_page=args.rows,
        can_page=not getattr(args, "no_paging", False),
        can_sort=not getattr(args, "no_sorting", False),
    )


# ============================================================
# Commands
# ============================================================

def cmd_rows(args):
    """Print one page of records."""
    grid = _build_grid(args)
    sort_info = SortInfo(args.sort or "", SortDirection.from_param(args.dir))
    rows = grid.get_rows(sort_info, max(args.page - 1, 0))

    if not rows:
        print("No rows.")
    for row in rows:
        print(f"  {row.row_index:4d}  {json.dumps(row.value, default=str)}")
    print(f"Page {args.page} of {grid.page_count} ({grid.total_row_count} rows)")


def cmd_count(args):
    """Print the total record count and page count."""
    grid = _build_grid(args)
    print(f"Rows:  {grid.total_row_count}")
    print(f"Pages: {grid.page_count}")


# ============================================================
# Argument parser
# ============================================================

def build_parser():
    parser = argparse.ArgumentParser(
        description="Sort and page JSON record files",
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("rows", help="Print one page of records")
    p.add_argument("file", help="JSON file containing an array of records")
    p.add_argument("--sort", default="", help="Column to sort by")
    p.add_argument("--dir", default="asc", choices=["asc", "desc"], help="Sort direction")
    p.add_argument("--page", type=int, default=1, help="1-based page number")
    p.add_argument("--rows", type=int, default=DEFAULT_ROWS_PER_PAGE, help="Rows per page")
    p.add_argument("--default-sort", default="", help="Column used when --sort does not resolve")
    p.add_argument("--no-paging", action="store_true", help="Print every record")
    p.add_argument("--no-sorting", action="store_true", help="Ignore --sort")
    p.set_defaults(func=cmd_rows)

    p = sub.add_parser("count", help="Print record and page counts")
    p.add_argument("file", help="JSON file containing an array of records")
    p.add_argument("--rows", type=int, default=DEFAULT_ROWS_PER_PAGE, help="Rows per page")
    p.set_defaults(func=cmd_count)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        sys.exit(2)


if __name__ == "__main__":
    main()
