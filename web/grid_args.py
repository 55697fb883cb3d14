"""Translate query-string parameters into grid sort and page requests."""

from __future__ import annotations

from typing import Mapping
from urllib.parse import urlencode

from flask import request

from config.settings import PAGE_FIELD_NAME, SORT_DIRECTION_FIELD_NAME, SORT_FIELD_NAME
from webgrid.sort_info import SortDirection, SortInfo


def grid_args(args: Mapping | None = None, prefix: str = "") -> tuple[SortInfo, int]:
    """Read the sort request and page index for one grid.

    Parameters
    ----------
    args:
        Query parameters; defaults to ``flask.request.args``.
    prefix:
        Field-name prefix, so several grids can share one page
        (e.g. ``"people_"`` reads ``people_sort``).

    Returns
    -------
    (sort_info, page_index)
        ``page`` is 1-based in the URL; the returned index is 0-based.
        Missing or malformed page numbers map to the first page.
    """
    if args is None:
        args = request.args
    column = (args.get(prefix + SORT_FIELD_NAME) or "").strip()
    direction = SortDirection.from_param(args.get(prefix + SORT_DIRECTION_FIELD_NAME))
    return SortInfo(column, direction), _page_index(args.get(prefix + PAGE_FIELD_NAME))


def sort_url(column: str, prefix: str = "") -> str:
    """Query string that sorts by *column*, toggling direction if already sorted by it."""
    args = request.args.to_dict()
    current, _ = grid_args(args, prefix)

    if current.sort_column == column:
        direction = current.reversed().sort_direction
    else:
        direction = SortDirection.ASCENDING

    args[prefix + SORT_FIELD_NAME] = column
    args[prefix + SORT_DIRECTION_FIELD_NAME] = direction.value
    args.pop(prefix + PAGE_FIELD_NAME, None)  # re-sorting starts from the first page
    return "?" + urlencode(args)


def page_url(page_index: int, prefix: str = "") -> str:
    """Query string for the 0-based *page_index*, keeping the current sort."""
    args = request.args.to_dict()
    args[prefix + PAGE_FIELD_NAME] = str(page_index + 1)
    return "?" + urlencode(args)


def _page_index(value) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return 0
    return max(number - 1, 0)
