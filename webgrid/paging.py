"""Offset/limit paging over lazy iterables."""

from itertools import islice
from typing import Iterable, TypeVar

T = TypeVar("T")


def page(
    data: Iterable[T], page_index: int, rows_per_page: int, can_page: bool = True
) -> Iterable[T]:
    """Return the ``page_index``-th window of ``rows_per_page`` items.

    The window is clipped to the end of ``data`` and evaluated lazily.
    When ``can_page`` is false, ``data`` is returned unchanged.
    """
    if not can_page:
        return data

    assert rows_per_page > 0, "rows_per_page must be positive when paging"
    assert page_index >= 0, "page_index must not be negative"

    start = page_index * rows_per_page
    return islice(data, start, start + rows_per_page)


def page_count(total_rows: int, rows_per_page: int) -> int:
    """Number of pages needed to show ``total_rows`` items."""
    assert rows_per_page > 0, "rows_per_page must be positive when paging"
    return (total_rows + rows_per_page - 1) // rows_per_page
