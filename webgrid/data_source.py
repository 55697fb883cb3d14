"""
Grid data sources.

A data source turns a grid's records into the rows of one page. The default
:class:`WebGridDataSource` sorts by the requested column (falling back to the
grid's default sort when the column does not resolve), pages the result and
materializes it. :class:`PreComputedDataSource` serves rows that the caller
has already sorted and paged.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence, Sized
from typing import Any, Iterable, Optional

from config.settings import DEFAULT_ROWS_PER_PAGE
from webgrid.columns import resolve_column
from webgrid.paging import page
from webgrid.row import WebGridRow
from webgrid.sort_info import SortInfo
from webgrid.sorting import IncomparableValuesError, build_comparator

logger = logging.getLogger(__name__)


class GridDataSource(ABC):
    """Supplies the rows and total row count for a grid."""

    @property
    @abstractmethod
    def total_row_count(self) -> int:
        ...

    @abstractmethod
    def get_rows(self, sort_info: Optional[SortInfo], page_index: int) -> list[WebGridRow]:
        ...


class WebGridDataSource(GridDataSource):
    """Default data source that sorts results if a sort column is specified.

    ``values`` must be re-iterable: it is enumerated once per materialization,
    and a second time when the sorted page has to be discarded because its
    keys could not be compared.
    """

    def __init__(
        self,
        grid,
        values: Iterable[Any],
        element_type: Any,
        can_page: bool = True,
        can_sort: bool = True,
        default_sort: Optional[SortInfo] = None,
        rows_per_page: int = DEFAULT_ROWS_PER_PAGE,
        sample: Any = None,
    ):
        assert grid is not None
        assert values is not None
        assert not can_page or rows_per_page > 0

        if sample is None and isinstance(values, Sequence) and len(values) > 0:
            sample = values[0]

        self._grid = grid
        self._values = values
        self._element_type = element_type
        self._can_page = can_page
        self._can_sort = can_sort
        self._sample = sample
        self._default_sort = default_sort
        self._rows_per_page = rows_per_page

    @property
    def total_row_count(self) -> int:
        if isinstance(self._values, Sized):
            return len(self._values)
        return sum(1 for _ in self._values)

    @property
    def default_sort(self) -> Optional[SortInfo]:
        return self._default_sort

    @property
    def rows_per_page(self) -> int:
        return self._rows_per_page

    def get_rows(self, sort_info: Optional[SortInfo], page_index: int) -> list[WebGridRow]:
        """Sort, page and materialize the rows of one page."""
        row_data = self._values

        if self._can_sort:
            row_data = self._sort(row_data, sort_info or SortInfo())

        values = self._materialize(self._page(row_data, page_index))
        if values is None:
            # Keys could not be ordered; treat them as equivalent and serve
            # the unsorted page. The sort is not attempted again.
            values = list(self._page(self._values, page_index))

        return [
            WebGridRow(self._grid, value=value, row_index=index)
            for index, value in enumerate(values)
        ]

    def _page(self, data: Iterable[Any], page_index: int) -> Iterable[Any]:
        return page(data, page_index, self.rows_per_page, self._can_page)

    def _materialize(self, data: Iterable[Any]) -> Optional[list]:
        """Force the lazy pipeline; None if the sort keys were not comparable."""
        try:
            return list(data)
        except IncomparableValuesError as exc:
            logger.info("Sort keys are not comparable (%s); returning rows unsorted", exc)
            return None

    def _sort(self, data: Iterable[Any], sort_info: SortInfo) -> Iterable[Any]:
        default = self.default_sort
        if sort_info.is_empty() and (default is None or default.is_empty()):
            return data
        return self._sort_by(data, sort_info)

    def _sort_by(self, data: Iterable[Any], sort_info: SortInfo) -> Iterable[Any]:
        column = sort_info.sort_column
        custom = self._grid.custom_sorters.get(column) if column else None

        if custom is not None:
            comparator = build_comparator(self._element_type, custom, sort_info.sort_direction)
            return comparator.apply(data)

        accessor = resolve_column(self._element_type, column, self._sample)
        if accessor is None:
            default = self.default_sort
            if default is not None and sort_info != default and not default.is_empty():
                logger.debug(
                    "Column %r does not resolve; falling back to default sort %r",
                    column, default.sort_column,
                )
                return self._sort_by(data, default)
            logger.debug("Column %r does not resolve; rows left unsorted", column)
            return data

        comparator = build_comparator(
            self._element_type, accessor, sort_info.sort_direction,
            value_type=accessor.value_type,
        )
        return comparator.apply(data)


class PreComputedDataSource(GridDataSource):
    """Rows already sorted and paged by the caller, with a known total count."""

    def __init__(self, grid, values: Iterable[Any], total_rows: int):
        assert grid is not None
        assert values is not None

        self._grid = grid
        self._values = values
        self._total_rows = total_rows

    @property
    def total_row_count(self) -> int:
        return self._total_rows

    def get_rows(self, sort_info: Optional[SortInfo], page_index: int) -> list[WebGridRow]:
        return [
            WebGridRow(self._grid, value=value, row_index=index)
            for index, value in enumerate(self._values)
        ]
