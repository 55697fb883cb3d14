"""WebGrid: configuration and entry point for sorted, paged row sets."""

import logging
from collections.abc import Mapping
from types import MappingProxyType, SimpleNamespace
from typing import Any, Callable, Iterable, Optional, Union

from config.settings import DEFAULT_ROWS_PER_PAGE
from webgrid.columns import declared_members
from webgrid.data_source import GridDataSource, PreComputedDataSource, WebGridDataSource
from webgrid.paging import page_count
from webgrid.row import WebGridRow
from webgrid.sort_info import SortDirection, SortInfo

logger = logging.getLogger(__name__)


class WebGrid:
    """Sortable, pageable view over a sequence of records.

    Usage:
        grid = WebGrid(people, default_sort="name", rows_per_page=25)
        grid.add_sorter("name", lambda p: len(p.name))
        rows = grid.get_rows(SortInfo("age", SortDirection.DESCENDING), page_index=0)
    """

    def __init__(
        self,
        source: Optional[Iterable[Any]] = None,
        element_type: Any = None,
        default_sort: Union[SortInfo, str, None] = None,
        rows_per_page: int = DEFAULT_ROWS_PER_PAGE,
        can_page: bool = True,
        can_sort: bool = True,
    ):
        if can_page and rows_per_page < 1:
            raise ValueError("rows_per_page must be at least 1 when paging is enabled")

        self._default_sort = _as_sort_info(default_sort)
        self._rows_per_page = rows_per_page
        self._can_page = can_page
        self._can_sort = can_sort

        self._custom_sorters: dict[str, Callable[[Any], Any]] = {}
        self._data_source: Optional[GridDataSource] = None
        self._element_type: Any = None
        self._sample: Any = None

        if source is not None:
            self.bind(source, element_type=element_type)

    # ---- Configuration ----

    # Fixed at construction; the data source takes a copy when bound.

    @property
    def default_sort(self) -> Optional[SortInfo]:
        return self._default_sort

    @property
    def rows_per_page(self) -> int:
        return self._rows_per_page

    @property
    def can_page(self) -> bool:
        return self._can_page

    @property
    def can_sort(self) -> bool:
        return self._can_sort

    @property
    def custom_sorters(self) -> Mapping:
        """Read-only view of the registered column -> key function sorters."""
        return MappingProxyType(self._custom_sorters)

    def add_sorter(self, column: str, key: Callable[[Any], Any]) -> "WebGrid":
        """Sort ``column`` by ``key`` instead of by the record's own member."""
        if not column:
            raise ValueError("column is required")
        if not callable(key):
            raise TypeError("key must be callable")
        self._custom_sorters[column] = key
        return self

    def bind(
        self,
        source: Iterable[Any],
        element_type: Any = None,
        auto_sort_and_page: bool = True,
        row_count: Optional[int] = None,
    ) -> "WebGrid":
        """Attach the records to display.

        Args:
            source: A re-iterable collection of records.
            element_type: Record type; inferred from the first record if omitted.
            auto_sort_and_page: When False, ``source`` is taken to be the
                already sorted and paged rows of the current page.
            row_count: Total number of records; required when
                ``auto_sort_and_page`` is False.
        """
        if self._data_source is not None:
            raise RuntimeError("WebGrid is already bound to a data source")
        if source is None:
            raise ValueError("source is required")
        if iter(source) is source:
            raise TypeError("source must be re-iterable, not a one-shot iterator")

        sample = next(iter(source), None)
        if element_type is None and sample is not None:
            element_type = type(sample)
        self._element_type = element_type
        self._sample = sample

        if auto_sort_and_page:
            self._data_source = WebGridDataSource(
                self,
                source,
                element_type,
                can_page=self.can_page,
                can_sort=self.can_sort,
                default_sort=self.default_sort,
                rows_per_page=self.rows_per_page,
                sample=sample,
            )
        else:
            if row_count is None:
                raise ValueError("row_count is required when auto_sort_and_page is disabled")
            self._data_source = PreComputedDataSource(self, source, row_count)

        logger.debug(
            "Bound %s source (element type %s)",
            type(self._data_source).__name__,
            getattr(element_type, "__name__", element_type),
        )
        return self

    # ---- Queries ----

    @property
    def element_type(self) -> Any:
        return self._element_type

    @property
    def total_row_count(self) -> int:
        return self._bound_source().total_row_count

    @property
    def page_count(self) -> int:
        if not self.can_page:
            return 1
        return page_count(self.total_row_count, self.rows_per_page)

    @property
    def column_names(self) -> list[str]:
        """Default column names derived from the record shape."""
        if isinstance(self._sample, Mapping):
            return [str(name) for name in self._sample]
        if isinstance(self._sample, SimpleNamespace):
            return list(vars(self._sample))
        names = declared_members(self._element_type)
        if not names and hasattr(self._sample, "__dict__"):
            names = [name for name in vars(self._sample) if not name.startswith("_")]
        return names

    def get_rows(self, sort_info: Optional[SortInfo] = None, page_index: int = 0) -> list[WebGridRow]:
        """Rows of page ``page_index`` ordered by ``sort_info``."""
        return self._bound_source().get_rows(sort_info, page_index)

    def _bound_source(self) -> GridDataSource:
        if self._data_source is None:
            raise RuntimeError("WebGrid is not bound to a data source")
        return self._data_source


def _as_sort_info(value: Union[SortInfo, str, None]) -> Optional[SortInfo]:
    if value is None or isinstance(value, SortInfo):
        return value
    return SortInfo(value, SortDirection.ASCENDING)
