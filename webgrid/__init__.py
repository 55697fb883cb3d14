"""
WebGrid Sort/Page Engine.

Sorts, pages and materializes arbitrary record sequences for grid views.

Features:
- Dotted column paths over static record types ("Address.City")
- Runtime property bags (dicts, SimpleNamespace, get(name) objects)
- Custom per-column sorters that override member lookup
- Fallback to a default sort when the requested column does not resolve
- Unsorted recovery when sort keys cannot be compared
"""

from webgrid.columns import ColumnAccessor, DynamicFieldAccess, resolve_column
from webgrid.data_source import GridDataSource, PreComputedDataSource, WebGridDataSource
from webgrid.grid import WebGrid
from webgrid.row import WebGridRow
from webgrid.sort_info import SortDirection, SortInfo
from webgrid.sorting import IncomparableValuesError, SortComparator, build_comparator

__all__ = [
    "ColumnAccessor",
    "DynamicFieldAccess",
    "resolve_column",
    "GridDataSource",
    "PreComputedDataSource",
    "WebGridDataSource",
    "WebGrid",
    "WebGridRow",
    "SortDirection",
    "SortInfo",
    "IncomparableValuesError",
    "SortComparator",
    "build_comparator",
]
