"""A single row of a materialized grid page."""

from dataclasses import dataclass, field
from typing import Any

from webgrid.columns import get_field

_MISSING = object()


@dataclass(frozen=True)
class WebGridRow:
    """A source record plus its 0-based position within the returned page."""

    grid: Any = field(repr=False, compare=False)
    value: Any
    row_index: int

    def __getitem__(self, name: str) -> Any:
        result = get_field(self.value, name, _MISSING)
        if result is _MISSING:
            raise KeyError(name)
        return result

    def get(self, name: str, default: Any = None) -> Any:
        """Read a member of the wrapped record, or ``default`` if it has none."""
        return get_field(self.value, name, default)
