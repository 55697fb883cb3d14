"""Sort request value types."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SortDirection(str, Enum):
    """Direction of a single-column sort."""

    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def from_param(cls, value: Optional[str]) -> "SortDirection":
        """Normalise a loose query-string value; anything unknown is ascending."""
        if value and value.strip().lower() in ("desc", "descending"):
            return cls.DESCENDING
        return cls.ASCENDING


@dataclass(frozen=True)
class SortInfo:
    """A requested sort: a dotted column path plus a direction.

    An empty ``sort_column`` means "no sort requested".
    """

    sort_column: str = ""
    sort_direction: SortDirection = SortDirection.ASCENDING

    def is_empty(self) -> bool:
        return not self.sort_column

    def reversed(self) -> "SortInfo":
        """Same column, opposite direction."""
        if self.sort_direction == SortDirection.DESCENDING:
            return SortInfo(self.sort_column, SortDirection.ASCENDING)
        return SortInfo(self.sort_column, SortDirection.DESCENDING)
