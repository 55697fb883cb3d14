"""Sort comparator construction for a resolved column."""

import typing
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from webgrid.sort_info import SortDirection

TElement = TypeVar("TElement")
TValue = TypeVar("TValue")


class IncomparableValuesError(TypeError):
    """Two projected sort keys cannot be ordered relative to each other."""

    def __init__(self, left: Any, right: Any):
        super().__init__(
            f"cannot order {type(left).__name__!r} against {type(right).__name__!r}"
        )
        self.left = left
        self.right = right


class _SortKey:
    """Wraps a projected value so comparison faults are reported distinctly."""

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __lt__(self, other):
        try:
            return self.value < other.value
        except TypeError as exc:
            raise IncomparableValuesError(self.value, other.value) from exc


class SortComparator(Generic[TElement, TValue]):
    """Orders a sequence of ``TElement`` by the natural order of a ``TValue`` key.

    Instances are specialised per concrete element type and value type via
    :func:`build_comparator`. Sorting is stable in both directions, so records
    with equal keys keep their source order.
    """

    def __init__(
        self,
        key: Callable[[TElement], TValue],
        direction: SortDirection = SortDirection.ASCENDING,
    ):
        self._key = key
        self.direction = direction

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESCENDING

    def sort_key(self, element: TElement) -> _SortKey:
        return _SortKey(self._key(element))

    def apply(self, data: Iterable[TElement]) -> Iterator[TElement]:
        """Return a lazy iterator; the sort runs when it is first consumed."""
        return self._ordered(data)

    def _ordered(self, data: Iterable[TElement]) -> Iterator[TElement]:
        yield from sorted(data, key=self.sort_key, reverse=self.descending)


def build_comparator(
    element_type: Any,
    key: Callable[[Any], Any],
    direction: SortDirection,
    value_type: Optional[Any] = None,
) -> SortComparator:
    """Build a comparator for ``element_type`` ordered by ``key``.

    ``value_type`` defaults to the key's return annotation, or ``Any``.
    """
    if value_type is None:
        value_type = _key_value_type(key)
    if element_type is None:
        element_type = Any
    return SortComparator[element_type, value_type](key, direction)


def _key_value_type(key: Callable) -> Any:
    value_type = getattr(key, "value_type", None)
    if value_type is not None:
        return value_type
    try:
        return typing.get_type_hints(key).get("return", Any)
    except (NameError, TypeError, AttributeError):
        return Any
