"""Base classes for selection ranges.

A range is a borrowed, exclusively mutable view ``[start, end]`` (both
inclusive) into a caller-owned buffer. The selection engine is written once
against this interface; concrete ranges differ only in how they read, write
and compare elements, and in whether two elements can be interpolated.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from qselect.exceptions import EmptyRangeError, InvalidRangeError

if TYPE_CHECKING:
    from qselect.config import QSelectConfig


def resolve_bounds(size: int, start: int, end: int | None) -> tuple[int, int]:
    """Validate ``[start, end]`` against a buffer of *size* elements.

    Args:
        size: Number of elements in the backing buffer.
        start: First index of the range.
        end: Last index of the range (inclusive), ``None`` for the last element.

    Returns:
        The validated ``(start, end)`` pair.

    Raises:
        EmptyRangeError: If the buffer is empty or ``end < start``.
        InvalidRangeError: If a bound is not an integer or lies outside the buffer.
    """
    if end is None:
        end = size - 1
    for name, bound in (("start", start), ("end", end)):
        if isinstance(bound, bool) or not isinstance(bound, numbers.Integral):
            raise InvalidRangeError(f"{name} must be an integer, got {bound!r}")
    start, end = int(start), int(end)
    if size == 0:
        raise EmptyRangeError("Cannot select from an empty buffer")
    if start < 0:
        raise InvalidRangeError(f"start={start} is negative")
    if end >= size:
        raise InvalidRangeError(f"end={end} is past the last index {size - 1}")
    if end < start:
        raise EmptyRangeError(f"Range [{start}, {end}] is empty")
    return start, end


class OrderedRange(ABC):
    """Abstract view of a mutable, totally ordered, indexable range.

    Subclasses adapt one kind of backing store. Indices passed to
    ``get``/``set``/``swap`` are absolute buffer indices, not offsets from
    ``start``.
    """

    #: Registry name, assigned by ``RangeRegistry.register()``.
    kind: ClassVar[str] = ""

    #: Whether two elements of this range can be linearly interpolated.
    interpolable: ClassVar[bool] = False

    def __init__(self, data: Any, start: int = 0, end: int | None = None) -> None:
        """Wrap *data* and validate the bounds.

        Args:
            data: Backing buffer. Reordered in place by the engine.
            start: First index of the range.
            end: Last index of the range (inclusive), ``None`` for the last element.

        Raises:
            EmptyRangeError: If the range holds no elements.
            InvalidRangeError: If a bound lies outside the buffer.
        """
        self._data = data
        self._start, self._end = resolve_bounds(len(data), start, end)

    @classmethod
    @abstractmethod
    def accepts(cls, data: Any) -> bool:
        """Return True if this range kind can wrap *data*."""

    @classmethod
    def from_config(
        cls,
        data: Any,
        start: int = 0,
        end: int | None = None,
        config: QSelectConfig | None = None,
    ) -> OrderedRange:
        """Build a range, reading any kind-specific options from *config*."""
        return cls(data, start, end)

    @property
    def data(self) -> Any:
        """The backing buffer."""
        return self._data

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    def __len__(self) -> int:
        return self._end - self._start + 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}(start={self._start}, end={self._end})"

    def get(self, index: int) -> Any:
        return self._data[index]

    def set(self, index: int, value: Any) -> None:
        self._data[index] = value

    def swap(self, a: int, b: int) -> None:
        """Exchange the elements at indices *a* and *b*."""
        data = self._data
        data[a], data[b] = data[b], data[a]

    @staticmethod
    def compare(a: Any, b: Any) -> int:
        """Three-way comparison of two element values.

        Returns:
            Negative if ``a < b``, zero if equal, positive if ``a > b``.
        """
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def value_at(self, index: int) -> Any:
        """Return the element at *index* as handed back to callers."""
        return self._data[index]


class InterpolableRange(OrderedRange):
    """Range whose elements support linear interpolation.

    Only interpolable ranges average the two middle elements of an
    even-length median or mix neighbours for fractional quantiles.
    """

    interpolable: ClassVar[bool] = True

    @abstractmethod
    def interpolate(self, low: Any, high: Any, fraction: float) -> Any:
        """Return ``low + (high - low) * fraction``.

        Args:
            low: Lower order statistic.
            high: Next higher order statistic.
            fraction: Position between the two, in ``[0, 1)``.
        """
