"""Module-level convenience functions.

Each call wraps the buffer in the matching range kind, builds a
:class:`~qselect.selection.engine.QuickSelect` from the configuration and
returns the value. Nothing is cached between calls.

Note: the buffer is **modified** in place by every function here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from qselect.config import QSelectConfig
from qselect.ranges.registry import RangeRegistry
from qselect.selection.engine import QuickSelect

if TYPE_CHECKING:
    from qselect.ranges.base import OrderedRange


def _prepare(
    data: Any,
    start: int,
    end: int | None,
    kind: str | None,
    config: QSelectConfig | None,
) -> tuple[QuickSelect, OrderedRange]:
    config = config if config is not None else QSelectConfig()
    rng = RangeRegistry.wrap(data, start, end, kind=kind, config=config)
    return QuickSelect(config), rng


def quickselect(
    data: Any,
    rank: int,
    start: int = 0,
    end: int | None = None,
    *,
    kind: str | None = None,
    config: QSelectConfig | None = None,
) -> Any:
    """Return the element of rank *rank* in ``data[start..=end]``.

    Afterwards ``data[rank]`` holds that element, everything in
    ``[start, rank)`` is ``<=`` it and everything in ``(rank, end]`` is ``>=`` it.

    Args:
        data: Mutable buffer: numpy array or mutable sequence.
        rank: Absolute index in ``[start, end]`` (0 = smallest when start is 0).
        start: First index of the range.
        end: Last index of the range (inclusive), ``None`` for the last element.
        kind: Force a range kind (``"numeric"``, ``"object"``, ``"sequence"``).
        config: Engine configuration; loaded from the environment if ``None``.

    Returns:
        The selected element.

    Raises:
        EmptyRangeError: If the range holds no elements.
        InvalidRangeError: If the bounds do not fit the buffer.
        InvalidRankError: If *rank* lies outside ``[start, end]``.
        UnsupportedBufferError: If the buffer cannot be wrapped.
    """
    engine, rng = _prepare(data, start, end, kind, config)
    return engine.select(rng, rank)


select = quickselect


def median(
    data: Any,
    start: int = 0,
    end: int | None = None,
    *,
    kind: str | None = None,
    config: QSelectConfig | None = None,
) -> Any:
    """Return the median of ``data[start..=end]``.

    For an even number of elements, numeric numpy arrays give the mean of
    the two middle values; object arrays and lists give the lower one.

    >>> import numpy as np
    >>> median(np.array([4.0, 1.0, 3.0, 2.0]))
    2.5
    >>> median([4, 1, 3, 2])
    2
    """
    engine, rng = _prepare(data, start, end, kind, config)
    return engine.median(rng)


def quantile(
    data: Any,
    q: float,
    start: int = 0,
    end: int | None = None,
    *,
    kind: str | None = None,
    config: QSelectConfig | None = None,
) -> Any:
    """Return the value at fraction *q* of ``data[start..=end]``.

    The target position is ``start + (length - 1) * q``. Numeric numpy
    arrays interpolate linearly between neighbouring order statistics;
    object arrays and lists return the element at the floor position.

    Raises:
        InvalidQuantileError: If *q* is not finite or outside ``[0, 1]``.
    """
    engine, rng = _prepare(data, start, end, kind, config)
    return engine.quantile(rng, q)


def insertion_sort(
    data: Any,
    start: int = 0,
    end: int | None = None,
    *,
    kind: str | None = None,
) -> None:
    """Sort ``data[start..=end]`` in place with insertion sort.

    Quadratic; only sensible for short ranges.
    """
    config = QSelectConfig()
    rng = RangeRegistry.wrap(data, start, end, kind=kind, config=config)
    QuickSelect(config).insertion_sort(rng)
