"""In-place QuickSelect engine.

QuickSelect is an incomplete quicksort: after partitioning around a pivot it
only continues into the side that contains the requested rank, giving
expected linear time. The descent is a loop over ``(start, end)``, so stack
depth stays constant even for adversarial inputs.

Semantic note on medians and quantiles:
    Interpolable ranges (numeric arrays) average the two middle elements of
    an even-length range and mix neighbouring order statistics for
    fractional quantiles. Ordering-only ranges (object arrays, lists) return
    the lower of the two candidates instead. The divergence is intentional:
    arbitrary ordered values have no average.
"""

from __future__ import annotations

import math
import numbers
import sys
import time
from typing import TYPE_CHECKING, Any

from qselect.config import QSelectConfig
from qselect.exceptions import InvalidQuantileError, InvalidRankError
from qselect.logging.logger import SelectionLogger
from qselect.logging.types import SelectionRecord
from qselect.selection.types import SelectionResult, SelectionStats

if TYPE_CHECKING:
    from collections.abc import Callable

    from qselect.ranges.base import OrderedRange

# Fractional positions at or below this are treated as exact ranks.
_MIN_FRACTION = sys.float_info.min


def _counted_compare(rng: OrderedRange, stats: SelectionStats) -> Callable[[Any, Any], int]:
    compare = rng.compare

    def counted(a: Any, b: Any) -> int:
        stats.comparisons += 1
        return compare(a, b)

    return counted


def _counted_swap(rng: OrderedRange, stats: SelectionStats) -> Callable[[int, int], None]:
    swap = rng.swap

    def counted(a: int, b: int) -> None:
        stats.swaps += 1
        swap(a, b)

    return counted


def _check_rank(rng: OrderedRange, rank: Any) -> int:
    if isinstance(rank, bool) or not isinstance(rank, numbers.Integral):
        raise InvalidRankError(f"rank must be an integer, got {rank!r}")
    rank = int(rank)
    if not rng.start <= rank <= rng.end:
        raise InvalidRankError(f"rank={rank} is outside the range [{rng.start}, {rng.end}]")
    return rank


def _check_quantile(q: Any) -> float:
    if isinstance(q, bool) or not isinstance(q, numbers.Real):
        raise InvalidQuantileError(f"quantile must be a real number, got {q!r}")
    q = float(q)
    if not math.isfinite(q):
        raise InvalidQuantileError(f"quantile must be finite, got {q!r}")
    if not 0.0 <= q <= 1.0:
        raise InvalidQuantileError(f"quantile must be in [0, 1], got {q!r}")
    return q


class QuickSelect:
    """Stateless order-statistic selector.

    Holds only the resolved configuration and a diagnostic logger; every
    call works on the range it is given and leaves nothing behind except
    the reordered buffer.

    Note: every operation **modifies** the buffer behind the range.
    """

    def __init__(
        self,
        config: QSelectConfig | None = None,
        selection_logger: SelectionLogger | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Engine configuration; loaded from the environment if ``None``.
            selection_logger: Logger receiving one record per operation.
                Built from *config* if ``None``.
        """
        self._config = config if config is not None else QSelectConfig()
        self._small = self._config.small_threshold
        self._logger = (
            selection_logger if selection_logger is not None else SelectionLogger(self._config)
        )

    @property
    def config(self) -> QSelectConfig:
        return self._config

    @property
    def logger(self) -> SelectionLogger:
        return self._logger

    # --- Public operations -------------------------------------------------

    def select(self, rng: OrderedRange, rank: int) -> Any:
        """Reorder the range so *rank* holds its order statistic and return it.

        Afterwards every element in ``[start, rank)`` is ``<=`` the result and
        every element in ``(rank, end]`` is ``>=`` it.

        Args:
            rng: Range to select from.
            rank: Absolute buffer index in ``[rng.start, rng.end]``.

        Returns:
            The value at *rank* after a full ascending sort.

        Raises:
            InvalidRankError: If *rank* is not an integer inside the range.
        """
        return self.select_result(rng, rank).value

    def median(self, rng: OrderedRange) -> Any:
        """Return the median of the range.

        Even-length ranges average the two middle elements when the range is
        interpolable and return the lower one otherwise.
        """
        return self.median_result(rng).value

    def quantile(self, rng: OrderedRange, q: float) -> Any:
        """Return the value at fraction *q* of the range.

        Args:
            rng: Range to select from.
            q: Fraction in ``[0, 1]``; 0 yields the minimum, 1 the maximum.

        Raises:
            InvalidQuantileError: If *q* is not finite or outside ``[0, 1]``.
        """
        return self.quantile_result(rng, q).value

    def select_result(self, rng: OrderedRange, rank: int) -> SelectionResult:
        """Like :meth:`select`, returning a :class:`SelectionResult`."""
        rank = _check_rank(rng, rank)
        began = time.perf_counter_ns()
        stats = SelectionStats()
        self._select(rng, rng.start, rng.end, rank, stats)
        return self._finish(rng, "select", rank, False, rng.value_at(rank), stats, began)

    def median_result(self, rng: OrderedRange) -> SelectionResult:
        """Like :meth:`median`, returning a :class:`SelectionResult`."""
        began = time.perf_counter_ns()
        stats = SelectionStats()
        length = len(rng)
        left = rng.start + (length - 1) // 2
        self._select(rng, rng.start, rng.end, left, stats)

        if length % 2 == 1 or not rng.interpolable:
            return self._finish(rng, "median", left, False, rng.value_at(left), stats, began)

        high = self._select_upper(rng, left, stats)
        value = rng.interpolate(rng.get(left), high, 0.5)  # type: ignore[attr-defined]
        return self._finish(rng, "median", left, True, value, stats, began)

    def quantile_result(self, rng: OrderedRange, q: float) -> SelectionResult:
        """Like :meth:`quantile`, returning a :class:`SelectionResult`."""
        q = _check_quantile(q)
        began = time.perf_counter_ns()
        stats = SelectionStats()
        dleft = rng.start + (len(rng) - 1) * q
        ileft = math.floor(dleft)
        err = dleft - ileft
        self._select(rng, rng.start, rng.end, ileft, stats)

        if err <= _MIN_FRACTION or not rng.interpolable:
            return self._finish(rng, "quantile", ileft, False, rng.value_at(ileft), stats, began)

        high = self._select_upper(rng, ileft, stats)
        value = rng.interpolate(rng.get(ileft), high, err)  # type: ignore[attr-defined]
        return self._finish(rng, "quantile", ileft, True, value, stats, began)

    def insertion_sort(self, rng: OrderedRange) -> None:
        """Sort the whole range in place with insertion sort.

        Quadratic; meant for the short ranges the engine itself hands to it.
        """
        self._insertion_sort(rng, rng.start, rng.end, SelectionStats())

    # --- Internals ---------------------------------------------------------

    def _select_upper(self, rng: OrderedRange, rank: int, stats: SelectionStats) -> Any:
        """Return the order statistic at ``rank + 1``.

        Requires the range to be partitioned at *rank* already, so the next
        statistic is the minimum of ``(rank, end]`` and the partition at
        *rank* survives.
        """
        self._select(rng, rank + 1, rng.end, rank + 1, stats)
        return rng.get(rank + 1)

    def _select(
        self,
        rng: OrderedRange,
        start: int,
        end: int,
        rank: int,
        stats: SelectionStats,
    ) -> None:
        compare = _counted_compare(rng, stats)
        swap = _counted_swap(rng, stats)
        get = rng.get

        while True:
            stats.passes += 1
            if end - start < self._small:
                self._insertion_sort(rng, start, end, stats)
                return

            # Pick pivot from three candidates: start, middle, end.
            # Ordering them also leaves start <= pivot <= end.
            middle = (start + end) // 2
            if compare(get(start), get(middle)) > 0:
                swap(start, middle)
            if compare(get(start), get(end)) > 0:
                swap(start, end)
            if compare(get(middle), get(end)) > 0:
                swap(middle, end)

            pivot = get(middle)
            # Park the pivot just before end, which is known to be >= pivot.
            swap(middle, end - 1)

            # Both scans stop on ties so runs of equal values split evenly.
            # The parked pivot bounds the left scan, data[start] the right one.
            i, j = start, end - 1
            while True:
                i += 1
                while compare(get(i), pivot) < 0:
                    i += 1
                j -= 1
                while compare(get(j), pivot) > 0:
                    j -= 1
                if i >= j:
                    break
                swap(i, j)

            # Pivot goes to its final position within [start, end].
            swap(i, end - 1)

            if rank == i:
                return
            if rank < i:
                end = i - 1
                # Elements equal to the pivot next to it are already placed.
                while end >= rank and compare(get(end), pivot) == 0:
                    end -= 1
                if end < rank:
                    return
            else:
                start = i + 1
                while start <= rank and compare(get(start), pivot) == 0:
                    start += 1
                if start > rank:
                    return

    def _insertion_sort(
        self,
        rng: OrderedRange,
        start: int,
        end: int,
        stats: SelectionStats,
    ) -> None:
        stats.insertion_sorts += 1
        compare = _counted_compare(rng, stats)
        swap = _counted_swap(rng, stats)
        get = rng.get
        for i in range(start + 1, end + 1):
            j = i
            while j > start and compare(get(j - 1), get(j)) > 0:
                swap(j, j - 1)
                j -= 1

    def _finish(
        self,
        rng: OrderedRange,
        operation: str,
        target: int,
        interpolated: bool,
        value: Any,
        stats: SelectionStats,
        began_ns: int,
    ) -> SelectionResult:
        elapsed_ms = (time.perf_counter_ns() - began_ns) / 1e6
        self._logger.log_selection(
            SelectionRecord(
                timestamp_ns=time.time_ns(),
                operation=operation,
                kind=rng.kind,
                start=rng.start,
                end=rng.end,
                target=target,
                interpolated=interpolated,
                comparisons=stats.comparisons,
                swaps=stats.swaps,
                passes=stats.passes,
                elapsed_ms=elapsed_ms,
            )
        )
        return SelectionResult(
            value=value,
            operation=operation,
            kind=rng.kind,
            start=rng.start,
            end=rng.end,
            target=target,
            interpolated=interpolated,
            stats=stats,
            elapsed_ms=elapsed_ms,
        )
