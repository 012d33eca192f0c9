"""Dense numeric range over a 1-D numpy array.

The only interpolable range kind: even-length medians average the two
middle order statistics and fractional quantiles mix neighbouring ones.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from qselect.exceptions import UnorderedValueError
from qselect.ranges.base import InterpolableRange
from qselect.ranges.registry import RangeRegistry

if TYPE_CHECKING:
    from qselect.config import QSelectConfig

# Signed integer, unsigned integer and floating dtypes. Booleans and complex
# numbers are excluded: the former have no useful interpolation, the latter
# no total order.
_NUMERIC_KINDS = frozenset("iuf")


@RangeRegistry.register("numeric")
class NumericRange(InterpolableRange):
    """Range over a contiguous numpy buffer of real numbers.

    Values handed back to callers are Python scalars (``int`` or ``float``).
    Interpolation is done in float64 so that narrow integer dtypes cannot
    overflow while subtracting.
    """

    def __init__(
        self,
        data: np.ndarray,
        start: int = 0,
        end: int | None = None,
        check_finite: bool = True,
    ) -> None:
        """Wrap a numeric array.

        Args:
            data: 1-D numpy array of integer or floating dtype.
            start: First index of the range.
            end: Last index of the range (inclusive), ``None`` for the last element.
            check_finite: Scan the range for NaN before selecting.

        Raises:
            UnorderedValueError: If *check_finite* is set and the range holds NaN.
        """
        super().__init__(data, start, end)
        if check_finite and data.dtype.kind == "f":
            window = data[self.start : self.end + 1]
            if np.isnan(window).any():
                raise UnorderedValueError(
                    f"Range [{self.start}, {self.end}] contains NaN values"
                )

    @classmethod
    def accepts(cls, data: Any) -> bool:
        return isinstance(data, np.ndarray) and data.ndim == 1 and data.dtype.kind in _NUMERIC_KINDS

    @classmethod
    def from_config(
        cls,
        data: Any,
        start: int = 0,
        end: int | None = None,
        config: QSelectConfig | None = None,
    ) -> NumericRange:
        check_finite = True if config is None else config.check_finite
        return cls(data, start, end, check_finite=check_finite)

    def value_at(self, index: int) -> Any:
        return self._data[index].item()

    def interpolate(self, low: Any, high: Any, fraction: float) -> float:
        low = float(low)
        return low + (float(high) - low) * fraction
