"""qselect: in-place order-statistic selection.

QuickSelect finds the element of a given rank in a mutable buffer without
sorting it, and derives medians and quantiles from that. Numeric numpy
arrays interpolate; object arrays and plain lists only compare.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("qselect")
except PackageNotFoundError:
    __version__ = "0.0.0"

from qselect.api import insertion_sort, median, quantile, quickselect, select
from qselect.config import QSelectConfig, resolve_config, validate_overrides
from qselect.exceptions import (
    ConfigValidationError,
    EmptyRangeError,
    InvalidQuantileError,
    InvalidRangeError,
    InvalidRankError,
    QSelectError,
    UnorderedValueError,
    UnsupportedBufferError,
)
from qselect.ranges import NumericRange, ObjectRange, RangeRegistry, SequenceRange
from qselect.selection import QuickSelect, SelectionResult
from qselect.voting import VotingRegistry

__all__ = [
    "ConfigValidationError",
    "EmptyRangeError",
    "InvalidQuantileError",
    "InvalidRangeError",
    "InvalidRankError",
    "NumericRange",
    "ObjectRange",
    "QSelectConfig",
    "QSelectError",
    "QuickSelect",
    "RangeRegistry",
    "SelectionResult",
    "SequenceRange",
    "UnorderedValueError",
    "UnsupportedBufferError",
    "VotingRegistry",
    "__version__",
    "insertion_sort",
    "median",
    "quantile",
    "quickselect",
    "resolve_config",
    "select",
    "validate_overrides",
]
