"""Selection range subsystem for qselect.

Adapts different backing stores (numpy numeric arrays, numpy object arrays,
mutable sequences) to the single interface the selection engine runs on.
"""

from qselect.ranges.base import InterpolableRange, OrderedRange, resolve_bounds
from qselect.ranges.numeric import NumericRange
from qselect.ranges.registry import RangeRegistry
from qselect.ranges.sequence import ObjectRange, SequenceRange

__all__ = [
    "InterpolableRange",
    "NumericRange",
    "ObjectRange",
    "OrderedRange",
    "RangeRegistry",
    "SequenceRange",
    "resolve_bounds",
]
