"""Order-statistic selection subsystem for qselect.

In-place QuickSelect with median-of-three pivoting, an insertion-sort
cutoff for small ranges, and median/quantile derivation on top.
"""

from qselect.selection.engine import QuickSelect
from qselect.selection.types import SelectionResult, SelectionStats

__all__ = [
    "QuickSelect",
    "SelectionResult",
    "SelectionStats",
]
