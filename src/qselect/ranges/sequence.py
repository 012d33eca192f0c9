"""Ordering-only ranges over generic comparable elements.

Elements need nothing beyond ``<`` and ``>``; there is no averaging, so an
even-length median returns the lower of the two middle elements and a
fractional quantile returns the element at the floor position.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

import numpy as np

from qselect.ranges.base import OrderedRange
from qselect.ranges.registry import RangeRegistry


@RangeRegistry.register("object")
class ObjectRange(OrderedRange):
    """Range over a 1-D numpy array of ``dtype=object``."""

    @classmethod
    def accepts(cls, data: Any) -> bool:
        return isinstance(data, np.ndarray) and data.ndim == 1 and data.dtype == np.dtype(object)


@RangeRegistry.register("sequence")
class SequenceRange(OrderedRange):
    """Range over any mutable sequence, typically a ``list``.

    A list of numbers is still treated as ordering-only. Wrap the values in
    a numpy array to get interpolated medians and quantiles.
    """

    @classmethod
    def accepts(cls, data: Any) -> bool:
        return isinstance(data, MutableSequence)
