"""Data types for the selection subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class SelectionStats:
    """Work counters gathered during one engine operation.

    Attributes:
        comparisons: Three-way comparisons between element values.
        swaps: Element exchanges inside the buffer.
        passes: Partition passes (loop iterations of the descent).
        insertion_sorts: Small ranges finished by insertion sort.
    """

    comparisons: int = 0
    swaps: int = 0
    passes: int = 0
    insertion_sorts: int = 0


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Result of a select, median or quantile operation.

    Attributes:
        value: The selected (or interpolated) value.
        operation: ``"select"``, ``"median"`` or ``"quantile"``.
        kind: Range kind the operation ran on (``"numeric"``, ``"object"``, ...).
        start: First index of the range.
        end: Last index of the range (inclusive).
        target: Rank that was selected; the lower rank when interpolating.
        interpolated: True if *value* mixes two order statistics.
        stats: Work counters for the whole operation.
        elapsed_ms: Wall time of the operation in milliseconds.
    """

    value: Any
    operation: str
    kind: str
    start: int
    end: int
    target: int
    interpolated: bool
    stats: SelectionStats
    elapsed_ms: float
