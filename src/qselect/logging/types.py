"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionRecord:
    """Immutable record of a single engine operation.

    Attributes:
        timestamp_ns: Wall-clock time of the operation (nanoseconds since epoch).
        operation: ``"select"``, ``"median"`` or ``"quantile"``.
        kind: Range kind the operation ran on.
        start: First index of the range.
        end: Last index of the range (inclusive).
        target: Selected rank (the lower one when interpolating).
        interpolated: True if the value mixes two order statistics.
        comparisons: Element comparisons performed.
        swaps: Element exchanges performed.
        passes: Partition passes performed.
        elapsed_ms: Wall time of the operation in milliseconds.
    """

    timestamp_ns: int

    # Request
    operation: str
    kind: str
    start: int
    end: int
    target: int
    interpolated: bool

    # Work
    comparisons: int
    swaps: int
    passes: int
    elapsed_ms: float
