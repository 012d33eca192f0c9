"""Diagnostic logger for selection operations.

Uses the standard ``logging`` module with the ``"qselect"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from qselect.config import QSelectConfig
    from qselect.logging.types import SelectionRecord

logger = logging.getLogger("qselect")


class SelectionLogger:
    """Per-operation diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per operation with the range, target rank
        and work counters.

        ``"full"``: Full JSON dump of all record fields.
    """

    def __init__(self, config: QSelectConfig) -> None:
        """Initialize the logger from configuration.

        Args:
            config: Configuration providing ``log_level`` and ``diagnostic_mode``.
        """
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[SelectionRecord] = []

    def log_selection(self, record: SelectionRecord) -> None:
        """Log a single engine operation.

        Args:
            record: Immutable record of the operation.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "%s kind=%s range=[%d,%d] target=%d%s cmp=%d swaps=%d passes=%d time=%.3fms",
                record.operation,
                record.kind,
                record.start,
                record.end,
                record.target,
                " [INTERPOLATED]" if record.interpolated else "",
                record.comparisons,
                record.swaps,
                record.passes,
                record.elapsed_ms,
            )
        elif self._log_level == "full":
            logger.info("selection_record: %s", json.dumps(asdict(record)))

    def get_diagnostic_data(self) -> list[SelectionRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``).

        Returns:
            Copy of the stored records. Empty if diagnostic_mode is False.
        """
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        comparisons = [r.comparisons for r in self._records]
        elements = [r.end - r.start + 1 for r in self._records]
        times = [r.elapsed_ms for r in self._records]
        interpolated = sum(1 for r in self._records if r.interpolated)
        operations: dict[str, int] = {}
        for r in self._records:
            operations[r.operation] = operations.get(r.operation, 0) + 1

        return {
            "total_operations": n,
            "operations": operations,
            "total_elements": sum(elements),
            "mean_comparisons": sum(comparisons) / n,
            "comparisons_per_element": sum(comparisons) / sum(elements),
            "mean_swaps": sum(r.swaps for r in self._records) / n,
            "mean_passes": sum(r.passes for r in self._records) / n,
            "mean_elapsed_ms": sum(times) / n,
            "max_elapsed_ms": max(times),
            "interpolated_count": interpolated,
        }
