"""Base class for ensemble score combination.

An ensemble of detectors produces one score per member for the same object;
a voting rule reduces those scores to a single combined score.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

from qselect.exceptions import EmptyRangeError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from qselect.config import QSelectConfig


def as_score_array(scores: Iterable[float]) -> np.ndarray:
    """Copy *scores* into a fresh float64 array.

    The copy is what rules reorder, so the caller's collection is untouched.

    Raises:
        EmptyRangeError: If there are no scores.
    """
    values = np.array(list(scores), dtype=np.float64)
    if values.size == 0:
        raise EmptyRangeError("Cannot combine an empty list of scores")
    return values


class EnsembleVoting(ABC):
    """Abstract base class for score combination rules."""

    def __init__(self, config: QSelectConfig) -> None:
        self._config = config

    @abstractmethod
    def combine(self, scores: Iterable[float]) -> float:
        """Combine member scores into one.

        Args:
            scores: One score per ensemble member.

        Returns:
            The combined score.

        Raises:
            EmptyRangeError: If *scores* is empty.
        """
