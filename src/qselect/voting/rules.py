"""Built-in ensemble voting rules.

``max``, ``min`` and ``mean`` reduce with numpy. ``median`` and ``quantile``
run QuickSelect on a private copy of the scores; the median is similar to a
majority vote and robust against a few outlying members.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from qselect.ranges.numeric import NumericRange
from qselect.selection.engine import QuickSelect
from qselect.voting.base import EnsembleVoting, as_score_array
from qselect.voting.registry import VotingRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from qselect.config import QSelectConfig


@VotingRegistry.register("max")
class EnsembleVotingMax(EnsembleVoting):
    """Combined score is the largest member score."""

    def combine(self, scores: Iterable[float]) -> float:
        return float(np.max(as_score_array(scores)))


@VotingRegistry.register("min")
class EnsembleVotingMin(EnsembleVoting):
    """Combined score is the smallest member score."""

    def combine(self, scores: Iterable[float]) -> float:
        return float(np.min(as_score_array(scores)))


@VotingRegistry.register("mean")
class EnsembleVotingMean(EnsembleVoting):
    """Combined score is the arithmetic mean of member scores."""

    def combine(self, scores: Iterable[float]) -> float:
        return float(np.mean(as_score_array(scores)))


@VotingRegistry.register("median")
class EnsembleVotingMedian(EnsembleVoting):
    """Combined score is the median of member scores.

    An even number of members averages the two middle scores.
    """

    def __init__(self, config: QSelectConfig) -> None:
        super().__init__(config)
        self._engine = QuickSelect(config)

    def combine(self, scores: Iterable[float]) -> float:
        values = as_score_array(scores)
        return float(self._engine.median(NumericRange.from_config(values, config=self._config)))


@VotingRegistry.register("quantile")
class EnsembleVotingQuantile(EnsembleVoting):
    """Combined score is the ``config.voting_quantile`` quantile of member scores.

    A quantile of 1.0 is equivalent to ``max``, 0.0 to ``min``.
    """

    def __init__(self, config: QSelectConfig) -> None:
        super().__init__(config)
        self._quantile = config.voting_quantile
        self._engine = QuickSelect(config)

    @property
    def quantile(self) -> float:
        return self._quantile

    def combine(self, scores: Iterable[float]) -> float:
        values = as_score_array(scores)
        rng = NumericRange.from_config(values, config=self._config)
        return float(self._engine.quantile(rng, self._quantile))
