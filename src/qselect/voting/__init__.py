"""Ensemble voting subsystem for qselect.

Combines the scores of several detectors into one, with median and
quantile rules backed by the selection engine.
"""

from qselect.voting.base import EnsembleVoting, as_score_array
from qselect.voting.registry import VotingRegistry
from qselect.voting.rules import (
    EnsembleVotingMax,
    EnsembleVotingMean,
    EnsembleVotingMedian,
    EnsembleVotingMin,
    EnsembleVotingQuantile,
)

__all__ = [
    "EnsembleVoting",
    "EnsembleVotingMax",
    "EnsembleVotingMean",
    "EnsembleVotingMedian",
    "EnsembleVotingMin",
    "EnsembleVotingQuantile",
    "VotingRegistry",
    "as_score_array",
]
