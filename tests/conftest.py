"""Shared pytest fixtures for qselect tests.

Provides reusable configuration objects, engines, and sample buffers that
are used across multiple test modules.
"""

from __future__ import annotations

import numpy as np
import pytest

from qselect.config import QSelectConfig
from qselect.selection.engine import QuickSelect


@pytest.fixture
def default_config() -> QSelectConfig:
    """Return a QSelectConfig with all default values, ignoring any .env file."""
    return QSelectConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def diagnostic_config() -> QSelectConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return QSelectConfig(
        _env_file=None,
        log_level="full",
        diagnostic_mode=True,  # type: ignore[call-arg]
    )


@pytest.fixture
def engine(default_config: QSelectConfig) -> QuickSelect:
    """Return a QuickSelect engine built from the default config."""
    return QuickSelect(default_config)


@pytest.fixture
def diagnostic_engine(diagnostic_config: QSelectConfig) -> QuickSelect:
    """Return an engine that stores a record for every operation."""
    return QuickSelect(diagnostic_config)


@pytest.fixture
def rng() -> np.random.Generator:
    """Return a seeded numpy generator for reproducible random buffers."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def sample_floats(rng: np.random.Generator) -> np.ndarray:
    """Return 1000 standard-normal floats, large enough to exercise partitioning."""
    return rng.standard_normal(1000)


@pytest.fixture
def sample_ints_with_duplicates(rng: np.random.Generator) -> np.ndarray:
    """Return 500 integers drawn from only five distinct values."""
    return rng.integers(0, 5, size=500)
