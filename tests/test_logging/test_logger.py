"""Tests for SelectionLogger and SelectionRecord."""

from __future__ import annotations

import logging

import pytest

from qselect.config import QSelectConfig
from qselect.logging.logger import SelectionLogger
from qselect.logging.types import SelectionRecord


def _make_record(**overrides: object) -> SelectionRecord:
    """Create a SelectionRecord with sensible defaults, overridable."""
    defaults: dict[str, object] = {
        "timestamp_ns": 1000000000,
        "operation": "select",
        "kind": "numeric",
        "start": 0,
        "end": 99,
        "target": 42,
        "interpolated": False,
        "comparisons": 250,
        "swaps": 40,
        "passes": 3,
        "elapsed_ms": 0.5,
    }
    defaults.update(overrides)
    return SelectionRecord(**defaults)  # type: ignore[arg-type]


def _config(**overrides: object) -> QSelectConfig:
    return QSelectConfig(_env_file=None, **overrides)  # type: ignore[arg-type]


class TestSelectionRecord:
    """Tests for SelectionRecord immutability."""

    def test_frozen(self) -> None:
        record = _make_record()
        with pytest.raises(AttributeError):
            record.target = 7  # type: ignore[misc]

    def test_slots(self) -> None:
        assert hasattr(_make_record(), "__slots__")


class TestSelectionLogger:
    """Tests for SelectionLogger."""

    def test_log_level_none_no_output(self, caplog: pytest.LogCaptureFixture) -> None:
        log = SelectionLogger(_config(log_level="none"))
        with caplog.at_level(logging.DEBUG, logger="qselect"):
            log.log_selection(_make_record())
        assert len(caplog.records) == 0

    def test_log_level_summary_output(self, caplog: pytest.LogCaptureFixture) -> None:
        log = SelectionLogger(_config(log_level="summary"))
        with caplog.at_level(logging.DEBUG, logger="qselect"):
            log.log_selection(_make_record())
        assert len(caplog.records) == 1
        msg = caplog.records[0].message
        assert msg.startswith("select kind=numeric")
        assert "range=[0,99]" in msg
        assert "target=42" in msg
        assert "cmp=250" in msg

    def test_log_level_summary_interpolated_flag(self, caplog: pytest.LogCaptureFixture) -> None:
        log = SelectionLogger(_config(log_level="summary"))
        with caplog.at_level(logging.DEBUG, logger="qselect"):
            log.log_selection(_make_record(operation="median", interpolated=True))
        assert "[INTERPOLATED]" in caplog.records[0].message

    def test_log_level_full_json(self, caplog: pytest.LogCaptureFixture) -> None:
        log = SelectionLogger(_config(log_level="full"))
        with caplog.at_level(logging.DEBUG, logger="qselect"):
            log.log_selection(_make_record())
        msg = caplog.records[0].message
        assert "selection_record:" in msg
        assert '"target": 42' in msg

    def test_diagnostic_mode_stores_records(self) -> None:
        log = SelectionLogger(_config(diagnostic_mode=True))
        for target in (1, 2, 3):
            log.log_selection(_make_record(target=target))
        data = log.get_diagnostic_data()
        assert [r.target for r in data] == [1, 2, 3]

    def test_diagnostic_mode_false_no_storage(self) -> None:
        log = SelectionLogger(_config(log_level="summary"))
        log.log_selection(_make_record())
        assert log.get_diagnostic_data() == []

    def test_get_diagnostic_data_returns_copy(self) -> None:
        log = SelectionLogger(_config(diagnostic_mode=True))
        log.log_selection(_make_record())
        log.get_diagnostic_data().clear()
        assert len(log.get_diagnostic_data()) == 1

    def test_summary_stats_empty(self) -> None:
        log = SelectionLogger(_config(diagnostic_mode=True))
        assert log.get_summary_stats() == {}

    def test_summary_stats_computed(self) -> None:
        log = SelectionLogger(_config(diagnostic_mode=True))
        log.log_selection(_make_record(comparisons=100, end=49, elapsed_ms=1.0))
        log.log_selection(
            _make_record(
                operation="median",
                comparisons=300,
                end=149,
                elapsed_ms=3.0,
                interpolated=True,
            )
        )
        stats = log.get_summary_stats()
        assert stats["total_operations"] == 2
        assert stats["operations"] == {"select": 1, "median": 1}
        assert stats["total_elements"] == 200
        assert stats["mean_comparisons"] == pytest.approx(200.0)
        assert stats["comparisons_per_element"] == pytest.approx(2.0)
        assert stats["mean_elapsed_ms"] == pytest.approx(2.0)
        assert stats["max_elapsed_ms"] == pytest.approx(3.0)
        assert stats["interpolated_count"] == 1
