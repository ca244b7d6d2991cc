from __future__ import annotations

import logging

import pytest

from logomark.telemetry import summarize_scores, timed


def test_timed_logs_stage_context_and_extra(caplog):
    caplog.set_level(logging.INFO, logger="logomark.telemetry")
    with timed("generate", {"algorithm": "starburst"}) as stats:
        stats["produced"] = 3
    record = caplog.records[-1]
    assert record.getMessage() == "timing"
    assert record.stage == "generate"
    assert record.algorithm == "starburst"
    assert record.produced == 3
    assert record.ok is True
    assert record.ms >= 0


def test_timed_marks_failures_and_reraises(caplog):
    caplog.set_level(logging.INFO, logger="logomark.telemetry")
    with pytest.raises(RuntimeError):
        with timed("preview"):
            raise RuntimeError("boom")
    assert caplog.records[-1].ok is False


def test_summarize_scores():
    assert summarize_scores([]) == {"n": 0, "min": 0.0, "mean": 0.0, "max": 0.0}
    assert summarize_scores([80, 90, 85]) == {"n": 3, "min": 80.0, "mean": 85.0, "max": 90.0}
