from __future__ import annotations

import pytest

from glyph_walk.core.timekeeping import FixedStepAccumulator, FrameTimer


def test_accumulator_releases_whole_ticks_and_keeps_remainder() -> None:
    acc = FixedStepAccumulator(step=0.5, max_substeps=10)
    acc.accrue(1.25)
    assert acc.consume() == 2
    assert acc.value == pytest.approx(0.25)
    acc.accrue(0.25)
    assert acc.consume() == 1
    assert acc.value == pytest.approx(0.0)


def test_accumulator_drops_backlog_beyond_max_substeps() -> None:
    acc = FixedStepAccumulator(step=0.5, max_substeps=3)
    acc.accrue(10.0)
    assert acc.consume() == 3
    assert acc.value == 0.0


def test_accumulator_ignores_negative_deltas() -> None:
    acc = FixedStepAccumulator(step=0.5, max_substeps=3)
    acc.accrue(-1.0)
    assert acc.consume() == 0


def test_accumulator_rejects_bad_settings() -> None:
    with pytest.raises(ValueError):
        FixedStepAccumulator(step=0.0, max_substeps=3)
    with pytest.raises(ValueError):
        FixedStepAccumulator(step=0.1, max_substeps=0)


def test_frame_timer_is_monotonic() -> None:
    timer = FrameTimer()
    assert timer.tick() >= 0.0
    assert timer.tick() >= 0.0
