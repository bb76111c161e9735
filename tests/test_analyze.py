from __future__ import annotations

import json

import numpy as np
import pytest

from glyph_walk import analyze
from glyph_walk.core.logging_utils import SessionLogger
from glyph_walk.core.model import WorldEvent


@pytest.fixture
def session_dir(tmp_path, world):
    with SessionLogger(tmp_path, session_id="sample") as logger:
        logger.write_meta(
            {
                "world_size": [3600.0, 2200.0],
                "glyphs": [{"id": g.id, "x": g.x, "y": g.y} for g in world.glyphs],
            }
        )
        logger.log_state(world)
        world.player.position[:] = (1830.0, 1250.0)
        world.time = 2.0
        world.discovered_count = 2
        logger.log_state(world)
        world.player.position[:] = (1830.0, 1300.0)
        world.time = 4.0
        world.collected_count = 1
        logger.log_state(world)
        logger.log_event(WorldEvent(0.5, "discovered", 100.0, 200.0, {"glyph": 1}))
        logger.log_event(WorldEvent(1.0, "discovered", 300.0, 400.0, {"glyph": 2}))
        logger.log_event(WorldEvent(3.5, "collected", 300.0, 400.0, {"glyph": 2, "symbol": "✷"}))
        logger.log_event(WorldEvent(3.7, "ripple", 5.0, 6.0, {"screen": [1, 2]}))
    return tmp_path / "sample"


def test_load_and_summarize_session(session_dir) -> None:
    ts = analyze.load_timeseries(session_dir / analyze.TIMESERIES_FILENAME)
    events = analyze.load_events(session_dir / analyze.EVENTS_FILENAME)
    meta = json.loads((session_dir / analyze.META_FILENAME).read_text(encoding="utf-8"))

    assert ts["t"].tolist() == [0.0, 2.0, 4.0]
    assert events[2]["details"] == {"glyph": 2, "symbol": "✷"}

    summary = analyze.summarize(ts, events, meta)
    assert summary.duration == 4.0
    assert summary.distance == pytest.approx(100.0)
    assert summary.event_counts == {"discovered": 2, "collected": 1, "ripple": 1}
    assert summary.first_discovery == 0.5
    assert summary.first_collection == 3.5
    assert summary.total_glyphs == 26


def test_path_length_handles_short_series() -> None:
    assert analyze.path_length(np.array([1.0]), np.array([2.0])) == 0.0
    assert analyze.path_length(np.array([0.0, 3.0]), np.array([0.0, 4.0])) == 5.0


def test_main_writes_figures_for_last_session(session_dir, capsys) -> None:
    analyze.main(["--log-dir", str(session_dir.parent)])

    assert (session_dir / "figs" / "path.png").is_file()
    assert (session_dir / "figs" / "progress.png").is_file()
    out = capsys.readouterr().out
    assert "Session: sample" in out
    assert "Collected: 1/26" in out


def test_main_rejects_missing_session(tmp_path) -> None:
    with pytest.raises(SystemExit):
        analyze.main(["--log-dir", str(tmp_path)])
    with pytest.raises(SystemExit):
        analyze.main(["nope", "--log-dir", str(tmp_path)])
