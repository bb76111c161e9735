from __future__ import annotations

import csv
import json

from glyph_walk.core.logging_utils import SessionLogger
from glyph_walk.core.model import WorldEvent


def test_session_files_and_marker_are_created(tmp_path, world) -> None:
    with SessionLogger(tmp_path, session_id="calm") as logger:
        logger.write_meta({"seed": 7, "symbol": "✶"})
        logger.log_state(world)
        logger.log_event(WorldEvent(1.5, "collected", 10.0, 20.0, {"glyph": 3, "symbol": "✶"}))

    session = tmp_path / "calm"
    assert (tmp_path / "last_walk.txt").read_text(encoding="utf-8") == "calm"
    assert json.loads((session / "meta.json").read_text(encoding="utf-8")) == {"seed": 7, "symbol": "✶"}

    with (session / "timeseries.csv").open(newline="", encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))
    assert len(rows) == 1
    assert float(rows[0]["x"]) == 1800.0
    assert rows[0]["discovered"] == "0"

    with (session / "events.csv").open(newline="", encoding="utf-8") as fh:
        events = list(csv.DictReader(fh))
    assert events[0]["type"] == "collected"
    assert json.loads(events[0]["details"]) == {"glyph": 3, "symbol": "✶"}


def test_existing_session_id_gets_suffix(tmp_path) -> None:
    first = SessionLogger(tmp_path, session_id="walk")
    second = SessionLogger(tmp_path, session_id="walk")
    try:
        assert first.session_id == "walk"
        assert second.session_id == "walk_01"
        assert (tmp_path / "last_walk.txt").read_text(encoding="utf-8") == "walk_01"
    finally:
        first.close()
        second.close()


def test_buffer_flushes_at_threshold(tmp_path, world) -> None:
    logger = SessionLogger(tmp_path, session_id="buffered", timeseries_flush_threshold=2)
    try:
        logger.log_state(world)
        lines = logger.timeseries_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        logger.log_state(world)
        lines = logger.timeseries_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 3
    finally:
        logger.close()
    logger.close()


def test_headers_are_on_disk_before_any_flush(tmp_path) -> None:
    logger = SessionLogger(tmp_path, session_id="early")
    try:
        assert logger.timeseries_path.read_text(encoding="utf-8").splitlines() == [
            ",".join(SessionLogger.TIMESERIES_HEADER)
        ]
        assert logger.events_path.read_text(encoding="utf-8").splitlines() == [
            ",".join(SessionLogger.EVENTS_HEADER)
        ]
    finally:
        logger.close()
