"""Session logging for walks: CSV time series, CSV events and JSON metadata."""
from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from .model import WorldEvent, WorldState


class SessionLogger:
    """Buffered logger that stores one walk session to CSV files."""

    TIMESERIES_HEADER = [
        "t",
        "x",
        "y",
        "vx",
        "vy",
        "cam_x",
        "cam_y",
        "discovered",
        "collected",
        "ripples",
    ]
    EVENTS_HEADER = ["t", "type", "x", "y", "details"]
    LAST_SESSION_MARKER = "last_walk.txt"

    def __init__(
        self,
        root_dir: str | Path = "data/walks",
        session_id: Optional[str] = None,
        *,
        timeseries_flush_threshold: int = 200,
        events_flush_threshold: int = 20,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        base = session_id or f"{timestamp}_walk"
        candidate_id = base
        suffix = 1
        while (self.root_dir / candidate_id).exists():
            candidate_id = f"{base}_{suffix:02d}"
            suffix += 1

        self.session_id = candidate_id
        self.session_dir = self.root_dir / self.session_id
        self.session_dir.mkdir(parents=True, exist_ok=False)

        self.timeseries_path = self.session_dir / "timeseries.csv"
        self.events_path = self.session_dir / "events.csv"
        self.meta_path = self.session_dir / "meta.json"

        self._ts_file = self.timeseries_path.open("w", newline="", encoding="utf-8")
        self._ts_file.write(",".join(self.TIMESERIES_HEADER) + "\n")
        self._ts_file.flush()
        self._ev_file = self.events_path.open("w", newline="", encoding="utf-8")
        self._ev_file.write(",".join(self.EVENTS_HEADER) + "\n")
        self._ev_file.flush()

        self._ts_buffer: list[str] = []
        self._ev_buffer: list[str] = []
        self._ts_threshold = max(1, timeseries_flush_threshold)
        self._ev_threshold = max(1, events_flush_threshold)
        self._closed = False

        marker = self.root_dir / self.LAST_SESSION_MARKER
        marker.write_text(self.session_id, encoding="utf-8")

    def write_meta(self, meta: dict) -> None:
        with self.meta_path.open("w", encoding="utf-8") as fh:
            json.dump(meta, fh, indent=2, sort_keys=True, ensure_ascii=False)

    def log_ts(self, values: Sequence[float]) -> None:
        self._ts_buffer.append(",".join(self._format_value(v) for v in values))
        if len(self._ts_buffer) >= self._ts_threshold:
            self._flush_timeseries()

    def log_state(self, state: WorldState) -> None:
        player = state.player
        self.log_ts(
            [
                state.time,
                float(player.position[0]),
                float(player.position[1]),
                float(player.velocity[0]),
                float(player.velocity[1]),
                state.camera.x,
                state.camera.y,
                state.discovered_count,
                state.collected_count,
                len(state.ripples),
            ]
        )

    def log_event(self, event: WorldEvent) -> None:
        details = json.dumps(event.details, sort_keys=True, ensure_ascii=False)
        row = [
            self._format_value(event.t),
            event.type,
            self._format_value(event.x),
            self._format_value(event.y),
            self._quote(details),
        ]
        self._ev_buffer.append(",".join(row))
        if len(self._ev_buffer) >= self._ev_threshold:
            self._flush_events()

    def close(self) -> None:
        if self._closed:
            return
        self._flush_timeseries()
        self._flush_events()
        self._ts_file.close()
        self._ev_file.close()
        self._closed = True

    def _flush_timeseries(self) -> None:
        if self._ts_buffer:
            self._ts_file.write("\n".join(self._ts_buffer) + "\n")
            self._ts_file.flush()
            self._ts_buffer.clear()

    def _flush_events(self) -> None:
        if self._ev_buffer:
            self._ev_file.write("\n".join(self._ev_buffer) + "\n")
            self._ev_file.flush()
            self._ev_buffer.clear()

    @staticmethod
    def _format_value(value: float) -> str:
        return f"{value:.10g}"

    @staticmethod
    def _quote(text: str) -> str:
        # CSV quoting: details carry JSON with commas and quotes
        return '"' + text.replace('"', '""') + '"'

    def __enter__(self) -> "SessionLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None


__all__ = ["SessionLogger"]
