"""Analyze a recorded walk session and generate summary figures."""
from __future__ import annotations

import argparse
import csv
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence

import numpy as np

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt


TIMESERIES_FILENAME = "timeseries.csv"
EVENTS_FILENAME = "events.csv"
META_FILENAME = "meta.json"
FIGS_SUBDIR = "figs"
LAST_SESSION_MARKER = "last_walk.txt"
EVENT_TYPES = ("discovered", "collected", "ripple")


@dataclass(frozen=True)
class SessionSummary:
    duration: float
    distance: float
    event_counts: Dict[str, int]
    first_discovery: float | None
    first_collection: float | None
    total_glyphs: int


def load_timeseries(path: Path) -> Dict[str, np.ndarray]:
    with path.open("r", newline="", encoding="utf-8") as fh:
        reader = csv.DictReader(fh)
        columns: Dict[str, List[float]] = {name: [] for name in reader.fieldnames or []}
        for row in reader:
            for key, value in row.items():
                if key is None:
                    continue
                columns.setdefault(key, []).append(float(value))
    return {key: np.asarray(values) for key, values in columns.items()}


def load_events(path: Path) -> List[dict]:
    with path.open("r", newline="", encoding="utf-8") as fh:
        reader = csv.DictReader(fh)
        events: List[dict] = []
        for row in reader:
            if not row or not row.get("type"):
                continue
            event = {
                "t": float(row["t"]),
                "type": row["type"],
                "x": float(row["x"]),
                "y": float(row["y"]),
            }
            details_raw = row.get("details", "")
            if details_raw:
                try:
                    event["details"] = json.loads(details_raw)
                except json.JSONDecodeError:
                    event["details"] = details_raw
            events.append(event)
    return events


def ensure_fig_dir(session_dir: Path) -> Path:
    fig_dir = session_dir / FIGS_SUBDIR
    fig_dir.mkdir(parents=True, exist_ok=True)
    return fig_dir


def path_length(xs: np.ndarray, ys: np.ndarray) -> float:
    if xs.size < 2:
        return 0.0
    return float(np.sum(np.hypot(np.diff(xs), np.diff(ys))))


def first_event_time(events: Sequence[dict], event_type: str) -> float | None:
    times = [event["t"] for event in events if event["type"] == event_type]
    return min(times) if times else None


def summarize(ts: Dict[str, np.ndarray], events: Sequence[dict], meta: dict) -> SessionSummary:
    counts: Dict[str, int] = {name: 0 for name in EVENT_TYPES}
    for event in events:
        counts[event["type"]] = counts.get(event["type"], 0) + 1
    t = ts.get("t", np.array([]))
    return SessionSummary(
        duration=float(t[-1] - t[0]) if t.size else 0.0,
        distance=path_length(ts.get("x", np.array([])), ts.get("y", np.array([]))),
        event_counts=counts,
        first_discovery=first_event_time(events, "discovered"),
        first_collection=first_event_time(events, "collected"),
        total_glyphs=len(meta.get("glyphs", [])),
    )


def plot_path(fig_dir: Path, ts: Dict[str, np.ndarray], events: Sequence[dict], meta: dict) -> Path:
    fig, ax = plt.subplots(figsize=(9, 5.5))
    ax.plot(ts["x"], ts["y"], color="#6bc5c0", lw=1.2, label="Path")
    glyphs = meta.get("glyphs", [])
    if glyphs:
        ax.scatter(
            [g["x"] for g in glyphs],
            [g["y"] for g in glyphs],
            marker="x",
            color="#adb5bd",
            s=24,
            label="Glyphs",
        )
    for event_type, color, marker in (("discovered", "#ffa94d", "o"), ("collected", "#9775fa", "*")):
        selected = [event for event in events if event["type"] == event_type]
        if selected:
            ax.scatter(
                [event["x"] for event in selected],
                [event["y"] for event in selected],
                color=color,
                marker=marker,
                s=50,
                label=event_type.capitalize(),
            )
    world_w, world_h = meta.get("world_size", [None, None])
    if world_w and world_h:
        ax.set_xlim(0, world_w)
        ax.set_ylim(world_h, 0)
    else:
        ax.invert_yaxis()
    ax.set_aspect("equal", "box")
    ax.set_xlabel("x [px]")
    ax.set_ylabel("y [px]")
    ax.set_title("Walk path")
    ax.legend(loc="upper right", fontsize="small")
    fig.tight_layout()
    out = fig_dir / "path.png"
    fig.savefig(out, dpi=150)
    plt.close(fig)
    return out


def plot_progress(fig_dir: Path, ts: Dict[str, np.ndarray], total_glyphs: int) -> Path:
    fig, ax = plt.subplots(figsize=(7, 4))
    ax.step(ts["t"], ts["discovered"], where="post", color="#ffa94d", label="Discovered")
    ax.step(ts["t"], ts["collected"], where="post", color="#9775fa", label="Collected")
    if total_glyphs:
        ax.axhline(total_glyphs, color="#868e96", linestyle=":", alpha=0.6)
    ax.set_xlabel("t [s]")
    ax.set_ylabel("Glyphs")
    ax.set_title("Discovery progress")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    out = fig_dir / "progress.png"
    fig.savefig(out, dpi=150)
    plt.close(fig)
    return out


def print_summary(session_dir: Path, summary: SessionSummary) -> None:
    print(f"Session: {session_dir.name}")
    print(f" Duration: {summary.duration:.1f} s")
    print(f" Distance walked: {summary.distance:,.0f} px")
    total = summary.total_glyphs or "?"
    print(f" Discovered: {summary.event_counts.get('discovered', 0)}/{total}")
    print(f" Collected: {summary.event_counts.get('collected', 0)}/{total}")
    if summary.first_discovery is not None:
        print(f" First discovery after {summary.first_discovery:.1f} s")
    if summary.first_collection is not None:
        print(f" First collection after {summary.first_collection:.1f} s")
    print(f" Ripples: {summary.event_counts.get('ripple', 0)}")


def resolve_session_dir(base_dir: Path, session: str | None) -> Path | None:
    if session:
        session_path = Path(session)
        if not session_path.is_dir():
            session_path = base_dir / session
        return session_path
    marker = base_dir / LAST_SESSION_MARKER
    if not marker.exists():
        return None
    return base_dir / marker.read_text(encoding="utf-8").strip()


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Analyze a recorded walk and create figures.")
    parser.add_argument("session", nargs="?", help="Path or id of a session directory")
    parser.add_argument("--log-dir", default="data/walks", help="Directory holding sessions")
    args = parser.parse_args(argv)

    session_path = resolve_session_dir(Path(args.log_dir), args.session)
    if session_path is None:
        parser.error(f"No session given and {LAST_SESSION_MARKER} is missing.")
    if not session_path.is_dir():
        parser.error(f"Could not find session directory: {session_path}")

    meta_path = session_path / META_FILENAME
    ts_path = session_path / TIMESERIES_FILENAME
    ev_path = session_path / EVENTS_FILENAME
    if not meta_path.exists() or not ts_path.exists() or not ev_path.exists():
        parser.error("Session directory is missing meta/timeseries/events files.")

    with meta_path.open("r", encoding="utf-8") as fh:
        meta = json.load(fh)
    ts = load_timeseries(ts_path)
    events = load_events(ev_path)
    if not ts or ts["t"].size == 0:
        parser.error("timeseries.csv is empty, nothing to analyze.")

    summary = summarize(ts, events, meta)
    fig_dir = ensure_fig_dir(session_path)
    plot_path(fig_dir, ts, events, meta)
    plot_progress(fig_dir, ts, summary.total_glyphs)
    print_summary(session_path, summary)


if __name__ == "__main__":
    main()
