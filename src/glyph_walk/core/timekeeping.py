"""Fixed-rate ticking decoupled from the display refresh."""
from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class FrameTimer:
    """Wall clock delta source based on :func:`time.perf_counter`."""

    last_time: float = field(default_factory=time.perf_counter)

    def tick(self) -> float:
        now = time.perf_counter()
        dt = now - self.last_time
        self.last_time = now
        return dt


@dataclass
class FixedStepAccumulator:
    """Collects frame time and releases it as whole ticks of ``step`` seconds.

    Leftover time smaller than one tick is carried into the next frame. When a
    frame stalls for longer than ``max_substeps`` ticks the excess is dropped
    so the world never tries to catch up in one burst.
    """

    step: float
    max_substeps: int
    value: float = 0.0

    def __post_init__(self) -> None:
        if self.step <= 0.0:
            raise ValueError("step must be positive")
        if self.max_substeps < 1:
            raise ValueError("max_substeps must be at least 1")

    def accrue(self, delta: float) -> None:
        if delta > 0.0:
            self.value += delta

    def clear(self) -> None:
        self.value = 0.0

    def consume(self) -> int:
        ticks = int(self.value / self.step)
        if ticks > self.max_substeps:
            self.value = 0.0
            return self.max_substeps
        self.value -= ticks * self.step
        return ticks


__all__ = ["FixedStepAccumulator", "FrameTimer"]
