"""Data models for the walk state."""
from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .camera import Camera


@dataclass
class Player:
    """Mutable state for the player glow."""

    position: np.ndarray = field(
        default_factory=lambda: np.zeros(2, dtype=float)
    )
    velocity: np.ndarray = field(
        default_factory=lambda: np.zeros(2, dtype=float)
    )
    max_speed: float = 2.25
    radius: float = 12.0

    @property
    def speed(self) -> float:
        return float(np.linalg.norm(self.velocity))


@dataclass
class Star:
    x: float
    y: float
    size: float
    twinkle: float


@dataclass
class Mote:
    x: float
    y: float
    size: float
    alpha: float
    vx: float
    vy: float
    phase: float


@dataclass
class Glyph:
    """A collectible symbol that is revealed once the camera has seen it."""

    id: int
    x: float
    y: float
    symbol: str
    radius: float
    seed: float
    discovered: bool = False
    collected: bool = False
    pulse: float = 0.0

    def discover(self) -> bool:
        """Mark the glyph as discovered. Returns ``True`` on the first call only."""

        if self.discovered:
            return False
        self.discovered = True
        self.pulse = 1.0
        return True

    def collect(self) -> bool:
        """Mark the glyph as collected. Returns ``True`` on the first call only."""

        if not self.discovered:
            raise ValueError(f"Glyph {self.id} must be discovered before it is collected")
        if self.collected:
            return False
        self.collected = True
        return True


@dataclass
class Ripple:
    x: float
    y: float
    alpha: float
    growth: float
    fade: float
    world: bool
    diameter: float = 0.0

    @property
    def expired(self) -> bool:
        return self.alpha <= 0.0

    def advance(self) -> None:
        self.diameter += self.growth
        self.alpha -= self.fade


@dataclass
class WorldEvent:
    """Something worth recording that happened during an update tick."""

    t: float
    type: str
    x: float
    y: float
    details: dict[str, object] = field(default_factory=dict)


@dataclass
class WorldState:
    """High level container passed through the update and render passes."""

    size: tuple[float, float]
    player: Player
    camera: Camera
    stars: list[Star] = field(default_factory=list)
    motes: list[Mote] = field(default_factory=list)
    glyphs: list[Glyph] = field(default_factory=list)
    ripples: list[Ripple] = field(default_factory=list)
    time: float = 0.0
    ticks: int = 0
    discovered_count: int = 0
    collected_count: int = 0

    @property
    def width(self) -> float:
        return self.size[0]

    @property
    def height(self) -> float:
        return self.size[1]


__all__ = ["Glyph", "Mote", "Player", "Ripple", "Star", "WorldEvent", "WorldState"]
