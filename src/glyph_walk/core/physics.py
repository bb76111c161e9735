"""Motion helpers for the player, camera drift and motes."""
from __future__ import annotations

import math

import numpy as np

from .config import CAMERA_CFG, PLAYER_CFG, CameraCfg, PlayerCfg
from .controls import Controls
from .model import Mote, Player


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* between *lo* and *hi*."""

    return max(lo, min(hi, value))


def movement_intent(controls: Controls) -> np.ndarray:
    """Directional intent where diagonals are no faster than straight moves."""

    dx = int(controls.right) - int(controls.left)
    dy = int(controls.down) - int(controls.up)
    length = max(1, abs(dx) + abs(dy))
    return np.array([dx / length, dy / length], dtype=float)


def step_player(
    player: Player,
    controls: Controls,
    world_size: tuple[float, float],
    cfg: PlayerCfg = PLAYER_CFG,
) -> None:
    """Ease velocity toward the intent, apply drag, integrate and clamp."""

    desired = movement_intent(controls) * player.max_speed
    player.velocity += (desired - player.velocity) * cfg.acceleration
    player.velocity *= cfg.drag
    player.position += player.velocity

    margin = cfg.bounds_margin
    width, height = world_size
    player.position[0] = clamp(float(player.position[0]), margin, width - margin)
    player.position[1] = clamp(float(player.position[1]), margin, height - margin)


def drift_offset(t: float, cfg: CameraCfg = CAMERA_CFG) -> tuple[float, float]:
    """Slow breathing offset added to the camera target."""

    dx = math.sin(t * cfg.drift_x[0][1]) * cfg.drift_x[0][0]
    dx += sum(math.sin(t * freq) * amp for amp, freq in cfg.drift_x[1:])
    dy = math.cos(t * cfg.drift_y[0][1]) * cfg.drift_y[0][0]
    dy += sum(math.sin(t * freq) * amp for amp, freq in cfg.drift_y[1:])
    return dx, dy


def wrap(value: float, extent: float) -> float:
    if value < 0.0:
        value += extent
    if value > extent:
        value -= extent
    return value


def step_mote(mote: Mote, world_size: tuple[float, float]) -> None:
    mote.phase += 0.01
    mote.x = wrap(mote.x + mote.vx + math.sin(mote.phase) * 0.08, world_size[0])
    mote.y = wrap(mote.y + mote.vy + math.cos(mote.phase * 0.9) * 0.08, world_size[1])


__all__ = [
    "clamp",
    "drift_offset",
    "movement_intent",
    "step_mote",
    "step_player",
    "wrap",
]
