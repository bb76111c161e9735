"""Per-tick update pass over the world state."""
from __future__ import annotations

import math

from .config import (
    CAMERA_CFG,
    PLAYER_CFG,
    RIPPLE_CFG,
    WORLD_CFG,
    CameraCfg,
    PlayerCfg,
    RippleCfg,
    WorldCfg,
)
from .controls import Controls
from .model import Ripple, WorldEvent, WorldState
from .physics import clamp, drift_offset, step_mote, step_player


def update_camera(state: WorldState, cfg: CameraCfg = CAMERA_CFG) -> None:
    player = state.player
    center = (float(player.position[0]), float(player.position[1]))
    state.camera.follow(center, drift_offset(state.time, cfg))
    state.camera.update(cfg.smoothing)


def update_motes(state: WorldState) -> None:
    for mote in state.motes:
        step_mote(mote, state.size)


def update_glyphs(
    state: WorldState,
    controls: Controls,
    *,
    world_cfg: WorldCfg = WORLD_CFG,
    ripple_cfg: RippleCfg = RIPPLE_CFG,
) -> list[WorldEvent]:
    """Reveal glyphs the camera sees and collect the ones the player holds."""

    events: list[WorldEvent] = []
    px = float(state.player.position[0])
    py = float(state.player.position[1])

    for glyph in state.glyphs:
        if glyph.collected:
            continue

        if state.camera.sees(glyph.x, glyph.y, world_cfg.discovery_padding) and glyph.discover():
            state.discovered_count += 1
            events.append(
                WorldEvent(state.time, "discovered", glyph.x, glyph.y, {"glyph": glyph.id})
            )

        glyph.pulse = clamp(glyph.pulse - world_cfg.pulse_decay, 0.0, 1.0)

        near = math.hypot(px - glyph.x, py - glyph.y) < glyph.radius
        if near and controls.collect and glyph.discovered and glyph.collect():
            state.collected_count += 1
            state.ripples.append(
                Ripple(
                    x=glyph.x,
                    y=glyph.y,
                    alpha=ripple_cfg.world_alpha,
                    growth=ripple_cfg.world_growth,
                    fade=ripple_cfg.world_fade,
                    world=True,
                )
            )
            events.append(
                WorldEvent(
                    state.time,
                    "collected",
                    glyph.x,
                    glyph.y,
                    {"glyph": glyph.id, "symbol": glyph.symbol},
                )
            )
    return events


def update_ripples(state: WorldState) -> None:
    for ripple in state.ripples:
        ripple.advance()
    state.ripples[:] = [ripple for ripple in state.ripples if not ripple.expired]


def spawn_screen_ripple(
    state: WorldState,
    position: tuple[int, int],
    cfg: RippleCfg = RIPPLE_CFG,
) -> WorldEvent:
    """Add a click ripple in screen space; it never touches the world."""

    x, y = position
    state.ripples.append(
        Ripple(
            x=float(x),
            y=float(y),
            alpha=cfg.screen_alpha,
            growth=cfg.screen_growth,
            fade=cfg.screen_fade,
            world=False,
        )
    )
    wx, wy = state.camera.screen_to_world(x, y)
    return WorldEvent(state.time, "ripple", wx, wy, {"screen": [int(x), int(y)]})


def update_world(
    state: WorldState,
    controls: Controls,
    dt: float,
    *,
    world_cfg: WorldCfg = WORLD_CFG,
    player_cfg: PlayerCfg = PLAYER_CFG,
    camera_cfg: CameraCfg = CAMERA_CFG,
    ripple_cfg: RippleCfg = RIPPLE_CFG,
) -> list[WorldEvent]:
    """Advance the world by one fixed tick of length *dt* seconds."""

    step_player(state.player, controls, state.size, player_cfg)
    update_camera(state, camera_cfg)
    update_motes(state)
    events = update_glyphs(state, controls, world_cfg=world_cfg, ripple_cfg=ripple_cfg)
    update_ripples(state)
    state.time += dt
    state.ticks += 1
    return events


__all__ = [
    "spawn_screen_ripple",
    "update_camera",
    "update_glyphs",
    "update_motes",
    "update_ripples",
    "update_world",
]
