"""
Glyph Walk
==========

A slow walk through a world larger than the window. The camera eases after
the player glow, stars drift behind at a fraction of the camera speed, and
glyphs hidden across the world reveal themselves once the camera has seen
them. Hold SPACE next to a revealed glyph to collect it.
"""
from __future__ import annotations

import argparse
import sys
from typing import Sequence

import pygame
from pygame.locals import DOUBLEBUF

from glyph_walk.core.config import (
    LOG_CFG,
    RENDER_CFG,
    WORLD_CFG,
    LogCfg,
    RenderCfg,
    WorldCfg,
)
from glyph_walk.core.controls import controls_from_keys
from glyph_walk.core.logging_utils import SessionLogger
from glyph_walk.core.model import WorldState
from glyph_walk.core.timekeeping import FixedStepAccumulator, FrameTimer
from glyph_walk.core.update import spawn_screen_ripple, update_world
from glyph_walk.data.layout import create_world
from glyph_walk.render.scene import SceneRenderer


def _set_display_mode_with_vsync(size: tuple[int, int], flags: int = 0) -> pygame.Surface:
    """Create the display surface with double buffering and vsync when available."""
    flags |= DOUBLEBUF
    try:
        return pygame.display.set_mode(size, flags, vsync=1)
    except pygame.error as err:
        try:
            return pygame.display.set_mode(size, flags)
        except pygame.error:
            raise err


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Wander a quiet world and collect hidden glyphs.")
    parser.add_argument("--seed", type=int, default=None, help="World seed (random when omitted)")
    parser.add_argument(
        "--fps",
        type=int,
        default=RENDER_CFG.fps_cap,
        help="Display frame cap, 0 for uncapped (default: %(default)s)",
    )
    parser.add_argument("--log", action="store_true", help="Record the session to CSV files")
    parser.add_argument(
        "--log-dir",
        default=LOG_CFG.root_dir,
        help="Directory for session logs when --log is given (default: %(default)s)",
    )
    return parser


def session_meta(state: WorldState, seed: int | None, world_cfg: WorldCfg, log_cfg: LogCfg) -> dict:
    return {
        "seed": seed,
        "world_size": [world_cfg.width, world_cfg.height],
        "view_size": [world_cfg.view_width, world_cfg.view_height],
        "tick_rate": world_cfg.tick_rate,
        "stars": len(state.stars),
        "motes": len(state.motes),
        "glyphs": [
            {"id": g.id, "x": g.x, "y": g.y, "symbol": g.symbol, "radius": g.radius}
            for g in state.glyphs
        ],
        "sample_every_ticks": log_cfg.sample_every_ticks,
        "code_version": log_cfg.code_version,
    }


def run(
    seed: int | None = None,
    *,
    fps_cap: int = RENDER_CFG.fps_cap,
    log_dir: str | None = None,
    world_cfg: WorldCfg = WORLD_CFG,
    render_cfg: RenderCfg = RENDER_CFG,
    log_cfg: LogCfg = LOG_CFG,
) -> None:
    pygame.init()
    pygame.display.set_caption(render_cfg.title)
    screen = _set_display_mode_with_vsync(world_cfg.view_size)

    state = create_world(seed, world_cfg=world_cfg)
    renderer = SceneRenderer(world_cfg.view_size, world_cfg.size, render_cfg=render_cfg)
    clock = pygame.time.Clock()
    timer = FrameTimer()
    accumulator = FixedStepAccumulator(step=world_cfg.tick_seconds, max_substeps=world_cfg.max_substeps)

    logger: SessionLogger | None = None
    if log_dir is not None:
        logger = SessionLogger(log_dir)
        logger.write_meta(session_meta(state, seed, world_cfg, log_cfg))
        logger.log_state(state)

    try:
        running = True
        while running:
            # --- Input ---
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    ripple_event = spawn_screen_ripple(state, event.pos)
                    if logger is not None:
                        logger.log_event(ripple_event)

            # --- Update ---
            controls = controls_from_keys(pygame.key.get_pressed())
            accumulator.accrue(timer.tick())
            for _ in range(accumulator.consume()):
                for world_event in update_world(state, controls, world_cfg.tick_seconds, world_cfg=world_cfg):
                    if logger is not None:
                        logger.log_event(world_event)
                if logger is not None and state.ticks % log_cfg.sample_every_ticks == 0:
                    logger.log_state(state)

            # --- Draw ---
            renderer.render(screen, state, fps=clock.get_fps())
            pygame.display.flip()
            clock.tick(fps_cap)
    finally:
        if logger is not None:
            logger.log_state(state)
            logger.close()
            print(f"Session saved to {logger.session_dir}")
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.fps < 0:
        parser.error("--fps must be zero or positive")
    run(
        args.seed,
        fps_cap=args.fps,
        log_dir=args.log_dir if args.log else None,
    )


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pygame.quit()
        sys.exit(0)
