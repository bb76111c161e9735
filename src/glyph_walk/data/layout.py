"""World population and the fixed background geometry."""
from __future__ import annotations

import math
import random
from dataclasses import dataclass

import numpy as np

from glyph_walk.core.camera import Camera
from glyph_walk.core.config import PLAYER_CFG, WORLD_CFG, PlayerCfg, WorldCfg
from glyph_walk.core.model import Glyph, Mote, Player, Star, WorldState


TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class Island:
    x: float
    y: float
    diameter: float


@dataclass(frozen=True)
class Monument:
    x: float
    y: float


def generate_stars(count: int, size: tuple[float, float], rng: random.Random) -> list[Star]:
    width, height = size
    return [
        Star(
            x=rng.uniform(0, width),
            y=rng.uniform(0, height),
            size=rng.uniform(0.6, 2.2),
            twinkle=rng.uniform(0, TWO_PI),
        )
        for _ in range(count)
    ]


def make_mote(size: tuple[float, float], rng: random.Random) -> Mote:
    width, height = size
    return Mote(
        x=rng.uniform(0, width),
        y=rng.uniform(0, height),
        size=rng.uniform(1.5, 4.5),
        alpha=rng.uniform(50, 140),
        vx=rng.uniform(-0.25, 0.25),
        vy=rng.uniform(-0.22, 0.22),
        phase=rng.uniform(0, TWO_PI),
    )


def generate_motes(count: int, size: tuple[float, float], rng: random.Random) -> list[Mote]:
    return [make_mote(size, rng) for _ in range(count)]


def generate_glyphs(cfg: WorldCfg, rng: random.Random) -> list[Glyph]:
    margin = cfg.glyph_edge_margin
    lo, hi = cfg.glyph_radius_range
    return [
        Glyph(
            id=idx,
            x=rng.uniform(margin, cfg.width - margin),
            y=rng.uniform(margin, cfg.height - margin),
            symbol=rng.choice(cfg.glyph_symbols),
            seed=rng.uniform(0, 1000),
            radius=rng.uniform(lo, hi),
        )
        for idx in range(cfg.num_glyphs)
    ]


def create_world(
    seed: int | None = None,
    *,
    world_cfg: WorldCfg = WORLD_CFG,
    player_cfg: PlayerCfg = PLAYER_CFG,
) -> WorldState:
    """Build a fresh world. The same *seed* always yields the same world."""

    rng = random.Random(seed)
    size = world_cfg.size
    fx, fy = player_cfg.start_fraction
    player = Player(
        position=np.array([world_cfg.width * fx, world_cfg.height * fy], dtype=float),
        max_speed=player_cfg.max_speed,
        radius=player_cfg.radius,
    )
    camera = Camera(world_cfg.view_size, size)
    return WorldState(
        size=size,
        player=player,
        camera=camera,
        stars=generate_stars(world_cfg.num_stars, size, rng),
        motes=generate_motes(world_cfg.num_motes, size, rng),
        glyphs=generate_glyphs(world_cfg, rng),
    )


def path_points(
    index: int,
    t: float,
    size: tuple[float, float],
    vertices: int = 10,
) -> list[tuple[float, float]]:
    """Vertices of one faint wandering path at time *t*."""

    width, height = size
    x0 = (index * 260 + 120) % width
    y0 = (index * 140 + 180) % height
    points: list[tuple[float, float]] = []
    for k in range(vertices):
        x = x0 + k * 160 + math.sin(t * 0.2 + index + k) * 30
        y = y0 + math.sin(k * 0.9 + index) * 120 + math.cos(t * 0.18 + k) * 22
        points.append((min(max(x, 0.0), width), min(max(y, 0.0), height)))
    return points


def islands(count: int, size: tuple[float, float]) -> list[Island]:
    width, height = size
    return [
        Island(
            x=(i * 310 + 200) % width,
            y=(i * 190 + 260) % height,
            diameter=80 + (i % 5) * 18,
        )
        for i in range(count)
    ]


def monuments(count: int, size: tuple[float, float]) -> list[Monument]:
    width, height = size
    return [Monument(x=(i * 520 + 380) % width, y=(i * 340 + 420) % height) for i in range(count)]


__all__ = [
    "Island",
    "Monument",
    "create_world",
    "generate_glyphs",
    "generate_motes",
    "generate_stars",
    "islands",
    "make_mote",
    "monuments",
    "path_points",
]
