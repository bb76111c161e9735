from __future__ import annotations

import math

import numpy as np

from glyph_walk.core.config import CAMERA_CFG, PLAYER_CFG
from glyph_walk.core.controls import Controls
from glyph_walk.core.model import Mote, Player
from glyph_walk.core.physics import drift_offset, movement_intent, step_mote, step_player, wrap

WORLD = (3600.0, 2200.0)


def test_movement_intent_diagonal_is_not_faster() -> None:
    straight = movement_intent(Controls(right=True))
    diagonal = movement_intent(Controls(right=True, down=True))

    assert straight.tolist() == [1.0, 0.0]
    assert diagonal.tolist() == [0.5, 0.5]
    assert abs(diagonal).sum() == abs(straight).sum()


def test_movement_intent_opposite_keys_cancel() -> None:
    intent = movement_intent(Controls(right=True, left=True, up=True))
    assert intent.tolist() == [0.0, -1.0]


def test_player_eases_toward_max_speed_but_never_exceeds_it() -> None:
    player = Player(position=np.array([1800.0, 1100.0]))
    speeds = []
    for _ in range(400):
        step_player(player, Controls(right=True), WORLD)
        speeds.append(float(player.velocity[0]))

    assert speeds[0] < speeds[10] < speeds[100]
    assert max(speeds) < PLAYER_CFG.max_speed
    # drag keeps the steady state just under the target
    assert speeds[-1] > PLAYER_CFG.max_speed * 0.8


def test_player_glides_to_rest_after_release() -> None:
    player = Player(position=np.array([1800.0, 1100.0]), velocity=np.array([2.0, -1.0]))
    for _ in range(600):
        step_player(player, Controls(), WORLD)
    assert player.speed < 1e-6


def test_player_stays_inside_margin_bounds() -> None:
    player = Player(position=np.array([40.0, 2150.0]))
    margin = PLAYER_CFG.bounds_margin
    for step in range(2000):
        controls = Controls(left=True, down=True) if step < 1000 else Controls(right=True, up=True)
        step_player(player, controls, WORLD)
        assert margin <= player.position[0] <= WORLD[0] - margin
        assert margin <= player.position[1] <= WORLD[1] - margin
    assert player.position[0] > 40.0


def test_player_position_out_of_range_is_clamped() -> None:
    player = Player(position=np.array([-500.0, 99999.0]))
    step_player(player, Controls(), WORLD)
    assert player.position.tolist() == [30.0, 2170.0]


def test_drift_offset_is_small_and_periodic() -> None:
    limit_x = sum(amp for amp, _ in CAMERA_CFG.drift_x)
    limit_y = sum(amp for amp, _ in CAMERA_CFG.drift_y)
    for i in range(500):
        dx, dy = drift_offset(i * 0.37)
        assert abs(dx) <= limit_x
        assert abs(dy) <= limit_y
    assert drift_offset(0.0) == (0.0, 8.0)


def test_wrap_keeps_values_inside_extent() -> None:
    assert wrap(-1.0, 100.0) == 99.0
    assert wrap(101.0, 100.0) == 1.0
    assert wrap(50.0, 100.0) == 50.0


def test_mote_wraps_around_world_edges() -> None:
    mote = Mote(x=0.05, y=2199.99, size=2.0, alpha=80.0, vx=-0.25, vy=0.22, phase=0.0)
    step_mote(mote, WORLD)
    assert 0.0 <= mote.x <= WORLD[0]
    assert 0.0 <= mote.y <= WORLD[1]
    assert mote.x > 3000.0
    assert mote.y < 100.0
    assert math.isclose(mote.phase, 0.01)
