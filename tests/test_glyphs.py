from __future__ import annotations

import numpy as np
import pytest

from glyph_walk.core.config import RIPPLE_CFG
from glyph_walk.core.controls import Controls
from glyph_walk.core.model import Glyph
from glyph_walk.core.update import update_glyphs, update_world


def make_glyph(x: float, y: float, idx: int = 0) -> Glyph:
    return Glyph(id=idx, x=x, y=y, symbol="✶", radius=36.0, seed=1.5)


def test_discover_is_one_way() -> None:
    glyph = make_glyph(0.0, 0.0)
    assert glyph.discover() is True
    assert glyph.discover() is False
    assert glyph.discovered is True
    assert glyph.pulse == 1.0


def test_collect_requires_discovery() -> None:
    glyph = make_glyph(0.0, 0.0)
    with pytest.raises(ValueError):
        glyph.collect()
    glyph.discover()
    assert glyph.collect() is True
    assert glyph.collect() is False
    assert glyph.discovered and glyph.collected


def test_glyph_in_padded_view_is_discovered(empty_world) -> None:
    state = empty_world
    state.camera.set_position((1000.0, 1000.0))
    inside = make_glyph(1000.0 - 30.0, 1200.0, 0)
    outside = make_glyph(1000.0 - 45.0, 1200.0, 1)
    state.glyphs.extend([inside, outside])

    events = update_glyphs(state, Controls())

    assert inside.discovered
    assert not outside.discovered
    assert state.discovered_count == 1
    assert [event.type for event in events] == ["discovered"]
    assert events[0].details == {"glyph": 0}


def test_pulse_decays_after_discovery(empty_world) -> None:
    state = empty_world
    state.camera.set_position((1000.0, 1000.0))
    glyph = make_glyph(1200.0, 1200.0)
    state.glyphs.append(glyph)

    update_glyphs(state, Controls())
    assert glyph.pulse == pytest.approx(0.97)
    for _ in range(100):
        update_glyphs(state, Controls())
    assert glyph.pulse == 0.0


def test_collecting_needs_hold_key_and_proximity(empty_world) -> None:
    state = empty_world
    state.camera.set_position((1000.0, 1000.0))
    glyph = make_glyph(1400.0, 1300.0)
    state.glyphs.append(glyph)
    state.player.position[:] = (1400.0 + 20.0, 1300.0)

    update_glyphs(state, Controls())
    assert glyph.discovered and not glyph.collected

    state.player.position[:] = (1400.0 + 50.0, 1300.0)
    update_glyphs(state, Controls(collect=True))
    assert not glyph.collected

    state.player.position[:] = (1400.0 + 20.0, 1300.0)
    events = update_glyphs(state, Controls(collect=True))
    assert glyph.collected
    assert state.collected_count == 1
    assert [event.type for event in events] == ["collected"]

    assert len(state.ripples) == 1
    ripple = state.ripples[0]
    assert ripple.world is True
    assert (ripple.x, ripple.y) == (1400.0, 1300.0)
    assert ripple.alpha == RIPPLE_CFG.world_alpha


def test_collected_glyph_is_ignored_afterwards(empty_world) -> None:
    state = empty_world
    state.camera.set_position((1000.0, 1000.0))
    glyph = make_glyph(1400.0, 1300.0)
    state.glyphs.append(glyph)
    state.player.position[:] = (1400.0, 1300.0)

    update_glyphs(state, Controls(collect=True))
    update_glyphs(state, Controls(collect=True))

    assert state.collected_count == 1
    assert state.discovered_count == 1
    assert len(state.ripples) == 1


def test_discovered_flags_never_revert_during_a_walk(world) -> None:
    previous = [g.discovered for g in world.glyphs]
    for step in range(3000):
        direction = (step // 400) % 4
        controls = Controls(
            right=direction == 0,
            down=direction == 1,
            left=direction == 2,
            up=direction == 3,
            collect=step % 3 == 0,
        )
        update_world(world, controls, 1 / 60)
        current = [g.discovered for g in world.glyphs]
        assert all(now or not before for before, now in zip(previous, current))
        assert all(g.discovered for g in world.glyphs if g.collected)
        previous = current

    assert world.discovered_count == sum(previous)
    assert world.collected_count == sum(g.collected for g in world.glyphs)
    assert np.isfinite(world.player.position).all()


def test_glyph_in_reach_but_unseen_is_not_collected(empty_world) -> None:
    state = empty_world
    state.camera.set_position((0.0, 0.0))
    x, y = (float(v) for v in state.player.position)
    glyph = make_glyph(x, y)
    state.glyphs.append(glyph)

    events = update_glyphs(state, Controls(collect=True))

    assert events == []
    assert not glyph.discovered
    assert not glyph.collected
    assert state.collected_count == 0
    assert state.ripples == []
