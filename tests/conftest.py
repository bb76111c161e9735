from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from glyph_walk.data.layout import create_world


@pytest.fixture
def world():
    return create_world(seed=7)


@pytest.fixture
def empty_world():
    state = create_world(seed=7)
    state.stars.clear()
    state.motes.clear()
    state.glyphs.clear()
    return state
