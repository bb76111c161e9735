from __future__ import annotations

import pytest

from glyph_walk.app import build_parser, main, session_meta
from glyph_walk.core.config import LOG_CFG, WORLD_CFG


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])
    assert args.seed is None
    assert args.fps == 60
    assert args.log_dir == LOG_CFG.root_dir
    assert args.log is False


def test_logging_is_opt_in(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr("glyph_walk.app.run", lambda seed, **kwargs: calls.append(kwargs))
    main([])
    main(["--log", "--log-dir", "walks"])
    assert calls[0]["log_dir"] is None
    assert calls[1]["log_dir"] == "walks"


def test_negative_fps_is_rejected() -> None:
    with pytest.raises(SystemExit):
        main(["--fps", "-1"])


def test_session_meta_lists_glyphs(world) -> None:
    meta = session_meta(world, 7, WORLD_CFG, LOG_CFG)
    assert meta["seed"] == 7
    assert meta["world_size"] == [3600.0, 2200.0]
    assert len(meta["glyphs"]) == WORLD_CFG.num_glyphs
    assert set(meta["glyphs"][0]) == {"id", "x", "y", "symbol", "radius"}
