"""Rendering helpers for the glyph walk."""

from .assets import (
    AssetLibrary,
    get_text_surface,
    load_font,
    quantize_alpha,
)
from .draw import (
    blit_circle,
    draw_glyphs,
    draw_islands,
    draw_monuments,
    draw_motes,
    draw_parallax_stars,
    draw_paths,
    draw_player,
    draw_ripples,
    draw_vignette,
    glyph_alpha,
)
from .scene import SceneRenderer
from .ui import (
    build_text_panel,
    draw_fps,
    draw_hud,
    draw_minimap,
    format_progress,
    minimap_point,
    minimap_rect,
)

__all__ = [
    "AssetLibrary",
    "SceneRenderer",
    "blit_circle",
    "build_text_panel",
    "draw_fps",
    "draw_glyphs",
    "draw_hud",
    "draw_islands",
    "draw_minimap",
    "draw_monuments",
    "draw_motes",
    "draw_parallax_stars",
    "draw_paths",
    "draw_player",
    "draw_ripples",
    "draw_vignette",
    "format_progress",
    "get_text_surface",
    "glyph_alpha",
    "load_font",
    "minimap_point",
    "minimap_rect",
    "quantize_alpha",
]
