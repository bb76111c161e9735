from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

import pygame

from .assets import Color, get_text_surface

if TYPE_CHECKING:  # pragma: no cover
    from glyph_walk.core.config import RenderCfg


HUD_TITLE = "Glyph Walk"
HUD_HINTS = ("Move: WASD / Arrows", "Collect near a symbol: hold SPACE")


def format_progress(discovered: int, collected: int, total: int) -> str:
    return f"Discovered: {discovered}/{total}   Collected: {collected}/{total}"


def build_text_panel(
    lines: Sequence[tuple[str, tuple[int, int, int], pygame.font.Font]],
    size: tuple[int, int],
    *,
    background_color: Color,
    padding: tuple[int, int] = (12, 8),
    radius: int = 14,
    line_gap: int = 2,
) -> pygame.Surface:
    """Fixed-size translucent panel with one font per line."""

    if not lines:
        raise ValueError("lines must not be empty")
    padding_x, padding_y = padding
    panel_surface = pygame.Surface(size, pygame.SRCALPHA)
    pygame.draw.rect(
        panel_surface,
        background_color,
        panel_surface.get_rect(),
        border_radius=radius,
    )
    y = padding_y
    for text, color, font in lines:
        if text:
            panel_surface.blit(get_text_surface(font, text, color), (padding_x, y))
        y += font.get_linesize() + line_gap
    return panel_surface


def minimap_rect(render_cfg: RenderCfg) -> pygame.Rect:
    left, top, width, _ = render_cfg.hud_panel_rect
    map_w, map_h = render_cfg.minimap_size
    return pygame.Rect(left + width + render_cfg.minimap_gap, top, map_w, map_h)


def minimap_point(
    position: tuple[float, float],
    world_size: tuple[float, float],
    frame: pygame.Rect,
) -> tuple[int, int]:
    """Map a world position into *frame*, clamped to its edges."""

    fx = min(max(position[0] / world_size[0], 0.0), 1.0)
    fy = min(max(position[1] / world_size[1], 0.0), 1.0)
    return (
        int(round(frame.left + fx * frame.width)),
        int(round(frame.top + fy * frame.height)),
    )


def draw_hud(
    surface: pygame.Surface,
    discovered: int,
    collected: int,
    total: int,
    *,
    title_font: pygame.font.Font,
    text_font: pygame.font.Font,
    render_cfg: RenderCfg,
) -> None:
    left, top, width, height = render_cfg.hud_panel_rect
    lines = [
        (HUD_TITLE, render_cfg.hud_title_color, title_font),
        *((hint, render_cfg.hud_text_color, text_font) for hint in HUD_HINTS),
        (format_progress(discovered, collected, total), render_cfg.hud_text_color, text_font),
    ]
    panel = build_text_panel(
        lines,
        (width, height),
        background_color=render_cfg.hud_panel_color,
        radius=render_cfg.hud_panel_radius,
    )
    surface.blit(panel, (left, top))


def draw_minimap(
    surface: pygame.Surface,
    player_position: tuple[float, float],
    world_size: tuple[float, float],
    *,
    render_cfg: RenderCfg,
) -> None:
    """Mini-map with the player dot only; glyphs stay a secret."""

    outer = minimap_rect(render_cfg)
    panel = pygame.Surface(outer.size, pygame.SRCALPHA)
    pygame.draw.rect(panel, render_cfg.hud_panel_color, panel.get_rect(), border_radius=render_cfg.hud_panel_radius)

    inset = render_cfg.minimap_inset
    frame = pygame.Rect(inset, inset, outer.width - inset * 2, outer.height - inset * 2)
    pygame.draw.rect(panel, render_cfg.minimap_frame_color, frame, 1, border_radius=10)
    pygame.draw.circle(panel, render_cfg.minimap_dot_color, minimap_point(player_position, world_size, frame), 4)
    surface.blit(panel, outer.topleft)


def draw_fps(
    surface: pygame.Surface,
    fps_value: float,
    font: pygame.font.Font,
    *,
    render_cfg: RenderCfg,
) -> None:
    fps_text = font.render(f"FPS: {fps_value:.1f}", True, render_cfg.hud_text_color)
    fps_text.set_alpha(render_cfg.fps_text_alpha)
    width, height = surface.get_size()
    surface.blit(fps_text, fps_text.get_rect(bottomright=(width - 16, height - 16)))
