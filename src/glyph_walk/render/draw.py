from __future__ import annotations

import math
from typing import Iterable, Sequence, TYPE_CHECKING

import pygame

from glyph_walk.core.model import Glyph, Mote, Player, Ripple, Star
from glyph_walk.data.layout import Island, Monument

from .assets import AssetLibrary, quantize_alpha

if TYPE_CHECKING:  # pragma: no cover
    from glyph_walk.core.camera import Camera
    from glyph_walk.core.config import RenderCfg


def _clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def blit_circle(
    surface: pygame.Surface,
    center: tuple[float, float],
    radius: float,
    color: tuple[int, int, int],
    alpha: float,
    *,
    assets: AssetLibrary,
) -> None:
    """Alpha-blend a filled circle onto *surface*."""

    r = max(1, int(round(radius)))
    a = quantize_alpha(alpha)
    if a <= 0 or radius <= 0.0:
        return
    sprite = assets.circle_sprite(r, (*color, a))
    surface.blit(sprite, (int(center[0]) - r, int(center[1]) - r))


def draw_parallax_stars(
    surface: pygame.Surface,
    stars: Iterable[Star],
    camera_position: tuple[float, float],
    t: float,
    *,
    render_cfg: RenderCfg,
    assets: AssetLibrary,
) -> None:
    width, height = surface.get_size()
    offset_x = camera_position[0] * render_cfg.star_parallax
    offset_y = camera_position[1] * render_cfg.star_parallax
    margin = render_cfg.star_cull_margin
    for star in stars:
        x = star.x - offset_x
        y = star.y - offset_y
        if x < -margin or x > width + margin or y < -margin or y > height + margin:
            continue
        twinkle = 0.6 + 0.4 * math.sin(t * 0.9 + star.twinkle)
        blit_circle(
            surface,
            (x, y),
            star.size * 0.5,
            render_cfg.star_color,
            render_cfg.star_alpha * twinkle,
            assets=assets,
        )


def draw_paths(
    layer: pygame.Surface,
    paths: Iterable[Sequence[tuple[float, float]]],
    offset: tuple[float, float],
    *,
    color: tuple[int, int, int, int],
    width: int = 2,
) -> None:
    ox, oy = offset
    for points in paths:
        if len(points) < 2:
            continue
        shifted = [(x - ox, y - oy) for x, y in points]
        pygame.draw.lines(layer, color, False, shifted, width)


def draw_islands(
    surface: pygame.Surface,
    islands: Iterable[Island],
    offset: tuple[float, float],
    *,
    render_cfg: RenderCfg,
    assets: AssetLibrary,
) -> None:
    ox, oy = offset
    width, height = surface.get_size()
    body_rgb, body_alpha = render_cfg.island_color[:3], render_cfg.island_color[3]
    shade_rgb, shade_alpha = render_cfg.island_shadow_color[:3], render_cfg.island_shadow_color[3]
    for island in islands:
        x = island.x - ox
        y = island.y - oy
        radius = island.diameter * 0.5
        if x < -radius - 30 or x > width + radius + 30 or y < -radius - 30 or y > height + radius + 30:
            continue
        blit_circle(surface, (x, y), radius, body_rgb, body_alpha, assets=assets)
        blit_circle(surface, (x + 22, y - 14), radius * 0.72, shade_rgb, shade_alpha, assets=assets)


def draw_motes(
    surface: pygame.Surface,
    motes: Iterable[Mote],
    offset: tuple[float, float],
    *,
    render_cfg: RenderCfg,
    assets: AssetLibrary,
) -> None:
    ox, oy = offset
    width, height = surface.get_size()
    for mote in motes:
        x = mote.x - ox
        y = mote.y - oy
        if x < -8 or x > width + 8 or y < -8 or y > height + 8:
            continue
        blit_circle(surface, (x, y), mote.size * 0.5, render_cfg.mote_color, mote.alpha, assets=assets)


def glyph_alpha(glyph: Glyph, t: float) -> float:
    """Opacity of a discovered glyph: a slow pulse plus the discovery flash."""

    return _clamp(110 + 90 * math.sin(t * 1.2 + glyph.seed) + glyph.pulse * 160, 0.0, 255.0)


def _blit_text(
    surface: pygame.Surface,
    assets: AssetLibrary,
    font: pygame.font.Font,
    text: str,
    color: tuple[int, int, int],
    alpha: float,
    center: tuple[float, float],
) -> None:
    a = quantize_alpha(alpha)
    if a <= 0:
        return
    text_surf = assets.text_sprite(font, text, color, a)
    surface.blit(text_surf, text_surf.get_rect(center=(int(center[0]), int(center[1]))))


def draw_glyphs(
    surface: pygame.Surface,
    ring_layer: pygame.Surface,
    glyphs: Iterable[Glyph],
    offset: tuple[float, float],
    t: float,
    player_position: tuple[float, float],
    *,
    render_cfg: RenderCfg,
    assets: AssetLibrary,
) -> None:
    """Draw glyph symbols onto *surface* and their rings onto *ring_layer*."""

    ox, oy = offset
    width, height = surface.get_size()
    hidden_font = assets.font(render_cfg.glyph_font_names, render_cfg.glyph_hidden_font_size)
    font = assets.font(render_cfg.glyph_font_names, render_cfg.glyph_font_size)
    px, py = player_position

    for glyph in glyphs:
        if glyph.collected:
            continue
        x = glyph.x - ox
        y = glyph.y - oy
        reach = glyph.radius * 1.2 + 10
        if x < -reach or x > width + reach or y < -reach or y > height + reach:
            continue
        bob = 6 * math.sin(t * 0.9 + glyph.seed)

        if not glyph.discovered:
            _blit_text(
                surface,
                assets,
                hidden_font,
                glyph.symbol,
                render_cfg.glyph_hidden_color,
                render_cfg.glyph_hidden_alpha,
                (x, y + bob),
            )
            continue

        highlight = glyph.pulse * 160
        ring_radius = glyph.radius * 1.05 + 5 * math.sin(t * 2.0 + glyph.seed)
        ring_alpha = quantize_alpha(20 + highlight)
        if ring_alpha > 0 and ring_radius > 2:
            pygame.draw.circle(
                ring_layer,
                (*render_cfg.glyph_ring_color, ring_alpha),
                (int(x), int(y)),
                int(ring_radius),
                2,
            )

        _blit_text(surface, assets, font, glyph.symbol, render_cfg.glyph_color, glyph_alpha(glyph, t), (x, y + bob))

        if math.hypot(px - glyph.x, py - glyph.y) < glyph.radius:
            pygame.draw.circle(
                ring_layer,
                render_cfg.glyph_hint_color,
                (int(x), int(y)),
                int(glyph.radius * 1.1),
                2,
            )


def draw_player(
    surface: pygame.Surface,
    player: Player,
    offset: tuple[float, float],
    t: float,
    *,
    render_cfg: RenderCfg,
    assets: AssetLibrary,
) -> None:
    x = float(player.position[0]) - offset[0]
    y = float(player.position[1]) - offset[1]
    breathe = 0.6 + 0.4 * math.sin(t * 1.1)
    glow = 26 + breathe * 10 + player.speed * 6

    glow_rgb, glow_alpha = render_cfg.player_glow_color[:3], render_cfg.player_glow_color[3]
    inner_rgb, inner_alpha = render_cfg.player_inner_color[:3], render_cfg.player_inner_color[3]
    core_rgb, core_alpha = render_cfg.player_core_color[:3], render_cfg.player_core_color[3]
    tail_rgb, tail_alpha = render_cfg.player_tail_color[:3], render_cfg.player_tail_color[3]

    blit_circle(surface, (x, y), glow * 1.3, glow_rgb, glow_alpha, assets=assets)
    blit_circle(surface, (x, y), glow * 0.85, inner_rgb, inner_alpha, assets=assets)
    blit_circle(surface, (x, y), player.radius, core_rgb, core_alpha, assets=assets)

    tail_x = x - float(player.velocity[0]) * 8
    tail_y = y - float(player.velocity[1]) * 8
    blit_circle(surface, (tail_x, tail_y), player.radius * 0.6, tail_rgb, tail_alpha, assets=assets)


def draw_monuments(
    layer: pygame.Surface,
    monuments: Iterable[Monument],
    offset: tuple[float, float],
    *,
    render_cfg: RenderCfg,
) -> None:
    ox, oy = offset
    w, h = render_cfg.monument_size
    for monument in monuments:
        rect = pygame.Rect(int(monument.x - ox), int(monument.y - oy), w, h)
        if not rect.colliderect(layer.get_rect()):
            continue
        pygame.draw.rect(layer, render_cfg.monument_color, rect, 2, border_radius=16)


def draw_vignette(
    surface: pygame.Surface,
    t: float,
    *,
    render_cfg: RenderCfg,
    assets: AssetLibrary,
) -> None:
    size = surface.get_size()
    frame = assets.vignette(
        size,
        render_cfg.vignette_steps,
        render_cfg.vignette_max_alpha,
        render_cfg.vignette_band,
        render_cfg.vignette_radius,
    )
    surface.blit(frame, (0, 0))

    breathe = 0.5 + 0.5 * math.sin(t * 0.9)
    dim = quantize_alpha(render_cfg.breathe_dim_alpha * breathe, step=1)
    if dim > 0:
        surface.blit(assets.flat_surface(size, (0, 0, 0, dim)), (0, 0))


def draw_ripples(
    layer: pygame.Surface,
    ripples: Iterable[Ripple],
    camera: Camera,
    *,
    render_cfg: RenderCfg,
) -> None:
    """World ripples follow the camera; screen ripples stay where they were clicked."""

    for ripple in ripples:
        alpha = quantize_alpha(ripple.alpha, step=1)
        radius = int(ripple.diameter * 0.5)
        if alpha <= 0 or radius <= render_cfg.ripple_width:
            continue
        if ripple.world:
            center = camera.world_to_screen(ripple.x, ripple.y)
        else:
            center = (int(ripple.x), int(ripple.y))
        pygame.draw.circle(
            layer,
            (*render_cfg.ripple_color, alpha),
            center,
            radius,
            render_cfg.ripple_width,
        )
