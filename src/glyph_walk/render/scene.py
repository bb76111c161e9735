"""Frame composition: parallax background, world layer, then screen overlays."""
from __future__ import annotations

import pygame

from glyph_walk.core.config import RENDER_CFG, RenderCfg
from glyph_walk.core.model import WorldState
from glyph_walk.data.layout import islands, monuments, path_points

from .assets import AssetLibrary
from .draw import (
    draw_glyphs,
    draw_islands,
    draw_monuments,
    draw_motes,
    draw_parallax_stars,
    draw_paths,
    draw_player,
    draw_ripples,
    draw_vignette,
)
from .ui import draw_fps, draw_hud, draw_minimap


class SceneRenderer:
    """Draws a :class:`WorldState` onto a view-sized surface."""

    def __init__(
        self,
        view_size: tuple[int, int],
        world_size: tuple[float, float],
        *,
        render_cfg: RenderCfg = RENDER_CFG,
        assets: AssetLibrary | None = None,
    ) -> None:
        self._view_size = view_size
        self._cfg = render_cfg
        self._assets = assets or AssetLibrary()
        self._overlay = pygame.Surface(view_size, pygame.SRCALPHA)
        self._islands = islands(render_cfg.island_count, world_size)
        self._monuments = monuments(render_cfg.monument_count, world_size)
        self._title_font = self._assets.font(render_cfg.hud_font_names, 14, bold=True)
        self._text_font = self._assets.font(render_cfg.hud_font_names, 12)
        self._fps_font = self._assets.font(("consolas", "dejavusansmono"), 14)

    @property
    def assets(self) -> AssetLibrary:
        return self._assets

    def _fresh_overlay(self) -> pygame.Surface:
        self._overlay.fill((0, 0, 0, 0))
        return self._overlay

    def render(self, surface: pygame.Surface, state: WorldState, fps: float | None = None) -> None:
        cfg = self._cfg
        assets = self._assets
        t = state.time
        camera = state.camera
        offset = (camera.x, camera.y)
        player_position = (float(state.player.position[0]), float(state.player.position[1]))

        # Far layer
        surface.fill(cfg.background_color)
        draw_parallax_stars(surface, state.stars, offset, t, render_cfg=cfg, assets=assets)
        surface.blit(
            assets.vertical_wash(self._view_size, cfg.sky_wash_color, cfg.sky_wash_alpha, cfg.sky_wash_row),
            (0, 0),
        )

        # World layer
        surface.blit(assets.flat_surface(self._view_size, (*cfg.world_base_color, cfg.world_base_alpha)), (0, 0))
        layer = self._fresh_overlay()
        paths = [path_points(i, t, state.size, cfg.path_vertices) for i in range(cfg.path_count)]
        draw_paths(layer, paths, offset, color=cfg.path_color)
        surface.blit(layer, (0, 0))
        draw_islands(surface, self._islands, offset, render_cfg=cfg, assets=assets)
        draw_motes(surface, state.motes, offset, render_cfg=cfg, assets=assets)

        layer = self._fresh_overlay()
        draw_glyphs(
            surface,
            layer,
            state.glyphs,
            offset,
            t,
            player_position,
            render_cfg=cfg,
            assets=assets,
        )
        surface.blit(layer, (0, 0))
        draw_player(surface, state.player, offset, t, render_cfg=cfg, assets=assets)

        layer = self._fresh_overlay()
        draw_monuments(layer, self._monuments, offset, render_cfg=cfg)
        surface.blit(layer, (0, 0))

        # Screen space
        draw_vignette(surface, t, render_cfg=cfg, assets=assets)
        layer = self._fresh_overlay()
        draw_ripples(layer, state.ripples, camera, render_cfg=cfg)
        surface.blit(layer, (0, 0))

        total = len(state.glyphs)
        draw_hud(
            surface,
            state.discovered_count,
            state.collected_count,
            total,
            title_font=self._title_font,
            text_font=self._text_font,
            render_cfg=cfg,
        )
        draw_minimap(surface, player_position, state.size, render_cfg=cfg)
        if fps is not None:
            draw_fps(surface, fps, self._fps_font, render_cfg=cfg)


__all__ = ["SceneRenderer"]
