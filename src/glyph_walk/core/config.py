"""Configuration dataclasses for the glyph walk."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WorldCfg:
    width: float = 3600.0
    height: float = 2200.0
    view_width: int = 900
    view_height: int = 540
    num_stars: int = 280
    num_motes: int = 140
    num_glyphs: int = 26
    glyph_edge_margin: float = 120.0
    glyph_radius_range: tuple[float, float] = (28.0, 44.0)
    glyph_symbols: tuple[str, ...] = ("✶", "✷", "✹", "❂", "❀", "✦", "✧", "✩", "✺", "✻")
    discovery_padding: float = 40.0
    pulse_decay: float = 0.03
    tick_rate: float = 60.0
    max_substeps: int = 5

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("World size must be positive")
        if self.view_width <= 0 or self.view_height <= 0:
            raise ValueError("View size must be positive")
        if self.view_width > self.width or self.view_height > self.height:
            raise ValueError("View must fit inside the world")
        if self.tick_rate <= 0.0:
            raise ValueError("tick_rate must be positive")
        lo, hi = self.glyph_radius_range
        if lo <= 0 or hi < lo:
            raise ValueError("glyph_radius_range must be a positive, ordered pair")

    @property
    def size(self) -> tuple[float, float]:
        return self.width, self.height

    @property
    def view_size(self) -> tuple[int, int]:
        return self.view_width, self.view_height

    @property
    def tick_seconds(self) -> float:
        return 1.0 / self.tick_rate


@dataclass(frozen=True)
class PlayerCfg:
    start_fraction: tuple[float, float] = (0.5, 0.55)
    radius: float = 12.0
    max_speed: float = 2.25
    acceleration: float = 0.08
    drag: float = 0.985
    bounds_margin: float = 30.0


@dataclass(frozen=True)
class CameraCfg:
    smoothing: float = 0.06
    # (amplitude, frequency) pairs summed into the breathing drift
    drift_x: tuple[tuple[float, float], ...] = ((9.0, 0.55), (5.0, 0.13))
    drift_y: tuple[tuple[float, float], ...] = ((8.0, 0.48), (4.0, 0.17))


@dataclass(frozen=True)
class RippleCfg:
    world_alpha: float = 180.0
    world_growth: float = 3.6
    world_fade: float = 4.8
    screen_alpha: float = 170.0
    screen_growth: float = 3.1
    screen_fade: float = 4.2


@dataclass(frozen=True)
class RenderCfg:
    title: str = "Glyph Walk"
    background_color: tuple[int, int, int] = (12, 12, 12)
    world_base_color: tuple[int, int, int] = (18, 26, 38)
    world_base_alpha: int = 150
    star_color: tuple[int, int, int] = (230, 235, 255)
    star_alpha: int = 90
    star_parallax: float = 0.25
    star_cull_margin: int = 50
    sky_wash_color: tuple[int, int, int] = (50, 80, 120)
    sky_wash_alpha: int = 35
    sky_wash_row: int = 3
    path_color: tuple[int, int, int, int] = (40, 70, 95, 28)
    path_count: int = 14
    path_vertices: int = 10
    island_count: int = 26
    island_color: tuple[int, int, int, int] = (25, 40, 55, 55)
    island_shadow_color: tuple[int, int, int, int] = (22, 36, 50, 40)
    monument_count: int = 10
    monument_size: tuple[int, int] = (140, 90)
    monument_color: tuple[int, int, int, int] = (255, 255, 255, 10)
    mote_color: tuple[int, int, int] = (210, 240, 255)
    glyph_hidden_color: tuple[int, int, int] = (200, 230, 255)
    glyph_hidden_alpha: int = 10
    glyph_color: tuple[int, int, int] = (220, 245, 255)
    glyph_ring_color: tuple[int, int, int] = (200, 230, 255)
    glyph_hint_color: tuple[int, int, int, int] = (240, 250, 255, 110)
    glyph_font_size: int = 24
    glyph_hidden_font_size: int = 18
    glyph_font_names: tuple[str, ...] = (
        "dejavusans",
        "segoeuisymbol",
        "notosanssymbols2",
        "applesymbols",
        "arialunicodems",
    )
    player_glow_color: tuple[int, int, int, int] = (170, 220, 255, 30)
    player_inner_color: tuple[int, int, int, int] = (200, 240, 255, 60)
    player_core_color: tuple[int, int, int, int] = (235, 250, 255, 200)
    player_tail_color: tuple[int, int, int, int] = (235, 250, 255, 110)
    vignette_steps: int = 14
    vignette_max_alpha: int = 70
    vignette_band: int = 3
    vignette_radius: int = 18
    breathe_dim_alpha: float = 18.0
    ripple_color: tuple[int, int, int] = (235, 250, 255)
    ripple_width: int = 2
    hud_panel_rect: tuple[int, int, int, int] = (12, 12, 360, 78)
    hud_panel_color: tuple[int, int, int, int] = (0, 0, 0, 90)
    hud_panel_radius: int = 14
    hud_title_color: tuple[int, int, int] = (235, 235, 235)
    hud_text_color: tuple[int, int, int] = (210, 210, 210)
    hud_font_names: tuple[str, ...] = ("helvetica", "arial", "dejavusans")
    minimap_size: tuple[int, int] = (120, 78)
    minimap_gap: int = 14
    minimap_inset: int = 14
    minimap_frame_color: tuple[int, int, int, int] = (255, 255, 255, 40)
    minimap_dot_color: tuple[int, int, int, int] = (235, 250, 255, 200)
    fps_text_alpha: int = int(255 * 0.6)
    fps_cap: int = 60


@dataclass(frozen=True)
class LogCfg:
    root_dir: str = "data/walks"
    sample_every_ticks: int = 30
    code_version: str = "Glyph Walk v1.0"


WORLD_CFG = WorldCfg()
PLAYER_CFG = PlayerCfg()
CAMERA_CFG = CameraCfg()
RIPPLE_CFG = RippleCfg()
RENDER_CFG = RenderCfg()
LOG_CFG = LogCfg()


__all__ = [
    "CAMERA_CFG",
    "LOG_CFG",
    "PLAYER_CFG",
    "RENDER_CFG",
    "RIPPLE_CFG",
    "WORLD_CFG",
    "CameraCfg",
    "LogCfg",
    "PlayerCfg",
    "RenderCfg",
    "RippleCfg",
    "WorldCfg",
]
