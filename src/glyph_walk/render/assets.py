from __future__ import annotations

from collections import OrderedDict
from typing import Iterable

import pygame


Color = tuple[int, int, int] | tuple[int, int, int, int]


def quantize_alpha(alpha: float, step: int = 4) -> int:
    """Clamp *alpha* to 0..255 and snap it so cached sprites stay reusable."""

    value = int(max(0.0, min(255.0, alpha)))
    if value >= 255:
        return 255
    return (value // step) * step


class AssetLibrary:
    """Cache for fonts and the translucent sprites drawn every frame."""

    def __init__(self, max_sprites: int = 1024) -> None:
        self._fonts: dict[tuple[tuple[str, ...], int, bool], pygame.font.Font] = {}
        self._sprites: OrderedDict[tuple[object, ...], pygame.Surface] = OrderedDict()
        self._max_sprites = max(16, max_sprites)

    def font(self, names: Iterable[str], size: int, *, bold: bool = False) -> pygame.font.Font:
        key = (tuple(names), size, bold)
        cached = self._fonts.get(key)
        if cached is None:
            cached = load_font(key[0], size, bold=bold)
            self._fonts[key] = cached
        return cached

    def _remember(self, key: tuple[object, ...], surface: pygame.Surface) -> pygame.Surface:
        self._sprites[key] = surface
        if len(self._sprites) > self._max_sprites:
            self._sprites.popitem(last=False)
        return surface

    def _lookup(self, key: tuple[object, ...]) -> pygame.Surface | None:
        cached = self._sprites.get(key)
        if cached is not None:
            self._sprites.move_to_end(key)
        return cached

    def circle_sprite(self, radius: int, color: tuple[int, int, int, int], width: int = 0) -> pygame.Surface:
        if radius <= 0:
            raise ValueError("Circle sprite radius must be positive")
        key = ("circle", radius, color, width)
        cached = self._lookup(key)
        if cached is not None:
            return cached
        sprite = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(sprite, color, (radius, radius), radius, width)
        return self._remember(key, sprite)

    def flat_surface(self, size: tuple[int, int], color: tuple[int, int, int, int]) -> pygame.Surface:
        key = ("flat", size, color)
        cached = self._lookup(key)
        if cached is not None:
            return cached
        surface = pygame.Surface(size, pygame.SRCALPHA)
        surface.fill(color)
        return self._remember(key, surface)

    def vertical_wash(
        self,
        size: tuple[int, int],
        color: tuple[int, int, int],
        top_alpha: int,
        row: int = 3,
    ) -> pygame.Surface:
        """Gradient that fades from *top_alpha* at the top to clear at the bottom."""

        key = ("wash", size, color, top_alpha, row)
        cached = self._lookup(key)
        if cached is not None:
            return cached
        width, height = size
        surface = pygame.Surface(size, pygame.SRCALPHA)
        for y in range(0, height, max(1, row)):
            alpha = int(top_alpha * (1.0 - y / height))
            surface.fill((*color, alpha), pygame.Rect(0, y, width, row))
        return self._remember(key, surface)

    def vignette(self, size: tuple[int, int], steps: int, max_alpha: int, band: int, radius: int) -> pygame.Surface:
        """Dark frame that is strongest at the screen edge."""

        key = ("vignette", size, steps, max_alpha, band, radius)
        cached = self._lookup(key)
        if cached is not None:
            return cached
        width, height = size
        surface = pygame.Surface(size, pygame.SRCALPHA)
        for i in range(steps):
            alpha = int(max_alpha * (1.0 - i / max(1, steps - 1)))
            inset = i * band
            rect = pygame.Rect(inset, inset, width - inset * 2, height - inset * 2)
            if rect.width <= 0 or rect.height <= 0:
                break
            pygame.draw.rect(surface, (0, 0, 0, alpha), rect, band, border_radius=radius)
        return self._remember(key, surface)

    def text_sprite(self, font: pygame.font.Font, text: str, color: Color, alpha: int) -> pygame.Surface:
        """Rendered text faded to *alpha*, shared between frames."""

        rendered = get_text_surface(font, text, color)
        if alpha >= 255:
            return rendered
        key = ("text", id(font), text, color, alpha)
        cached = self._lookup(key)
        if cached is not None:
            return cached
        faded = rendered.copy()
        faded.set_alpha(alpha)
        return self._remember(key, faded)


_TEXT_SURFACE_CACHE_MAX_SIZE = 256
_TEXT_SURFACE_CACHE: OrderedDict[tuple[int, str, Color], pygame.Surface] = OrderedDict()


def get_text_surface(font: pygame.font.Font, text: str, color: Color) -> pygame.Surface:
    """Return a cached rendered surface for the given font, text and color."""

    key = (id(font), text, color)
    cached = _TEXT_SURFACE_CACHE.get(key)
    if cached is not None:
        _TEXT_SURFACE_CACHE.move_to_end(key)
        return cached
    rendered = font.render(text, True, color)
    _TEXT_SURFACE_CACHE[key] = rendered
    if len(_TEXT_SURFACE_CACHE) > _TEXT_SURFACE_CACHE_MAX_SIZE:
        _TEXT_SURFACE_CACHE.popitem(last=False)
    return rendered


def load_font(preferred_names: Iterable[str], size: int, *, bold: bool = False) -> pygame.font.Font:
    names = list(preferred_names)
    for name in names:
        try:
            match = pygame.font.match_font(name, bold=bold)
        except (OSError, ValueError):
            match = None
        if match:
            return pygame.font.Font(match, size)
    fallback = names[0] if names else None
    return pygame.font.SysFont(fallback, size, bold=bold)
