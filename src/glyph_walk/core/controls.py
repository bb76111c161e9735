"""Keyboard state mapped onto movement and collection intent."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pygame


RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)
UP_KEYS = (pygame.K_UP, pygame.K_w)
COLLECT_KEY = pygame.K_SPACE


@dataclass(frozen=True)
class Controls:
    right: bool = False
    left: bool = False
    down: bool = False
    up: bool = False
    collect: bool = False


def _any_down(pressed: Any, keys: tuple[int, ...]) -> bool:
    return any(bool(pressed[key]) for key in keys)


def controls_from_keys(pressed: Any) -> Controls:
    """Build :class:`Controls` from ``pygame.key.get_pressed()`` or a key mapping."""

    return Controls(
        right=_any_down(pressed, RIGHT_KEYS),
        left=_any_down(pressed, LEFT_KEYS),
        down=_any_down(pressed, DOWN_KEYS),
        up=_any_down(pressed, UP_KEYS),
        collect=bool(pressed[COLLECT_KEY]),
    )


__all__ = ["COLLECT_KEY", "Controls", "controls_from_keys"]
