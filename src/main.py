"""Run Glyph Walk straight from a source checkout: ``python src/main.py``."""

import pygame

from glyph_walk.app import main


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pygame.quit()
