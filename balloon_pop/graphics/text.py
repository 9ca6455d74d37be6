"""
text.py
-------
Cached font lookup and single-line text blitting.
"""

from typing import Dict, Tuple

import pygame

from balloon_pop.core.runtime.game_settings import Fonts

_FONT_CACHE: Dict[int, pygame.font.Font] = {}


def get_font(size: int) -> pygame.font.Font:
    """Return the default font at size, initialising pygame.font on first use."""
    if not pygame.font.get_init():
        pygame.font.init()
    font = _FONT_CACHE.get(size)
    if font is None:
        font = pygame.font.Font(Fonts.DEFAULT, size)
        _FONT_CACHE[size] = font
    return font


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int],
              color=(230, 230, 230), size: int = Fonts.HUD_SIZE, anchor: str = "topleft") -> pygame.Rect:
    """
    Blit one line of text.

    Args:
        anchor: Rect attribute pos refers to ("topleft", "topright", "center", ...)

    Returns:
        The rect the text was drawn into
    """
    rendered = get_font(size).render(text, True, color)
    rect = rendered.get_rect(**{anchor: pos})
    surface.blit(rendered, rect)
    return rect
