"""
canvas.py
---------
Fixed-width play area centred inside the window surface.

Scenes draw on the canvas subsurface and map window (page) coordinates into
canvas-local coordinates through the canvas bounding rect.
"""

from typing import Optional, Tuple

import pygame

from balloon_pop.core.runtime.game_settings import Canvas as CanvasSettings


class Canvas:
    """Drawable region of the window with its own local coordinate space."""

    def __init__(self, window: pygame.Surface, width: Optional[int] = None,
                 height: Optional[int] = None, background=CanvasSettings.BACKGROUND_COLOR):
        """
        Args:
            window: Window (or any host) surface the canvas lives in
            width: Canvas width, clamped to the window width
            height: Canvas height, defaults to the full window height
            background: Fill color used by clear()
        """
        win_w, win_h = window.get_size()
        self.width = min(width or CanvasSettings.WIDTH, win_w)
        self.height = min(height or win_h, win_h)
        self.background = background
        self.window = window

        left = (win_w - self.width) // 2
        top = (win_h - self.height) // 2
        self._rect = pygame.Rect(left, top, self.width, self.height)
        self._surface = window.subsurface(self._rect)

    # ===========================================================
    # Drawing
    # ===========================================================

    def get_context(self) -> pygame.Surface:
        """Surface to draw on, in canvas-local coordinates."""
        return self._surface

    def clear(self) -> None:
        self._surface.fill(self.background)

    # ===========================================================
    # Coordinate Mapping
    # ===========================================================

    def get_bounding_rect(self) -> pygame.Rect:
        """Canvas placement in window coordinates."""
        return self._rect.copy()

    def to_local(self, page_x: float, page_y: float) -> Tuple[float, float]:
        """Map window coordinates to canvas-local coordinates."""
        return page_x - self._rect.left, page_y - self._rect.top

    def contains(self, x: float, y: float) -> bool:
        """True if a canvas-local point lies strictly inside the canvas."""
        return 0 < x < self.width and 0 < y < self.height
