"""
Runtime exports.

Provides game-wide constants, the canvas abstraction and the frame driver.
"""

from balloon_pop.core.runtime.game_settings import (
    Display,
    Canvas as CanvasSettings,
    Fonts,
    Colors,
    Bounds,
    BalloonShape,
)
from balloon_pop.core.runtime.canvas import Canvas
from balloon_pop.core.runtime.game import Game

__all__ = [
    # Settings
    'Display',
    'CanvasSettings',
    'Fonts',
    'Colors',
    'Bounds',
    'BalloonShape',
    # Runtime
    'Canvas',
    'Game',
]
