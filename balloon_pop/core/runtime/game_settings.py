"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Balloon Pop"

    BACKGROUND_COLOR = (40, 44, 52)


class Canvas:
    """Play area placed in the middle of the window."""
    WIDTH: int = 500
    BACKGROUND_COLOR = (236, 244, 252)


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    DEFAULT: str = None  # pygame default font
    HUD_SIZE: int = 32
    OVERLAY_TITLE_SIZE: int = 40
    OVERLAY_BODY_SIZE: int = 26


# ===========================================================
# Colors
# ===========================================================

class Colors:
    """Shared RGB values for rendering."""
    HUD_TEXT = (0, 0, 0)
    BALLOON_OUTLINE = (255, 255, 255)
    BOMB_MARK = (20, 20, 20)
    SPEEDUP_MARK = (255, 255, 255)
    OVERLAY_DIM = (0, 0, 0, 150)
    OVERLAY_TEXT = (240, 240, 240)

    BALLOON_PALETTE = (
        "#36F",
        "#F63",
        "#6F3",
        "#F60",
        "#F30",
        "#F66",
        "#9F0",
    )


# ===========================================================
# Bounds & Margins
# ===========================================================

class Bounds:
    """Margin values for balloon hit testing and cleanup."""
    HIT_MARGIN: int = 2
    OFFSCREEN_MARGIN: int = 10


# ===========================================================
# Balloon Geometry
# ===========================================================

class BalloonShape:
    """Default half-axes and spawn kinematics (pixels, pixels/second)."""
    SIZE_X: float = 35.0
    SIZE_Y: float = 40.0
    RISE_SPEED: float = 75.0
    SPEED_JITTER: float = 8.0
    OUTLINE_WIDTH: int = 3
    STRING_LENGTH: int = 7
