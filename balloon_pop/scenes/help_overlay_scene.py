"""
help_overlay_scene.py
---------------------
Translucent legend drawn over the balloon scene.

The scenes below keep updating and drawing; only input is captured here.
Any click or tap closes the overlay.
"""

import pygame

from balloon_pop.core.runtime.game_settings import Colors, Fonts
from balloon_pop.core.services.input_events import EVENT_CLICK, EVENT_TOUCHSTART
from balloon_pop.graphics.text import draw_text
from balloon_pop.scenes.base_scene import BaseScene


HELP_LINES = (
    "Click or tap balloons to pop them.",
    "Arrow balloons speed everything up.",
    "Dark-core balloons pop the whole sky.",
    "",
    "Click anywhere to continue.",
)


class HelpOverlayScene(BaseScene):
    """Legend overlay; pops itself on the first click or tap."""

    def __init__(self):
        super().__init__()
        self.manager = None

    def on_init(self, context):
        self.manager = context

    def handle_event(self, event_type: str, event):
        if event_type in (EVENT_CLICK, EVENT_TOUCHSTART):
            self.manager.pop_state()

    def draw(self, ctx, canvas):
        shade = pygame.Surface((canvas.width, canvas.height), pygame.SRCALPHA)
        shade.fill(Colors.OVERLAY_DIM)
        ctx.blit(shade, (0, 0))

        center_x = canvas.width // 2
        y = canvas.height // 3
        draw_text(ctx, "How to play", (center_x, y), color=Colors.OVERLAY_TEXT,
                  size=Fonts.OVERLAY_TITLE_SIZE, anchor="midtop")

        y += Fonts.OVERLAY_TITLE_SIZE + 16
        for line in HELP_LINES:
            if line:
                draw_text(ctx, line, (center_x, y), color=Colors.OVERLAY_TEXT,
                          size=Fonts.OVERLAY_BODY_SIZE, anchor="midtop")
            y += Fonts.OVERLAY_BODY_SIZE + 6
