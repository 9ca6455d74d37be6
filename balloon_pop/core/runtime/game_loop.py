"""
game_loop.py
------------
Defines the GameLoop class that hosts the game in a pygame window.

Responsibilities
----------------
- Initialize pygame, the window and the canvas region
- Build the event bus, the scene stack and the Game driver
- Translate pygame input into click/touchstart notifications
- Maintain the main timing loop (event → update → render)
"""

import random

import pygame

from balloon_pop.core.debug.debug_logger import DebugLogger
from balloon_pop.core.runtime.canvas import Canvas
from balloon_pop.core.runtime.game import Game
from balloon_pop.core.runtime.game_settings import Canvas as CanvasSettings, Display
from balloon_pop.core.services.config_manager import load_config
from balloon_pop.core.services.event_manager import EventManager
from balloon_pop.core.services.input_events import (
    EVENT_CLICK,
    EVENT_TOUCHSTART,
    TouchEvent,
    pointer_from_finger,
    pointer_from_mouse,
)
from balloon_pop.core.services.state_manager import StateManager
from balloon_pop.scenes.balloon_scene import DEFAULT_BALLOON_CONFIG, BalloonScene
from balloon_pop.scenes.help_overlay_scene import HelpOverlayScene

BALLOON_STATE = "balloon"
HELP_STATE = "help"


class GameLoop:
    """Core runtime controller that manages the game's main loop."""

    def __init__(self, window_size=(Display.WIDTH, Display.HEIGHT), canvas_width=CanvasSettings.WIDTH,
                 fps=Display.FPS, seed=None, config_file="balloons.json"):
        """
        Args:
            window_size: (width, height) of the pygame window
            canvas_width: Width of the centred play area
            fps: Frame cap
            seed: Optional RNG seed for reproducible spawns
            config_file: Balloon tuning file name or path
        """
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.display.set_caption(Display.CAPTION)
        self.screen = pygame.display.set_mode(window_size)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.running = True
        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {window_size[0]}x{window_size[1]} @ {fps} FPS")

        self.canvas = Canvas(self.screen, canvas_width)
        self.events = EventManager()
        self.states = StateManager(self.canvas, self.events)

        config = load_config(config_file, DEFAULT_BALLOON_CONFIG)
        self.states.register_state(BALLOON_STATE, BalloonScene(config, random.Random(seed)))
        self.states.register_state(HELP_STATE, HelpOverlayScene())
        self.states.push_state(BALLOON_STATE)

        self.game = Game(self.canvas, self.states, self.events)
        DebugLogger.init_entry("GameLoop Runtime")

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================
    def run(self):
        """Main loop that runs until the window is closed."""
        DebugLogger.section("Game Loop")

        while self.running:
            self._handle_events()
            self.game.update(pygame.time.get_ticks())

            self.screen.fill(Display.BACKGROUND_COLOR)
            self.game.draw()
            pygame.display.flip()

            self.clock.tick(self.fps)

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================
    def _handle_events(self):
        """
        Route pygame events to the scene stack.

        All fingers that went down this frame are batched into one
        touchstart notification. Mouse events synthesized from touches
        are ignored so a tap is never counted twice.
        """
        touches = []

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_h:
                    self.toggle_help()

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1 and not getattr(event, "touch", False):
                    self.states.notify_top(EVENT_CLICK, pointer_from_mouse(event))

            elif event.type == pygame.FINGERDOWN:
                touches.append(pointer_from_finger(event, self.screen.get_size()))

        if touches:
            self.states.notify_top(EVENT_TOUCHSTART, TouchEvent(touches))

    def toggle_help(self):
        """Push the help overlay, or pop it if it is already on top."""
        if self.states.depth > 1:
            self.states.pop_state()
        else:
            self.states.push_state(HELP_STATE)
