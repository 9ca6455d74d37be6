"""
balloon_scene.py
----------------
The balloon-popping scene.

Responsibilities
----------------
- Own the live balloon list, the pop counter and the speed multiplier.
- Spawn one balloon whenever the jittered spawn countdown expires.
- Route clicks and touches to balloon hit tests.
- React to bus events: count pops, apply speedup boosts, chain bomb pops.
"""

import random

from balloon_pop.core.debug.debug_logger import DebugLogger
from balloon_pop.core.runtime.game_settings import Colors, Fonts
from balloon_pop.core.services.config_manager import load_config
from balloon_pop.core.services.event_manager import (
    EVENT_BALLOON_POPPED,
    EVENT_SPEEDUP,
    SpeedChangeEvent,
)
from balloon_pop.core.services.input_events import EVENT_CLICK, EVENT_TOUCHSTART
from balloon_pop.entities.balloon import Balloon
from balloon_pop.entities.balloon_types import BalloonType, build_variants, parse_color, roll_variant
from balloon_pop.graphics.text import draw_text
from balloon_pop.scenes.base_scene import BaseScene


DEFAULT_BALLOON_CONFIG = {
    "spawn": {"interval": 1000, "jitter": 250},
    "variant_thresholds": {"normal": 0.95, "speedup": 0.98},
    "palette": list(Colors.BALLOON_PALETTE),
    "variants": {
        "normal": {"popping_rate": 60.0, "popping_time_s": 0.15, "spawn_lift": 0.0},
        "speedup": {"popping_rate": 60.0, "popping_time_s": 0.15, "spawn_lift": 25.0},
        "bomb": {"popping_rate": 600.0, "popping_time_s": 0.08, "spawn_lift": 0.0},
    },
    "speedup": {"increment": 0.5, "duration": 3000},
    "bomb": {"spawn_penalty": 2000},
}


class BalloonScene(BaseScene):
    """Balloons rise, the player pops them."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, config=None, rng=None):
        """
        Args:
            config: Tuning dict shaped like DEFAULT_BALLOON_CONFIG
                    (loaded from balloons.json when omitted)
            rng: random.Random used for spawns

        Raises:
            ValueError: If the palette is empty
        """
        super().__init__()
        if config is None:
            config = load_config("balloons.json", DEFAULT_BALLOON_CONFIG)
        self.config = config
        self.rng = rng or random.Random()

        self.colors = [parse_color(c) for c in config["palette"]]
        if not self.colors:
            raise ValueError("Balloon palette must contain at least one color")
        self.variants = build_variants(config["variants"])

        self.canvas = None
        self.events = None
        self.balloons = []
        self.popped = 0
        self.spawn_countdown = 0.0
        self.speed_multiplier = 1.0

    # ===========================================================
    # Lifecycle
    # ===========================================================
    def on_init(self, context):
        """Reset the round and subscribe to bus events."""
        if self.events is not None:
            self.events.release(self)

        self.canvas = context.canvas
        self.events = context.events
        self.balloons = []
        self.popped = 0
        self.spawn_countdown = 0.0
        self.speed_multiplier = 1.0

        self.events.subscribe(EVENT_BALLOON_POPPED, self._on_balloon_popped, owner=self)
        self.events.subscribe(EVENT_SPEEDUP, self._on_speed_change, owner=self)
        DebugLogger.state("Balloon round started", category="scene")

    def on_disable(self):
        """Drop every subscription and pending callback owned by this scene."""
        if self.events is not None:
            self.events.release(self)
        DebugLogger.state(f"Balloon round ended with {self.popped} pops", category="scene")

    # ===========================================================
    # Update
    # ===========================================================
    def update(self, dt: float):
        self.spawn_countdown -= dt
        if self.spawn_countdown <= 0:
            spawn = self.config["spawn"]
            jitter = spawn["jitter"]
            self.spawn_countdown = spawn["interval"] + (self.rng.random() * 2 * jitter - jitter)
            self.spawn()

        for balloon in self.balloons:
            balloon.update(dt, self.speed_multiplier)

        before = len(self.balloons)
        self.balloons = [b for b in self.balloons if not b.is_removable()]
        if len(self.balloons) != before:
            DebugLogger.trace(f"Removed {before - len(self.balloons)} balloon(s)", category="entity_cleanup")

    def spawn(self) -> Balloon:
        """Add one balloon with a random color and a rolled variant."""
        color = self.rng.choice(self.colors)
        balloon_type = roll_variant(self.rng.random(), self.config["variant_thresholds"])
        balloon = Balloon(color, self.canvas, self.events, self.variants[balloon_type], rng=self.rng)
        self.balloons.append(balloon)
        DebugLogger.trace(f"Spawned {balloon!r} ({balloon_type.value})", category="entity_spawn")
        return balloon

    # ===========================================================
    # Input
    # ===========================================================
    def handle_event(self, event_type: str, event):
        if event_type == EVENT_CLICK:
            pointers = [event]
        elif event_type == EVENT_TOUCHSTART:
            pointers = list(event.touches)
        else:
            return

        points = [self.canvas.to_local(p.page_x, p.page_y) for p in pointers]
        points = [pt for pt in points if self.canvas.contains(*pt)]

        for point in points:
            for balloon in self.balloons:
                if not balloon.is_removable() and balloon.check_hit(point):
                    balloon.explode()

    # ===========================================================
    # Bus Handlers
    # ===========================================================
    def _on_balloon_popped(self, event):
        self.popped += 1
        balloon = event.balloon

        if balloon.balloon_type == BalloonType.SPEEDUP:
            boost = self.config["speedup"]
            increment = boost["increment"]
            self.events.publish(EVENT_SPEEDUP, SpeedChangeEvent(increment))
            self.events.call_later(
                boost["duration"],
                self.events.publish, EVENT_SPEEDUP, SpeedChangeEvent(-increment),
                owner=self,
            )

        elif balloon.balloon_type == BalloonType.BOMB:
            for other in list(self.balloons):
                if other is not balloon and not other.popping:
                    other.explode()
            self.spawn_countdown += self.config["bomb"]["spawn_penalty"]
            DebugLogger.action("Bomb balloon cleared the sky", category="event")

    def _on_speed_change(self, event):
        self.speed_multiplier += event.delta
        DebugLogger.trace(f"Speed multiplier now {self.speed_multiplier:.2f}", category="event")

    # ===========================================================
    # Rendering
    # ===========================================================
    def draw(self, ctx, canvas):
        for balloon in self.balloons:
            balloon.draw(ctx)

        draw_text(ctx, str(self.popped), (10, 10), color=Colors.HUD_TEXT, size=Fonts.HUD_SIZE)
        if self.speed_multiplier != 1.0:
            draw_text(ctx, f"x{self.speed_multiplier:.1f}", (canvas.width - 10, 10),
                      color=Colors.HUD_TEXT, size=Fonts.HUD_SIZE, anchor="topright")
