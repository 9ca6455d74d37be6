"""
balloon.py
----------
Pop-able balloon entity shared by every variant.

Responsibilities
----------------
- Rise with linear motion scaled by the scene speed multiplier.
- Bounce off the vertical canvas edges.
- Run the ALIVE -> POPPING -> REMOVED state machine.
- Hit-test points against a slightly enlarged ellipse.
"""

import random

import pygame

from balloon_pop.core.debug.debug_logger import DebugLogger
from balloon_pop.core.runtime.game_settings import BalloonShape, Bounds, Colors
from balloon_pop.core.services.event_manager import EVENT_BALLOON_POPPED, BalloonPoppedEvent
from balloon_pop.entities.balloon_types import BalloonType, BalloonVariant
from balloon_pop.entities.base_entity import BaseEntity
from balloon_pop.entities.entity_state import LifecycleState


class Balloon(BaseEntity):
    """One balloon; variant behaviour comes from its BalloonVariant."""

    __slots__ = (
        'size', 'color', 'variant', 'canvas_size', 'events',
        'popping', 'popping_timer', 'popping_rate',
    )

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, color, canvas, events, variant: BalloonVariant, rng=random,
                 size=(BalloonShape.SIZE_X, BalloonShape.SIZE_Y)):
        """
        Spawn just below the bottom edge at a random horizontal position.

        Args:
            color: Fill color
            canvas: Anything exposing width and height
            events: EventManager used to announce pops
            variant: Variant tuning record
            rng: Random source (module or random.Random)
            size: Half-axes (x, y)
        """
        self.canvas_size = (canvas.width, canvas.height)
        self.size = pygame.Vector2(size)
        width, height = self.canvas_size

        x = rng.random() * (width - 2 * self.size.x) + self.size.x
        y = height + self.size.y
        super().__init__(x, y)

        jitter = BalloonShape.SPEED_JITTER
        self.velocity.update(
            rng.random() * 2 * jitter - jitter,
            -(BalloonShape.RISE_SPEED + variant.spawn_lift) + (rng.random() * 2 * jitter - jitter),
        )

        self.color = color
        self.variant = variant
        self.events = events

        self.popping = False
        self.popping_timer = variant.popping_time
        self.popping_rate = variant.popping_rate

    @property
    def balloon_type(self) -> BalloonType:
        return self.variant.balloon_type

    # ===========================================================
    # State Machine
    # ===========================================================
    @property
    def lifecycle(self) -> LifecycleState:
        if self.is_removable():
            return LifecycleState.REMOVED
        if self.popping:
            return LifecycleState.POPPING
        return LifecycleState.ALIVE

    def is_removable(self) -> bool:
        """Finished popping, or drifted fully past the top edge."""
        if self.popping and self.popping_timer < 0:
            return True
        return self.pos.y + self.size.y + Bounds.OFFSCREEN_MARGIN < 0

    def explode(self) -> None:
        """Start popping and announce it on the bus. No-op if already popping."""
        if self.popping:
            return

        self.popping = True
        self.popping_timer = self.variant.popping_time
        self.popping_rate = self.variant.popping_rate
        self.velocity.update(0, 0)

        DebugLogger.trace(f"{self.balloon_type.value} balloon popped at {self.pos}", category="collision")
        self.events.publish(EVENT_BALLOON_POPPED, BalloonPoppedEvent(self))

    # ===========================================================
    # Update
    # ===========================================================
    def update(self, dt: float, speed_multiplier: float = 1.0):
        """
        Args:
            dt: Delta time in milliseconds
            speed_multiplier: Scene-wide velocity scale
        """
        seconds = dt / 1000.0

        if self.popping:
            self.velocity.update(0, 0)
            if self.popping_timer > 0:
                growth = self.popping_rate * seconds
                self.size.x += growth
                self.size.y += growth
            self.popping_timer -= seconds
            return

        self._bounce()
        self.pos += self.velocity * (speed_multiplier * seconds)

    def _bounce(self):
        """Flip horizontal velocity once when leaving the canvas sideways."""
        width = self.canvas_size[0]
        past_right = self.pos.x + self.size.x > width and self.velocity.x > 0
        past_left = self.pos.x - self.size.x < 0 and self.velocity.x < 0
        if past_right or past_left:
            self.velocity.x = -self.velocity.x

    # ===========================================================
    # Collision
    # ===========================================================
    def check_hit(self, point) -> bool:
        """True if point lies inside the ellipse enlarged by HIT_MARGIN."""
        px, py = point
        rx = self.size.x + Bounds.HIT_MARGIN
        ry = self.size.y + Bounds.HIT_MARGIN
        dx = (px - self.pos.x) / rx
        dy = (py - self.pos.y) / ry
        return dx * dx + dy * dy <= 1

    # ===========================================================
    # Rendering
    # ===========================================================
    def draw(self, surface: pygame.Surface):
        if self.is_removable():
            return

        x, y = self.pos
        sx, sy = self.size
        body = pygame.Rect(int(x - sx), int(y - sy), int(2 * sx), int(2 * sy))

        if self.popping:
            pygame.draw.ellipse(surface, self.color, body, BalloonShape.OUTLINE_WIDTH)
            return

        tail = BalloonShape.STRING_LENGTH
        knot = [
            (x, y + sy - 3),
            (x - tail, y + sy + tail),
            (x + tail, y + sy + tail),
        ]
        pygame.draw.polygon(surface, self.color, knot)
        pygame.draw.ellipse(surface, self.color, body)
        pygame.draw.ellipse(surface, Colors.BALLOON_OUTLINE, body, BalloonShape.OUTLINE_WIDTH)
        self._draw_mark(surface, x, y, sx, sy)

    def _draw_mark(self, surface, x, y, sx, sy):
        if self.balloon_type == BalloonType.SPEEDUP:
            arrow = [
                (x, y - sy * 0.45),
                (x - sx * 0.35, y + sy * 0.1),
                (x + sx * 0.35, y + sy * 0.1),
            ]
            pygame.draw.polygon(surface, Colors.SPEEDUP_MARK, arrow)
        elif self.balloon_type == BalloonType.BOMB:
            pygame.draw.circle(surface, Colors.BOMB_MARK, (int(x), int(y)), int(sx * 0.4))
