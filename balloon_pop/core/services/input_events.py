"""
input_events.py
---------------
Pointer and touch records forwarded by the host loop to the top scene.

Coordinates are in window (page) space; scenes map them to canvas space.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

import pygame


EVENT_CLICK = "click"
EVENT_TOUCHSTART = "touchstart"


@dataclass(frozen=True)
class PointerEvent:
    """Single pointer-down in window coordinates."""
    page_x: float
    page_y: float

    @property
    def page_pos(self) -> Tuple[float, float]:
        return self.page_x, self.page_y


@dataclass(frozen=True)
class TouchEvent:
    """Every finger that went down during one frame."""
    touches: List[PointerEvent] = field(default_factory=list)


def pointer_from_mouse(event: pygame.event.Event) -> PointerEvent:
    """Build a PointerEvent from a MOUSEBUTTONDOWN event."""
    x, y = event.pos
    return PointerEvent(float(x), float(y))


def pointer_from_finger(event: pygame.event.Event, window_size: Tuple[int, int]) -> PointerEvent:
    """Build a PointerEvent from a FINGERDOWN event (normalized coords)."""
    w, h = window_size
    return PointerEvent(event.x * w, event.y * h)
