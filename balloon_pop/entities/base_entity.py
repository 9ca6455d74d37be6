"""
base_entity.py
--------------
Foundational class for on-screen entities.

Coordinate System
-----------------
All entities use center-based canvas-local coordinates:
- self.pos is the entity's visual and physical center
- self.velocity is in pixels per second
"""

import pygame

from balloon_pop.entities.entity_state import LifecycleState


class BaseEntity:
    """Shared kinematic state for canvas entities."""

    __slots__ = ('pos', 'velocity')

    def __init__(self, x: float, y: float):
        self.pos = pygame.Vector2(x, y)
        self.velocity = pygame.Vector2(0, 0)

    # ===================================================================
    # Core Update Loop
    # ===================================================================

    def update(self, dt: float, speed_multiplier: float = 1.0):
        """
        Per-frame update. Override in subclasses.

        Args:
            dt: Delta time in milliseconds
            speed_multiplier: Scene-wide velocity scale
        """
        pass

    def draw(self, surface: pygame.Surface):
        """Render onto the canvas surface. Override in subclasses."""
        pass

    # ===================================================================
    # Lifecycle
    # ===================================================================

    @property
    def lifecycle(self) -> LifecycleState:
        return LifecycleState.ALIVE

    def is_removable(self) -> bool:
        return self.lifecycle == LifecycleState.REMOVED

    # ===================================================================
    # Utilities
    # ===================================================================

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} "
            f"pos=({self.pos.x:.1f}, {self.pos.y:.1f}) "
            f"vel=({self.velocity.x:.1f}, {self.velocity.y:.1f}) "
            f"state={self.lifecycle.name}>"
        )
