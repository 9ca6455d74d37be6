"""
scene_state.py
--------------
Defines the lifecycle states a scene can be in.
"""

from enum import Enum


class SceneState(Enum):
    """Lifecycle states for scene management."""
    INACTIVE = "inactive"       # Registered, never pushed or popped off
    ACTIVE = "active"           # Top of the stack, receives input
    PAUSED = "paused"           # Covered by another scene, still updated and drawn
    EXITING = "exiting"         # Popped off the stack
