"""
entity_state.py
---------------
Defines runtime state enumerations for balloon entities.
"""

from enum import IntEnum


class LifecycleState(IntEnum):
    """
    Tracks the life/pop progression of an entity.
    Used for pop animation control and cleanup timing.
    """
    ALIVE = 0
    POPPING = 1    # Playing pop animation, frozen in place
    REMOVED = 2    # Ready for cleanup, never drawn again
