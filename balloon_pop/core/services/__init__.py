"""
Core services exports.

Provides the event bus, the scene stack, input records and configuration loading.
"""

from balloon_pop.core.services.config_manager import load_config
from balloon_pop.core.services.event_manager import (
    EventManager,
    EVENT_BALLOON_POPPED,
    EVENT_SPEEDUP,
    BalloonPoppedEvent,
    SpeedChangeEvent,
)
from balloon_pop.core.services.input_events import (
    EVENT_CLICK,
    EVENT_TOUCHSTART,
    PointerEvent,
    TouchEvent,
)
from balloon_pop.core.services.state_manager import (
    StateManager,
    StateManagerError,
    DuplicateStateError,
    EmptyStackError,
)

__all__ = [
    # Config
    'load_config',
    # Events
    'EventManager',
    'EVENT_BALLOON_POPPED',
    'EVENT_SPEEDUP',
    'BalloonPoppedEvent',
    'SpeedChangeEvent',
    # Input
    'EVENT_CLICK',
    'EVENT_TOUCHSTART',
    'PointerEvent',
    'TouchEvent',
    # Scene stack
    'StateManager',
    'StateManagerError',
    'DuplicateStateError',
    'EmptyStackError',
]
