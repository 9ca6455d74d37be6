"""
Entity module exports.

Lifecycle enum, variant tags and variant tuning records.

Exports:
    LifecycleState - Balloon progression (ALIVE, POPPING, REMOVED)
    BalloonType    - Variant tag (NORMAL, SPEEDUP, BOMB)
    BalloonVariant - Per-variant tuning record
"""

from balloon_pop.entities.entity_state import LifecycleState
from balloon_pop.entities.balloon_types import BalloonType, BalloonVariant

__all__ = [
    'LifecycleState',
    'BalloonType',
    'BalloonVariant',
]
