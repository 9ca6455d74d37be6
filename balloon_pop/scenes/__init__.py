"""
Scene module exports.

Provides the base scene class and its lifecycle states.
"""

from balloon_pop.scenes.base_scene import BaseScene
from balloon_pop.scenes.scene_state import SceneState

__all__ = [
    'BaseScene',
    'SceneState',
]
