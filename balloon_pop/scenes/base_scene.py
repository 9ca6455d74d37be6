"""
base_scene.py
-------------
Base class for all scenes managed by the StateManager.
Every hook is a no-op so a scene overrides only what it needs.
"""

from balloon_pop.scenes.scene_state import SceneState


class BaseScene:
    """
    Base class for all scenes.

    Attributes:
        state: Current lifecycle state, maintained by the StateManager
    """

    def __init__(self):
        self.state = SceneState.INACTIVE

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def on_init(self, context):
        """Called every time the scene is pushed onto the stack."""
        pass

    def on_disable(self):
        """Called when the scene is popped off the stack."""
        pass

    def on_pause(self):
        """Called when another scene is pushed on top of this one."""
        pass

    def on_resume(self):
        """Called when the scene above this one is popped."""
        pass

    # ===========================================================
    # Frame Methods
    # ===========================================================

    def update(self, dt: float):
        """Advance scene logic by dt milliseconds."""
        pass

    def draw(self, ctx, canvas):
        """Render the scene onto ctx (the canvas drawing surface)."""
        pass

    def handle_event(self, event_type: str, event):
        """Handle input routed to the top of the stack."""
        pass
