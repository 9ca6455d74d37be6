"""
state_manager.py
----------------
Stack-based scene coordinator with pause/resume lifecycle hooks.

Stack Contract
--------------
- update() and draw() visit every scene, bottom to top, so covered scenes
  keep animating and get overdrawn by the scenes above them.
- notify_top() routes input to the top scene only.
- The bottom scene can never be popped.
"""

from balloon_pop.core.debug.debug_logger import DebugLogger
from balloon_pop.scenes.scene_state import SceneState


# ===========================================================
# Errors
# ===========================================================

class StateManagerError(RuntimeError):
    """Base class for scene stack contract violations."""


class DuplicateStateError(StateManagerError):
    """Raised when a scene id is registered twice."""


class EmptyStackError(StateManagerError):
    """Raised when popping would remove the base scene."""


# ===========================================================
# State Manager
# ===========================================================

class StateManager:
    """Owns the scene registry and the scene stack."""

    def __init__(self, canvas, events):
        """
        Args:
            canvas: Canvas the scenes draw on and map input against
            events: EventManager shared by all scenes
        """
        self.canvas = canvas
        self.events = events
        self._states = {}
        self._stack = []
        DebugLogger.init_entry("StateManager")

    # ===========================================================
    # Registry
    # ===========================================================

    def register_state(self, state_id: str, scene) -> None:
        """
        Register a scene under a unique id.

        Raises:
            DuplicateStateError: If state_id is already registered
        """
        if state_id in self._states:
            raise DuplicateStateError(f"State '{state_id}' already registered")
        self._states[state_id] = scene
        DebugLogger.system(f"Registered state '{state_id}'", category="scene")

    def is_registered(self, state_id: str) -> bool:
        return state_id in self._states

    # ===========================================================
    # Stack Control
    # ===========================================================

    def push_state(self, state_id: str) -> None:
        """
        Pause the current top, initialise the target scene and push it.

        Raises:
            KeyError: If state_id was never registered
        """
        scene = self._states[state_id]

        if self._stack:
            top = self._stack[-1]
            top.state = SceneState.PAUSED
            top.on_pause()

        scene.on_init(self)
        scene.state = SceneState.ACTIVE
        self._stack.append(scene)
        DebugLogger.state(f"Pushed '{state_id}' (depth {len(self._stack)})", category="scene")

    def pop_state(self) -> None:
        """
        Disable and remove the top scene, then resume the one below.

        Raises:
            EmptyStackError: If only the base scene remains
        """
        if len(self._stack) <= 1:
            raise EmptyStackError("No state below the current one")

        top = self._stack[-1]
        top.state = SceneState.EXITING
        top.on_disable()
        self._stack.pop()

        below = self._stack[-1]
        below.state = SceneState.ACTIVE
        below.on_resume()
        DebugLogger.state(
            f"Popped {type(top).__name__}, resumed {type(below).__name__}",
            category="scene"
        )

    @property
    def top(self):
        """Scene currently receiving input, or None before the first push."""
        return self._stack[-1] if self._stack else None

    @property
    def depth(self) -> int:
        return len(self._stack)

    # ===========================================================
    # Update, Draw, Input Delegation
    # ===========================================================

    def update(self, dt: float) -> None:
        """Update every scene in the stack, bottom to top."""
        for scene in list(self._stack):
            scene.update(dt)

    def draw(self, ctx, canvas) -> None:
        """Draw every scene in the stack, bottom to top."""
        for scene in list(self._stack):
            scene.draw(ctx, canvas)

    def notify_top(self, event_type: str, event) -> None:
        """Forward an input event to the top scene only."""
        if not self._stack:
            return
        DebugLogger.trace(f"'{event_type}' -> {type(self._stack[-1]).__name__}", category="input")
        self._stack[-1].handle_event(event_type, event)
