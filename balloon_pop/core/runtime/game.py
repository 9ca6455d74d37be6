"""
game.py
-------
Top-level driver owning the frame clock, the canvas, the event bus and the
scene stack. The host loop calls update(timestamp) then draw() once per frame.
"""

from balloon_pop.core.debug.debug_logger import DebugLogger


class Game:
    """Turns host timestamps into frame deltas and delegates to the stack."""

    def __init__(self, canvas, state_manager, events):
        self.canvas = canvas
        self.state_manager = state_manager
        self.events = events
        self.last_timestamp = None

    def update(self, timestamp: float) -> float:
        """
        Advance the simulation by the time elapsed since the previous call.

        The first call only records the baseline and advances by zero.
        A timestamp earlier than the previous one also advances by zero.
        Deferred bus tasks run before the scenes update.

        Args:
            timestamp: Monotonic host time in milliseconds

        Returns:
            The delta applied, in milliseconds
        """
        if self.last_timestamp is None:
            self.last_timestamp = timestamp
        dt = max(0.0, timestamp - self.last_timestamp)
        self.last_timestamp = timestamp

        DebugLogger.trace(f"Frame dt={dt:.1f}ms", category="timing")
        self.events.tick(dt)
        self.state_manager.update(dt)
        return dt

    def draw(self) -> None:
        """Clear the canvas and render the whole scene stack."""
        self.canvas.clear()
        self.state_manager.draw(self.canvas.get_context(), self.canvas)
