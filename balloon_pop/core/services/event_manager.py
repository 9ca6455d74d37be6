"""
event_manager.py
----------------
Deferred publish/subscribe bus for decoupled game component communication.
Lets balloons and scenes talk without holding references to each other.

Delivery Model
--------------
publish() never runs a handler in-line. Each subscriber is queued as its own
task and runs on the next tick()/flush(), after the current synchronous work
has finished. call_later() queues a task once the bus clock has advanced by
the given delay. Tasks queued while draining run in the same drain, so chain
reactions settle within one pass.

Every subscription, task and timer can be tagged with an owner; release(owner)
drops them all so nothing fires against a disposed scene.
"""

import heapq
import itertools
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Dict, List, Optional

from balloon_pop.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

EVENT_BALLOON_POPPED = "balloonpopped"
EVENT_SPEEDUP = "speedup"


@dataclass(frozen=True)
class BalloonPoppedEvent:
    """Dispatched when a balloon starts popping."""
    balloon: Any


@dataclass(frozen=True)
class SpeedChangeEvent:
    """Dispatched to shift the scene speed multiplier by delta."""
    delta: float


# ===========================================================
# Internal Records
# ===========================================================

@dataclass
class _Subscription:
    callback: Callable
    owner: Any = None


@dataclass
class _Task:
    callback: Callable
    args: tuple = ()
    owner: Any = None


@dataclass(order=True)
class _Timer:
    due: float
    seq: int
    task: _Task = field(compare=False)


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using deferred pub-sub delivery."""

    MAX_TASKS_PER_FLUSH = 10000

    def __init__(self):
        self._subscribers: Dict[str, List[_Subscription]] = {}
        self._queue: Deque[_Task] = deque()
        self._timers: List[_Timer] = []
        self._seq = itertools.count()
        self._clock = 0.0
        DebugLogger.init_entry("EventManager")

    @property
    def now(self) -> float:
        """Bus clock in milliseconds, advanced only by tick()."""
        return self._clock

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: str, callback: Callable, owner: Any = None) -> None:
        """
        Register a callback for an event type.

        Subscribing the same callback twice makes it fire twice per publish.

        Args:
            event_type: Event name to listen for
            callback: Function called with the event payload
            owner: Optional scope object for release()
        """
        self._subscribers.setdefault(event_type, []).append(_Subscription(callback, owner))
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type}'",
            category="event_manager"
        )

    # ===========================================================
    # Publishing & Scheduling
    # ===========================================================

    def publish(self, event_type: str, payload: Any = None) -> None:
        """
        Queue one deferred task per subscriber of event_type.

        Args:
            event_type: Event name
            payload: Object handed to every subscriber
        """
        subscribers = self._subscribers.get(event_type)
        if not subscribers:
            return

        for sub in list(subscribers):
            self._queue.append(_Task(sub.callback, (payload,), sub.owner))

        DebugLogger.trace(
            f"Queued '{event_type}' for {len(subscribers)} subscriber(s)",
            category="event_manager"
        )

    def call_later(self, delay_ms: float, callback: Callable, *args, owner: Any = None) -> None:
        """
        Run callback(*args) once the bus clock has advanced by delay_ms.

        Args:
            delay_ms: Delay in milliseconds from the current bus clock
            callback: Function to run
            owner: Optional scope object for release()
        """
        due = self._clock + max(0.0, delay_ms)
        heapq.heappush(self._timers, _Timer(due, next(self._seq), _Task(callback, args, owner)))

    # ===========================================================
    # Dispatch
    # ===========================================================

    def tick(self, dt_ms: float) -> int:
        """
        Advance the bus clock, promote due timers, then drain the queue.

        Returns:
            Number of tasks run
        """
        self._clock += max(0.0, dt_ms)
        while self._timers and self._timers[0].due <= self._clock:
            self._queue.append(heapq.heappop(self._timers).task)
        return self.flush()

    def flush(self) -> int:
        """
        Run every queued task, including ones queued while draining.

        Returns:
            Number of tasks run
        """
        ran = 0
        while self._queue:
            if ran >= self.MAX_TASKS_PER_FLUSH:
                DebugLogger.warn(
                    f"Task limit reached, {len(self._queue)} task(s) deferred to next tick",
                    category="event"
                )
                break

            task = self._queue.popleft()
            ran += 1
            try:
                task.callback(*task.args)
            except Exception as e:
                callback_name = getattr(task.callback, '__name__', repr(task.callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}", category="event")
        return ran

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def release(self, owner: Any) -> None:
        """
        Drop subscriptions, queued tasks and timers tagged with owner.

        Args:
            owner: Scope object passed to subscribe()/call_later()
        """
        if owner is None:
            return

        for event_type, subs in list(self._subscribers.items()):
            kept = [s for s in subs if s.owner is not owner]
            if kept:
                self._subscribers[event_type] = kept
            else:
                del self._subscribers[event_type]

        self._queue = deque(t for t in self._queue if t.owner is not owner)
        self._timers = [t for t in self._timers if t.task.owner is not owner]
        heapq.heapify(self._timers)

        DebugLogger.system(f"Released scope of {type(owner).__name__}", category="event_manager")

    def clear_all(self) -> None:
        """Remove every subscriber, task and timer."""
        self._subscribers.clear()
        self._queue.clear()
        self._timers.clear()

    def pending_count(self) -> int:
        """Number of queued tasks plus scheduled timers."""
        return len(self._queue) + len(self._timers)

    def subscriber_count(self, event_type: Optional[str] = None) -> int:
        """
        Get count of subscribers.

        Args:
            event_type: Specific event type, or None for total

        Returns:
            Number of subscribers
        """
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
