"""
balloon_pop
-----------
Arcade balloon-popping game built on a scene stack and a deferred event bus.
"""

__version__ = "0.1.0"
