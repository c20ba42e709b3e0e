"""
Decision Layer - What to do.

Contains:
- NavigationPolicy: Explore/backtrack state machine
- ExplorerSession: Per-run owner of mode and junction memory
"""

from .navigation_policy import Decision, MemoryAction, NavigationPolicy
from .session import ExplorerSession
from .state import ControllerState, Mode

__all__ = [
    "ControllerState",
    "Decision",
    "ExplorerSession",
    "MemoryAction",
    "Mode",
    "NavigationPolicy",
]
