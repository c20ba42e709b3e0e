"""
Explorer session - What the runtime talks to.

One session owns the ControllerState and the JunctionMemory for a
maze run. Nothing else reads or writes them; the runtime only calls
decide_next_move() once per tick and on_run_reset() between runs.
"""

from __future__ import annotations

import logging

import numpy as np

from ..config import MAX_JUNCTIONS
from ..perception.directions import Direction
from ..perception.junction_memory import JunctionMemory
from ..perception.snapshot import Snapshot
from .navigation_policy import Decision, NavigationPolicy
from .state import ControllerState, Mode

logger = logging.getLogger(__name__)


class ExplorerSession:
    """
    Coordinate-free maze explorer for one run at a time.

    Usage:
        session = ExplorerSession(rng=np.random.default_rng(7))
        session.on_run_reset()

        # Each tick:
        direction = session.decide_next_move(snapshot)
    """

    def __init__(
        self,
        policy: NavigationPolicy = None,
        capacity: int = MAX_JUNCTIONS,
        rng: np.random.Generator = None,
    ):
        self.policy = policy or NavigationPolicy(rng=rng)
        self._memory = JunctionMemory(capacity)
        self._state = ControllerState()
        self._last_decision: Decision | None = None

    @property
    def mode(self) -> Mode:
        return self._state.mode

    @property
    def step(self) -> int:
        return self._state.step

    @property
    def run_index(self) -> int:
        return self._state.run_index

    @property
    def junction_depth(self) -> int:
        return self._memory.depth

    @property
    def max_junction_depth(self) -> int:
        return self._memory.max_depth

    @property
    def last_decision(self) -> Decision | None:
        return self._last_decision

    def on_run_reset(self, run_index: int | None = None) -> None:
        """Start a new run: clear memory, back to EXPLORE, step 0."""
        self._memory.clear()
        self._state.reset(run_index)
        self._last_decision = None
        logger.info(f"Run {self._state.run_index} reset: memory cleared, mode EXPLORE")

    def decide_next_move(self, snapshot: Snapshot) -> Direction:
        """
        Per-tick entry point.

        Returns:
            Relative direction to face, or absolute heading to set.

        Raises:
            MemoryCapacityError: junction memory full.
        """
        decision = self.policy.decide(snapshot, self._state, self._memory)
        self._state.step += 1
        self._last_decision = decision
        return decision.direction

    def status(self) -> dict:
        """Copy of the session counters for logs and the web API."""
        last = self._last_decision
        return {
            "run": self._state.run_index,
            "step": self._state.step,
            "mode": self._state.mode.name,
            "junction_depth": self._memory.depth,
            "max_junction_depth": self._memory.max_depth,
            "last_direction": last.direction.name if last else None,
            "last_topology": last.topology.name if last else None,
        }
