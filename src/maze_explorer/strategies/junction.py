"""
Junction strategies - Three or four exits.

Detection of unexplored branches is shared by explore and backtrack
modes; the choice between them is the policy's job.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from ..perception.directions import Direction
from ..perception.snapshot import Snapshot
from .choice import uniform_choice


class JunctionStrategy(ABC):
    """Base class for junction and crossroad handling."""

    @abstractmethod
    def choose_unexplored(self, snapshot: Snapshot) -> Direction | None:
        """
        Pick an unexplored branch.

        Returns:
            Relative direction into an EXIT or PASSAGE cell, or None.
        """
        ...

    @abstractmethod
    def choose(self, snapshot: Snapshot) -> Direction:
        """
        Pick a branch, unexplored if possible.

        Returns:
            A relative, non-wall direction.
        """
        ...


class PreferUnexplored(JunctionStrategy):
    """
    Prefer the exit, then passages, uniform among ties.

    With nothing unexplored, fall back to any non-wall direction,
    BEHIND included (re-descend a visited branch).
    """

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def choose_unexplored(self, snapshot: Snapshot) -> Direction | None:
        candidates = snapshot.unexplored
        if not candidates:
            return None
        return uniform_choice(self.rng, candidates)

    def choose(self, snapshot: Snapshot) -> Direction:
        direction = self.choose_unexplored(snapshot)
        if direction is None:
            direction = uniform_choice(self.rng, snapshot.open_directions)
        return direction
