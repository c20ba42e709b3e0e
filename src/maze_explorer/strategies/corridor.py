"""
Corridor strategies - Keep going, never turn back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from ..perception.directions import Direction
from ..perception.snapshot import Snapshot
from .choice import uniform_choice


class CorridorStrategy(ABC):
    """Base class for two-exit cells."""

    @abstractmethod
    def choose(self, snapshot: Snapshot) -> Direction:
        """
        Choose a direction along the corridor.

        Returns:
            A relative, non-wall direction.
        """
        ...


class NoReverseCorridor(CorridorStrategy):
    """Uniform choice among non-wall directions other than BEHIND."""

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def choose(self, snapshot: Snapshot) -> Direction:
        forward = [d for d in snapshot.open_directions if d is not Direction.BEHIND]
        return uniform_choice(self.rng, forward)
