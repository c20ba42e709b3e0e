"""
Dead end strategies - One way in, one way out.

Takes a Snapshot, returns the relative direction to move.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from ..perception.directions import Direction
from ..perception.snapshot import Snapshot
from .choice import uniform_choice


class DeadEndStrategy(ABC):
    """Base class for dead end handling."""

    @abstractmethod
    def choose(self, snapshot: Snapshot) -> Direction:
        """
        Choose a direction out of the current cell.

        Args:
            snapshot: Current readings.

        Returns:
            A relative direction whose reading is not WALL.
        """
        ...


class RandomAvoidWall(DeadEndStrategy):
    """
    Uniform choice among all non-wall directions.

    At a dead end there is exactly one, but going through the general
    chooser also makes this the fallback for any cell.
    """

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def choose(self, snapshot: Snapshot) -> Direction:
        return uniform_choice(self.rng, snapshot.open_directions)
