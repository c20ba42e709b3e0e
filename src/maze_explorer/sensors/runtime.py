"""
Maze runtime interface.

The runtime owns the maze and the robot's body: it answers sensing
queries and executes moves. The explorer only ever sees it through
these five calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..perception.directions import CellState, Direction


class MazeRuntime(ABC):
    """Base class for anything that can host the explorer."""

    @abstractmethod
    def look(self, relative: Direction) -> CellState:
        """Reading in one relative direction."""
        ...

    @abstractmethod
    def current_heading(self) -> Direction:
        """Absolute heading of the robot."""
        ...

    @abstractmethod
    def run_index(self) -> int:
        """Index of the current run, 0 for the first."""
        ...

    @abstractmethod
    def apply(self, direction: Direction) -> None:
        """
        Execute one move.

        Args:
            direction: Relative direction to face, or absolute heading
                to set; the robot then advances one cell.
        """
        ...

    @abstractmethod
    def at_exit(self) -> bool:
        """True once the robot stands on the exit cell."""
        ...
