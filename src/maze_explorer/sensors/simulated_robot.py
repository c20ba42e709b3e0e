"""
Simulated robot - MazeRuntime backed by a GridMaze.

Tracks position, heading and visited cells the way a maze simulator
would. Visited marks are what turn PASSAGE readings into VISITED ones.
"""

from __future__ import annotations

import logging

import numpy as np

from ..perception.directions import CellState, Direction
from .grid_maze import Cell, GridMaze
from .runtime import MazeRuntime

logger = logging.getLogger(__name__)


class SimulatedRobot(MazeRuntime):
    """
    Robot body inside a GridMaze.

    Moving into a wall is not an error here: like a real robot it just
    bumps, stays put and the collision is counted.

    Usage:
        robot = SimulatedRobot(GridMaze.generate(8, 8))
        robot.look(Direction.AHEAD)
        robot.apply(Direction.LEFT)
    """

    def __init__(self, maze: GridMaze, start_heading: Direction = None):
        self._run_index = 0
        self._start_heading_override = start_heading
        self.maze = maze
        self._reset_body()

    def _reset_body(self) -> None:
        if self._start_heading_override is not None:
            self.start_heading = self._start_heading_override
        else:
            # Face an opening so the first AHEAD is not a wall
            headings = self.maze.open_headings(self.maze.start)
            self.start_heading = headings[0] if headings else Direction.NORTH
        self.position: Cell = self.maze.start
        self.heading: Direction = self.start_heading
        self.steps = 0
        self.collisions = 0
        self._visited = np.zeros((self.maze.height, self.maze.width), dtype=bool)
        self._visited[self.position] = True

    @property
    def visited_cells(self) -> int:
        return int(self._visited.sum())

    def look(self, relative: Direction) -> CellState:
        heading = relative.to_absolute(self.heading)
        if not self.maze.is_open(self.position, heading):
            return CellState.WALL
        cell = self.maze.neighbour(self.position, heading)
        if cell == self.maze.exit:
            return CellState.EXIT
        if self._visited[cell]:
            return CellState.VISITED
        return CellState.PASSAGE

    def current_heading(self) -> Direction:
        return self.heading

    def run_index(self) -> int:
        return self._run_index

    def apply(self, direction: Direction) -> None:
        self.heading = direction.to_absolute(self.heading)
        self.steps += 1
        if not self.maze.is_open(self.position, self.heading):
            self.collisions += 1
            logger.warning(f"Collision at {self.position} heading {self.heading.name}")
            return
        self.position = self.maze.neighbour(self.position, self.heading)
        self._visited[self.position] = True

    def at_exit(self) -> bool:
        return self.position == self.maze.exit

    def new_run(self, maze: GridMaze = None) -> None:
        """Back to the start for the next run, optionally in a new maze."""
        if maze is not None:
            self.maze = maze
        self._run_index += 1
        self._reset_body()
        logger.info(f"Simulator run {self._run_index} ready ({self.maze.width}x{self.maze.height})")

    def render(self) -> str:
        return self.maze.to_ascii(robot=(self.position, self.heading))
