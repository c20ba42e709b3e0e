"""
Grid maze - Simulated maze layout.

Cells live on the odd coordinates of a boolean numpy grid; the even
coordinates between two cells are the walls (False) or openings (True).
A W x H maze is a (2H+1) x (2W+1) grid with a solid border.

Coordinates exist only in the simulator. The explorer never sees them.
"""

from __future__ import annotations

import logging

import numpy as np

from ..config import EXIT_CHAR, MIN_MAZE_SIZE, OPEN_CHAR, ROBOT_CHARS, START_CHAR, WALL_CHAR
from ..errors import MazeConfigError
from ..perception.directions import ABSOLUTE_DIRECTIONS, Direction

logger = logging.getLogger(__name__)

Cell = tuple[int, int]  # (row, col)

_OFFSETS = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}


class GridMaze:
    """
    Rectangular maze with a start and an exit cell.

    Usage:
        maze = GridMaze.generate(12, 12, rng=np.random.default_rng(3))
        maze.is_open((0, 0), Direction.EAST)
        print(maze.to_ascii())
    """

    def __init__(self, grid: np.ndarray, start: Cell, exit_cell: Cell):
        rows, cols = grid.shape
        if rows % 2 == 0 or cols % 2 == 0:
            raise MazeConfigError(f"Grid shape must be odd in both axes, got {grid.shape}")
        self.grid = grid.astype(bool)
        self.start = start
        self.exit = exit_cell
        for name, cell in (("start", start), ("exit", exit_cell)):
            if not self.in_bounds(cell):
                raise MazeConfigError(f"{name} cell {cell} outside {self.width}x{self.height} maze")

    @property
    def height(self) -> int:
        return self.grid.shape[0] // 2

    @property
    def width(self) -> int:
        return self.grid.shape[1] // 2

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.height and 0 <= col < self.width

    def is_open(self, cell: Cell, heading: Direction) -> bool:
        """True if there is no wall on the given side of the cell."""
        row, col = cell
        dr, dc = _OFFSETS[heading]
        return bool(self.grid[2 * row + 1 + dr, 2 * col + 1 + dc])

    def neighbour(self, cell: Cell, heading: Direction) -> Cell:
        dr, dc = _OFFSETS[heading]
        return cell[0] + dr, cell[1] + dc

    def open_headings(self, cell: Cell) -> list[Direction]:
        return [h for h in ABSOLUTE_DIRECTIONS if self.is_open(cell, h)]

    def junction_count(self) -> int:
        """Cells with three or four openings."""
        return sum(
            1
            for row in range(self.height)
            for col in range(self.width)
            if len(self.open_headings((row, col))) >= 3
        )

    @classmethod
    def generate(
        cls,
        width: int,
        height: int,
        rng: np.random.Generator = None,
        loop_density: float = 0.0,
    ) -> GridMaze:
        """
        Carve a maze by randomized depth-first search.

        Start is the top-left cell, exit the bottom-right one.

        Args:
            width: Cells per row.
            height: Cells per column.
            rng: Random generator (seed it for reproducible mazes).
            loop_density: Fraction of remaining inner walls to knock out.
                0.0 gives a perfect maze (exactly one path between cells).
        """
        if width < MIN_MAZE_SIZE or height < MIN_MAZE_SIZE:
            raise MazeConfigError(f"Maze must be at least {MIN_MAZE_SIZE}x{MIN_MAZE_SIZE}")
        if not 0.0 <= loop_density <= 1.0:
            raise MazeConfigError(f"loop_density must be in [0, 1], got {loop_density}")
        rng = rng if rng is not None else np.random.default_rng()

        grid = np.zeros((2 * height + 1, 2 * width + 1), dtype=bool)
        carved = np.zeros((height, width), dtype=bool)

        start = (0, 0)
        carved[start] = True
        grid[1, 1] = True
        stack = [start]
        while stack:
            row, col = stack[-1]
            options = []
            for heading, (dr, dc) in _OFFSETS.items():
                nr, nc = row + dr, col + dc
                if 0 <= nr < height and 0 <= nc < width and not carved[nr, nc]:
                    options.append(heading)
            if not options:
                stack.pop()
                continue
            dr, dc = _OFFSETS[options[int(rng.integers(len(options)))]]
            nr, nc = row + dr, col + dc
            grid[2 * row + 1 + dr, 2 * col + 1 + dc] = True
            grid[2 * nr + 1, 2 * nc + 1] = True
            carved[nr, nc] = True
            stack.append((nr, nc))

        if loop_density > 0.0:
            cls._add_loops(grid, rng, loop_density)

        maze = cls(grid, start, (height - 1, width - 1))
        logger.debug(f"Generated {width}x{height} maze ({maze.junction_count()} junctions)")
        return maze

    @classmethod
    def from_params(cls, params) -> GridMaze:
        """Generate a maze from a Parameters instance."""
        params.validate()
        return cls.generate(
            params.maze_width,
            params.maze_height,
            rng=np.random.default_rng(params.rng_seed),
            loop_density=params.loop_density,
        )

    @staticmethod
    def _add_loops(grid: np.ndarray, rng: np.random.Generator, loop_density: float) -> None:
        rows, cols = np.indices(grid.shape)
        inner = (rows > 0) & (rows < grid.shape[0] - 1) & (cols > 0) & (cols < grid.shape[1] - 1)
        # Wall slots sit between two cells: exactly one coordinate is odd
        between = (rows + cols) % 2 == 1
        candidates = np.argwhere(inner & between & ~grid)
        count = int(round(loop_density * len(candidates)))
        if count == 0:
            return
        picked = rng.choice(len(candidates), size=count, replace=False)
        for r, c in candidates[picked]:
            grid[r, c] = True

    @classmethod
    def from_ascii(cls, text: str) -> GridMaze:
        """
        Parse a maze drawn with '#' walls, 'S' start and 'E' exit.

        S and E must sit on cell positions (odd row and column).
        """
        lines = text.strip("\n").splitlines()
        if not lines or len({len(line) for line in lines}) != 1:
            raise MazeConfigError("Maze rows must be non-empty and of equal length")

        grid = np.array([[ch != WALL_CHAR for ch in line] for line in lines], dtype=bool)
        markers = {}
        for r, line in enumerate(lines):
            for c, ch in enumerate(line):
                if ch in (START_CHAR, EXIT_CHAR):
                    if r % 2 == 0 or c % 2 == 0:
                        raise MazeConfigError(f"Marker {ch!r} at ({r}, {c}) is not on a cell")
                    markers[ch] = ((r - 1) // 2, (c - 1) // 2)

        missing = [ch for ch in (START_CHAR, EXIT_CHAR) if ch not in markers]
        if missing:
            raise MazeConfigError(f"Maze has no {' or '.join(missing)} marker")
        return cls(grid, markers[START_CHAR], markers[EXIT_CHAR])

    def to_ascii(self, robot: tuple[Cell, Direction] = None) -> str:
        """Render as text, optionally with the robot drawn as ^ > v <."""
        chars = np.where(self.grid, OPEN_CHAR, WALL_CHAR).astype("<U1")
        chars[2 * self.start[0] + 1, 2 * self.start[1] + 1] = START_CHAR
        chars[2 * self.exit[0] + 1, 2 * self.exit[1] + 1] = EXIT_CHAR
        if robot is not None:
            (row, col), heading = robot
            chars[2 * row + 1, 2 * col + 1] = ROBOT_CHARS[heading.value]
        return "\n".join("".join(row) for row in chars)
