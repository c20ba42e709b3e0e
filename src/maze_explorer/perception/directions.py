"""
Directions and cell readings.

Direction covers both frames the robot deals with:
relative (robot frame) and absolute (maze frame). Converting between
them only needs the current heading, never a position.
"""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """Relative (AHEAD..RIGHT) or absolute (NORTH..WEST) direction."""

    AHEAD = "ahead"
    BEHIND = "behind"
    LEFT = "left"
    RIGHT = "right"
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def is_relative(self) -> bool:
        return self in RELATIVE_DIRECTIONS

    @property
    def is_absolute(self) -> bool:
        return self in ABSOLUTE_DIRECTIONS

    @property
    def opposite(self) -> Direction:
        """Rotate 180 degrees (NORTH<->SOUTH, LEFT<->RIGHT, ...)."""
        return _OPPOSITES[self]

    def to_absolute(self, heading: Direction) -> Direction:
        """
        Absolute direction of this relative direction.

        Args:
            heading: Current absolute heading of the robot.
        """
        if self.is_absolute:
            return self
        _check_heading(heading)
        index = (ABSOLUTE_DIRECTIONS.index(heading) + _CLOCKWISE_TURNS[self]) % 4
        return ABSOLUTE_DIRECTIONS[index]

    def to_relative(self, heading: Direction) -> Direction:
        """
        Relative direction of this absolute direction.

        Args:
            heading: Current absolute heading of the robot.
        """
        if self.is_relative:
            return self
        _check_heading(heading)
        turns = (ABSOLUTE_DIRECTIONS.index(self) - ABSOLUTE_DIRECTIONS.index(heading)) % 4
        return _RELATIVE_BY_TURNS[turns]


class CellState(Enum):
    """What the robot senses in one relative direction."""

    WALL = "wall"
    PASSAGE = "passage"  # open, never visited
    VISITED = "visited"  # open, already traversed
    EXIT = "exit"  # open, the maze exit

    @property
    def is_open(self) -> bool:
        return self is not CellState.WALL

    @property
    def is_unexplored(self) -> bool:
        return self in (CellState.PASSAGE, CellState.EXIT)


# Order used whenever candidates are enumerated
RELATIVE_DIRECTIONS = (Direction.AHEAD, Direction.LEFT, Direction.RIGHT, Direction.BEHIND)

# Clockwise from north
ABSOLUTE_DIRECTIONS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)

_CLOCKWISE_TURNS = {
    Direction.AHEAD: 0,
    Direction.RIGHT: 1,
    Direction.BEHIND: 2,
    Direction.LEFT: 3,
}
_RELATIVE_BY_TURNS = {turns: d for d, turns in _CLOCKWISE_TURNS.items()}

_OPPOSITES = {
    Direction.AHEAD: Direction.BEHIND,
    Direction.BEHIND: Direction.AHEAD,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


def _check_heading(heading: Direction) -> None:
    if not heading.is_absolute:
        raise ValueError(f"Heading must be absolute, got {heading.name}")
