"""
Snapshot - Local sensing for one tick.

A Snapshot holds the four relative readings plus the current absolute
heading. It is the only input the decision layer sees: no position,
no map.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import InvalidSnapshot, NoNonWallDirection
from .directions import RELATIVE_DIRECTIONS, CellState, Direction


class Topology(Enum):
    """Cell classification by number of non-wall exits."""

    DEAD_END = 1
    CORRIDOR = 2
    JUNCTION = 3
    CROSSROAD = 4

    @property
    def is_branching(self) -> bool:
        """Junctions and crossroads are where memory is consulted."""
        return self in (Topology.JUNCTION, Topology.CROSSROAD)


@dataclass
class Snapshot:
    """
    Sensor readings for the current cell.

    Raises InvalidSnapshot if any of the four relative directions is
    missing, and NoNonWallDirection if all four are walls.
    """

    readings: dict[Direction, CellState]
    heading: Direction

    def __post_init__(self):
        if not isinstance(self.heading, Direction) or not self.heading.is_absolute:
            raise InvalidSnapshot(f"Heading must be an absolute direction, got {self.heading!r}")

        unexpected = [d for d in self.readings if not isinstance(d, Direction) or not d.is_relative]
        if unexpected:
            raise InvalidSnapshot(f"Readings must be keyed by relative direction, got {unexpected}")

        missing = [d.name for d in RELATIVE_DIRECTIONS if d not in self.readings]
        if missing:
            raise InvalidSnapshot(f"Snapshot missing readings for {', '.join(missing)}")

        bad = {d.name: s for d, s in self.readings.items() if not isinstance(s, CellState)}
        if bad:
            raise InvalidSnapshot(f"Readings must be cell states, got {bad}")

        if not any(state.is_open for state in self.readings.values()):
            raise NoNonWallDirection(
                f"All four directions are walls (heading {self.heading.name})"
            )

    def state_of(self, direction: Direction) -> CellState:
        """Reading for a relative or absolute direction."""
        return self.readings[direction.to_relative(self.heading)]

    def is_open(self, direction: Direction) -> bool:
        return self.state_of(direction).is_open

    @property
    def open_directions(self) -> list[Direction]:
        """Non-wall relative directions."""
        return [d for d in RELATIVE_DIRECTIONS if self.readings[d].is_open]

    @property
    def exits(self) -> int:
        return len(self.open_directions)

    @property
    def topology(self) -> Topology:
        return Topology(self.exits)

    @property
    def passages(self) -> list[Direction]:
        """Directions leading to never-visited cells."""
        return [d for d in RELATIVE_DIRECTIONS if self.readings[d] is CellState.PASSAGE]

    @property
    def unexplored(self) -> list[Direction]:
        """Exit directions if any are visible, else passage directions."""
        exits = [d for d in RELATIVE_DIRECTIONS if self.readings[d] is CellState.EXIT]
        return exits or self.passages

    @property
    def visited_count(self) -> int:
        """
        Visited neighbours, not counting BEHIND.

        The cell behind is the one just left, so it is visited on every
        arrival and says nothing about whether this junction is new.
        """
        return sum(
            1
            for d in RELATIVE_DIRECTIONS
            if d is not Direction.BEHIND and self.readings[d] is CellState.VISITED
        )

    def describe(self) -> str:
        """Compact one-line form for logs."""
        parts = " ".join(f"{d.name[0]}={self.readings[d].name}" for d in RELATIVE_DIRECTIONS)
        return f"[{self.heading.name} {parts}]"


def read_snapshot(runtime) -> Snapshot:
    """
    Build a Snapshot from a runtime's sensing interface.

    Args:
        runtime: Anything providing look(relative) and current_heading().
    """
    readings = {d: runtime.look(d) for d in RELATIVE_DIRECTIONS}
    return Snapshot(readings=readings, heading=runtime.current_heading())
