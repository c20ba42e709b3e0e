"""
Junction memory - LIFO record of open junctions.

Each record keeps only the absolute heading on which the robot entered
the junction. Which junction a record belongs to is implied by its
position in the stack, so no coordinates are ever stored and memory
grows with the number of open junctions, not with the maze area.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config import MAX_JUNCTIONS
from ..errors import MemoryCapacityError
from .directions import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JunctionRecord:
    """Junction left with unexplored branches."""

    arrival_heading: Direction  # absolute heading when the junction was entered


class JunctionMemory:
    """
    Bounded stack of JunctionRecords.

    Records are resolved strictly in reverse order of recording, which
    is what lets backtracking retrace the outward path exactly.

    Usage:
        memory = JunctionMemory()
        memory.push(Direction.NORTH)
        memory.peek_top()   # Direction.NORTH
        memory.pop_top()    # Direction.NORTH, memory now empty
    """

    def __init__(self, capacity: int = MAX_JUNCTIONS):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._records: list[JunctionRecord] = []
        self._max_depth = 0

    def __len__(self) -> int:
        return len(self._records)

    @property
    def depth(self) -> int:
        return len(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records

    @property
    def max_depth(self) -> int:
        """Deepest the stack has been since the last clear()."""
        return self._max_depth

    def push(self, arrival_heading: Direction) -> JunctionRecord:
        """
        Record a junction on top of the stack.

        Raises:
            ValueError: arrival_heading is not absolute.
            MemoryCapacityError: capacity reached.
        """
        if not arrival_heading.is_absolute:
            raise ValueError(f"Arrival heading must be absolute, got {arrival_heading.name}")
        if len(self._records) >= self.capacity:
            raise MemoryCapacityError(
                f"Junction memory full ({self.capacity} records); raise junction_capacity"
            )

        record = JunctionRecord(arrival_heading)
        self._records.append(record)
        self._max_depth = max(self._max_depth, len(self._records))
        logger.debug(f"Push junction #{len(self._records)} (arrived {arrival_heading.name})")
        return record

    def peek_top(self) -> Direction | None:
        """Arrival heading of the most recent record, or None if empty."""
        if not self._records:
            return None
        return self._records[-1].arrival_heading

    def pop_top(self) -> Direction | None:
        """Remove the most recent record and return its heading. No-op if empty."""
        if not self._records:
            return None
        record = self._records.pop()
        logger.debug(f"Pop junction #{len(self._records) + 1} (arrived {record.arrival_heading.name})")
        return record.arrival_heading

    def clear(self) -> None:
        """Drop all records (start of a new run)."""
        self._records.clear()
        self._max_depth = 0
