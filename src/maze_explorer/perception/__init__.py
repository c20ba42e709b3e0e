"""
Perception Layer - What the robot knows.

Contains:
- Direction / CellState: relative and absolute directions, cell readings
- Snapshot: the four readings + heading for the current tick
- JunctionMemory: LIFO stack of open junctions (headings only)
"""

from .directions import ABSOLUTE_DIRECTIONS, RELATIVE_DIRECTIONS, CellState, Direction
from .junction_memory import JunctionMemory, JunctionRecord
from .snapshot import Snapshot, Topology, read_snapshot

__all__ = [
    "ABSOLUTE_DIRECTIONS",
    "RELATIVE_DIRECTIONS",
    "CellState",
    "Direction",
    "JunctionMemory",
    "JunctionRecord",
    "Snapshot",
    "Topology",
    "read_snapshot",
]
