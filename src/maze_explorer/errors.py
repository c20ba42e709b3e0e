"""
Exception hierarchy for the maze explorer.

Fatal conditions (bad runtime integration, corrupt maze, exhausted
memory) propagate to the caller. EmptyMemoryUnderflow is the one
condition the decision layer recovers from locally.
"""


class ExplorerError(Exception):
    """Base class for all maze explorer errors."""


class InvalidSnapshot(ExplorerError, ValueError):
    """Sensing snapshot is missing relative readings or is malformed."""


class NoNonWallDirection(ExplorerError):
    """All four readings are WALL: the maze or the sensing is corrupt."""


class EmptyMemoryUnderflow(ExplorerError):
    """Backtracking needed a junction record but memory is empty."""


class MemoryCapacityError(ExplorerError):
    """Junction memory is full (configuration error)."""


class MazeConfigError(ExplorerError, ValueError):
    """Invalid maze or runtime parameters."""
