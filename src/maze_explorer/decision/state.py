"""
Controller state - Mode and counters for one run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Mode(Enum):
    """Exploration mode enumeration."""

    EXPLORE = auto()
    BACKTRACK = auto()


@dataclass
class ControllerState:
    """Per-run state owned by an ExplorerSession."""

    run_index: int = 0
    step: int = 0  # Ticks decided so far in this run
    mode: Mode = Mode.EXPLORE

    @property
    def is_first_tick(self) -> bool:
        return self.step == 0

    def reset(self, run_index: int | None = None) -> None:
        if run_index is not None:
            self.run_index = run_index
        self.step = 0
        self.mode = Mode.EXPLORE
