"""
Runtime tunable parameters with JSON persistence.

The CLI and the web interface share one Parameters instance. Changes
made over the web take effect on the next run (maze size, seed) or the
next tick (pacing). Single-threaded asyncio means no locks needed.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from .config import (
    CONTROL_LOOP_HZ,
    DEFAULT_LOOP_DENSITY,
    DEFAULT_MAZE_HEIGHT,
    DEFAULT_MAZE_WIDTH,
    MAX_JUNCTIONS,
    MAX_STEPS,
    MIN_MAZE_SIZE,
    STATS_INTERVAL,
)
from .errors import MazeConfigError

logger = logging.getLogger(__name__)

PARAMS_FILE = Path(__file__).parent / "params.json"


@dataclass
class Parameters:
    """Runtime tunable parameters."""

    # Simulated maze (regenerated on reset)
    maze_width: int = DEFAULT_MAZE_WIDTH
    maze_height: int = DEFAULT_MAZE_HEIGHT
    loop_density: float = DEFAULT_LOOP_DENSITY  # 0.0-1.0, fraction of extra walls removed
    seed: int = -1  # -1 = fresh entropy each run

    # Run control
    max_steps: int = MAX_STEPS
    tick_hz: int = CONTROL_LOOP_HZ  # Paced loop rate (web mode only)
    stats_interval: int = STATS_INTERVAL

    # Junction memory
    junction_capacity: int = MAX_JUNCTIONS

    def update(self, **kwargs):
        """Update parameters from dict (e.g., from web API)."""
        for key, value in kwargs.items():
            if hasattr(self, key):
                expected_type = type(getattr(self, key))
                try:
                    setattr(self, key, expected_type(value))
                except (TypeError, ValueError):
                    logger.warning(f"Invalid value for {key}: {value}")
            else:
                logger.warning(f"Unknown parameter ignored: {key}")

    def validate(self) -> None:
        """Raise MazeConfigError if the parameters cannot describe a run."""
        if self.maze_width < MIN_MAZE_SIZE or self.maze_height < MIN_MAZE_SIZE:
            raise MazeConfigError(
                f"Maze must be at least {MIN_MAZE_SIZE}x{MIN_MAZE_SIZE}, "
                f"got {self.maze_width}x{self.maze_height}"
            )
        if not 0.0 <= self.loop_density <= 1.0:
            raise MazeConfigError(f"loop_density must be in [0, 1], got {self.loop_density}")
        if self.max_steps < 1:
            raise MazeConfigError(f"max_steps must be positive, got {self.max_steps}")
        if self.tick_hz < 1:
            raise MazeConfigError(f"tick_hz must be positive, got {self.tick_hz}")
        if self.stats_interval < 1:
            raise MazeConfigError(f"stats_interval must be positive, got {self.stats_interval}")
        if self.junction_capacity < 1:
            raise MazeConfigError(
                f"junction_capacity must be positive, got {self.junction_capacity}"
            )

    @property
    def rng_seed(self) -> int | None:
        """Seed for numpy's default_rng, or None for fresh entropy."""
        return None if self.seed < 0 else self.seed

    def save(self, path: Path = PARAMS_FILE):
        """Persist to JSON file."""
        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)
        logger.info(f"Parameters saved to {path}")

    @classmethod
    def load(cls, path: Path = PARAMS_FILE) -> Parameters:
        """Load from JSON file, or return defaults."""
        if path.exists():
            try:
                with open(path) as f:
                    data = json.load(f)
                params = cls()
                params.update(**data)
                logger.info(f"Parameters loaded from {path}")
                return params
            except (OSError, json.JSONDecodeError, TypeError) as e:
                logger.warning(f"Failed to load {path}: {e}, using defaults")
        return cls()

    def to_dict(self) -> dict:
        """Convert to dict for JSON API."""
        return asdict(self)
