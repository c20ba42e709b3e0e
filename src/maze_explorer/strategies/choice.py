"""
Uniform choice over candidate directions.

All randomness in the decision layer goes through here, so a seeded
numpy Generator (or a stub with an integers() method) makes every
decision reproducible.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from ..perception.directions import Direction


def uniform_choice(rng: np.random.Generator, candidates: Sequence[Direction]) -> Direction:
    """Pick one candidate uniformly at random."""
    if not candidates:
        raise ValueError("No candidate directions to choose from")
    if len(candidates) == 1:
        return candidates[0]
    return candidates[int(rng.integers(len(candidates)))]
