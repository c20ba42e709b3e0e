"""
Swappable strategy implementations (Strategy pattern).

One strategy type per cell topology, each with an ABC and an
implementation. Pass the desired implementation to NavigationPolicy.
"""

from .choice import uniform_choice
from .corridor import (
    CorridorStrategy,
    NoReverseCorridor,
)
from .dead_end import (
    DeadEndStrategy,
    RandomAvoidWall,
)
from .junction import (
    JunctionStrategy,
    PreferUnexplored,
)
