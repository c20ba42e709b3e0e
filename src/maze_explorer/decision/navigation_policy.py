"""
Navigation policy - Explore/backtrack state machine.

Maps one Snapshot plus the current mode to a direction. Memory is only
touched at junctions and crossroads:

- EXPLORE: entering a fresh junction that still has passages pushes the
  arrival heading.
- BACKTRACK: a junction with nothing left to explore pops the most
  recent record and reverses out along its arrival heading.

Finding an unexplored branch while backtracking switches back to
EXPLORE without pushing again: the junction's record from the outward
trip is still on the stack.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

import numpy as np

from ..errors import EmptyMemoryUnderflow
from ..perception.directions import Direction
from ..perception.junction_memory import JunctionMemory
from ..perception.snapshot import Snapshot, Topology
from ..strategies import (
    CorridorStrategy,
    DeadEndStrategy,
    JunctionStrategy,
    NoReverseCorridor,
    PreferUnexplored,
    RandomAvoidWall,
)
from .state import ControllerState, Mode

logger = logging.getLogger(__name__)


class MemoryAction(Enum):
    """What a decision did to junction memory."""

    NONE = auto()
    PUSH = auto()
    POP = auto()
    UNDERFLOW = auto()  # Pop wanted, memory empty, fell back to dead end rule


@dataclass
class Decision:
    """Outcome of one tick."""

    direction: Direction  # Relative, or absolute when reversing out of a junction
    mode: Mode  # Mode after this tick
    topology: Topology
    memory_action: MemoryAction = MemoryAction.NONE


class NavigationPolicy:
    """
    Decision logic for one tick.

    Usage:
        policy = NavigationPolicy(rng=np.random.default_rng(7))
        decision = policy.decide(snapshot, state, memory)

        # With custom strategies:
        policy = NavigationPolicy(corridor=MyCorridor(), junction=MyJunction())
    """

    def __init__(
        self,
        dead_end: DeadEndStrategy = None,
        corridor: CorridorStrategy = None,
        junction: JunctionStrategy = None,
        rng: np.random.Generator = None,
    ):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.dead_end = dead_end or RandomAvoidWall(self.rng)
        self.corridor = corridor or NoReverseCorridor(self.rng)
        self.junction = junction or PreferUnexplored(self.rng)

    def decide(
        self,
        snapshot: Snapshot,
        state: ControllerState,
        memory: JunctionMemory,
    ) -> Decision:
        """
        Decide the next move and apply the mode transition to state.

        Args:
            snapshot: Current readings (validated on construction).
            state: Controller state; state.mode is updated in place.
            memory: Junction stack; pushed or popped in place.

        Returns:
            Decision whose direction is never into a wall.
        """
        if state.mode == Mode.EXPLORE:
            decision = self._explore(snapshot, state, memory)
        else:
            decision = self._backtrack(snapshot, memory)

        if decision.mode != state.mode:
            logger.info(
                f"Transition: {state.mode.name} -> {decision.mode.name} "
                f"(step {state.step}, {decision.topology.name}, depth {memory.depth})"
            )
            state.mode = decision.mode

        logger.debug(
            f"Step {state.step}: {snapshot.describe()} -> {decision.direction.name} "
            f"[{decision.memory_action.name}]"
        )
        return decision

    def _explore(
        self,
        snapshot: Snapshot,
        state: ControllerState,
        memory: JunctionMemory,
    ) -> Decision:
        topology = snapshot.topology

        if topology == Topology.DEAD_END:
            direction = self.dead_end.choose(snapshot)
            # Nothing to return from on the first tick: just leave
            mode = Mode.EXPLORE if state.is_first_tick else Mode.BACKTRACK
            return Decision(direction, mode, topology)

        if topology == Topology.CORRIDOR:
            return Decision(self.corridor.choose(snapshot), Mode.EXPLORE, topology)

        direction = self.junction.choose(snapshot)
        action = MemoryAction.NONE
        if snapshot.visited_count == 0 and snapshot.passages:
            memory.push(snapshot.heading)
            action = MemoryAction.PUSH
        return Decision(direction, Mode.EXPLORE, topology, action)

    def _backtrack(self, snapshot: Snapshot, memory: JunctionMemory) -> Decision:
        topology = snapshot.topology

        if topology == Topology.CORRIDOR:
            return Decision(self.corridor.choose(snapshot), Mode.BACKTRACK, topology)

        if topology == Topology.DEAD_END:
            return Decision(self.dead_end.choose(snapshot), Mode.BACKTRACK, topology)

        direction = self.junction.choose_unexplored(snapshot)
        if direction is not None:
            return Decision(direction, Mode.EXPLORE, topology)

        try:
            arrival = self._pop_arrival(memory)
        except EmptyMemoryUnderflow as e:
            logger.info(f"{e}; treating junction as a dead end")
            return Decision(
                self.dead_end.choose(snapshot),
                Mode.BACKTRACK,
                topology,
                MemoryAction.UNDERFLOW,
            )

        reverse = arrival.opposite
        if not snapshot.is_open(reverse):
            # Start cell: the initial heading need not point back along a passage
            logger.info(f"Reverse heading {reverse.name} is walled; treating junction as a dead end")
            return Decision(self.dead_end.choose(snapshot), Mode.BACKTRACK, topology, MemoryAction.POP)
        return Decision(reverse, Mode.BACKTRACK, topology, MemoryAction.POP)

    def _pop_arrival(self, memory: JunctionMemory) -> Direction:
        arrival = memory.pop_top()
        if arrival is None:
            raise EmptyMemoryUnderflow("Junction memory empty while backtracking")
        return arrival
