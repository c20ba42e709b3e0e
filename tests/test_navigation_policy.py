import itertools

import numpy as np
import pytest

from maze_explorer.decision import ControllerState, MemoryAction, Mode, NavigationPolicy
from maze_explorer.errors import MemoryCapacityError
from maze_explorer.perception import (
    ABSOLUTE_DIRECTIONS,
    RELATIVE_DIRECTIONS,
    Direction,
    JunctionMemory,
    Topology,
)

from helpers import FixedIndexRng, P, V, W, X, make_snapshot


def _snapshot(heading=Direction.NORTH, **readings):
    return make_snapshot(heading=heading, **readings)


def _state(mode=Mode.EXPLORE, step=5):
    return ControllerState(step=step, mode=mode)


OPEN_STATES = (P, V, X)


@pytest.mark.parametrize("mode", [Mode.EXPLORE, Mode.BACKTRACK])
@pytest.mark.parametrize("step", [0, 7])
def test_single_exit_is_always_taken(mode, step):
    policy = NavigationPolicy(rng=np.random.default_rng(3))
    for direction, cell, heading in itertools.product(
        RELATIVE_DIRECTIONS, OPEN_STATES, ABSOLUTE_DIRECTIONS
    ):
        snapshot = _snapshot(heading=heading, **{direction.value: cell})
        decision = policy.decide(snapshot, _state(mode, step), JunctionMemory())
        assert decision.direction is direction


@pytest.mark.parametrize("mode", [Mode.EXPLORE, Mode.BACKTRACK])
def test_corridor_with_behind_never_reverses(mode):
    policy = NavigationPolicy(rng=np.random.default_rng(11))
    for other, cell, behind_cell in itertools.product(
        (Direction.AHEAD, Direction.LEFT, Direction.RIGHT), OPEN_STATES, OPEN_STATES
    ):
        snapshot = _snapshot(behind=behind_cell, **{other.value: cell})
        for _ in range(10):
            decision = policy.decide(snapshot, _state(mode), JunctionMemory())
            assert decision.direction is not Direction.BEHIND
            assert decision.mode is mode


def test_explore_junction_pushes_arrival_heading():
    # Facing NORTH; the passage chosen is on the RIGHT, i.e. EAST
    policy = NavigationPolicy(rng=FixedIndexRng(1))
    memory = JunctionMemory()
    snapshot = _snapshot(heading=Direction.NORTH, ahead=P, right=P, behind=V)

    decision = policy.decide(snapshot, _state(), memory)

    assert decision.direction is Direction.RIGHT
    assert decision.direction.to_absolute(Direction.NORTH) is Direction.EAST
    assert decision.memory_action is MemoryAction.PUSH
    assert decision.topology is Topology.JUNCTION
    assert memory.peek_top() is Direction.NORTH
    assert memory.depth == 1


def test_explore_junction_with_visited_neighbour_does_not_push():
    policy = NavigationPolicy(rng=np.random.default_rng(0))
    memory = JunctionMemory()
    snapshot = _snapshot(ahead=P, left=V, right=P, behind=V)

    decision = policy.decide(snapshot, _state(), memory)

    assert decision.direction in (Direction.AHEAD, Direction.RIGHT)
    assert decision.memory_action is MemoryAction.NONE
    assert memory.is_empty


def test_explore_junction_without_passage_revisits_without_push():
    policy = NavigationPolicy(rng=np.random.default_rng(0))
    memory = JunctionMemory()
    snapshot = _snapshot(ahead=V, left=V, right=V, behind=V)

    decision = policy.decide(snapshot, _state(), memory)

    assert decision.direction in RELATIVE_DIRECTIONS
    assert decision.mode is Mode.EXPLORE
    assert memory.is_empty


def test_explore_prefers_exit_at_crossroad():
    policy = NavigationPolicy(rng=np.random.default_rng(0))
    snapshot = _snapshot(ahead=P, left=X, right=P, behind=V)
    decision = policy.decide(snapshot, _state(), JunctionMemory())
    assert decision.direction is Direction.LEFT


def test_explore_junction_with_only_exit_does_not_push():
    policy = NavigationPolicy(rng=np.random.default_rng(0))
    memory = JunctionMemory()
    snapshot = _snapshot(ahead=X, right=X, behind=V)

    decision = policy.decide(snapshot, _state(), memory)

    assert decision.direction in (Direction.AHEAD, Direction.RIGHT)
    assert decision.memory_action is MemoryAction.NONE
    assert memory.is_empty


def test_dead_end_switches_to_backtrack():
    policy = NavigationPolicy(rng=np.random.default_rng(0))
    state = _state(step=4)
    decision = policy.decide(_snapshot(behind=V), state, JunctionMemory())

    assert decision.direction is Direction.BEHIND
    assert decision.mode is Mode.BACKTRACK
    assert state.mode is Mode.BACKTRACK


def test_first_tick_dead_end_stays_in_explore():
    policy = NavigationPolicy(rng=np.random.default_rng(0))
    state = _state(step=0)
    decision = policy.decide(_snapshot(right=P), state, JunctionMemory())

    assert decision.direction is Direction.RIGHT
    assert decision.mode is Mode.EXPLORE
    assert state.mode is Mode.EXPLORE


def test_backtrack_junction_without_passage_reverses_arrival():
    policy = NavigationPolicy(rng=np.random.default_rng(0))
    memory = JunctionMemory()
    memory.push(Direction.NORTH)
    state = _state(Mode.BACKTRACK)
    # Facing WEST: SOUTH is on the LEFT
    snapshot = _snapshot(heading=Direction.WEST, ahead=V, left=V, behind=V)

    decision = policy.decide(snapshot, state, memory)

    assert decision.direction is Direction.SOUTH
    assert decision.memory_action is MemoryAction.POP
    assert decision.mode is Mode.BACKTRACK
    assert memory.is_empty


def test_backtrack_pops_only_the_top_record():
    policy = NavigationPolicy(rng=np.random.default_rng(0))
    memory = JunctionMemory()
    memory.push(Direction.EAST)
    memory.push(Direction.SOUTH)
    snapshot = _snapshot(heading=Direction.SOUTH, ahead=V, left=V, right=V, behind=V)

    decision = policy.decide(snapshot, _state(Mode.BACKTRACK), memory)

    assert decision.direction is Direction.NORTH
    assert memory.peek_top() is Direction.EAST


def test_backtrack_junction_with_passage_resumes_explore():
    policy = NavigationPolicy(rng=np.random.default_rng(0))
    memory = JunctionMemory()
    memory.push(Direction.EAST)
    state = _state(Mode.BACKTRACK)
    snapshot = _snapshot(ahead=V, left=P, behind=V)

    decision = policy.decide(snapshot, state, memory)

    assert decision.direction is Direction.LEFT
    assert decision.mode is Mode.EXPLORE
    assert decision.memory_action is MemoryAction.NONE
    assert state.mode is Mode.EXPLORE
    # The junction's record from the outward trip is kept, not duplicated
    assert memory.depth == 1
    assert memory.peek_top() is Direction.EAST


def test_backtrack_underflow_degrades_to_dead_end_rule():
    policy = NavigationPolicy(rng=np.random.default_rng(0))
    memory = JunctionMemory()
    snapshot = _snapshot(ahead=V, right=V, behind=V)

    decision = policy.decide(snapshot, _state(Mode.BACKTRACK), memory)

    assert decision.memory_action is MemoryAction.UNDERFLOW
    assert decision.mode is Mode.BACKTRACK
    assert snapshot.is_open(decision.direction)
    assert memory.is_empty


def test_backtrack_walled_reverse_falls_back_to_open_direction():
    policy = NavigationPolicy(rng=np.random.default_rng(0))
    memory = JunctionMemory()
    memory.push(Direction.NORTH)
    # Facing NORTH, SOUTH is BEHIND and walled
    snapshot = _snapshot(ahead=V, left=V, right=V, behind=W)

    decision = policy.decide(snapshot, _state(Mode.BACKTRACK), memory)

    assert decision.memory_action is MemoryAction.POP
    assert decision.direction in (Direction.AHEAD, Direction.LEFT, Direction.RIGHT)
    assert memory.is_empty


def test_backtrack_corridor_and_dead_end_keep_mode():
    policy = NavigationPolicy(rng=np.random.default_rng(0))
    memory = JunctionMemory()
    memory.push(Direction.WEST)

    corridor = policy.decide(_snapshot(ahead=V, behind=V), _state(Mode.BACKTRACK), memory)
    dead_end = policy.decide(_snapshot(behind=V), _state(Mode.BACKTRACK), memory)

    assert corridor.direction is Direction.AHEAD
    assert dead_end.direction is Direction.BEHIND
    assert corridor.mode is dead_end.mode is Mode.BACKTRACK
    assert memory.depth == 1


def test_push_on_full_memory_propagates():
    policy = NavigationPolicy(rng=np.random.default_rng(0))
    memory = JunctionMemory(capacity=1)
    memory.push(Direction.NORTH)
    with pytest.raises(MemoryCapacityError):
        policy.decide(_snapshot(ahead=P, left=P, behind=V), _state(), memory)


def test_custom_strategy_is_used():
    class AlwaysAhead:
        def choose(self, snapshot):
            return Direction.AHEAD

    policy = NavigationPolicy(corridor=AlwaysAhead(), rng=np.random.default_rng(0))
    decision = policy.decide(_snapshot(ahead=P, left=P), _state(), JunctionMemory())
    assert decision.direction is Direction.AHEAD
