import pytest

from maze_explorer.errors import MemoryCapacityError
from maze_explorer.perception import Direction, JunctionMemory


def test_pops_in_reverse_push_order():
    memory = JunctionMemory()
    for heading in (Direction.NORTH, Direction.EAST, Direction.SOUTH):
        memory.push(heading)

    assert [memory.pop_top() for _ in range(3)] == [
        Direction.SOUTH,
        Direction.EAST,
        Direction.NORTH,
    ]
    assert memory.is_empty


def test_peek_does_not_remove():
    memory = JunctionMemory()
    memory.push(Direction.WEST)
    assert memory.peek_top() is Direction.WEST
    assert memory.peek_top() is Direction.WEST
    assert memory.depth == 1


def test_empty_memory_peek_and_pop_return_none():
    memory = JunctionMemory()
    assert memory.peek_top() is None
    assert memory.pop_top() is None
    assert memory.pop_top() is None
    assert len(memory) == 0


def test_clear_drops_everything():
    memory = JunctionMemory()
    memory.push(Direction.NORTH)
    memory.push(Direction.EAST)
    memory.clear()
    assert memory.is_empty
    assert memory.max_depth == 0


def test_max_depth_tracks_high_water_mark():
    memory = JunctionMemory()
    memory.push(Direction.NORTH)
    memory.push(Direction.EAST)
    memory.pop_top()
    memory.push(Direction.SOUTH)
    memory.pop_top()
    assert memory.depth == 1
    assert memory.max_depth == 2


def test_capacity_exhaustion_raises():
    memory = JunctionMemory(capacity=2)
    memory.push(Direction.NORTH)
    memory.push(Direction.NORTH)
    with pytest.raises(MemoryCapacityError):
        memory.push(Direction.NORTH)
    assert memory.depth == 2


def test_relative_heading_rejected():
    with pytest.raises(ValueError):
        JunctionMemory().push(Direction.LEFT)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        JunctionMemory(capacity=0)


def test_instances_do_not_share_records():
    first, second = JunctionMemory(), JunctionMemory()
    first.push(Direction.EAST)
    assert second.is_empty
