"""Shared builders for the test suite."""

from maze_explorer.perception import CellState, Direction, Snapshot

W = CellState.WALL
P = CellState.PASSAGE
V = CellState.VISITED
X = CellState.EXIT


class FixedIndexRng:
    """Stands in for a numpy Generator: always picks candidate `index`."""

    def __init__(self, index=0):
        self.index = index

    def integers(self, n):
        return min(self.index, n - 1)


def make_snapshot(ahead=W, left=W, right=W, behind=W, heading=Direction.NORTH):
    return Snapshot(
        readings={
            Direction.AHEAD: ahead,
            Direction.LEFT: left,
            Direction.RIGHT: right,
            Direction.BEHIND: behind,
        },
        heading=heading,
    )


SMALL_MAZE = """
#########
#S#     #
# # ### #
#   #   #
### # ###
#   #  E#
#########
"""
