from maze_explorer.perception import CellState, Direction
from maze_explorer.sensors import GridMaze, MazeRuntime, SimulatedRobot

TINY_MAZE = """
#####
#S E#
#####
"""


def test_is_a_maze_runtime(small_maze):
    assert isinstance(SimulatedRobot(small_maze), MazeRuntime)


def test_starts_facing_an_opening(small_maze):
    robot = SimulatedRobot(small_maze)
    assert robot.current_heading() is Direction.SOUTH
    assert robot.look(Direction.AHEAD) is CellState.PASSAGE
    assert robot.look(Direction.BEHIND) is CellState.WALL
    assert robot.run_index() == 0


def test_moves_mark_cells_visited(small_maze):
    robot = SimulatedRobot(small_maze)
    robot.apply(Direction.AHEAD)

    assert robot.position == (1, 0)
    assert robot.look(Direction.BEHIND) is CellState.VISITED
    # Facing SOUTH, LEFT is EAST
    assert robot.look(Direction.LEFT) is CellState.PASSAGE
    assert robot.visited_cells == 2


def test_absolute_direction_sets_heading(small_maze):
    robot = SimulatedRobot(small_maze)
    robot.apply(Direction.AHEAD)
    robot.apply(Direction.EAST)
    assert robot.position == (1, 1)
    assert robot.current_heading() is Direction.EAST


def test_wall_bump_is_counted_not_moved(small_maze):
    robot = SimulatedRobot(small_maze)
    robot.apply(Direction.BEHIND)
    assert robot.position == small_maze.start
    assert robot.current_heading() is Direction.NORTH
    assert robot.collisions == 1
    assert robot.steps == 1


def test_exit_reading_and_arrival():
    robot = SimulatedRobot(GridMaze.from_ascii(TINY_MAZE))
    assert robot.look(Direction.AHEAD) is CellState.EXIT
    assert not robot.at_exit()
    robot.apply(Direction.AHEAD)
    assert robot.at_exit()


def test_new_run_returns_to_start(small_maze):
    robot = SimulatedRobot(small_maze)
    robot.apply(Direction.AHEAD)
    robot.new_run()

    assert robot.run_index() == 1
    assert robot.position == small_maze.start
    assert robot.steps == 0
    assert robot.visited_cells == 1


def test_new_run_can_swap_maze(small_maze):
    robot = SimulatedRobot(small_maze)
    tiny = GridMaze.from_ascii(TINY_MAZE)
    robot.new_run(tiny)
    assert robot.maze is tiny
    assert robot.current_heading() is Direction.EAST


def test_render_shows_robot(small_maze):
    robot = SimulatedRobot(small_maze)
    assert robot.render().splitlines()[1][1] == "v"
