import numpy as np
import pytest

from maze_explorer.control import Controller
from maze_explorer.decision import ExplorerSession
from maze_explorer.params import Parameters
from maze_explorer.sensors import GridMaze, SimulatedRobot

from helpers import SMALL_MAZE


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def small_maze():
    return GridMaze.from_ascii(SMALL_MAZE)


@pytest.fixture
def controller(small_maze, rng):
    params = Parameters(maze_width=4, maze_height=3, seed=5, tick_hz=1000)
    robot = SimulatedRobot(small_maze)
    return Controller(robot, session=ExplorerSession(rng=rng), params=params)
