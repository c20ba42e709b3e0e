"""
Runtime Layer - The maze and the robot's body.

Contains:
- MazeRuntime: Interface the explorer is driven through
- GridMaze: numpy-backed maze layout and generator
- SimulatedRobot: MazeRuntime implementation over a GridMaze
"""

from .grid_maze import GridMaze
from .runtime import MazeRuntime
from .simulated_robot import SimulatedRobot

__all__ = ["GridMaze", "MazeRuntime", "SimulatedRobot"]
