"""
Configuration constants for the maze explorer.

All fixed defaults in one place. Runtime-tunable values live in params.py.
"""

# =============================================================================
# JUNCTION MEMORY
# =============================================================================

# Generous upper bound on open junctions; exhaustion is a configuration error
MAX_JUNCTIONS = 10000

# =============================================================================
# SIMULATED MAZE
# =============================================================================

DEFAULT_MAZE_WIDTH = 12  # cells
DEFAULT_MAZE_HEIGHT = 12  # cells
MIN_MAZE_SIZE = 2  # cells per side
DEFAULT_LOOP_DENSITY = 0.0  # 0.0 = perfect maze (no loops)

# ASCII rendering
WALL_CHAR = "#"
OPEN_CHAR = " "
START_CHAR = "S"
EXIT_CHAR = "E"
ROBOT_CHARS = {"north": "^", "east": ">", "south": "v", "west": "<"}

# =============================================================================
# CONTROL LOOP
# =============================================================================

MAX_STEPS = 10000  # Step budget per run
CONTROL_LOOP_HZ = 20  # Tick rate when paced (web debug mode)
STATS_INTERVAL = 500  # Log run statistics every N ticks

# =============================================================================
# WEB INTERFACE
# =============================================================================

WEB_HOST = "0.0.0.0"
WEB_PORT = 8080
