#!/usr/bin/env python3
"""
Maze explorer - Main entry point

Usage:
    maze-explorer                      # Explore one generated maze
    maze-explorer --runs 5 --seed 3    # Several runs, reproducible mazes
    maze-explorer --web                # Debug web interface
"""

import argparse
import asyncio
import logging
import sys

import numpy as np


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Coordinate-free maze explorer")
    parser.add_argument("--width", type=int, help="Maze width in cells")
    parser.add_argument("--height", type=int, help="Maze height in cells")
    parser.add_argument("--seed", type=int, help="Random seed (-1 for fresh entropy)")
    parser.add_argument("--loops", type=float, help="Loop density 0.0-1.0")
    parser.add_argument("--max-steps", type=int, help="Step budget per run")
    parser.add_argument("--runs", type=int, default=1, help="Number of runs")
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the maze after each run",
    )
    parser.add_argument(
        "--web",
        action="store_true",
        help="Enable web interface for debugging",
    )
    parser.add_argument(
        "--save-params",
        action="store_true",
        help="Persist the effective parameters to params.json",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    args = parser.parse_args(argv)

    # Setup logging
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("Maze explorer starting...")

    from .control import Controller
    from .decision import ExplorerSession
    from .errors import ExplorerError
    from .params import Parameters
    from .sensors import GridMaze, SimulatedRobot

    params = Parameters.load()
    overrides = {
        "maze_width": args.width,
        "maze_height": args.height,
        "seed": args.seed,
        "loop_density": args.loops,
        "max_steps": args.max_steps,
    }
    params.update(**{k: v for k, v in overrides.items() if v is not None})

    try:
        params.validate()
    except ExplorerError as e:
        logger.error(f"Invalid parameters: {e}")
        return 2

    if args.save_params:
        params.save()

    rng = np.random.default_rng(params.rng_seed)
    robot = SimulatedRobot(GridMaze.generate(
        params.maze_width,
        params.maze_height,
        rng=rng,
        loop_density=params.loop_density,
    ))
    session = ExplorerSession(capacity=params.junction_capacity, rng=rng)
    controller = Controller(robot, session=session, params=params)

    if args.web:
        from .web import run_server

        async def run_web():
            runner = await run_server(controller=controller)
            logger.info("Press Ctrl+C to stop")
            try:
                while True:
                    await asyncio.sleep(1)
            except asyncio.CancelledError:
                pass
            finally:
                controller.stop()
                await runner.cleanup()

        try:
            asyncio.run(run_web())
        except KeyboardInterrupt:
            logger.info("Interrupted")
        return 0

    reached = 0
    for run in range(args.runs):
        if run > 0:
            robot.new_run(GridMaze.generate(
                params.maze_width,
                params.maze_height,
                rng=rng,
                loop_density=params.loop_density,
            ))
        try:
            result = controller.run()
        except ExplorerError as e:
            logger.error(f"Run {run} aborted: {e}", exc_info=True)
            return 1
        reached += result.reached_exit
        if args.show:
            print(robot.render())

    logger.info(f"Exit reached in {reached}/{args.runs} runs")
    return 0 if reached == args.runs else 1


if __name__ == "__main__":
    sys.exit(main())
