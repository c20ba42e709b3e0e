"""
Main controller - Couples the explorer to a runtime.

Each tick:
1. Read the four relative cells + heading into a Snapshot
2. Get a direction from the ExplorerSession
3. Hand it to the runtime to execute
4. Stop on the exit or when the step budget runs out
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict, dataclass

from ..params import Parameters
from ..perception import Direction, read_snapshot
from ..decision import ExplorerSession, Mode
from ..sensors import MazeRuntime

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Summary of one run."""

    run_index: int
    reached_exit: bool
    steps: int
    max_junction_depth: int
    backtracks: int  # EXPLORE -> BACKTRACK transitions

    def to_dict(self) -> dict:
        return asdict(self)


class Controller:
    """
    Drives one ExplorerSession against one MazeRuntime.

    Usage:
        controller = Controller(SimulatedRobot(maze))
        result = controller.run()

        # Paced, for the web interface:
        result = await controller.run_async(hz=20)
    """

    def __init__(
        self,
        runtime: MazeRuntime,
        session: ExplorerSession = None,
        params: Parameters = None,
    ):
        self.params = params or Parameters()
        self.runtime = runtime
        self.session = session or ExplorerSession(capacity=self.params.junction_capacity)

        # Control state
        self._running = False
        self._steps = 0
        self._backtracks = 0
        self._started = False

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def steps(self) -> int:
        return self._steps

    def start_run(self) -> None:
        """Reset the session for the runtime's current run."""
        self.session.on_run_reset(self.runtime.run_index())
        self._steps = 0
        self._backtracks = 0
        self._started = True

    def step(self) -> Direction:
        """Execute one tick and return the direction applied."""
        if not self._started or self.session.run_index != self.runtime.run_index():
            self.start_run()

        mode_before = self.session.mode
        snapshot = read_snapshot(self.runtime)
        direction = self.session.decide_next_move(snapshot)
        self.runtime.apply(direction)

        self._steps += 1
        if mode_before == Mode.EXPLORE and self.session.mode == Mode.BACKTRACK:
            self._backtracks += 1
        if self._steps % self.params.stats_interval == 0:
            self._log_stats()
        return direction

    def run(self, max_steps: int = None) -> RunResult:
        """Run until the exit is reached or the step budget is spent."""
        budget = max_steps if max_steps is not None else self.params.max_steps
        self.start_run()
        self._running = True
        logger.info(f"Run {self.runtime.run_index()} starting (budget {budget} steps)")
        try:
            while self._running and self._steps < budget and not self.runtime.at_exit():
                self.step()
        finally:
            self._running = False
        return self._finish()

    async def run_async(self, hz: int = None, max_steps: int = None) -> RunResult:
        """Paced version of run() for use inside an asyncio loop."""
        period = 1.0 / (hz or self.params.tick_hz)
        budget = max_steps if max_steps is not None else self.params.max_steps
        loop = asyncio.get_running_loop()
        if not self._started:
            self.start_run()
        self._running = True
        try:
            while self._running and self._steps < budget and not self.runtime.at_exit():
                t0 = loop.time()
                self.step()
                elapsed = loop.time() - t0
                await asyncio.sleep(max(0, period - elapsed))
        finally:
            self._running = False
        return self._finish()

    def stop(self) -> None:
        """Ask a running loop to stop after the current tick."""
        if self._running:
            logger.info("Stop requested")
        self._running = False

    def result(self) -> RunResult:
        return RunResult(
            run_index=self.runtime.run_index(),
            reached_exit=self.runtime.at_exit(),
            steps=self._steps,
            max_junction_depth=self.session.max_junction_depth,
            backtracks=self._backtracks,
        )

    def _finish(self) -> RunResult:
        result = self.result()
        if result.reached_exit:
            logger.info(
                f"Run {result.run_index}: exit reached in {result.steps} steps "
                f"(max depth {result.max_junction_depth}, {result.backtracks} backtracks)"
            )
        else:
            logger.warning(f"Run {result.run_index}: exit not reached after {result.steps} steps")
        return result

    def _log_stats(self) -> None:
        status = self.session.status()
        logger.info(
            f"Step {self._steps}: Mode={status['mode']}, "
            f"Depth={status['junction_depth']}, MaxDepth={status['max_junction_depth']}"
        )
