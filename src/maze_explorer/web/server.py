"""
Web server - aiohttp application for debug interface.
"""

import asyncio
import logging
from dataclasses import replace
from typing import Optional

from aiohttp import web

from ..config import WEB_HOST, WEB_PORT
from ..errors import MazeConfigError
from ..sensors import GridMaze

logger = logging.getLogger(__name__)


class WebServer:
    """
    Debug web interface server.

    Provides:
    - Run status (mode, step, junction depth)
    - Single-step and paced auto run of the explorer
    - Parameter tuning
    - ASCII view of the simulated maze
    """

    def __init__(self, controller=None):
        """
        Args:
            controller: Optional Controller driving a SimulatedRobot
        """
        self.controller = controller
        self.app = web.Application()
        self._auto_task: Optional[asyncio.Task] = None
        self._setup_routes()
        self.app.on_cleanup.append(self._on_cleanup)

    def _setup_routes(self):
        """Configure routes."""
        self.app.router.add_get("/api/status", self.api_status)
        self.app.router.add_get("/api/maze", self.api_maze)

        # Run control
        self.app.router.add_post("/api/step", self.api_step)
        self.app.router.add_post("/api/run/start", self.api_run_start)
        self.app.router.add_post("/api/run/stop", self.api_run_stop)
        self.app.router.add_post("/api/run/reset", self.api_run_reset)

        # Runtime parameters
        self.app.router.add_get("/api/params", self.api_params_get)
        self.app.router.add_post("/api/params", self.api_params_set)

    @property
    def auto_running(self) -> bool:
        return self._auto_task is not None and not self._auto_task.done()

    def _status(self) -> dict:
        status = {
            "run": 0,
            "step": 0,
            "mode": "unknown",
            "junction_depth": 0,
            "reached_exit": False,
            "auto": self.auto_running,
        }
        if self.controller:
            status.update(self.controller.session.status())
            status["reached_exit"] = self.controller.runtime.at_exit()
        return status

    async def api_status(self, request):
        """Get current explorer status."""
        return web.json_response(self._status())

    async def api_maze(self, request):
        """ASCII view of the simulated maze with the robot drawn in."""
        if not self.controller or not hasattr(self.controller.runtime, "render"):
            return web.json_response({"error": "No simulated maze"}, status=404)
        return web.Response(text=self.controller.runtime.render(), content_type="text/plain")

    async def api_step(self, request):
        """Execute a single tick."""
        if not self.controller:
            return web.json_response({"error": "Controller not available"}, status=404)
        if self.auto_running:
            return web.json_response({"error": "Auto run in progress"}, status=409)
        if self.controller.runtime.at_exit():
            return web.json_response({"error": "Exit already reached"}, status=409)

        direction = self.controller.step()
        status = self._status()
        status["direction"] = direction.name
        return web.json_response(status)

    async def api_run_start(self, request):
        """Start a paced autonomous run."""
        if not self.controller:
            return web.json_response({"error": "Controller not available"}, status=404)
        if self.auto_running:
            return web.json_response({"error": "Auto run in progress"}, status=409)

        self._auto_task = asyncio.ensure_future(self._auto_loop())
        logger.info("Auto run started")
        return web.json_response(self._status())

    async def api_run_stop(self, request):
        """Stop the autonomous run."""
        await self.stop_auto()
        return web.json_response(self._status())

    async def api_run_reset(self, request):
        """Start a new run. Pass {"regenerate": true} for a new maze from params."""
        if not self.controller:
            return web.json_response({"error": "Controller not available"}, status=404)

        data = await request.json() if request.can_read_body else {}
        await self.stop_auto()

        maze = None
        if data.get("regenerate"):
            try:
                maze = GridMaze.from_params(self.controller.params)
            except MazeConfigError as e:
                return web.json_response({"error": str(e)}, status=400)

        self.controller.runtime.new_run(maze)
        self.controller.start_run()
        return web.json_response(self._status())

    async def api_params_get(self, request):
        """Get all tunable parameters."""
        if not self.controller:
            return web.json_response({"error": "Parameters not available"}, status=404)
        return web.json_response(self.controller.params.to_dict())

    async def api_params_set(self, request):
        """Update tunable parameters. Include _save=true to persist to disk."""
        if not self.controller:
            return web.json_response({"error": "Parameters not available"}, status=404)

        data = await request.json()
        save = data.pop("_save", False)
        candidate = replace(self.controller.params)
        candidate.update(**data)
        try:
            candidate.validate()
        except MazeConfigError as e:
            return web.json_response({"error": str(e)}, status=400)
        self.controller.params.update(**data)

        if save:
            self.controller.params.save()

        return web.json_response(self.controller.params.to_dict())

    async def stop_auto(self):
        """Cancel the auto run task if any."""
        if self._auto_task is None:
            return
        self.controller.stop()
        self._auto_task.cancel()
        try:
            await self._auto_task
        except asyncio.CancelledError:
            pass
        self._auto_task = None
        logger.info("Auto run stopped")

    async def _auto_loop(self):
        """Paced run (runs as asyncio task)."""
        try:
            result = await self.controller.run_async()
            logger.info(f"Auto run finished: {result.to_dict()}")
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"Auto loop error: {e}", exc_info=True)

    async def _on_cleanup(self, app):
        await self.stop_auto()


def create_app(controller=None) -> web.Application:
    """Create the web application."""
    server = WebServer(controller)
    return server.app


async def run_server(controller=None, host=WEB_HOST, port=WEB_PORT):
    """Run the web server."""
    app = create_app(controller)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, host, port)
    await site.start()
    logger.info(f"Web server running at http://{host}:{port}")
    return runner
