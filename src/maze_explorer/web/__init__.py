"""
Web Layer - Debug and remote control interface.

Provides:
- Explorer status (JSON)
- Single-step / auto run control
- Parameter tuning
- ASCII maze view (simulator only)
"""

from .server import create_app, run_server

__all__ = ["create_app", "run_server"]
