"""
Control Layer - Execution.

Tick loop that couples the explorer to a maze runtime.
"""

from .controller import Controller, RunResult

__all__ = ["Controller", "RunResult"]
