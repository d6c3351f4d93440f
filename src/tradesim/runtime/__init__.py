"""Simulation runtime exports."""

from tradesim.runtime.clock import ClockConfig, SimulationClock
from tradesim.runtime.context import RunContext, create_run_context
from tradesim.runtime.engine import SimulationEngine, SimulationState, TickResult, toggle

__all__ = [
    "ClockConfig",
    "RunContext",
    "SimulationClock",
    "SimulationEngine",
    "SimulationState",
    "TickResult",
    "create_run_context",
    "toggle",
]
