"""Simulation layer: generation stepping and session management."""

from life_arena.simulation.session import LifeSession, SessionRunningError
from life_arena.simulation.step import next_generation, run_generations

__all__ = [
    "LifeSession",
    "SessionRunningError",
    "next_generation",
    "run_generations",
]
