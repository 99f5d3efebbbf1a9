"""Simulation module for running awards day by day."""

from .runner import AwardSimulation, DaySnapshot, RankedAward

__all__ = [
    "AwardSimulation",
    "DaySnapshot",
    "RankedAward",
]
