"""Rebuild judgement counts and combo for a simulated rhythm-game play."""

from .errors import (
    DivisionByZeroError,
    InvalidRangeError,
    NegativeCountError,
    PlayFormatError,
    SimulationError,
)
from .runtime import evaluate, max_combo, resolve_combo, synthesize
from .types import ACCEPTABLE, GOOD, MISS, PERFECT, TIERS, Distribution, JudgedObject

__version__ = "0.1.0"

__all__ = [
    "ACCEPTABLE",
    "GOOD",
    "MISS",
    "PERFECT",
    "TIERS",
    "Distribution",
    "JudgedObject",
    "DivisionByZeroError",
    "InvalidRangeError",
    "NegativeCountError",
    "PlayFormatError",
    "SimulationError",
    "evaluate",
    "max_combo",
    "resolve_combo",
    "synthesize",
]
