from __future__ import annotations


class SimulationError(Exception):
    pass


class InvalidRangeError(SimulationError, ValueError):
    """Raised when a count or accuracy lies outside its valid range."""


class NegativeCountError(SimulationError, ValueError):
    """Raised when explicit GOOD / ACCEPTABLE counts leave no room for PERFECT."""


class DivisionByZeroError(SimulationError, ZeroDivisionError):
    """Raised when accuracy is evaluated for a play with no judged objects."""


class PlayFormatError(SimulationError, ValueError):
    pass
