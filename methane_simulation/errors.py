"""
errors.py
---------

Exceptions raised by the methane adjustment simulation.

All of them derive from ValueError so callers that already guard argument
errors with ``except ValueError`` keep working.
"""

from __future__ import annotations


class MethaneSimulationError(ValueError):
    """Base class for simulation input/parameter errors."""


class InputShapeError(MethaneSimulationError):
    """Per-year arrays disagree in length, dimensionality or year ordering."""


class InvalidParameterError(MethaneSimulationError):
    """Trial counts, distribution parameters or sweep ranges are malformed."""


class PreconditionError(MethaneSimulationError):
    """An operation was requested on an empty trial axis."""


__all__ = [
    "MethaneSimulationError",
    "InputShapeError",
    "InvalidParameterError",
    "PreconditionError",
]
