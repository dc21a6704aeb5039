"""Fluent guards - chainable ordering checks with a single error message."""

from . import guards
from .errors import GuardFailedError
from .guard import Guard
from .result import GuardResult
from .types import Bound


__all__ = [
    # Chainable guard
    "Guard",
    "GuardResult",
    "GuardFailedError",
    "Bound",
    # Single-use guards
    "guards",
]
