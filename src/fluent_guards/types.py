"""Shared types for fluent guards."""

from enum import Enum


class Bound(Enum):
    """Boundary treatment for range checks."""

    INCLUSIVE = "inclusive"  # Bound values count as inside the range
    EXCLUSIVE = "exclusive"  # Bound values count as outside the range
