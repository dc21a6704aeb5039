"""Guard error types."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from fluent_guards.result import GuardResult


class GuardFailedError(Exception):
    """Raised when a failed GuardResult is unwrapped.

    The message is the caller's error message, unchanged.
    """

    def __init__(self, result: GuardResult) -> None:
        self.result = result
        super().__init__(result.error)
