"""Chainable guards.

A :class:`Guard` runs several checks from :mod:`fluent_guards.guards` against
one value and keeps the message of the first one that fails:

    >>> def set_channel(channel: int) -> GuardResult[int]:
    ...     return (
    ...         Guard(channel)
    ...         .between(1, 15, Bound.INCLUSIVE, "Invalid channel!")
    ...         .not_equal_to(13, "Channel 13 is blocked!")
    ...         .finalize()
    ...     )
    >>> set_channel(5)
    GuardResult(value=5)
    >>> set_channel(0)
    GuardResult(error='Invalid channel!')
    >>> set_channel(13)
    GuardResult(error='Channel 13 is blocked!')
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from fluent_guards import guards
from fluent_guards.result import GuardResult
from fluent_guards.types import Bound


logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Guard(Generic[T]):
    """Guarded value plus the first recorded failure, if any.

    Guards are immutable. Every check returns a guard: the same instance when
    nothing changed, a new one carrying the error message on the first
    failure. Once an error is recorded later checks are skipped without being
    evaluated, and :meth:`finalize` returns that first error. A check that
    runs raises TypeError for a None error message, pass or fail.

    Attributes
    ----------
    value
        The value under validation.
    error
        Message of the first failed check, or None while every check passed.
    """

    value: T
    error: str | None = None

    @classmethod
    def create(cls, value: T) -> Guard[T]:
        return cls(value)

    @property
    def failed(self) -> bool:
        return self.error is not None

    def finalize(self) -> GuardResult[T]:
        """Return ``ok(value)`` if every check passed, else ``fail(error)``."""
        if self.error is None:
            return GuardResult.ok(self.value)
        return GuardResult.fail(self.error)

    def _apply(self, check: Callable[..., GuardResult[T]], *args: Any) -> Guard[T]:
        if self.error is not None:
            return self

        result = check(self.value, *args)
        if result.passed:
            return self

        logger.debug("Guard %s failed for %r: %s", check.__name__, self.value, result.error)
        return replace(self, error=result.error)

    def equal_to(self, test_value: T, error_message: Any) -> Guard[T]:
        """Ensure that the value equals ``test_value``."""
        return self._apply(guards.equal_to, test_value, error_message)

    def not_equal_to(self, test_value: T, error_message: Any) -> Guard[T]:
        """Ensure that the value does not equal ``test_value``."""
        return self._apply(guards.not_equal_to, test_value, error_message)

    def less_than(self, test_value: T, error_message: Any) -> Guard[T]:
        return self._apply(guards.less_than, test_value, error_message)

    def less_or_equal(self, test_value: T, error_message: Any) -> Guard[T]:
        return self._apply(guards.less_or_equal, test_value, error_message)

    def greater_than(self, test_value: T, error_message: Any) -> Guard[T]:
        return self._apply(guards.greater_than, test_value, error_message)

    def greater_or_equal(self, test_value: T, error_message: Any) -> Guard[T]:
        return self._apply(guards.greater_or_equal, test_value, error_message)

    def between(
        self,
        lower_bound: T,
        upper_bound: T,
        bound_mode: Bound,
        error_message: Any,
    ) -> Guard[T]:
        """Ensure that the value lies between the bounds.

        See :func:`fluent_guards.guards.between` for the bound semantics.
        """
        return self._apply(guards.between, lower_bound, upper_bound, bound_mode, error_message)

    def outside(
        self,
        lower_bound: T,
        upper_bound: T,
        bound_mode: Bound,
        error_message: Any,
    ) -> Guard[T]:
        """Ensure that the value lies outside the bounds.

        See :func:`fluent_guards.guards.outside` for the bound semantics.
        """
        return self._apply(guards.outside, lower_bound, upper_bound, bound_mode, error_message)
