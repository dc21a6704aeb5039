"""Single-use guards over orderable values.

Each function checks one condition and returns a :class:`GuardResult`:
``GuardResult.ok(value)`` with the original object when the condition holds,
``GuardResult.fail(error_message)`` with the caller's message otherwise.

    >>> equal_to(5, 5, "Value was not 5!")
    GuardResult(value=5)
    >>> less_than(5, 5, "Value was 5 or more!")
    GuardResult(error='Value was 5 or more!')

Values only need the rich comparison operators. A pair that cannot be ordered
(the comparison raises ``TypeError``) fails the check instead of raising.
Every check rejects a None ``error_message`` with ``TypeError``, whether or not
the condition holds.
"""

import logging
import operator
from collections.abc import Callable
from typing import Any, TypeVar

from fluent_guards.result import GuardResult
from fluent_guards.types import Bound


logger = logging.getLogger(__name__)

T = TypeVar("T")


def _compare(op: Callable[[Any, Any], Any], left: Any, right: Any) -> bool:
    try:
        return bool(op(left, right))
    except TypeError as exc:
        logger.debug("Unordered comparison %s(%r, %r): %s", op.__name__, left, right, exc)
        return False


def _check(passed: bool, value: T, error_message: Any) -> GuardResult[T]:
    if error_message is None:
        raise TypeError("error_message must be text, got None")
    if passed:
        return GuardResult.ok(value)
    return GuardResult.fail(error_message)


def _ensure_bound(bound_mode: Bound) -> Bound:
    if not isinstance(bound_mode, Bound):
        msg = f"Invalid bound mode: {bound_mode!r}"
        raise ValueError(msg)
    return bound_mode


def equal_to(value: T, test_value: T, error_message: Any) -> GuardResult[T]:
    """Ensure that ``value`` and ``test_value`` are equal."""
    return _check(_compare(operator.eq, value, test_value), value, error_message)


def not_equal_to(value: T, test_value: T, error_message: Any) -> GuardResult[T]:
    """Ensure that ``value`` and ``test_value`` are not equal."""
    return _check(_compare(operator.ne, value, test_value), value, error_message)


def less_than(value: T, test_value: T, error_message: Any) -> GuardResult[T]:
    """Ensure that ``value`` is less than ``test_value``."""
    return _check(_compare(operator.lt, value, test_value), value, error_message)


def less_or_equal(value: T, test_value: T, error_message: Any) -> GuardResult[T]:
    """Ensure that ``value`` is less than or equal to ``test_value``."""
    return _check(_compare(operator.le, value, test_value), value, error_message)


def greater_than(value: T, test_value: T, error_message: Any) -> GuardResult[T]:
    """Ensure that ``value`` is greater than ``test_value``."""
    return _check(_compare(operator.gt, value, test_value), value, error_message)


def greater_or_equal(value: T, test_value: T, error_message: Any) -> GuardResult[T]:
    """Ensure that ``value`` is greater than or equal to ``test_value``."""
    return _check(_compare(operator.ge, value, test_value), value, error_message)


def between(
    value: T,
    lower_bound: T,
    upper_bound: T,
    bound_mode: Bound,
    error_message: Any,
) -> GuardResult[T]:
    """Ensure that ``value`` lies between ``lower_bound`` and ``upper_bound``.

    Parameters
    ----------
    value : T
        The value to check.
    lower_bound, upper_bound : T
        Range bounds.
    bound_mode : Bound
        ``Bound.EXCLUSIVE`` requires ``lower < value < upper``;
        ``Bound.INCLUSIVE`` requires ``lower <= value <= upper``.
    error_message : str
        Returned verbatim when the check fails.

    Returns
    -------
    GuardResult
        ``ok(value)`` if inside the range, ``fail(error_message)`` otherwise.

    Raises
    ------
    TypeError
        If ``error_message`` is None.
    ValueError
        If ``bound_mode`` is not a :class:`Bound` member.
    """
    if _ensure_bound(bound_mode) is Bound.EXCLUSIVE:
        passed = _compare(operator.gt, value, lower_bound) and _compare(operator.lt, value, upper_bound)
    else:
        passed = _compare(operator.ge, value, lower_bound) and _compare(operator.le, value, upper_bound)
    return _check(passed, value, error_message)


def outside(
    value: T,
    lower_bound: T,
    upper_bound: T,
    bound_mode: Bound,
    error_message: Any,
) -> GuardResult[T]:
    """Ensure that ``value`` lies outside ``lower_bound`` and ``upper_bound``.

    ``Bound.EXCLUSIVE`` passes for ``value <= lower or value >= upper``, so a
    value sitting on a bound is outside. ``Bound.INCLUSIVE`` passes for
    ``value < lower or value > upper``. In either mode ``outside`` is the
    negation of ``between`` with the same mode, so a bound value passes both
    ``between(INCLUSIVE)`` and ``outside(EXCLUSIVE)``.

    Raises
    ------
    TypeError
        If ``error_message`` is None.
    ValueError
        If ``bound_mode`` is not a :class:`Bound` member.
    """
    if _ensure_bound(bound_mode) is Bound.EXCLUSIVE:
        passed = _compare(operator.le, value, lower_bound) or _compare(operator.ge, value, upper_bound)
    else:
        passed = _compare(operator.lt, value, lower_bound) or _compare(operator.gt, value, upper_bound)
    return _check(passed, value, error_message)
