"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest


class RecordingValue:
    """Integer-backed value that records every comparison made against it."""

    def __init__(self, n: int, calls: list[str]):
        self.n = n
        self.calls = calls

    def _record(self, op: str, other: RecordingValue) -> int:
        self.calls.append(op)
        return other.n

    def __eq__(self, other):
        return self.n == self._record("eq", other)

    def __ne__(self, other):
        return self.n != self._record("ne", other)

    def __lt__(self, other):
        return self.n < self._record("lt", other)

    def __le__(self, other):
        return self.n <= self._record("le", other)

    def __gt__(self, other):
        return self.n > self._record("gt", other)

    def __ge__(self, other):
        return self.n >= self._record("ge", other)

    __hash__ = None


@pytest.fixture
def comparison_calls() -> list[str]:
    """Shared log of comparisons made by RecordingValue instances."""
    return []


@pytest.fixture
def recording(comparison_calls):
    """Factory for RecordingValue instances writing to comparison_calls."""

    def make(n: int) -> RecordingValue:
        return RecordingValue(n, comparison_calls)

    return make
