"""Success/failure result of a guard check or guard chain."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

from fluent_guards.errors import GuardFailedError


T = TypeVar("T")


class GuardResult(BaseModel, Generic[T]):
    """Result of evaluating one guard or a whole guard chain.

    Attributes:
    ----------
    value: T | None
        The guarded value when the check passed, otherwise None
    error: str | None
        The caller's error message when the check failed, otherwise None
    """

    model_config = ConfigDict(frozen=True)

    value: T | None = None
    error: str | None = None

    @field_validator("error", mode="before")
    @classmethod
    def _coerce_message(cls, v: Any) -> str | None:
        """Accept text-like error messages and store them as str."""
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (bytes, bytearray)):
            return bytes(v).decode("utf-8", errors="replace")
        return str(v)

    @classmethod
    def ok(cls, value: T) -> GuardResult[T]:
        return cls(value=value, error=None)

    @classmethod
    def fail(cls, message: Any) -> GuardResult[T]:
        if message is None:
            raise TypeError("A failed GuardResult needs an error message, got None")
        return cls(value=None, error=message)

    @property
    def passed(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the guarded value, raising GuardFailedError on failure."""
        if self.error is not None:
            raise GuardFailedError(self)
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self.passed

    def __repr__(self) -> str:
        if self.error is not None:
            return f"GuardResult(error={self.error!r})"
        return f"GuardResult(value={self.value!r})"
