"""Result<T> pattern — resolvers return this instead of raising for expected misses."""
from __future__ import annotations
from typing import TypeVar, Generic, Optional

T = TypeVar("T")

NOT_FOUND = "NOT_FOUND"


class Result(Generic[T]):
    def __init__(
        self,
        is_success: bool,
        value: Optional[T] = None,
        error: Optional[str] = None,
        code: Optional[str] = None,
    ):
        self.is_success = is_success
        self.value = value
        self.error = error
        self.code = code

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(is_success=True, value=value)

    @classmethod
    def fail(cls, error: str, code: Optional[str] = None) -> "Result[T]":
        return cls(is_success=False, error=error, code=code)

    @classmethod
    def not_found(cls, error: str) -> "Result[T]":
        return cls.fail(error, code=NOT_FOUND)

    @property
    def is_not_found(self) -> bool:
        return not self.is_success and self.code == NOT_FOUND

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.ok({self.value!r})"
        if self.code:
            return f"Result.fail({self.error!r}, code={self.code!r})"
        return f"Result.fail({self.error!r})"
