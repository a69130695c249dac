"""
Result envelope: the fallback executor as a value instead of a raise.

``try_result`` runs a zero-argument computation and returns ``Ok(value)``
on success or ``Err(exception)`` on failure. It is the tagged-union
counterpart of :func:`oranpy.core.tries.run_or_fail`: the failure is kept
as a structured exception object, never flattened into a string.

Architecture:
    ::

        ┌─────────────────────────────────────────────┐
        │                 Result[T]                    │
        ├───────────────────────┬─────────────────────┤
        │      Ok[T]            │      Err[T]          │
        │  • value: T           │  • error: Exception  │
        │  • map()              │  • or_else()         │
        │  • unwrap()           │  • unwrap_or()       │
        └───────────────────────┴─────────────────────┘

Examples:
    >>> try_result(lambda: int("42"))
    Ok(42)
    >>> try_result(lambda: int("x")).unwrap_or(0)
    0
    >>> match try_result(lambda: 1 // 0):
    ...     case Ok(value):
    ...         print(value)
    ...     case Err(error):
    ...         print(type(error).__name__)
    ZeroDivisionError

Guardrails:
    ❌ DON'T: Call unwrap() on Err without a plan - it raises the error
    ✅ DO: Use unwrap_or() / unwrap_or_else() or pattern matching

Tags:
    result-pattern, error-handling, tagged-union, oranpy

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from oranpy.core.errors import OranError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the value. Safe for Ok."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[Exception], T]) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """Transform the value if Ok."""
        return Ok(f(self.value))

    def or_else(self, f: Callable[[Exception], Result[T]]) -> Result[T]:
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"ok": True, "value": self.value}

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[T]):
    """
    Failed result containing an error.

    ``map`` passes the Err through unchanged; ``or_else`` and
    ``unwrap_or``/``unwrap_or_else`` are the recovery points.
    """

    error: Exception

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise the error. Use only when you're sure it's Ok."""
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[Exception], T]) -> T:
        """Call f with error to get value."""
        return f(self.error)

    def map(self, f: Callable[[T], U]) -> Result[U]:
        """No-op for Err."""
        return Err(self.error)

    def or_else(self, f: Callable[[Exception], Result[T]]) -> Result[T]:
        """Call f with error to try recovery."""
        return f(self.error)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        if isinstance(self.error, OranError):
            return {"ok": False, "error": self.error.to_dict()}
        return {
            "ok": False,
            "error": {
                "error_type": type(self.error).__name__,
                "message": str(self.error),
            },
        }

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result
Result = Ok[T] | Err[T]


def try_result(f: Callable[[], T]) -> Result[T]:
    """
    Execute a function and wrap its outcome in a Result.

    Args:
        f: Zero-argument callable that may raise exceptions

    Returns:
        Ok[T] if f() succeeds, Err[T] with the exception if f() raises
    """
    try:
        return Ok(f())
    except Exception as e:
        return Err(e)


__all__ = ["Ok", "Err", "Result", "try_result"]
