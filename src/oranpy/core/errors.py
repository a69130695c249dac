"""
Structured error types for oranpy.

Provides the wrapped-failure type raised by the fallback executor, with
enough metadata to tell which computation failed, at which stage, and
what the underlying exception was.

The fallback executor (``oranpy.core.tries``) never swallows a failure.
When a computation cannot be recovered, the original exception is carried
inside a ``WrappedError`` so callers catch a single type while keeping the
real cause reachable through ``error.cause`` and the ``__cause__`` chain.

Manifesto:
    - **One catchable type:** Callers catch ``WrappedError`` (or ``OranError``)
    - **Structured cause:** The inner exception is an attribute, not a string
    - **Stage awareness:** Context records whether primary or recovery failed
    - **Serialization-ready:** ``to_dict()`` for structured logging

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                        OranError                          │
        │         (message, category, context, cause)              │
        ├──────────────────────────────────────────────────────────┤
        │                                                           │
        │  WrappedError                                             │
        │  category = COMPUTATION  (run_or_fail / do_or_fail)       │
        │  category = RECOVERY     (run_or_recover / do_or_recover) │
        │                                                           │
        └──────────────────────────────────────────────────────────┘

Examples:
    Wrapping an exception:

    >>> try:
    ...     1 // 0
    ... except ZeroDivisionError as e:
    ...     error = WrappedError(cause=e)
    >>> error.message
    'ZeroDivisionError: integer division or modulo by zero'
    >>> isinstance(error.__cause__, ZeroDivisionError)
    True

    Adding context fluently:

    >>> error = WrappedError("lookup failed").with_context(operation="load", row=7)
    >>> error.context.operation
    'load'
    >>> error.context.metadata["row"]
    7

Guardrails:
    ❌ DON'T: Flatten the cause into the message and drop it
    ✅ DO: Pass it as cause= so tracebacks show the chain

Tags:
    error-handling, exception-hierarchy, error-context, wrapped-failure,
    oranpy

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification.

    COMPUTATION marks a primary computation that failed with no recovery
    available. RECOVERY marks a recovery computation that itself failed.
    """

    COMPUTATION = "COMPUTATION"   # Primary computation raised, no recovery
    RECOVERY = "RECOVERY"         # Recovery computation raised

    INTERNAL = "INTERNAL"         # Bugs, unexpected state
    UNKNOWN = "UNKNOWN"           # Uncategorized errors


@dataclass
class ErrorContext:
    """
    Structured metadata context for errors.

    Attributes:
        operation: Qualified name of the callable that failed
        stage: ``"primary"`` or ``"recovery"``
        metadata: Additional key-value pairs

    Examples:
        >>> ctx = ErrorContext(operation="parse_row", stage="primary")
        >>> ctx.to_dict()
        {'operation': 'parse_row', 'stage': 'primary'}
    """

    operation: str | None = None
    stage: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["operation", "stage"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class OranError(Exception):
    """
    Base exception for all oranpy errors.

    Every OranError carries a category, an ErrorContext and an optional
    underlying cause. When a cause is given it is also installed as
    ``__cause__`` so the standard traceback shows the chain.

    Subclasses set ``default_category`` to provide a sensible default.

    Examples:
        >>> error = OranError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.to_dict()["error_type"]
        'OranError'
    """

    # Default category for this error type
    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        # Chain the cause if provided
        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> OranError:
        """
        Add context to this error (fluent API).

        Usage:
            raise WrappedError(cause=exc).with_context(operation="fetch", attempt=2)
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = {
                "error_type": type(self.cause).__name__,
                "message": str(self.cause),
            }
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class WrappedError(OranError):
    """
    Generic failure carrying an inner, original failure as its cause.

    Raised by the fallback executor whenever a computation cannot be
    recovered. The message defaults to ``"<CauseType>: <cause message>"``.
    """

    default_category = ErrorCategory.COMPUTATION

    def __init__(
        self,
        message: str | None = None,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: BaseException | None = None,
    ):
        if message is None:
            message = _describe(cause) if cause is not None else "wrapped failure"
        super().__init__(message, category=category, context=context, cause=cause)


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def _describe(error: BaseException) -> str:
    text = str(error)
    name = type(error).__name__
    return f"{name}: {text}" if text else name


def root_cause(error: BaseException) -> BaseException:
    """Follow ``__cause__`` links down to the innermost exception."""
    seen = {id(error)}
    while error.__cause__ is not None and id(error.__cause__) not in seen:
        error = error.__cause__
        seen.add(id(error))
    return error


def categorize_error(error: BaseException) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, OranError):
        return error.category
    return ErrorCategory.UNKNOWN


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "OranError",
    "WrappedError",
    "root_cause",
    "categorize_error",
]
