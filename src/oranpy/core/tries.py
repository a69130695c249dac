"""
Fallback executor: try/except collapsed into single call sites.

Wraps a zero-argument computation so that a failure either turns into a
fallback value (computed by a recovery callable that receives the
exception) or is re-raised as a ``WrappedError`` carrying the original
exception as its cause.

Manifesto:
    - **Expressions, not blocks:** ``x = run_or_recover(parse, lambda e: 0)``
    - **Never swallowed:** A failure is recovered or re-raised, never dropped
    - **Single catchable type:** Unrecoverable failures surface as WrappedError
    - **Structured cause:** ``error.cause`` is the real exception object

Architecture:
    ::

        run_or_recover / do_or_recover
        ┌──────────────┐  ok   ┌──────────────┐
        │  primary()   │ ────> │  return      │
        └──────┬───────┘       └──────────────┘
               │ raises
        ┌──────▼───────┐  ok   ┌──────────────┐
        │ recovery(e)  │ ────> │  return      │
        └──────┬───────┘       └──────────────┘
               │ raises
        ┌──────▼──────────────────────────────┐
        │ raise WrappedError(cause=recovery's) │
        └─────────────────────────────────────┘

        run_or_fail / do_or_fail
            primary() ok     ──> return
            primary() raises ──> raise WrappedError(cause=primary's)

Examples:
    Recovering from a failure:

    >>> run_or_recover(lambda: 1 // 0, lambda e: -1)
    -1

    Surfacing a failure as WrappedError:

    >>> try:
    ...     run_or_fail(lambda: 1 // 0)
    ... except WrappedError as e:
    ...     type(e.cause).__name__
    'ZeroDivisionError'

Guardrails:
    ❌ DON'T: Rely on the primary exception after a failed recovery
    ✅ DO: Capture it inside the recovery callable if you need it

    ❌ DON'T: Expect KeyboardInterrupt or SystemExit to be recovered
    ✅ DO: Let them propagate; only Exception subclasses are caught

Tags:
    error-handling, try-except, fallback, wrapped-failure, oranpy

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from oranpy.core.errors import ErrorCategory, ErrorContext, WrappedError
from oranpy.core.logging import get_logger

logger = get_logger(__name__)

V = TypeVar("V")


def _name_of(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


def _wrap(error: Exception, fn: Callable[..., Any], stage: str) -> WrappedError:
    category = ErrorCategory.RECOVERY if stage == "recovery" else ErrorCategory.COMPUTATION
    wrapped = WrappedError(
        category=category,
        context=ErrorContext(operation=_name_of(fn), stage=stage),
        cause=error,
    )
    logger.debug("failure_wrapped", **wrapped.to_dict())
    return wrapped


def run_or_recover(primary: Callable[[], V], recovery: Callable[[Exception], V]) -> V:
    """
    Return ``primary()``, or ``recovery(exc)`` if primary raises.

    Replaces::

        try:
            result = divide(dividend, divisor)
        except Exception as e1:
            try:
                result = conquer(dividend)
            except Exception as e2:
                raise SomeError(...) from e2

    with::

        result = run_or_recover(lambda: divide(dividend, divisor), lambda e: conquer(dividend))

    Args:
        primary: Zero-argument computation to attempt
        recovery: Called with the primary's exception when primary raises

    Returns:
        The primary's result, or the recovery's result on failure.

    Raises:
        WrappedError: If recovery raises; ``cause`` is the recovery's
            exception. The primary's exception is not chained.
    """
    try:
        return primary()
    except Exception as exc:
        failure = exc

    logger.debug(
        "primary_failed",
        operation=_name_of(primary),
        error_type=type(failure).__name__,
    )
    # Recovery runs outside the except block so its errors do not pick up
    # the primary failure as __context__.
    try:
        return recovery(failure)
    except Exception as exc:
        raise _wrap(exc, recovery, "recovery") from exc


def do_or_recover(primary: Callable[[], Any], recovery: Callable[[Exception], Any]) -> None:
    """
    Run ``primary()`` for its side effects, or ``recovery(exc)`` if it raises.

    Same ordering and failure propagation as :func:`run_or_recover`; any
    return values are discarded.

    Example::

        do_or_recover(lambda: compute_and_print(n), lambda e: compute_and_print(n - 1))
    """
    run_or_recover(primary, recovery)


def run_or_fail(primary: Callable[[], V]) -> V:
    """
    Return ``primary()``, raising WrappedError if it raises.

    Example::

        person = run_or_fail(lambda: parse(person_id))

    Raises:
        WrappedError: With the primary's exception as ``cause``.
    """
    try:
        return primary()
    except Exception as exc:
        raise _wrap(exc, primary, "primary") from exc


def do_or_fail(primary: Callable[[], Any]) -> None:
    """Run ``primary()`` for its side effects, raising WrappedError if it raises."""
    run_or_fail(primary)


__all__ = [
    "run_or_recover",
    "do_or_recover",
    "run_or_fail",
    "do_or_fail",
]
