"""oranpy Core -- null-safe container builders and a fallback executor.

Manifesto:
    Two kinds of boilerplate show up in almost every codebase: building a
    fresh mutable container out of values or other (possibly missing)
    containers, and wrapping a call in try/except just to substitute a
    fallback value or re-raise a single error type.  ``oranpy.core``
    collapses both into one-line call sites.

Architecture::

    containers.py      Null-safe builders (set, OrderedSet, ConcurrentSet,
                       list, deque, HeapQueue)
    tries.py           run_or_recover / do_or_recover / run_or_fail / do_or_fail
    result.py          Ok / Err envelope + try_result
    errors.py          OranError, WrappedError, ErrorCategory
    logging.py         Structured logging (structlog)
    settings.py        OranSettings (pydantic-settings)

The two utility modules, ``containers`` and ``tries``, do not depend on
each other.

Tags:
    oranpy, foundation, collections, error-handling

Doc-Types:
    package-overview, module-index
"""

from oranpy.core.containers import (
    ConcurrentSet,
    HeapQueue,
    OrderedSet,
    as_concurrent_set,
    as_concurrent_set_from,
    as_linked_list,
    as_linked_list_from,
    as_list,
    as_list_from,
    as_ordered_set,
    as_ordered_set_from,
    as_priority_queue,
    as_priority_queue_from,
    as_set,
    as_set_from,
    build_from_containers,
    build_from_elements,
    has_at_least_one,
    is_absent_or_empty,
)
from oranpy.core.errors import (
    ErrorCategory,
    ErrorContext,
    OranError,
    WrappedError,
    categorize_error,
    root_cause,
)
from oranpy.core.result import Err, Ok, Result, try_result
from oranpy.core.tries import do_or_fail, do_or_recover, run_or_fail, run_or_recover

__all__ = [
    # containers
    "ConcurrentSet",
    "HeapQueue",
    "OrderedSet",
    "as_concurrent_set",
    "as_concurrent_set_from",
    "as_linked_list",
    "as_linked_list_from",
    "as_list",
    "as_list_from",
    "as_ordered_set",
    "as_ordered_set_from",
    "as_priority_queue",
    "as_priority_queue_from",
    "as_set",
    "as_set_from",
    "build_from_containers",
    "build_from_elements",
    "has_at_least_one",
    "is_absent_or_empty",
    # errors
    "ErrorCategory",
    "ErrorContext",
    "OranError",
    "WrappedError",
    "categorize_error",
    "root_cause",
    # result
    "Err",
    "Ok",
    "Result",
    "try_result",
    # tries
    "do_or_fail",
    "do_or_recover",
    "run_or_fail",
    "run_or_recover",
]
