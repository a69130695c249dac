"""
Null-safe factories for mutable containers.

Builds a new, independently owned, mutable container either from a number
of (zero or more) elements or by merging a number of existing containers.
Absent (``None``) inputs are skipped rather than raising, so every builder
is total: the worst case is an empty container.

Manifesto:
    - **Never None:** Builders always return a fresh container
    - **Never raises on absence:** ``None`` and empty inputs contribute nothing
    - **Never aliases:** Inputs are read, copied, and left untouched
    - **Kind decides semantics:** Uniqueness and order come from the factory

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────────┐
        │  build_from_elements(factory, elements)                      │
        │  build_from_containers(factory, first, *more)                │
        ├──────────────────────────────────────────────────────────────┤
        │  kind            factory         elements     merged         │
        │  ─────────────   ─────────────   ──────────   ────────────── │
        │  set             set             as_set       as_set_from    │
        │  ordered set     OrderedSet      as_ordered_set ..._from     │
        │  concurrent set  ConcurrentSet   as_concurrent_set ..._from  │
        │  list            list            as_list      as_list_from   │
        │  linked list     deque           as_linked_list ..._from     │
        │  priority queue  HeapQueue       as_priority_queue ..._from  │
        └──────────────────────────────────────────────────────────────┘

Examples:
    Merging ordered sets keeps first-seen order:

    >>> merged = as_ordered_set_from(as_linked_list(1, 2, 3), as_ordered_set(3, 4, 5))
    >>> list(merged)
    [1, 2, 3, 4, 5]

    Absent inputs degrade to empty containers:

    >>> as_set_from(None, None, None)
    set()
    >>> build_from_elements(list, None)
    []

    Any zero-argument factory works:

    >>> from collections import deque
    >>> build_from_containers(deque, as_list("a", "b"), None, ["c"])
    deque(['a', 'b', 'c'])

Guardrails:
    ❌ DON'T: Pass a factory that returns a shared instance
    ✅ DO: Pass a class or a callable that builds a new container each call

Tags:
    collections, containers, factories, null-safety, oranpy

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import heapq
import threading
from collections import deque
from collections.abc import Callable, Collection, Iterable, Iterator, MutableSet, Sized
from typing import Any, Generic, TypeVar

E = TypeVar("E")
C = TypeVar("C")


# =============================================================================
# CONTAINER KINDS MISSING FROM THE STANDARD LIBRARY
# =============================================================================


class OrderedSet(MutableSet, Generic[E]):
    """
    Unique, insertion-ordered, mutable set.

    Backed by a ``dict`` whose keys are the members, so iteration follows
    first insertion and re-adding an existing member keeps its position.
    ``None`` is a valid member. Equality with other sets ignores order.

    Examples:
        >>> s = OrderedSet([None, "1", None, "2"])
        >>> list(s)
        [None, '1', '2']
        >>> s == {"2", "1", None}
        True
    """

    __slots__ = ("_members",)

    def __init__(self, iterable: Iterable[E] | None = None):
        self._members: dict[E, None] = {}
        if iterable is not None:
            self.update(iterable)

    def __contains__(self, item: object) -> bool:
        return item in self._members

    def __iter__(self) -> Iterator[E]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def add(self, value: E) -> None:
        self._members[value] = None

    def discard(self, value: E) -> None:
        self._members.pop(value, None)

    def update(self, *iterables: Iterable[E]) -> None:
        for iterable in iterables:
            for value in iterable:
                self._members[value] = None

    def copy(self) -> OrderedSet[E]:
        return OrderedSet(self._members)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._members)!r})"


class ConcurrentSet(MutableSet, Generic[E]):
    """
    Unique, unordered set safe for concurrent mutation.

    Every membership and mutation operation runs under a single lock.
    Iteration walks a snapshot taken under the lock, so concurrent writers
    never invalidate a running loop (the loop may miss their changes).
    """

    def __init__(self, iterable: Iterable[E] | None = None):
        self._members: set[E] = set()
        self._lock = threading.Lock()
        if iterable is not None:
            self.update(iterable)

    def __contains__(self, item: object) -> bool:
        with self._lock:
            return item in self._members

    def __iter__(self) -> Iterator[E]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._members)

    def add(self, value: E) -> None:
        with self._lock:
            self._members.add(value)

    def discard(self, value: E) -> None:
        with self._lock:
            self._members.discard(value)

    def remove(self, value: E) -> None:
        """Remove ``value``; KeyError when it is not a member."""
        with self._lock:
            self._members.remove(value)

    def pop(self) -> E:
        """Remove and return an arbitrary member; KeyError when empty."""
        with self._lock:
            if not self._members:
                raise KeyError("pop from an empty ConcurrentSet")
            return self._members.pop()

    def clear(self) -> None:
        with self._lock:
            self._members.clear()

    def update(self, *iterables: Iterable[E]) -> None:
        # Materialize outside the lock; a source may be another ConcurrentSet
        values = [value for iterable in iterables for value in iterable]
        with self._lock:
            self._members.update(values)

    # In-place operators: one lock acquisition per operation, not the
    # per-element add/discard loop of MutableSet.

    def __ior__(self, other: Iterable[E]) -> ConcurrentSet[E]:
        self.update(other)
        return self

    def __iand__(self, other: Iterable[Any]) -> ConcurrentSet[E]:
        values = set(other)
        with self._lock:
            self._members.intersection_update(values)
        return self

    def __isub__(self, other: Iterable[Any]) -> ConcurrentSet[E]:
        values = set(other)
        with self._lock:
            self._members.difference_update(values)
        return self

    def __ixor__(self, other: Iterable[E]) -> ConcurrentSet[E]:
        values = set(other)
        with self._lock:
            self._members.symmetric_difference_update(values)
        return self

    def snapshot(self) -> frozenset[E]:
        """Point-in-time copy of the members."""
        with self._lock:
            return frozenset(self._members)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({sorted(self.snapshot(), key=repr)!r})"


class HeapQueue(Generic[E]):
    """
    Mutable priority queue, smallest element first.

    Backed by a ``heapq`` list. Iteration and ``repr`` expose the heap
    array order, which is not sorted order beyond the first element.
    Elements must be mutually comparable.

    Examples:
        >>> q = HeapQueue(["Z", "X", "Y"])
        >>> q.pop()
        'X'
        >>> len(q)
        2
    """

    __slots__ = ("_heap",)

    def __init__(self, iterable: Iterable[E] | None = None):
        self._heap: list[E] = []
        if iterable is not None:
            self.extend(iterable)

    def push(self, value: E) -> None:
        if self._heap:
            # Raises TypeError for an incomparable value before the heap is touched
            value < self._heap[0]  # noqa: B015
        heapq.heappush(self._heap, value)

    def extend(self, iterable: Iterable[E]) -> None:
        """Add every element; on TypeError the queue is left unchanged."""
        merged = self._heap + list(iterable)
        heapq.heapify(merged)
        self._heap = merged

    def pop(self) -> E:
        """Remove and return the smallest element; IndexError when empty."""
        if not self._heap:
            raise IndexError("pop from an empty HeapQueue")
        return heapq.heappop(self._heap)

    def peek(self) -> E:
        if not self._heap:
            raise IndexError("peek at an empty HeapQueue")
        return self._heap[0]

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[E]:
        return iter(list(self._heap))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._heap!r})"


# =============================================================================
# EMPTINESS CHECKS
# =============================================================================


def is_absent_or_empty(elements: Sized | None) -> bool:
    """True iff ``elements`` is None or has zero length."""
    return elements is None or len(elements) == 0


def has_at_least_one(elements: Sized | None) -> bool:
    """True iff ``elements`` is not None and holds one or more elements."""
    return elements is not None and len(elements) > 0


# =============================================================================
# GENERIC BUILDERS
# =============================================================================


def _add_all(target: Any, elements: Iterable[Any]) -> None:
    """Copy ``elements`` into ``target`` using the container's bulk API."""
    if hasattr(target, "update"):
        target.update(elements)
    elif hasattr(target, "extend"):
        target.extend(elements)
    elif isinstance(target, MutableSet):
        target |= elements
    elif hasattr(target, "add"):
        for element in elements:
            target.add(element)
    elif hasattr(target, "append"):
        for element in elements:
            target.append(element)
    else:
        raise TypeError(
            f"{type(target).__name__} supports none of update/extend/add/append"
        )


def build_from_elements(factory: Callable[[], C], elements: Collection[Any] | None) -> C:
    """
    Build a new container of the factory's kind out of ``elements``.

    ``None`` entries inside ``elements`` are copied like any other value
    (kept by kinds that accept them). A ``None`` or empty ``elements``
    yields ``factory()`` untouched.

    Args:
        factory: Zero-argument callable producing a new empty container
            (``set``, ``list``, ``deque``, ``OrderedSet``, ...)
        elements: Elements to copy, or None

    Returns:
        A new container holding the elements.
    """
    container = factory()

    if is_absent_or_empty(elements):
        return container

    _add_all(container, elements)
    return container


def build_from_containers(
    factory: Callable[[], C],
    first: Collection[Any] | None,
    *more: Collection[Any] | None,
) -> C:
    """
    Build a new container of the factory's kind merged from containers.

    Sources are copied in argument order, each in its own iteration order
    at copy time. Sources that are None or empty are skipped. No source is
    modified, and the result never aliases a source.

    Args:
        factory: Zero-argument callable producing a new empty container
        first: First source container, or None
        *more: Further source containers, any of which may be None

    Returns:
        A new container merged from the sources.
    """
    merged = factory()

    if has_at_least_one(first):
        _add_all(merged, first)

    for source in more:
        if has_at_least_one(source):
            _add_all(merged, source)

    return merged


# =============================================================================
# KIND-SPECIFIC BUILDERS
# =============================================================================


def as_set(*elements: E) -> set[E]:
    """New ``set`` of the given elements."""
    return build_from_elements(set, elements)


def as_set_from(first: Collection[E] | None, *more: Collection[E] | None) -> set[E]:
    """New ``set`` merged from the given containers."""
    return build_from_containers(set, first, *more)


def as_ordered_set(*elements: E) -> OrderedSet[E]:
    """New ``OrderedSet`` of the given elements, in first-seen order."""
    return build_from_elements(OrderedSet, elements)


def as_ordered_set_from(
    first: Collection[E] | None, *more: Collection[E] | None
) -> OrderedSet[E]:
    """New ``OrderedSet`` merged from the given containers."""
    return build_from_containers(OrderedSet, first, *more)


def as_concurrent_set(*elements: E) -> ConcurrentSet[E]:
    """New ``ConcurrentSet`` of the given elements."""
    return build_from_elements(ConcurrentSet, elements)


def as_concurrent_set_from(
    first: Collection[E] | None, *more: Collection[E] | None
) -> ConcurrentSet[E]:
    """New ``ConcurrentSet`` merged from the given containers."""
    return build_from_containers(ConcurrentSet, first, *more)


def as_list(*elements: E) -> list[E]:
    """New ``list`` of the given elements."""
    return build_from_elements(list, elements)


def as_list_from(first: Collection[E] | None, *more: Collection[E] | None) -> list[E]:
    """New ``list`` merged from the given containers."""
    return build_from_containers(list, first, *more)


def as_linked_list(*elements: E) -> deque[E]:
    """New ``deque`` of the given elements."""
    return build_from_elements(deque, elements)


def as_linked_list_from(
    first: Collection[E] | None, *more: Collection[E] | None
) -> deque[E]:
    """New ``deque`` merged from the given containers."""
    return build_from_containers(deque, first, *more)


def as_priority_queue(*elements: E) -> HeapQueue[E]:
    return build_from_elements(HeapQueue, elements)


def as_priority_queue_from(
    first: Collection[E] | None, *more: Collection[E] | None
) -> HeapQueue[E]:
    return build_from_containers(HeapQueue, first, *more)


__all__ = [
    # Kinds
    "OrderedSet",
    "ConcurrentSet",
    "HeapQueue",
    # Checks
    "is_absent_or_empty",
    "has_at_least_one",
    # Generic builders
    "build_from_elements",
    "build_from_containers",
    # Kind-specific builders
    "as_set",
    "as_set_from",
    "as_ordered_set",
    "as_ordered_set_from",
    "as_concurrent_set",
    "as_concurrent_set_from",
    "as_list",
    "as_list_from",
    "as_linked_list",
    "as_linked_list_from",
    "as_priority_queue",
    "as_priority_queue_from",
]
