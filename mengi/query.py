from __future__ import annotations

from enum import Enum, auto
from .types import *
from .errors import UnsupportedMutationError

# --- core functionality ---
from .extensions.core import _CoreOperations
from .extensions.dispatch import _DispatchOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor


class IteratorState(Enum):
    SEEKING = auto()
    HAS_NEXT = auto()
    EXHAUSTED = auto()


# --- filtering iterator ---

class QueryIterator(Iterator[T]):
    """
    iterates a source, yielding only the elements accepted by the predicate.

    the iterator always looks one element ahead: it advances the source on
    construction and after every yield, so has_next() never consumes anything
    and can be called any number of times. when the source runs dry the number
    of accepted elements is handed back to the owning query as its length.
    """

    def __init__(self, source: Iterable[T], predicate: Optional[Predicate[T]], owner: '_BaseQuery[T]'):
        self._iterator = iter(source)
        self._predicate = predicate
        self._owner = owner
        self._count = 0
        self._next: Optional[T] = None
        self._state = IteratorState.SEEKING
        self._forward()

    def _forward(self) -> None:
        self._state = IteratorState.SEEKING
        self._next = None
        for current in self._iterator:
            if self._predicate is None or self._predicate(current):
                self._count += 1
                self._next = current
                self._state = IteratorState.HAS_NEXT
                return
        self._state = IteratorState.EXHAUSTED
        self._owner._record_length(self._count)

    @property
    def state(self) -> IteratorState:
        return self._state

    def has_next(self) -> bool:
        return self._state is IteratorState.HAS_NEXT

    def __iter__(self) -> 'QueryIterator[T]':
        return self

    def __next__(self) -> T:
        if self._state is not IteratorState.HAS_NEXT:
            raise StopIteration
        current = self._next
        self._forward()
        return current

    def remove(self) -> None:
        raise UnsupportedMutationError()


# --- base query implementation ---

class _BaseQuery(Generic[T]):
    def __init__(self, source: Iterable[T],
                 predicate_factory: Optional[PredicateFactory[T]] = None,
                 length: int = UNKNOWN_LENGTH):
        """
        init with a source and an optional predicate factory. the factory is
        called once per traversal so stateful predicates start fresh each time.
        """
        self._source = source
        self._predicate_factory = predicate_factory
        self._length = length

    def _make_predicate(self) -> Optional[Predicate[T]]:
        if self._predicate_factory is None:
            return None
        return self._predicate_factory()

    def _record_length(self, count: int) -> None:
        """cache the length the first time a full traversal completes"""
        if self._length == UNKNOWN_LENGTH:
            self._length = count

    @property
    def is_length_known(self) -> bool:
        return self._length != UNKNOWN_LENGTH

    def iterator(self) -> QueryIterator[T]:
        """start a fresh traversal of this query"""
        return QueryIterator(self._source, self._make_predicate(), self)

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def __bool__(self) -> bool:
        return self.iterator().has_next()

    def __repr__(self) -> str:
        length = self._length if self.is_length_known else '?'
        return f"{type(self).__name__}(length={length})"


# --- main query class ---

class Query(
    _BaseQuery[T],
    _CoreOperations[T],
    _DispatchOperations[T]
):
    """a lazy, chainable query over any iterable source."""

    @property
    def to(self) -> TerminalAccessor[T]:
        return TerminalAccessor(self)
