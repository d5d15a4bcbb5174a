from __future__ import annotations
import typing
from ..types import *
from ..iterators import JoinedIterable

if typing.TYPE_CHECKING:
    from ..query import Query
    from ..facades import BroadcastFacade


def _check_bound(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"slice {name} must be an int, got {type(value).__name__}")


class _CoreOperations(Generic[T]):
    def filter(self: 'Query[T]', predicate: Predicate[T]) -> 'Query[T]':
        """
        lazily keep the elements accepted by the predicate.
        the new query wraps this one, so earlier filters still apply first.
        """
        from ..query import Query
        if not callable(predicate):
            raise TypeError("predicate must be callable")
        return Query(self, lambda: predicate)

    def slice(self: 'Query[T]', start: int, end: Optional[int] = None) -> 'Query[T]':
        """
        lazily keep a positional window of elements.

        positions are counted from 1 as elements reach the slice. slice(x)
        keeps positions x+1 onwards, i.e. skips the first x elements.
        slice(x, y) keeps positions strictly between x and y, i.e. x+1 .. y-1,
        which is empty when y <= x + 1.
        """
        from ..query import Query
        _check_bound("start", start)
        if end is not None:
            _check_bound("end", end)

        def make_predicate() -> Predicate[T]:
            # a fresh counter per traversal
            state = 0

            def in_window(item: T) -> bool:
                nonlocal state
                state += 1
                return state > start and (end is None or state < end)

            return in_window

        return Query(self, make_predicate)

    def length(self: 'Query[T]') -> int:
        """
        number of elements in the query.
        pre-sized sources answer immediately, anything else is counted by one
        full traversal and the result is cached.
        """
        if self.is_length_known:
            return self._length
        count = 0
        for _ in self:
            count += 1
        self._record_length(count)
        return self._length

    def get(self: 'Query[T]', index: int, default: Optional[T] = None) -> Optional[T]:
        """element at a 0-based index, or default when the query is shorter"""
        if index < 0:
            return default
        for position, item in enumerate(self):
            if position == index:
                return item
        return default

    def map(self: 'Query[T]', transformer: Selector[T, U]) -> 'Query[U]':
        """
        transform every element into a new query.
        this is an EAGER operation: the whole query is traversed right away
        and the results are held in a list.
        """
        from ..query import Query
        mapped = [transformer(item) for item in self]
        return Query(mapped, length=len(mapped))

    @typing.overload
    def each(self: 'Query[T]') -> 'BroadcastFacade[T]': ...

    @typing.overload
    def each(self: 'Query[T]', action: Action[T]) -> 'Query[T]': ...

    def each(self, action=None):
        """
        with an action: eagerly call it on every element and return this query.
        without one: return a facade that forwards every call to all elements.
        """
        if action is None:
            from ..facades import BroadcastFacade
            return BroadcastFacade(self)
        for item in self:
            action(item)
        return self

    def append(self: 'Query[T]', other: Iterable[T]) -> 'Query[T]':
        """lazily chain other after this query"""
        from ..query import Query
        if not isinstance(other, Iterable):
            raise TypeError(f"cannot append {type(other).__name__}, expected an iterable")
        return Query(JoinedIterable(self, other))

    def prepend(self: 'Query[T]', other: Iterable[T]) -> 'Query[T]':
        """lazily chain other before this query"""
        from ..query import Query
        if not isinstance(other, Iterable):
            raise TypeError(f"cannot prepend {type(other).__name__}, expected an iterable")
        return Query(JoinedIterable(other, self))
