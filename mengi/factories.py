import typing
from collections.abc import Collection
from .types import *
from .iterators import IterableString, IterableArray, FactoryIterable

if typing.TYPE_CHECKING:
    from .query import Query


def of(*values: T) -> 'Query[T]':
    """create query from the given values"""
    return from_collection(values)


def from_iterable(data: Iterable[T]) -> 'Query[T]':
    """
    create query from iterable.
    pre-realized collections have their length cached up front. one-shot
    iterators (generators, files) can only be traversed once; use
    from_function for a re-iterable generator source.
    """
    from .query import Query
    if isinstance(data, Collection) and not isinstance(data, Query):
        return Query(data, length=len(data))
    return Query(data)


def from_collection(data: Collection[T]) -> 'Query[T]':
    """create query from a sized collection, length known immediately"""
    from .query import Query
    return Query(data, length=len(data))


def from_function(factory: Callable[[], Iterable[T]]) -> 'Query[T]':
    """create query whose source is rebuilt by calling factory on every traversal"""
    from .query import Query
    return Query(FactoryIterable(factory))


def string(text: str) -> 'Query[str]':
    """create query of the one-character strings of text"""
    from .query import Query
    adapted = IterableString(text)
    return Query(adapted, length=len(adapted))


def from_array(array: Any) -> 'Query[Any]':
    """create query of the scalar elements of a numpy array"""
    from .query import Query
    adapted = IterableArray(array)
    return Query(adapted, length=len(adapted))


def empty() -> 'Query[Any]':
    """create empty query"""
    return from_collection(())


# --- aliases ---
Q = from_iterable
q = from_iterable
