"""
capability discovery for dispatch facades.

an element's capability set is the set of operation names it supports. a
type may declare it explicitly through a ``__capabilities__`` attribute;
otherwise it is every public callable attribute of the element's type.
"""
import typing
from .types import *

if typing.TYPE_CHECKING:
    from .query import Query


def capabilities_of(obj: Any) -> FrozenSet[str]:
    """operation names the given object supports"""
    declared = getattr(obj, '__capabilities__', None)
    if declared is not None:
        return frozenset(declared)
    kind = type(obj)
    return frozenset(
        name for name in dir(kind)
        if not name.startswith('_') and callable(getattr(kind, name, None))
    )


def first_capabilities(query: 'Query[T]') -> FrozenSet[str]:
    """capability set of the first element, empty when there is none"""
    iterator = query.iterator()
    if not iterator.has_next():
        return frozenset()
    return capabilities_of(next(iterator))


def union_capabilities(query: 'Query[T]') -> FrozenSet[str]:
    """every operation supported by at least one element"""
    return frozenset().union(*(capabilities_of(item) for item in query))
