from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, FrozenSet
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
PredicateFactory = Callable[[], Predicate[T]]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Action = Callable[[T], Any]
Accumulator = Callable[[U, T], U]

# sentinel for "length not known yet"
UNKNOWN_LENGTH = -1
