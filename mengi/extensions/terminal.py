from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from itertools import islice
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query


class TerminalAccessor(Generic[T]):
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._query)

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._query)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(list(self._query))

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._query)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._query}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self._query))

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(list(self._query))

    def join(self, separator: str = "") -> str:
        """concatenate string elements"""
        return separator.join(self._query)

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return self._query.length()
        return sum(1 for x in self._query if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        if predicate is None: return self._query.iterator().has_next()
        return any(predicate(x) for x in self._query)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(x) for x in self._query)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        if predicate is None:
            iterator = self._query.iterator()
            if not iterator.has_next(): raise ValueError("sequence contains no elements")
            return next(iterator)
        for item in self._query:
            if predicate(item): return item
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except ValueError: return default

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        source = self._query.filter(predicate) if predicate else self._query
        data = list(islice(source, 2))
        if len(data) == 0: raise ValueError("sequence contains no matching elements")
        if len(data) > 1: raise ValueError("sequence contains more than one matching element")
        return data[0]

    def aggregate(self, accumulator: Accumulator[T, T], seed: Optional[T] = None) -> T:
        """applies accumulator function over sequence"""
        iterator = self._query.iterator()
        if seed is not None: return reduce(accumulator, iterator, seed)
        if not iterator.has_next(): raise ValueError("cannot aggregate empty sequence without seed")
        return reduce(accumulator, iterator)
