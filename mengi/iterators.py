"""
iterator building blocks used by queries.

adapters turn primitive sources (strings, numpy arrays) into re-iterable
sequences of single-unit elements, and the joined iterator chains several
sources end to end.
"""
import numpy as np
from .types import *
from .errors import UnsupportedMutationError


class CharIterator(Iterator[str]):
    """forward iterator over the characters of a string"""

    def __init__(self, text: str):
        self._text = text
        self._state = 0

    def has_next(self) -> bool:
        return self._state < len(self._text)

    def __iter__(self) -> 'CharIterator':
        return self

    def __next__(self) -> str:
        if not self.has_next():
            raise StopIteration
        char = self._text[self._state]
        self._state += 1
        return char

    def remove(self) -> None:
        raise UnsupportedMutationError("strings are immutable")


class StringIterator(Iterator[str]):
    """yields each character of a string as a str of length one"""

    def __init__(self, text: str):
        self._iterator = CharIterator(text)

    def has_next(self) -> bool:
        return self._iterator.has_next()

    def __iter__(self) -> 'StringIterator':
        return self

    def __next__(self) -> str:
        return str(next(self._iterator))

    def remove(self) -> None:
        raise UnsupportedMutationError("strings are immutable")


class IterableString(Iterable[str]):
    """adapts a string to a re-iterable sequence of one-character strings"""

    def __init__(self, text: str):
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        self._text = text

    def __iter__(self) -> StringIterator:
        return StringIterator(self._text)

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"IterableString({self._text!r})"


class IterableArray(Iterable[Any]):
    """
    adapts a numpy array (or anything np.asarray accepts) to a re-iterable
    sequence of native python scalars, in row-major order.
    """

    def __init__(self, array: Any):
        self._array = np.asarray(array)

    def __iter__(self) -> Iterator[Any]:
        # .flat walks n-d arrays element by element; .item() unboxes numpy scalars
        return (value.item() if isinstance(value, np.generic) else value
                for value in self._array.flat)

    def __len__(self) -> int:
        return int(self._array.size)

    def __repr__(self) -> str:
        return f"IterableArray(shape={self._array.shape}, dtype={self._array.dtype})"


class JoinedIterator(Iterator[T]):
    """
    joins several iterators end to end. the first is exhausted before the
    second is started, and so on. once every source is exhausted the
    iterator stays exhausted.
    """

    def __init__(self, *iterators: Iterator[T]):
        if not iterators:
            raise ValueError("joined iterator needs at least one source")
        self._iterators = [iter(it) for it in iterators]
        self._status = 0
        self._pending: List[T] = []  # at most one element peeked by has_next()

    def _advance(self) -> bool:
        """pull the next element into the pending slot, moving across sources"""
        while self._status < len(self._iterators):
            try:
                self._pending.append(next(self._iterators[self._status]))
                return True
            except StopIteration:
                self._status += 1
        return False

    def has_next(self) -> bool:
        return bool(self._pending) or self._advance()

    def __iter__(self) -> 'JoinedIterator[T]':
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self._pending.pop()

    def remove(self) -> None:
        raise UnsupportedMutationError()


class JoinedIterable(Iterable[T]):
    """re-iterable concatenation: each traversal joins fresh iterators of every part"""

    def __init__(self, *parts: Iterable[T]):
        self._parts = parts

    def __iter__(self) -> JoinedIterator[T]:
        return JoinedIterator(*(iter(part) for part in self._parts))


class FactoryIterable(Iterable[T]):
    """re-iterable source backed by a factory called once per traversal"""

    def __init__(self, factory: Callable[[], Iterable[T]]):
        if not callable(factory):
            raise TypeError("factory must be callable")
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return iter(self._factory())
