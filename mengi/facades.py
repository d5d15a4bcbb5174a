"""
dispatch facades: treat a query of objects as one addressable target.

a facade exposes a fixed capability set (operation names). calling one of
those operations on the facade forwards the call to the query's elements
according to the facade's policy:

- BroadcastFacade: call every element, in order.
- ComposeFacade: call the first element that supports the operation.
- XorFacade: try elements in order until one succeeds, suppressing the
  given exception kinds along the way.

the query is read fresh on every call, nothing is cached but the
capability set computed when the facade was built.
"""
from __future__ import annotations

import logging
import typing
from .types import *
from .errors import NoResponderError, DispatchStateError
from .capabilities import capabilities_of, first_capabilities, union_capabilities

if typing.TYPE_CHECKING:
    from .query import Query

logger = logging.getLogger(__name__)


class Facade(Generic[T]):
    __slots__ = ('_query', '_capabilities')

    def __init__(self, query: 'Query[T]', capabilities: Iterable[str]):
        self._query = query
        self._capabilities = frozenset(capabilities)

    @property
    def __capabilities__(self) -> FrozenSet[str]:
        return self._capabilities

    def _dispatch(self, name: str, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Any:
        raise NotImplementedError

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith('_') or name not in self._capabilities:
            raise AttributeError(f"{type(self).__name__} has no operation '{name}'")

        def operation(*args: Any, **kwargs: Any) -> Any:
            return self._dispatch(name, args, kwargs)

        operation.__name__ = name
        operation.__qualname__ = f"{type(self).__name__}.{name}"
        return operation

    def __dir__(self) -> List[str]:
        return sorted(self._capabilities)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} capabilities={sorted(self._capabilities)}>"


class BroadcastFacade(Facade[T]):
    """
    forwards each call to every element and returns the last result.
    meant for side-effecting operations: all other results are dropped.
    the first element that raises aborts the rest of the broadcast.
    """
    __slots__ = ()

    def __init__(self, query: 'Query[T]'):
        super().__init__(query, first_capabilities(query))

    def _dispatch(self, name: str, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Any:
        result = None
        for element in self._query:
            result = getattr(element, name)(*args, **kwargs)
        return result


class ComposeFacade(Facade[T]):
    """forwards each call to the first element whose capability set has the operation"""
    __slots__ = ()

    def __init__(self, query: 'Query[T]'):
        super().__init__(query, union_capabilities(query))

    def _dispatch(self, name: str, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Any:
        for element in self._query:
            if name in capabilities_of(element):
                return getattr(element, name)(*args, **kwargs)
        raise NoResponderError(name)


class XorFacade(Facade[T]):
    """
    tries each element in order and returns the first successful result.

    failures of a suppressed kind are skipped. any other failure is kept as
    the pending one and the next element is still tried. when nothing
    succeeds the last pending failure is raised.
    """
    __slots__ = ('_suppressed',)

    def __init__(self, query: 'Query[T]', suppressed: Tuple[Type[BaseException], ...] = ()):
        for kind in suppressed:
            if not (isinstance(kind, type) and issubclass(kind, BaseException)):
                raise TypeError(f"suppressed kinds must be exception classes, got {kind!r}")
        super().__init__(query, first_capabilities(query))
        self._suppressed = tuple(suppressed)

    def _dispatch(self, name: str, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Any:
        pending: Optional[Exception] = None
        for element in self._query:
            try:
                return getattr(element, name)(*args, **kwargs)
            except self._suppressed as error:
                logger.debug("suppressed %s from %r.%s: %s", type(error).__name__, element, name, error)
            except Exception as error:
                logger.debug("%r.%s failed with %s, trying next element", element, name, type(error).__name__)
                pending = error
        if pending is not None:
            raise pending
        raise DispatchStateError(f"unreachable state: no element succeeded at '{name}' and no failure is pending")
