from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query
    from ..facades import ComposeFacade, XorFacade


class _DispatchOperations(Generic[T]):
    def compose(self: 'Query[T]') -> 'ComposeFacade[T]':
        """
        facade exposing every operation any element supports. a call goes to
        the first element that supports it, NoResponderError if none does.
        """
        from ..facades import ComposeFacade
        return ComposeFacade(self)

    def xor(self: 'Query[T]', *suppressed: Type[BaseException]) -> 'XorFacade[T]':
        """
        facade that tries each element in turn until one succeeds.
        exceptions of the suppressed kinds are swallowed while retrying.
        """
        from ..facades import XorFacade
        return XorFacade(self, suppressed)
