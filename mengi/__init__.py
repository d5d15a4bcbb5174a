r"""
'    ___  ___ _______ ___   _  _____ _____
'    |  \/  ||  ___|  \ | || __ \_   _|
'    | .  . || |__ |   \| || |  \/ | |
'    | |\/| ||  __|| . ` || | __  | |
'    | |  | || |___| |\  || |_\ \_| |_
'    \_|  |_/\____/\_| \_/ \____/\___/
"""
import logging

# expose the main classes
from .query import Query, QueryIterator, IteratorState

# expose the factory functions
from .factories import (
    of,
    from_iterable,
    from_collection,
    from_function,
    string,
    from_array,
    empty,
    Q,
    q
)

# expose iterators and adapters
from .iterators import (
    CharIterator,
    StringIterator,
    IterableString,
    IterableArray,
    JoinedIterator,
    JoinedIterable,
    FactoryIterable
)

# expose dispatch facades
from .facades import Facade, BroadcastFacade, ComposeFacade, XorFacade
from .capabilities import capabilities_of

# expose errors
from .errors import (
    MengiError,
    NoResponderError,
    UnsupportedMutationError,
    DispatchStateError
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Query",
    "QueryIterator",
    "IteratorState",
    "of",
    "from_iterable",
    "from_collection",
    "from_function",
    "string",
    "from_array",
    "empty",
    "Q",
    "q",
    "CharIterator",
    "StringIterator",
    "IterableString",
    "IterableArray",
    "JoinedIterator",
    "JoinedIterable",
    "FactoryIterable",
    "Facade",
    "BroadcastFacade",
    "ComposeFacade",
    "XorFacade",
    "capabilities_of",
    "MengiError",
    "NoResponderError",
    "UnsupportedMutationError",
    "DispatchStateError"
]
