class MengiError(Exception):
    """base class for all mengi errors"""


class NoResponderError(MengiError, LookupError):
    """raised when a composed facade finds no element supporting an operation"""

    def __init__(self, operation: str):
        super().__init__(f"no element responds to '{operation}'")
        self.operation = operation


class UnsupportedMutationError(MengiError, TypeError):
    """queries and their iterators are iterate-only"""

    def __init__(self, message: str = "remove not supported"):
        super().__init__(message)


class DispatchStateError(MengiError, RuntimeError):
    """
    raised by an xor facade when every attempt failed but no failure is left
    to re-raise, i.e. all of them were suppressed or nothing was attempted.
    """
