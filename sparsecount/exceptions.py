"""
Errors raised by counter operations.

Arithmetic never raises: division by zero and logs of non-positive values
follow IEEE-754 and propagate inf/nan. Only operations that have no value
to return fail loudly.
"""


class EmptyCounterError(LookupError):
    """Raised when an operation needs at least one stored entry and there are none."""
    pass
