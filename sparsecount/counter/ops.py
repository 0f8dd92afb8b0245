"""
Pure elementwise arithmetic between two counters.

Each function returns a new Counter and leaves both operands untouched.
The result's base is the operation applied to the two bases, and every
key stored in either operand is evaluated, so disjoint vocabularies are
handled by falling back to each side's default.
"""

import operator

from . import ieee
from .counter import combine


def add(a, b):
    """Add a to b, returning a new counter."""
    return combine(operator.add, a, b)


def subtract(a, b):
    """Subtract b from a, returning a new counter."""
    return combine(operator.sub, a, b)


def multiply(a, b):
    """Multiply a by b, returning a new counter."""
    return combine(operator.mul, a, b)


def divide(a, b):
    """Divide a by b, returning a new counter. x/0 gives inf or nan, never raises."""
    return combine(ieee.div, a, b)
