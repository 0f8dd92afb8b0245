"""
Sparse default-valued counters for frequency counts and probability mass.
"""
from .config import Config, config
from .counter import Counter, combine, merge_keys, add, subtract, multiply, divide
from .exceptions import EmptyCounterError
from .logs import configure_logging

__all__ = [
    "Config",
    "config",
    "configure_logging",
    "Counter",
    "EmptyCounterError",
    "combine",
    "merge_keys",
    "add",
    "subtract",
    "multiply",
    "divide",
]
