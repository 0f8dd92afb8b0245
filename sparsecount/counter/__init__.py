from .counter import Counter, combine
from .keys import merge_keys
from .ops import add, subtract, multiply, divide

__all__ = [
    "Counter",
    "combine",
    "merge_keys",
    "add",
    "subtract",
    "multiply",
    "divide",
]
