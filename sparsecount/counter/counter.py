"""
Sparse, default-valued numeric map.

A Counter holds one shared default (the base) plus explicit overrides for
the keys whose value differs from it. Used for frequency counts and
unnormalized probability mass: counting tokens, adding two count tables
with different vocabularies, normalizing into a distribution, moving in
and out of log space.

Storage never holds a value equal to the base. Writing the base removes
the key, so keys() is always the set of keys that differ from the default.
"""

import logging
import math
import operator

import structlog

from ..exceptions import EmptyCounterError
from . import ieee
from .keys import merge_keys

# routed through stdlib logging under "sparsecount"
log = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)


class Counter:
    """
    Sparse map from string keys to floats with a default for missing keys.

    Example: token counts over an open vocabulary.
      - c = Counter(0.0)
      - c.incr("the")  → c["the"] == 1.0
      - c["unseen"]    → 0.0 (the base), and "unseen" is not stored
    """

    def __init__(self, base=0.0):
        self.base = base
        self._values = {}

    @classmethod
    def from_mapping(cls, base, mapping):
        """Build a counter from (key, value) pairs. Pairs equal to `base` are dropped."""
        c = cls(base)
        for k, v in dict(mapping).items():
            c.set(k, v)
        return c

    # ── access ──────────────────────────────────────────────────────

    def get(self, key):
        return self._values.get(key, self.base)

    def set(self, key, value):
        if value == self.base:
            self._values.pop(key, None)
            return
        self._values[key] = value

    def incr(self, key, amount=1):
        self.set(key, self.get(key) + amount)

    def keys(self):
        """Keys with a non-default value. Order is not part of the contract."""
        return list(self._values)

    def items(self):
        return list(self._values.items())

    def copy(self):
        c = self.__class__(self.base)
        c._values = dict(self._values)
        return c

    def __getitem__(self, key):
        return self.get(key)

    def __setitem__(self, key, value):
        self.set(key, value)

    def __contains__(self, key):
        return key in self._values

    def __iter__(self):
        return iter(self.keys())

    def __len__(self):
        return len(self._values)

    def __eq__(self, other):
        if not isinstance(other, Counter):
            return NotImplemented
        return self.base == other.base and self._values == other._values

    __hash__ = None

    def __repr__(self):
        return f"{self.__class__.__name__}(base={self.base!r}, values={self._values!r})"

    # ── in-place arithmetic ─────────────────────────────────────────

    def combine_inplace(self, op, other):
        """Apply `op` elementwise with `other`, updating this counter.

        The base becomes op(self.base, other.base); every key stored in
        either counter becomes op(self[k], other[k]). `other` is not modified.
        """
        # snapshot our keys before set() starts adding and pruning them
        keys = merge_keys(self.keys(), other.keys())
        pairs = [(k, self.get(k), other.get(k)) for k in keys]

        self.base = op(self.base, other.base)
        for k, a, b in pairs:
            self.set(k, op(a, b))

    def add(self, other):
        self.combine_inplace(operator.add, other)

    def subtract(self, other):
        self.combine_inplace(operator.sub, other)

    def multiply(self, other):
        self.combine_inplace(operator.mul, other)

    def divide(self, other):
        self.combine_inplace(ieee.div, other)

    def __add__(self, other):
        if not isinstance(other, Counter):
            return NotImplemented
        return combine(operator.add, self, other)

    def __sub__(self, other):
        if not isinstance(other, Counter):
            return NotImplemented
        return combine(operator.sub, self, other)

    def __mul__(self, other):
        if not isinstance(other, Counter):
            return NotImplemented
        return combine(operator.mul, self, other)

    def __truediv__(self, other):
        if not isinstance(other, Counter):
            return NotImplemented
        return combine(ieee.div, self, other)

    def __iadd__(self, other):
        if not isinstance(other, Counter):
            return NotImplemented
        self.add(other)
        return self

    def __isub__(self, other):
        if not isinstance(other, Counter):
            return NotImplemented
        self.subtract(other)
        return self

    def __imul__(self, other):
        if not isinstance(other, Counter):
            return NotImplemented
        self.multiply(other)
        return self

    def __itruediv__(self, other):
        if not isinstance(other, Counter):
            return NotImplemented
        self.divide(other)
        return self

    # ── transforms ──────────────────────────────────────────────────

    def apply(self, fn):
        """Replace every value, base included, with fn(key, value).

        The base is transformed first and is passed with key None, so keys
        that were never stored keep reading the transformed default. Entries
        that end up equal to the new base are pruned.
        """
        self.base = fn(None, self.base)

        for k, v in self.items():
            self.set(k, fn(k, v))

    def log(self):
        self.apply(lambda k, v: ieee.ln(v))

    def exp(self):
        self.apply(lambda k, v: ieee.exp(v))

    # ── reductions ──────────────────────────────────────────────────

    def reduce(self, seed, op):
        """Fold `op` over the stored values, starting at `seed`. The base is not included."""
        acc = seed
        for v in self._values.values():
            acc = op(acc, v)
        return acc

    def sum(self):
        """Base counted once, plus every stored value."""
        return self.reduce(self.base, operator.add)

    def _total(self, event):
        total = self.reduce(0.0, operator.add)
        if total == 0 or not math.isfinite(total):
            log.warning(event, total=total, entries=len(self))
        return total

    def normalize(self):
        """Scale values so the stored entries sum to 1.0.

        The total covers stored entries only, but the base is divided by it
        as well. With base 0.0 the base stays 0.0; a non-zero base ends up
        as base / total, which is not the remaining probability mass.
        """
        total = self._total("counter_normalize_degenerate_total")
        self.apply(lambda k, v: ieee.div(v, total))
        log.debug("counter_normalized", total=total, entries=len(self))

    def log_normalize(self):
        """Normalize and move to log space in one pass.

        Each value becomes ln(v) - ln(total). Taking the log before dividing
        keeps small probabilities from underflowing.
        """
        total = self._total("counter_log_normalize_degenerate_total")
        log_total = ieee.ln(total)
        self.apply(lambda k, v: ieee.ln(v) - log_total)
        log.debug("counter_log_normalized", total=total, log_total=log_total, entries=len(self))

    def arg_max(self):
        """Return (key, value) of the largest stored entry.

        The first entry is always accepted, later ones replace it only when
        strictly greater, so ties go to the first key seen. The base is not
        a candidate.
        """
        max_key = None
        max_val = 0.0

        for k, v in self._values.items():
            if max_key is None or v > max_val:
                max_key = k
                max_val = v

        if max_key is None:
            log.warning("counter_argmax_empty", base=self.base)
            raise EmptyCounterError("arg_max() of a counter with no stored entries")

        return max_key, max_val


def combine(op, a, b):
    """Return a new counter holding op(a[k], b[k]) for every key in either counter."""
    result = a.__class__(op(a.base, b.base))

    for k in merge_keys(a.keys(), b.keys()):
        result.set(k, op(a.get(k), b.get(k)))

    return result
