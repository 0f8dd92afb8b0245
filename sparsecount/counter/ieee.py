"""
Float helpers with IEEE-754 results instead of Python exceptions.

Python raises ZeroDivisionError, ValueError and OverflowError where IEEE
arithmetic yields inf or nan. Counters are used for probability mass and
log-probabilities, where -inf (log 0) and inf are ordinary values, so
these helpers return them rather than raising.
"""
import math


def div(a, b):
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        # sign of the zero denominator matters: 1/-0.0 is -inf
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def ln(x):
    if x > 0:
        return math.log(x)
    if x == 0:
        return -math.inf
    return math.nan  # negative or nan


def exp(x):
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf
