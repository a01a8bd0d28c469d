"""Half-up rounding helpers.

Ties round toward positive infinity (``floor(x * 10**d + 0.5)``), which is the
rounding every stored amount in a schedule goes through. Python's built-in
``round`` rounds half to even and would shift results by a cent on ties.
"""

import math

RATE_PRECISION = 10


def round_to(value: float, places: int) -> float:
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def round_cents(value: float) -> float:
    """Round a currency amount to cents. Infinite values pass through."""
    if math.isinf(value):
        return value
    return round_to(value, 2)


def round_rate(value: float) -> float:
    """Round a periodic rate to 10 decimal digits"""
    return round_to(value, RATE_PRECISION)
