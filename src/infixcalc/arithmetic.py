"""IEEE-754 float helpers for the operations Python refuses to finish."""

from __future__ import annotations

import math


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and math.fmod(x, 2.0) != 0.0


def divide(left: float, right: float) -> float:
    """Float division that yields inf/nan for a zero divisor instead of raising."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def power(base: float, exponent: float) -> float:
    """``base ** exponent`` with C99 pow() results on overflow and domain errors."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0.0 and _is_odd_integer(exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        if base == 0.0:
            # 0 raised to a negative power
            negative = math.copysign(1.0, base) < 0.0 and _is_odd_integer(exponent)
            return -math.inf if negative else math.inf
        # negative base, non-integer exponent
        return math.nan
