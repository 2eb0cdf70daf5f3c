"""
numeric helper tools shared by all standards
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from math import floor, isfinite, log
from numbers import Real

import numpy as np

from .errors import InvalidValueError


def as_number(n):
    """
    Return `n` as a plain Python real number.

    numpy scalars are unwrapped; booleans, non-real and non-finite
    values raise InvalidValueError.
    """
    if isinstance(n, np.generic):
        n = n.item()
    if isinstance(n, bool) or not isinstance(n, Real):
        raise InvalidValueError(n)
    if isinstance(n, float) and not isfinite(n):
        raise InvalidValueError(n, "not finite")
    return n


def maybe_integer(n):
    """
    Return int if `n` is numerically a whole number, `n` otherwise.

    1.0 becomes 1, 1.5 stays 1.5.
    """
    if isinstance(n, float) and not isfinite(n):
        return n
    rounded = round(n)
    if rounded == n:
        return rounded
    return n


def exponent(n, base):
    """
    Return floor(log_base(|n|)), the magnitude class of `n`.

    Zero (either sign) has exponent 0.  The floating-point estimate is
    checked against exact powers of `base`, so exponent(10**9, 1000)
    is 3.
    """
    assert base > 1, "base must be larger than 1"
    a = abs(n)
    if a == 0:
        return 0
    e = int(floor(log(a) / log(base)))
    if base ** (e + 1) <= a:
        e += 1
    elif base**e > a:
        e -= 1
    return e


def round_half_up(n, precision=0):
    """
    Round `n` to `precision` decimals, exact ties away from zero.

    The exact binary value of a float is rounded, so 1.125 becomes
    1.13 and 2.5 becomes 3.0, but 1.005 (stored as 1.00499...) becomes
    1.0.
    """
    if not isinstance(n, (int, float)):
        n = float(n)
    d = Decimal(n)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, d.adjusted() + precision + 2)
        d = d.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)
    return float(d)
