# converter/facts.py
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from math import isqrt
from typing import Any, Dict, List

from sympy import factorint, isprime

# Above this, sqrt(n) loops get too slow for a request; sympy takes over.
TRIAL_DIVISION_LIMIT = 10 ** 12


# ============================================================
# Primes / divisors
# ============================================================

def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    if n > TRIAL_DIVISION_LIMIT:
        return bool(isprime(n))

    for i in range(3, isqrt(n) + 1, 2):
        if n % i == 0:
            return False
    return True


def _divisors_from_factorization(fac: Dict[int, int]) -> List[int]:
    ds = [1]
    for p, e in fac.items():
        ds = [d * p ** k for d in ds for k in range(e + 1)]
    return sorted(ds)


def factors(n: int) -> List[int]:
    """
    Every positive divisor of n, ascending.
    12 -> [1, 2, 3, 4, 6, 12]
    n <= 0 -> []
    """
    if n <= 0:
        return []
    if n > TRIAL_DIVISION_LIMIT:
        return _divisors_from_factorization(factorint(n))

    small, large = [], []
    for i in range(1, isqrt(n) + 1):
        if n % i == 0:
            small.append(i)
            if i != n // i:
                large.append(n // i)
    return small + large[::-1]


# ============================================================
# Formatting
# ============================================================

def scientific(n: int, digits: int = 2) -> str:
    """
    Exponential notation with a fixed mantissa precision:
    12345 -> '1.23e+4'
    0     -> '0.00e+0'
    99999 -> '1.00e+5'
    Ties round away from zero.
    """
    sign = "-" if n < 0 else ""
    n = abs(n)
    quantum = Decimal(1).scaleb(-digits)

    exponent = len(str(n)) - 1 if n else 0
    mantissa = Decimal(n).scaleb(-exponent).quantize(quantum, rounding=ROUND_HALF_UP)
    if mantissa >= 10:
        exponent += 1
        mantissa = Decimal(n).scaleb(-exponent).quantize(quantum, rounding=ROUND_HALF_UP)

    return f"{sign}{mantissa}e+{exponent}"


def facts(n: int) -> Dict[str, Any]:
    divisors = factors(n)
    even = n % 2 == 0
    return {
        "is_prime": is_prime(n),
        "is_even": even,
        "is_odd": not even,
        "is_composite": len(divisors) > 2,
        "factors": divisors,
        "scientific": scientific(n),
    }
