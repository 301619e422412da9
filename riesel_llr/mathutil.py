"""Small-integer helpers used by the start-value search."""

from __future__ import annotations

import gmpy2
from sympy.ntheory.factor_ import core


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """Return ``base**exponent % modulus`` with the right-to-left binary method.

    Every product is reduced straight away, so intermediates never exceed
    ``modulus**2``.
    """
    if modulus < 1:
        raise ValueError(f"Expected modulus > 0, but received modulus = {modulus}")
    if exponent < 0:
        raise ValueError(f"Expected exponent >= 0, but received exponent = {exponent}")

    if base == 0 or modulus == 1:
        return 0
    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result


def strip_twos(x: int) -> tuple[int, int]:
    """Return ``(odd, e)`` with ``x == odd * 2**e``."""
    if x < 1:
        raise ValueError(f"Expected x >= 1, but received x = {x}")
    e = (x & -x).bit_length() - 1
    return x >> e, e


def square_free_part(x: int) -> int:
    """Square-free ``D`` such that ``x == D * b**2`` for some ``b``."""
    if x < 1:
        raise ValueError(f"Expected x >= 1, but received x = {x}")
    return int(core(x, 2))


def is_perfect_square(x: int) -> bool:
    if x <= 0:
        raise ValueError(f"Expected x > 0, but received x = {x}")
    return bool(gmpy2.is_square(x))
