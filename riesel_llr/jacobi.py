"""Jacobi symbols ``(x / N)`` for ``N = h * 2**n - 1`` without building ``N``.

``N`` is only ever seen through its residue modulo the small odd ``x``, which
is ``((h mod x) * (2**n mod x) - 1) mod x``.  Quadratic reciprocity turns
``(x / N)`` into ``(N mod x / x)`` up to a sign that depends only on ``x`` and
``n``:

* ``(2 / N) == -1`` exactly when ``n == 2``: for ``n >= 3`` we have
  ``N == 7 (mod 8)``, for ``n == 2`` we have ``N == 3 (mod 8)``;
* ``N == 3 (mod 4)``, so reciprocity flips the sign iff ``x == 3 (mod 4)``;
* when ``x | h`` we have ``N == -1 (mod x)`` and the two signs above cancel.
"""

from __future__ import annotations

import logging

import gmpy2

from .mathutil import mod_exp, strip_twos

log = logging.getLogger(__name__)

# Returned instead of a symbol when x shares a factor with N.
FACTOR_FOUND = 0


def jacobi_of_n(x: int, h_mod_x: int, n: int) -> int:
    """Jacobi symbol ``(N mod x / x)`` for odd ``x > 1``, or ``FACTOR_FOUND``."""
    n_mod_x = (h_mod_x * mod_exp(2, n, x) - 1) % x
    if n_mod_x == 0:
        log.debug("%d divides N", x)
        return FACTOR_FOUND

    symbol = gmpy2.jacobi(n_mod_x, x)
    if symbol == 0:
        log.debug("gcd(N, %d) > 1", x)
        return FACTOR_FOUND
    return int(symbol)


def efficient_jacobi(x: int, h: int, n: int, cache: dict[int, int] | None = None) -> int:
    """Return ``(x / h * 2**n - 1)`` as ``+1``/``-1``, or ``FACTOR_FOUND``.

    ``cache`` maps odd ``x`` to ``(N mod x / x)`` and may be shared between
    calls with the same ``h`` and ``n``.
    """
    if x < 1:
        raise ValueError(f"Expected x >= 1, but received x = {x}")

    sign = 1
    x, twos = strip_twos(x)
    if n == 2 and twos & 1:
        sign = -sign

    h_mod_x = h % x
    if h_mod_x == 0:
        return sign

    if cache is not None and x in cache:
        symbol = cache[x]
    else:
        symbol = jacobi_of_n(x, h_mod_x, n)
        if symbol == FACTOR_FOUND:
            return FACTOR_FOUND
        if cache is not None:
            cache[x] = symbol

    if x % 4 == 3:
        sign = -sign
    return sign * symbol
