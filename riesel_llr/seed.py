"""Start value ``V(1)`` for the Lucas sequence of a Riesel candidate.

When ``h`` is not a multiple of 3 the start value is always 4: with
``alpha = 2 + sqrt(3)`` we get ``V(1) = alpha + alpha**-1 = 4``, valid for
``h == +/-1 (mod 6)`` as long as 3 does not divide ``N``.

When ``3 | h`` one of three searches is used:

* Rodseth: the first ``P`` with ``(P-2 / N) == 1`` and ``(P+2 / N) == -1``;
* Riesel: the first ``v`` with ``(D / N) == -1`` for ``D`` the square-free
  part of ``v**2 - 4``, plus a second condition on ``v - 2``;
* Penne: ``x**2 + 2`` for the first ``x`` with ``(D / N) == -1``, ``D`` the
  square-free part of ``x**2 + 4``.  Fast, but tends to give a larger ``V(1)``.
"""

from __future__ import annotations

import logging

import gmpy2

from .candidate import RieselNumber
from .config import DEFAULT_CONFIG, LLRConfig, SeedMethod
from .jacobi import FACTOR_FOUND, efficient_jacobi
from .mathutil import is_perfect_square, square_free_part
from .results import Seed, Verdict

log = logging.getLogger(__name__)


def gen_v1(candidate: RieselNumber, config: LLRConfig = DEFAULT_CONFIG) -> Seed:
    """Find a valid ``V(1)`` for ``candidate`` or say why there is none."""
    reason = candidate.invalid_reason()
    if reason is not None:
        log.error("Error: %s", reason)
        return Seed(verdict=Verdict.INVALID_INPUT, reason=reason)

    h, n = candidate.h, candidate.n
    hmod3 = h % 3
    if hmod3 != 0:
        # 2**(2k) == 1 and 2**(2k+1) == -1 (mod 3)
        if (hmod3 == 1 and n % 2 == 0) or (hmod3 == 2 and n % 2 == 1):
            # 3 is prime, but no V(1) exists for it
            if candidate.N == 3:
                return Seed(verdict=Verdict.PRIME, reason="N is 3")
            log.info("N = %s is a multiple of 3", candidate)
            return Seed(verdict=Verdict.COMPOSITE, reason="N is a multiple of 3", witness=3)
        log.debug("h = %d is not a multiple of 3, thus V(1) = 4", h)
        return Seed(v1=4)

    seed = _SEARCHES[config.seed_method](candidate, config.search_limit)
    if seed is None:
        reason = (
            f"no valid V(1) found with the {config.seed_method.value} method "
            f"within {config.search_limit} candidates"
        )
        log.error("Error: %s", reason)
        return Seed(verdict=Verdict.SEARCH_EXHAUSTED, reason=reason)
    if seed.witness is not None:
        log.info("N = %s has the known factor %d", candidate, seed.witness)
    return seed


def _factor_seed(x: int, candidate: RieselNumber) -> Seed | None:
    """Composite verdict for a symbol that came back as ``FACTOR_FOUND``.

    ``None`` when the shared factor is ``N`` itself, which only happens for
    tiny candidates; the symbol is then simply 0.
    """
    g = int(gmpy2.gcd(x, candidate.N))
    if g == candidate.N:
        return None
    return Seed(verdict=Verdict.COMPOSITE, reason=f"N has the factor {g}", witness=g)


# ─────────────────────────────────────────────────────────────────────────────
# Searches used when 3 | h
# ─────────────────────────────────────────────────────────────────────────────

def _rodseth(candidate: RieselNumber, limit: int) -> Seed | None:
    h, n = candidate.h, candidate.n
    cache: dict[int, int] = {}
    # (P+2 / N) values already computed; P' = P + 4 asks for the same symbol
    plus: dict[int, int] = {}

    for P in range(3, 3 + limit):
        j_minus = plus.pop(P - 2, None)
        if j_minus is not None:
            log.debug("Retrieved Jacobi(%d, N) from the cache", P - 2)
        else:
            j_minus = efficient_jacobi(P - 2, h, n, cache)
            if j_minus == FACTOR_FOUND:
                found = _factor_seed(P - 2, candidate)
                if found is not None:
                    return found
        if j_minus != 1:
            continue
        log.debug("Jacobi(%d - 2, N) == 1: 1st condition passed", P)

        j_plus = efficient_jacobi(P + 2, h, n, cache)
        if j_plus == FACTOR_FOUND:
            found = _factor_seed(P + 2, candidate)
            if found is not None:
                return found
        if j_plus == -1:
            log.debug("Jacobi(%d + 2, N) == -1: 2nd condition passed", P)
            return Seed(v1=P)
        plus[P + 2] = j_plus
    return None


def _riesel(candidate: RieselNumber, limit: int) -> Seed | None:
    h, n = candidate.h, candidate.n
    cache: dict[int, int] = {}

    for v in range(3, 3 + limit):
        D = square_free_part(v * v - 4)
        j_d = efficient_jacobi(D, h, n, cache)
        if j_d == FACTOR_FOUND:
            found = _factor_seed(D, candidate)
            if found is not None:
                return found
        if j_d != -1:
            log.debug("[C1] Jacobi(%d, N) != -1: %d is not a valid V(1)", D, v)
            continue

        # alpha = epsilon**2, nothing more to check
        if is_perfect_square(v - 2):
            return Seed(v1=v)

        # (r / N) * sgn(a**2 - b**2 * D) must be -1 with r = 4a, a = v - 2
        # and a**2 - b**2 * D = 8 - 4v < 0, so we need (v - 2 / N) == 1
        j_a = efficient_jacobi(v - 2, h, n, cache)
        if j_a == FACTOR_FOUND:
            found = _factor_seed(v - 2, candidate)
            if found is not None:
                return found
        if j_a == 1:
            return Seed(v1=v)
        log.debug("[C2] Jacobi(%d, N) != 1: %d is not a valid V(1)", v - 2, v)
    return None


def _penne(candidate: RieselNumber, limit: int) -> Seed | None:
    h, n = candidate.h, candidate.n
    cache: dict[int, int] = {}

    for x in range(1, 1 + limit):
        D = square_free_part(x * x + 4)
        j_d = efficient_jacobi(D, h, n, cache)
        if j_d == FACTOR_FOUND:
            found = _factor_seed(D, candidate)
            if found is not None:
                return found
        # alpha is always a square here, (D / N) == -1 is enough
        if j_d == -1:
            return Seed(v1=x * x + 2)
    return None


_SEARCHES = {
    SeedMethod.RODSETH: _rodseth,
    SeedMethod.RIESEL: _riesel,
    SeedMethod.PENNE: _penne,
}
