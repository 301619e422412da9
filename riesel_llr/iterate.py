"""LLR iteration ``U(i) = U(i-1)**2 - 2 (mod N)`` for ``i = 3 .. n``.

The squares are reduced with the shift-and-add method instead of a general
big-integer division.  From ``h * 2**n == 1 (mod N)`` we get, for
``u = j * 2**n + k`` and ``j = q * h + r``::

    u == r * 2**n + k + q  (mod N)

which needs only a shift, a mask and a division by the small ``h``.  Each
pass removes exactly ``q * N`` from ``u``, so the loop ends after a handful
of passes for the ``u < N**2`` values the iteration produces.
"""

from __future__ import annotations

import logging
import os

import gmpy2
from tqdm import tqdm

from .candidate import RieselNumber, last_digits
from .config import DEFAULT_CONFIG, LLRConfig

log = logging.getLogger(__name__)


class ReductionScratch:
    """Constants and counters for :func:`riesel_mod`.

    One instance serves a whole test: :func:`riesel_llr.llr.is_prime` builds it
    and hands it to both the ladder and the iteration.
    """

    def __init__(self, candidate: RieselNumber) -> None:
        self.n = candidate.n
        self.h = gmpy2.mpz(candidate.h)
        self.N = candidate.N
        self.mask = (gmpy2.mpz(1) << candidate.n) - 1
        self.passes = 0


def riesel_mod(u, candidate: RieselNumber, scratch: ReductionScratch | None = None) -> gmpy2.mpz:
    """Return ``u mod N`` for ``N = h * 2**n - 1``."""
    if scratch is None:
        scratch = ReductionScratch(candidate)
    N = scratch.N
    u = gmpy2.mpz(u)

    if u < 0:
        # u**2 - 2 and r*s - v1 dip below zero for tiny residues
        return u % N

    n, mask = scratch.n, scratch.mask
    while u > N:
        j = u >> n
        k = u & mask
        if scratch.h == 1:
            u = j + k
        else:
            q, r = gmpy2.t_divmod(j, scratch.h)
            u = (r << n) + k + q
        scratch.passes += 1

    if u == N:
        return gmpy2.mpz(0)
    return u


def gen_un(
    candidate: RieselNumber,
    u2,
    config: LLRConfig = DEFAULT_CONFIG,
    scratch: ReductionScratch | None = None,
) -> gmpy2.mpz | None:
    """Run the LLR recursion from ``U(2)`` up to ``U(n)``.

    Returns ``None`` (after logging the reason) when the preconditions
    ``h >= 1``, ``n >= 2``, odd ``h`` and ``U(2) >= 0`` do not hold.
    """
    reason = candidate.invalid_reason()
    if reason is None and u2 < 0:
        reason = f"expected U(2) >= 0, but received U(2) = {u2}"
    if reason is not None:
        log.error("Error: %s", reason)
        return None

    if scratch is None:
        scratch = ReductionScratch(candidate)
    u = riesel_mod(u2, candidate, scratch)
    report = config.verbose and log.isEnabledFor(logging.INFO)
    begin = os.times()

    rounds = range(3, candidate.n + 1)
    if config.progress_bar:
        rounds = tqdm(rounds, desc=f"LLR {candidate}", unit="it", leave=False)

    for i in rounds:
        u = riesel_mod(u * u - 2, candidate, scratch)

        if report and i % config.progress_interval == 0:
            current = os.times()
            log.info(
                "Reached U(%d). Last 8 digits = %s. Utime = %.2f. Stime = %.2f.",
                i,
                last_digits(u),
                current.user - begin.user,
                current.system - begin.system,
            )

    log.debug("Reduction passes for %s: %d", candidate, scratch.passes)
    return u
