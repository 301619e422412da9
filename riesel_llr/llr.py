"""Lucas-Lehmer-Riesel test for ``N = h * 2**n - 1``.

The test works as follows:

1. find a start value ``V(1)`` (:mod:`riesel_llr.seed`);
2. derive ``U(2) = V(h) mod N`` (:mod:`riesel_llr.lucas`);
3. iterate ``U(i) = U(i-1)**2 - 2 mod N`` up to ``U(n)`` (:mod:`riesel_llr.iterate`);
4. ``N`` is prime iff ``U(n) == 0``.

The criterion is conclusive for odd ``h < 2**n``.
"""

from __future__ import annotations

import logging

from .candidate import RieselNumber, last_digits
from .config import DEFAULT_CONFIG, LLRConfig
from .iterate import ReductionScratch, gen_un
from .lucas import gen_u2
from .results import LLRResult, Verdict
from .seed import gen_v1

log = logging.getLogger(__name__)


def is_prime(candidate: RieselNumber, config: LLRConfig = DEFAULT_CONFIG) -> LLRResult:
    """Run the full LLR test on ``candidate``.

    Never raises for bad ``h``/``n``: those come back as ``INVALID_INPUT``.
    """
    reason = candidate.invalid_reason()
    if reason is not None:
        log.error("Error: %s", reason)
        return LLRResult(candidate, Verdict.INVALID_INPUT, reason=reason)

    if candidate.h.bit_length() > candidate.n:
        log.warning("h = %d >= 2^%d: the LLR verdict for %s is not conclusive",
                    candidate.h, candidate.n, candidate)

    # 3 is the only prime caught by the factor-3 screen
    if candidate.N == 3:
        log.info("N = %s = 3 is prime", candidate)
        return LLRResult(candidate, Verdict.PRIME)

    seed = gen_v1(candidate, config)
    if not seed.found:
        return LLRResult(candidate, seed.verdict, reason=seed.reason, witness=seed.witness)
    v1 = seed.v1
    if config.verbose:
        log.info("Generated V(1) = %d", v1)

    scratch = ReductionScratch(candidate)
    u2 = gen_u2(candidate, v1, scratch)
    if u2 is None:
        return LLRResult(candidate, Verdict.INVALID_INPUT, v1=v1, reason="could not generate U(2)")
    if config.verbose:
        log.info("Generated U(2) = V(h). Last 8 digits = %s.", last_digits(u2))

    un = gen_un(candidate, u2, config, scratch)
    if un is None:
        return LLRResult(candidate, Verdict.INVALID_INPUT, v1=v1, reason="could not generate U(n)")
    if config.verbose:
        log.info("Generated U(n). Last 8 digits = %s.", last_digits(un))

    if un == 0:
        log.info("N = %s is prime!", candidate)
        return LLRResult(candidate, Verdict.PRIME, v1=v1, residue=un)
    log.info("N = %s is composite!", candidate)
    return LLRResult(candidate, Verdict.COMPOSITE, v1=v1, residue=un)


def riesel_is_prime(h: int, n: int, config: LLRConfig = DEFAULT_CONFIG) -> LLRResult:
    """Test ``h * 2**n - 1`` as given, without normalising an even ``h``."""
    return is_prime(RieselNumber(h, n), config)
