"""``U(2) = V(h) mod N`` by a Lucas ladder over the bits of ``h``.

With ``V(0) = 2``, ``V(1) = v1`` and ``V(x+2) = v1 * V(x+1) - V(x)``::

    V(2x)   = V(x)**2 - 2
    V(2x+1) = V(x+1) * V(x) - V(1)

Keeping ``r = V(x)`` and ``s = V(x+1)`` each bit of ``h`` moves ``x`` to
``2x`` or ``2x + 1`` with one of each.
"""

from __future__ import annotations

import logging

import gmpy2

from .candidate import RieselNumber, last_digits
from .iterate import ReductionScratch, riesel_mod

log = logging.getLogger(__name__)


def gen_u2(
    candidate: RieselNumber, v1: int, scratch: ReductionScratch | None = None
) -> gmpy2.mpz | None:
    """Return ``V(h) mod N`` for the start value ``v1``.

    ``scratch`` is the reduction state of the running test, shared with
    :func:`riesel_llr.iterate.gen_un`.

    Returns ``None`` (after logging the reason) when ``h >= 1``, ``n >= 2``,
    odd ``h`` or ``v1 >= 3`` does not hold.
    """
    reason = candidate.invalid_reason()
    if reason is None and v1 < 3:
        reason = f"expected v1 >= 3, but received v1 = {v1}"
    if reason is not None:
        log.error("Error: %s", reason)
        return None

    if scratch is None:
        scratch = ReductionScratch(candidate)
    h = candidate.h
    v1 = gmpy2.mpz(v1)

    r = v1
    if h == 1:
        return riesel_mod(r, candidate, scratch)
    s = r * r - 2

    trace = log.isEnabledFor(logging.DEBUG)
    # the top bit is V(1) itself, bit 0 is handled after the loop
    for i in range(h.bit_length() - 2, 0, -1):
        if (h >> i) & 1:
            r = riesel_mod(r * s - v1, candidate, scratch)
            s = riesel_mod(s * s - 2, candidate, scratch)
        else:
            s = riesel_mod(r * s - v1, candidate, scratch)
            r = riesel_mod(r * r - 2, candidate, scratch)
        if trace:
            log.debug("bit %d: r = ...%s, s = ...%s", i, last_digits(r), last_digits(s))

    # h is odd, so bit 0 is set
    return riesel_mod(r * s - v1, candidate, scratch)
