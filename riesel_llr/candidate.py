"""Riesel candidates ``N = h * 2**n - 1``.

A :class:`RieselNumber` is built once per test and never mutated.  ``N`` is a
``gmpy2.mpz`` computed at construction time; every later computation works on
fresh values reduced modulo ``N``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import gmpy2


@dataclass(frozen=True)
class RieselNumber:
    h: int
    n: int
    N: gmpy2.mpz = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.h < 0 or self.n < 0:
            raise ValueError(f"h and n must be non-negative, got h = {self.h}, n = {self.n}")
        object.__setattr__(self, "N", (gmpy2.mpz(self.h) << self.n) - 1)

    @classmethod
    def from_args(cls, h: int, n: int) -> "RieselNumber":
        """Build a candidate from raw command-line values.

        An even ``h`` is made odd by moving its powers of two over to ``2**n``,
        so ``6 * 2^152 - 1`` becomes ``3 * 2^153 - 1``.  The result may still
        have ``n < 2``; :func:`riesel_llr.llr.is_prime` reports that.
        """
        if h < 1:
            raise ValueError(f"Expected h > 0, but received h = {h}")
        if n < 0:
            raise ValueError(f"Expected n >= 0, but received n = {n}")
        shift = (h & -h).bit_length() - 1
        return cls(h >> shift, n + shift)

    def invalid_reason(self, require_odd: bool = True) -> str | None:
        """Return why this candidate cannot be tested, or ``None``."""
        if self.h < 1:
            return f"expected h >= 1, but received h = {self.h}"
        if self.n < 2:
            return f"expected n >= 2, but received n = {self.n}"
        if require_odd and self.h % 2 == 0:
            return f"expected odd h, but received h = {self.h} which is even"
        return None

    def __str__(self) -> str:
        return f"{self.h} * 2^{self.n} - 1"


def last_digits(value, digits: int = 8) -> str:
    """Low-order decimal digits of ``value`` without a full ``str()`` conversion."""
    return str(int(value % (10 ** digits))).zfill(digits)
