"""Outcome types shared by the seed search and the orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import gmpy2

from .candidate import RieselNumber


class Verdict(Enum):
    PRIME = "prime"
    COMPOSITE = "composite"
    INVALID_INPUT = "invalid input"
    SEARCH_EXHAUSTED = "search exhausted"


@dataclass(frozen=True)
class Seed:
    """Result of the start-value search.

    Exactly one of ``v1`` and ``verdict`` is set.  ``witness`` is the small
    divisor of ``N`` found while screening, when there is one.
    """

    v1: int | None = None
    verdict: Verdict | None = None
    reason: str = ""
    witness: int | None = None

    @property
    def found(self) -> bool:
        return self.v1 is not None


@dataclass(frozen=True)
class LLRResult:
    candidate: RieselNumber
    verdict: Verdict
    v1: int | None = None
    reason: str = ""
    witness: int | None = None
    residue: gmpy2.mpz | None = None

    @property
    def is_prime(self) -> bool:
        return self.verdict is Verdict.PRIME

    def __bool__(self) -> bool:
        return self.is_prime
