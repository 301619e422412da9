"""Lucas-Lehmer-Riesel primality test for Riesel numbers ``h * 2**n - 1``."""

from .candidate import RieselNumber
from .config import DEFAULT_CONFIG, LLRConfig, SeedMethod
from .llr import is_prime, riesel_is_prime
from .results import LLRResult, Seed, Verdict

__all__ = [
    "DEFAULT_CONFIG",
    "LLRConfig",
    "LLRResult",
    "RieselNumber",
    "Seed",
    "SeedMethod",
    "Verdict",
    "is_prime",
    "riesel_is_prime",
]
