import pytest
from sympy import isprime

import riesel_llr.iterate
import riesel_llr.llr
import riesel_llr.lucas
from riesel_llr import (
    LLRConfig,
    RieselNumber,
    SeedMethod,
    Verdict,
    is_prime,
    riesel_is_prime,
)


@pytest.mark.parametrize(
    "h, n, expected",
    [
        (3, 2, Verdict.PRIME),  # 11
        (7, 2, Verdict.COMPOSITE),  # 27
        (5, 4, Verdict.PRIME),  # 79
        (1, 2, Verdict.PRIME),  # 3
        (1, 3, Verdict.PRIME),  # 7
        (1, 11, Verdict.COMPOSITE),  # 2047 = 23 * 89
        (3, 4, Verdict.PRIME),  # 47
        (9, 2, Verdict.COMPOSITE),  # 35
    ],
)
def test_known_values(h: int, n: int, expected: Verdict) -> None:
    assert riesel_is_prime(h, n).verdict is expected


def test_prime_result_fields() -> None:
    result = riesel_is_prime(5, 4)
    assert result.is_prime
    assert bool(result)
    assert result.v1 == 4
    assert result.residue == 0
    assert result.candidate == RieselNumber(5, 4)


def test_composite_result_fields() -> None:
    result = riesel_is_prime(7, 2)
    assert not result
    assert result.witness == 3

    # 3 * 2^5 - 1 = 95 = 5 * 19, caught by the start value search
    result = riesel_is_prime(3, 5)
    assert result.verdict is Verdict.COMPOSITE
    assert result.witness == 5


@pytest.mark.parametrize("method", list(SeedMethod))
@pytest.mark.parametrize("n", range(2, 11))
def test_agrees_with_isprime(method: SeedMethod, n: int) -> None:
    config = LLRConfig(seed_method=method)
    for h in range(1, 2**n, 2):
        expected = Verdict.PRIME if isprime(h * 2**n - 1) else Verdict.COMPOSITE
        assert riesel_is_prime(h, n, config).verdict is expected, (h, n)


@pytest.mark.parametrize(
    "h, n",
    [(3, 6), (3, 7), (3, 11), (3, 18), (3, 38), (1, 31), (1, 61), (1, 89), (5, 8)],
)
def test_large_primes(h: int, n: int) -> None:
    assert isprime(h * 2**n - 1)
    assert riesel_is_prime(h, n).is_prime


def test_mersenne_composites() -> None:
    for n in (23, 29, 37, 41):
        assert riesel_is_prime(1, n).verdict is Verdict.COMPOSITE


def test_deterministic() -> None:
    candidate = RieselNumber(507, 50)
    first = is_prime(candidate)
    assert is_prime(candidate) == first


@pytest.mark.parametrize("h, n", [(0, 5), (3, 1), (3, 0), (6, 4)])
def test_invalid_input_never_raises(h: int, n: int, caplog) -> None:
    result = riesel_is_prime(h, n)
    assert result.verdict is Verdict.INVALID_INPUT
    assert result.reason
    assert not result
    assert "Error" in caplog.text


def test_search_exhausted() -> None:
    result = riesel_is_prime(3, 2, LLRConfig(search_limit=2))
    assert result.verdict is Verdict.SEARCH_EXHAUSTED
    assert result.v1 is None


def test_large_h_is_reported(caplog) -> None:
    result = riesel_is_prime(33, 2)
    assert result.verdict in (Verdict.PRIME, Verdict.COMPOSITE)
    assert "not conclusive" in caplog.text


def test_verbose_reports_steps(caplog) -> None:
    caplog.set_level("INFO", logger="riesel_llr")
    riesel_is_prime(5, 4, LLRConfig(verbose=True))
    assert "Generated V(1) = 4" in caplog.text
    assert "Generated U(2) = V(h). Last 8 digits = 00000013." in caplog.text
    assert "is prime!" in caplog.text


def test_one_reduction_scratch_per_test(monkeypatch) -> None:
    built = []

    class CountingScratch(riesel_llr.iterate.ReductionScratch):
        def __init__(self, candidate) -> None:
            super().__init__(candidate)
            built.append(self)

    for module in (riesel_llr.iterate, riesel_llr.llr, riesel_llr.lucas):
        monkeypatch.setattr(module, "ReductionScratch", CountingScratch)

    assert riesel_is_prime(3, 38).is_prime
    assert len(built) == 1
    assert built[0].passes > 0
