import dataclasses

import gmpy2
import pytest

from riesel_llr.candidate import RieselNumber, last_digits


def test_n_is_derived() -> None:
    candidate = RieselNumber(5, 4)
    assert candidate.N == 79
    assert isinstance(candidate.N, type(gmpy2.mpz(0)))
    assert RieselNumber(1, 127).N == 2**127 - 1


def test_frozen() -> None:
    candidate = RieselNumber(3, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        candidate.h = 5


def test_str() -> None:
    assert str(RieselNumber(3, 153)) == "3 * 2^153 - 1"


def test_negative_values_are_rejected() -> None:
    with pytest.raises(ValueError):
        RieselNumber(-3, 4)
    with pytest.raises(ValueError):
        RieselNumber(3, -4)


@pytest.mark.parametrize(
    "h, n, expected",
    [(6, 152, (3, 153)), (224, 10, (7, 15)), (5, 4, (5, 4)), (1, 0, (1, 0)), (2, 1, (1, 2))],
)
def test_from_args_moves_twos_into_n(h: int, n: int, expected) -> None:
    candidate = RieselNumber.from_args(h, n)
    assert (candidate.h, candidate.n) == expected
    assert candidate.N == h * 2**n - 1


@pytest.mark.parametrize("h, n", [(0, 5), (-1, 5), (3, -1)])
def test_from_args_rejects(h: int, n: int) -> None:
    with pytest.raises(ValueError):
        RieselNumber.from_args(h, n)


def test_invalid_reason() -> None:
    assert RieselNumber(3, 2).invalid_reason() is None
    assert "h >= 1" in RieselNumber(0, 4).invalid_reason()
    assert "n >= 2" in RieselNumber(3, 1).invalid_reason()
    assert "even" in RieselNumber(6, 4).invalid_reason()
    assert RieselNumber(6, 4).invalid_reason(require_odd=False) is None


def test_last_digits() -> None:
    assert last_digits(13) == "00000013"
    assert last_digits(2**127 - 1) == "84105727"
    assert last_digits(gmpy2.mpz(123456789), 4) == "6789"
