"""Tests for cayleytools.numtheory module."""
import pytest

from cayleytools.numtheory import prime_factors, divisors, multiplicity, int_pow


# --- prime factors ---

def test_prime_factors_with_multiplicity():
    assert prime_factors(12) == (2, 2, 3)
    assert prime_factors(96) == (2, 2, 2, 2, 2, 3)


def test_prime_factors_prime():
    assert prime_factors(97) == (97,)


def test_prime_factors_one():
    assert prime_factors(1) == ()


# --- divisors ---

def test_divisors_ascending():
    assert divisors(12) == (1, 2, 3, 4, 6, 12)


def test_divisors_square():
    # 6 appears once
    assert divisors(36) == (1, 2, 3, 4, 6, 9, 12, 18, 36)


def test_divisors_one():
    assert divisors(1) == (1,)


# --- multiplicity / int_pow ---

def test_multiplicity():
    assert multiplicity(72, 2) == 3
    assert multiplicity(72, 3) == 2
    assert multiplicity(72, 5) == 0


def test_int_pow():
    assert int_pow(3, 4) == 81
    assert int_pow(2, 0) == 1
    assert int_pow(7, 1) == 7


@pytest.mark.parametrize("n", [0, -4])
def test_nonpositive_rejected(n):
    with pytest.raises(ValueError):
        prime_factors(n)
    with pytest.raises(ValueError):
        divisors(n)


def test_int_pow_negative_exponent():
    with pytest.raises(ValueError):
        int_pow(2, -1)
