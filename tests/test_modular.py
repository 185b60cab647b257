import math

import pytest

from cpkit.modular import (
    Factorials,
    binomial,
    extended_gcd,
    mod_inverse,
    mod_pow,
)


def test_mod_pow_worked_example():
    assert mod_pow(2, 1, 1000000007) == 2


@pytest.mark.parametrize(
    "base, exponent, modulus",
    [(2, 10, 1000000007), (3, 200, 998244353), (12345, 6789, 97), (7, 0, 13), (10**12, 55, 1000000007)],
)
def test_mod_pow_matches_builtin(base, exponent, modulus):
    assert mod_pow(base, exponent, modulus) == pow(base, exponent, modulus)


def test_mod_pow_rejects_bad_arguments():
    with pytest.raises(ValueError):
        mod_pow(2, -1, 7)
    with pytest.raises(ValueError):
        mod_pow(2, 3, 0)


@pytest.mark.parametrize("a, b", [(30, 12), (12, 30), (17, 5), (240, 46), (1, 1), (99, 0), (5, 1000000007)])
def test_extended_gcd_bezout(a, b):
    g, x, y = extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


def test_extended_gcd_base_case():
    assert extended_gcd(0, 42) == (42, 0, 1)


@pytest.mark.parametrize("a, modulus", [(3, 11), (10, 17), (2, 1000000007), (123456, 998244353)])
def test_mod_inverse(a, modulus):
    inverse = mod_inverse(a, modulus)
    assert 0 <= inverse < modulus
    assert a * inverse % modulus == 1


def test_mod_inverse_not_coprime():
    with pytest.raises(ValueError):
        mod_inverse(6, 9)


@pytest.mark.parametrize("n, r", [(10, 3), (20, 10), (5, 0), (52, 5), (60, 30)])
def test_binomial_matches_comb(n, r):
    assert binomial(n, r) == math.comb(n, r)


def test_binomial_symmetry():
    for r in range(15):
        assert binomial(14, r) == binomial(14, 14 - r)


def test_factorials_inverse_pairs():
    table = Factorials(200)
    m = table.modulus
    for n in range(201):
        assert table.factorial(n) * table.inverse_factorial(n) % m == 1


def test_factorials_values():
    table = Factorials(50, 1000000007)
    for n in range(51):
        assert table.factorial(n) == math.factorial(n) % 1000000007


def test_ncr_matches_comb():
    table = Factorials(100)
    for n in range(0, 101, 7):
        for r in range(n + 1):
            assert table.ncr(n, r) == math.comb(n, r) % table.modulus


def test_ncr_pascal_identity():
    table = Factorials(60)
    for n in range(1, 61):
        for r in range(1, n):
            assert table.ncr(n, r) == (table.ncr(n - 1, r - 1) + table.ncr(n - 1, r)) % table.modulus


def test_ncr_undefined_is_zero():
    table = Factorials(10)
    assert table.ncr(3, 5) == 0
    assert table.ncr(-1, 0) == 0
    assert table.ncr(5, -2) == 0


def test_factorial_out_of_range():
    table = Factorials(10)
    with pytest.raises(ValueError):
        table.factorial(11)
    with pytest.raises(ValueError):
        table.inverse_factorial(-1)


def test_factorials_limit_must_be_below_modulus():
    with pytest.raises(ValueError):
        Factorials(7, 7)