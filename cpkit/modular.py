"""Modular arithmetic: fast exponentiation, extended Euclid and factorial tables."""

from __future__ import annotations

from itertools import accumulate

DEFAULT_MODULUS = 998_244_353


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent`` reduced modulo ``modulus`` by binary exponentiation."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` such that ``a * x + b * y == g`` where ``g = gcd(a, b)``."""
    if a == 0:
        return b, 0, 1
    g, x1, y1 = extended_gcd(b % a, a)
    return g, y1 - (b // a) * x1, x1


def mod_inverse(a: int, modulus: int) -> int:
    """Return the multiplicative inverse of ``a`` modulo ``modulus``.

    Raises ValueError when ``a`` and ``modulus`` are not coprime.
    """
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    g, x, _ = extended_gcd(a % modulus, modulus)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {modulus}")
    return x % modulus


def binomial(n: int, r: int) -> int:
    """Return C(n, r) computed exactly as a running product of ratios."""
    result = 1
    for i in range(r):
        result = result * (n - i) // (i + 1)
    return result


class Factorials:
    """Precomputed factorials and inverse factorials modulo a prime."""

    def __init__(self, limit: int, modulus: int = DEFAULT_MODULUS) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        self.modulus = modulus
        self._fac = list(
            accumulate(range(1, limit + 1), lambda acc, i: acc * i % modulus, initial=1 % modulus)
        )
        top = self._fac[limit]
        if top == 0:
            raise ValueError("modulus must be a prime larger than limit")
        # Fermat's little theorem gives the inverse of limit!; the rest follow downwards.
        top_inverse = mod_pow(top, modulus - 2, modulus)
        descending = accumulate(
            range(limit, 0, -1), lambda acc, i: acc * i % modulus, initial=top_inverse
        )
        self._inv = list(descending)[::-1]

    def _check(self, n: int) -> None:
        if not 0 <= n <= self.limit:
            raise ValueError(f"{n} is outside the table range 0..{self.limit}")

    def factorial(self, n: int) -> int:
        """Return ``n!`` modulo the table's modulus."""
        self._check(n)
        return self._fac[n]

    def inverse_factorial(self, n: int) -> int:
        """Return the inverse of ``n!`` modulo the table's modulus."""
        self._check(n)
        return self._inv[n]

    def ncr(self, n: int, r: int) -> int:
        """Return C(n, r) modulo the table's modulus, or 0 when it is not defined."""
        if n < 0 or r < 0 or n < r:
            return 0
        self._check(n)
        m = self.modulus
        return self._fac[n] * self._inv[r] % m * self._inv[n - r] % m