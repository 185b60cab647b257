"""Prime sieves, primality testing, factorization and Euler's totient."""

from __future__ import annotations

from itertools import compress
from math import isqrt

_MILLER_RABIN_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def smallest_prime_factors(limit: int) -> list[int]:
    """Return the smallest prime factor of every ``i < limit`` using a linear sieve.

    Entries for 0 and 1 are 0.
    """
    factor = [0] * max(limit, 0)
    primes: list[int] = []
    for i in range(2, limit):
        if factor[i] == 0:
            factor[i] = i
            primes.append(i)
        lowest = factor[i]
        for p in primes:
            if p > lowest or p * i >= limit:
                break
            factor[p * i] = p
    return factor


def sieve(limit: int) -> list[bool]:
    """Return primality flags for every ``i < limit`` using the sieve of Eratosthenes."""
    if limit < 2:
        return [False] * max(limit, 0)
    flags = [True] * limit
    flags[0] = flags[1] = False
    for i in range(2, isqrt(limit - 1) + 1):
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, limit, i))
    return flags


def factorize_with_spf(n: int, spf: list[int]) -> list[int]:
    """Factorize ``n`` in ascending order using a smallest-prime-factor table."""
    if n < 1:
        raise ValueError("n must be positive")
    if n >= len(spf):
        raise ValueError(f"{n} is beyond the factor table")
    factors = []
    while n > 1:
        p = spf[n]
        factors.append(p)
        n //= p
    return factors


def segmented_primes(low: int, high: int) -> list[int]:
    """Return all primes in the inclusive range ``[low, high]``."""
    if low > high:
        raise ValueError("low must not exceed high")
    start = max(low, 2)
    if start > high:
        return []
    base_primes = list(compress(range(isqrt(high) + 1), sieve(isqrt(high) + 1)))
    segment = [True] * (high - start + 1)
    for p in base_primes:
        first = max(p * p, -(-start // p) * p)
        if first > high:
            continue
        segment[first - start :: p] = [False] * len(range(first, high + 1, p))
    return list(compress(range(start, high + 1), segment))


def _is_witness(n: int, a: int, d: int, s: int) -> bool:
    x = pow(a, d, n)
    if x in (1, n - 1):
        return False
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return False
    return True


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test, exact for all 64-bit integers."""
    if n < 4:
        return n in (2, 3)
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _MILLER_RABIN_BASES:
        if n == a:
            return True
        if _is_witness(n, a, d, s):
            return False
    return True


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with repetition."""
    if n < 1:
        raise ValueError("n must be positive")
    factors = []
    i = 2
    while i * i <= n:
        while n % i == 0:
            factors.append(i)
            n //= i
        i += 1
    if n > 1:
        factors.append(n)
    return factors


def euler_phi(n: int) -> int:
    """Return Euler's totient of ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    phi = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            phi -= phi // i
        i += 1
    if n > 1:
        phi -= phi // n
    return phi


def totients(limit: int) -> list[int]:
    """Return Euler's totient of every ``i < limit`` (entry 0 is 0)."""
    tots = list(range(max(limit, 0)))
    for i in range(2, limit):
        if tots[i] == i:
            for j in range(i, limit, i):
                tots[j] -= tots[j] // i
    return tots