"""Polynomial rolling hashes for substring search and a seeded integer mixer."""

from __future__ import annotations

import random
import time
from typing import Optional, Union

from cpkit.modular import mod_pow

POLY_MODULUS = 1_000_000_123
DEFAULT_BASE = 1_000_000_007
_MASK64 = (1 << 64) - 1

SINGLE_HASH_BASE = 101
SINGLE_HASH_MODULUS = 1_000_000_007

Text = Union[str, bytes]


def _codes(text: Text) -> list[int]:
    return list(text) if isinstance(text, (bytes, bytearray)) else [ord(c) for c in text]


def generate_base(
    low: int = 256, high: int = POLY_MODULUS, rng: Optional[random.Random] = None
) -> int:
    """Draw a random odd base from ``(low, high]``; an even draw is lowered by one."""
    if low + 1 > high:
        raise ValueError("the range (low, high] is empty")
    if rng is None:
        rng = random.Random(time.perf_counter_ns())
    base = rng.randint(low + 1, high)
    return base - 1 if base % 2 == 0 else base


class PolyHash:
    """Prefix hashes of a sequence under two moduli: a large prime and 2**64."""

    def __init__(self, text: Text, base: int = DEFAULT_BASE) -> None:
        if not 0 < base < POLY_MODULUS:
            raise ValueError(f"base must lie in (0, {POLY_MODULUS})")
        codes = _codes(text)
        if any(code >= base for code in codes):
            raise ValueError("base must exceed every symbol code")
        self.base = base
        self._pow1 = [1]
        self._pow2 = [1]
        self._extend_powers(len(codes))
        self._pref1 = [0]
        self._pref2 = [0]
        for code, p1, p2 in zip(codes, self._pow1, self._pow2):
            self._pref1.append((self._pref1[-1] + code * p1) % POLY_MODULUS)
            self._pref2.append((self._pref2[-1] + code * p2) & _MASK64)

    def __len__(self) -> int:
        return len(self._pref1) - 1

    def _extend_powers(self, highest: int) -> None:
        while len(self._pow1) <= highest:
            self._pow1.append(self._pow1[-1] * self.base % POLY_MODULUS)
            self._pow2.append(self._pow2[-1] * self.base & _MASK64)

    def __call__(self, pos: int, length: int, max_power: int = 0) -> tuple[int, int]:
        """Return both hashes of the segment ``[pos, pos + length)``.

        With ``max_power`` set, the hashes are shifted so that equal segments at
        different positions hash alike, as long as they end at or before ``max_power``.
        """
        if pos < 0 or length < 0 or pos + length > len(self):
            raise IndexError(f"segment [{pos}, {pos + length}) is outside length {len(self)}")
        end = pos + length
        hash1 = (self._pref1[end] - self._pref1[pos]) % POLY_MODULUS
        hash2 = (self._pref2[end] - self._pref2[pos]) & _MASK64
        if max_power:
            shift = max_power - (end - 1)
            if shift < 0:
                raise ValueError("max_power is smaller than the segment's last index")
            self._extend_powers(shift)
            hash1 = hash1 * self._pow1[shift] % POLY_MODULUS
            hash2 = hash2 * self._pow2[shift] & _MASK64
        return hash1, hash2


def find_occurrences(text: Text, pattern: Text, base: Optional[int] = None) -> list[int]:
    """Return every start index of ``pattern`` in ``text`` using double hashing."""
    if len(pattern) == 0:
        raise ValueError("pattern must not be empty")
    if base is None:
        base = generate_base(256, POLY_MODULUS)
    max_power = max(len(text), len(pattern))
    text_hash = PolyHash(text, base)
    needed = PolyHash(pattern, base)(0, len(pattern), max_power)
    m = len(pattern)
    return [
        i for i in range(len(text) - m + 1) if text_hash(i, m, max_power) == needed
    ]


def find_occurrences_single_hash(text: str, pattern: str) -> list[int]:
    """Return start indices of ``pattern`` in ``text`` by one rolling hash over lower-case letters.

    Only one modulus is used, so a hash collision may report a false match.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    n, m = len(text), len(pattern)
    if n < m:
        return []
    p, mod = SINGLE_HASH_BASE, SINGLE_HASH_MODULUS

    def code(ch: str) -> int:
        return ord(ch) - ord("a") + 1

    def window_hash(chars: str) -> int:
        total, power = 0, 1
        for ch in chars:
            total = (total + code(ch) * power) % mod
            power = power * p % mod
        return total

    target = window_hash(pattern)
    top_power = mod_pow(p, m - 1, mod)
    inverse = mod_pow(p, mod - 2, mod)
    current = window_hash(text[:m])
    found = [0] if current == target else []
    for start in range(1, n - m + 1):
        leaving, entering = text[start - 1], text[start + m - 1]
        current = ((current - code(leaving)) * inverse + code(entering) * top_power) % mod
        if current == target:
            found.append(start)
    return found


def splitmix64(x: int) -> int:
    """Mix a 64-bit integer with the SplitMix64 finalizer."""
    x = (x + 0x9E3779B97F4A7C15) & _MASK64
    x = ((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    x = ((x ^ (x >> 27)) * 0x94D049BB133111EB) & _MASK64
    return x ^ (x >> 31)


class SafeHasher:
    """Hash function for integer keys, salted with a per-instance seed."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = (time.monotonic_ns() if seed is None else seed) & _MASK64

    def __call__(self, key: int) -> int:
        return splitmix64((key + self.seed) & _MASK64)