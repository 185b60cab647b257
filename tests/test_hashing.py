import random

import pytest

from cpkit.hashing import (
    POLY_MODULUS,
    PolyHash,
    SafeHasher,
    find_occurrences,
    find_occurrences_single_hash,
    generate_base,
    splitmix64,
)


def _naive(text, pattern):
    return [i for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i)]


def test_splitmix64_of_zero():
    assert splitmix64(0) == 0xE220A8397B1DCDAF


def test_splitmix64_stays_in_64_bits():
    for x in (0, 1, 2**63, 2**64 - 1, 123456789):
        assert 0 <= splitmix64(x) < 2**64


def test_safe_hasher_uses_seed():
    hasher = SafeHasher(5)
    assert hasher(10) == splitmix64(15)
    assert SafeHasher(5)(10) == hasher(10)


@pytest.mark.parametrize("seed", range(5))
def test_generate_base_is_odd_and_in_range(seed):
    base = generate_base(256, POLY_MODULUS, random.Random(seed))
    assert base % 2 == 1
    assert 256 <= base <= POLY_MODULUS


def test_generate_base_rejects_empty_range():
    with pytest.raises(ValueError):
        generate_base(10, 10, random.Random(0))


def test_equal_segments_hash_alike_with_max_power():
    text = "abcxyzabc"
    h = PolyHash(text, 1_000_003)
    assert h(0, 3, len(text)) == h(6, 3, len(text))


def test_hash_matches_across_instances():
    s, t = "hello world", "world"
    mx = max(len(s), len(t))
    hs, ht = PolyHash(s, 999_983), PolyHash(t, 999_983)
    assert hs(6, 5, mx) == ht(0, 5, mx)


def test_hash_of_empty_segment_is_zero():
    assert PolyHash("abc")(1, 0) == (0, 0)


def test_single_symbol_hash_is_its_code():
    assert PolyHash("a")(0, 1) == (ord("a"), ord("a"))


def test_base_below_symbol_raises():
    with pytest.raises(ValueError):
        PolyHash("abc", 50)


def test_base_at_modulus_raises():
    with pytest.raises(ValueError):
        PolyHash("abc", POLY_MODULUS)


def test_segment_outside_text_raises():
    with pytest.raises(IndexError):
        PolyHash("abc")(2, 5)


@pytest.mark.parametrize(
    "text,pattern",
    [("ababab", "ab"), ("aaaaa", "aa"), ("abc", "d"), ("abc", "abcd"), ("xyzxyz", "xyzxyz")],
)
def test_find_occurrences_matches_naive(text, pattern):
    assert find_occurrences(text, pattern, 1_000_003) == _naive(text, pattern)


def test_find_occurrences_with_random_base():
    rng = random.Random(7)
    text = "".join(rng.choice("ab") for _ in range(200))
    assert find_occurrences(text, "abba") == _naive(text, "abba")


def test_find_occurrences_rejects_empty_pattern():
    with pytest.raises(ValueError):
        find_occurrences("abc", "")


@pytest.mark.parametrize(
    "text,pattern",
    [("ababab", "ab"), ("aaaaa", "aaa"), ("hello", "z"), ("ab", "abc"), ("banana", "ana")],
)
def test_single_hash_matches_naive(text, pattern):
    assert find_occurrences_single_hash(text, pattern) == _naive(text, pattern)


def test_single_hash_random_text():
    rng = random.Random(11)
    text = "".join(rng.choice("abc") for _ in range(300))
    assert find_occurrences_single_hash(text, "cab") == _naive(text, "cab")


def test_single_hash_rejects_empty_pattern():
    with pytest.raises(ValueError):
        find_occurrences_single_hash("abc", "")