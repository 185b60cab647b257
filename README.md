# cpkit

A small toolbox of algorithms and data structures that come up again and
again in competitive programming: modular arithmetic, prime sieves,
matrix exponentiation, counting tricks, tries, range-query structures and
rolling hashes. Everything is pure Python with no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cpkit.modular` | `mod_pow`, `extended_gcd`, `mod_inverse`, `binomial`, `Factorials` (factorials, inverse factorials and `ncr` modulo a prime, default 998244353) |
| `cpkit.primes` | `smallest_prime_factors` (linear sieve), `sieve` (Eratosthenes), `factorize_with_spf`, `segmented_primes`, `is_prime` (deterministic Miller–Rabin), `prime_factors`, `euler_phi`, `totients` |
| `cpkit.matrix` | `mat_mult`, `mat_pow`, `linear_recurrence`, `fibonacci`, `fibonacci_range_sum`, `solve_linear_system` (Gauss–Jordan elimination) |
| `cpkit.counting` | `lcm`, `count_multiples` and `count_free` (inclusion–exclusion), `compress`, `rank_by_last_position`, `find_duplicate` (Floyd's cycle finding) |
| `cpkit.linked_list` | `ListNode`, `LinkedList` (`push_front`, `push_back`, `pop_front`, `pop_back`, `reverse`, `middle`), `merge_sorted` |
| `cpkit.bst` | `BinarySearchTree` with `insert`, `inorder` and `preorder` |
| `cpkit.dsu` | `DisjointSet` with `find`, `union`, `size_of` and a `components` count |
| `cpkit.sparse_table` | `SparseTable` for range-minimum queries (`query`, `query_by_lifting`) |
| `cpkit.sqrt_decomp` | `SqrtDecomposition` for range sums (`query`) with point updates (`update`) |
| `cpkit.mo` | `count_distinct_in_ranges` using Mo's algorithm |
| `cpkit.hashing` | `PolyHash` (hash modulo 1000000123 and 2**64), `generate_base`, `find_occurrences`, `find_occurrences_single_hash`, `splitmix64`, `SafeHasher` |
| `cpkit.bit_trie` | `BitTrie` (counted binary trie with `count`, `remove`, `min_xor`, `max_xor`, `mex`, `minimum`), `max_xor_pair` |
| `cpkit.string_trie` | `Trie` of strings with `count`, `count_prefix`, `remove` and `in` |

Errors are raised rather than returned: invalid arguments give
`ValueError`, out-of-range indices give `IndexError`.

## Examples

```python
from cpkit.modular import mod_pow, extended_gcd, Factorials
from cpkit.primes import is_prime, prime_factors, euler_phi
from cpkit.matrix import fibonacci, linear_recurrence
from cpkit.dsu import DisjointSet
from cpkit.sparse_table import SparseTable
from cpkit.string_trie import Trie

mod_pow(2, 10, 1_000_000_007)        # 1024
g, x, y = extended_gcd(30, 12)       # g == 6 and 30 * x + 12 * y == 6

facts = Factorials(100, 998244353)
facts.ncr(10, 3)                     # 120

is_prime(1_000_000_007)              # True
prime_factors(360)                   # [2, 2, 2, 3, 3, 5]
euler_phi(36)                        # 12

fibonacci(10)                        # 55
linear_recurrence([1, 1], [1, 1], 10)  # 55, the 10th term of 1, 1, 2, 3, ...

dsu = DisjointSet(5)
dsu.union(1, 2)                      # True
dsu.find(1) == dsu.find(2)           # True
dsu.components                       # 4

table = SparseTable([5, 2, 4, 7, 1, 3])
table.query(0, 3)                    # 2

trie = Trie()
trie.insert("abc")
trie.insert("abd")
"abc" in trie                        # True
trie.count_prefix("ab")              # 2
```

Indices in the range-query structures are zero-based and ranges are
inclusive on both ends.

## What it does not do

`cpkit` is a library only. It has no command-line program: nothing reads
problem input from standard input or prints answers; call the functions
from your own code.