"""Modular matrix arithmetic, linear recurrences and Gauss-Jordan elimination."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]

FIBONACCI_MODULUS = 1_000_000_007
RECURRENCE_MODULUS = 1_000_000_000


def _identity(size: int, modulus: int) -> Matrix:
    one = 1 % modulus
    return [[one if row == col else 0 for col in range(size)] for row in range(size)]


def mat_mult(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], modulus: int = FIBONACCI_MODULUS
) -> Matrix:
    """Return the product ``a @ b`` with every entry reduced modulo ``modulus``."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if not a or not b:
        raise ValueError("matrices must not be empty")
    if any(len(row) != len(b) for row in a):
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) % modulus for col in columns] for row in a]


def mat_pow(
    matrix: Sequence[Sequence[int]], exponent: int, modulus: int = FIBONACCI_MODULUS
) -> Matrix:
    """Raise a square matrix to a non-negative power modulo ``modulus``."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    size = len(matrix)
    if size == 0 or any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square and non-empty")
    result = _identity(size, modulus)
    base = [[value % modulus for value in row] for row in matrix]
    while exponent:
        if exponent & 1:
            result = mat_mult(result, base, modulus)
        base = mat_mult(base, base, modulus)
        exponent >>= 1
    return result


def linear_recurrence(
    coefficients: Sequence[int],
    initial: Sequence[int],
    n: int,
    modulus: int = RECURRENCE_MODULUS,
) -> int:
    """Return the ``n``-th term (1-based) of ``a_i = c_1 a_{i-1} + ... + c_k a_{i-k}``.

    ``initial`` holds the first ``k`` terms ``a_1 .. a_k``.
    """
    k = len(coefficients)
    if k == 0:
        raise ValueError("at least one coefficient is required")
    if len(initial) != k:
        raise ValueError("initial terms and coefficients must have the same length")
    if n < 1:
        raise ValueError("n must be at least 1")
    if n <= k:
        return initial[n - 1] % modulus
    companion = [list(coefficients)]
    companion.extend([1 if col == row - 1 else 0 for col in range(k)] for row in range(1, k))
    state = [[term] for term in reversed(initial)]
    powered = mat_pow(companion, n - k, modulus)
    return mat_mult(powered, state, modulus)[0][0]


def fibonacci(n: int, modulus: int = FIBONACCI_MODULUS) -> int:
    """Return the ``n``-th Fibonacci number modulo ``modulus`` (F(0) = 0, F(1) = 1)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n <= 1:
        return n % modulus
    powered = mat_pow([[1, 1], [1, 0]], n - 1, modulus)
    return mat_mult(powered, [[1], [0]], modulus)[0][0]


def fibonacci_range_sum(n: int, m: int, modulus: int = FIBONACCI_MODULUS) -> int:
    """Return ``F(n) + F(n+1) + ... + F(m)`` modulo ``modulus``; the bounds may come in either order."""
    if n > m:
        n, m = m, n
    return (fibonacci(m + 2, modulus) - fibonacci(n + 1, modulus)) % modulus


def solve_linear_system(
    coefficients: Sequence[Sequence[float]], constants: Sequence[float]
) -> list[float]:
    """Solve the square system ``coefficients @ x = constants`` by Gauss-Jordan elimination.

    Raises ValueError when the system is not square or has no unique solution.
    """
    n = len(coefficients)
    if n == 0:
        raise ValueError("the system must have at least one equation")
    if len(constants) != n or any(len(row) != n for row in coefficients):
        raise ValueError("the system must be square")
    rows = [[float(v) for v in row] + [float(c)] for row, c in zip(coefficients, constants)]

    for i in range(n):
        if rows[i][i] == 0:
            donor = next(
                (rows[(i + step) % n] for step in range(1, n) if rows[(i + step) % n][i] != 0),
                None,
            )
            if donor is None:
                raise ValueError("the system has no unique solution")
            rows[i] = [x + y for x, y in zip(rows[i], donor)]
        pivot = rows[i][i]
        rows[i] = [x / pivot for x in rows[i]]
        pivot_row = rows[i]
        for j, row in enumerate(rows):
            if j != i and row[i] != 0:
                factor = row[i]
                rows[j] = [x - factor * y for x, y in zip(row, pivot_row)]

    return [row[-1] for row in rows]