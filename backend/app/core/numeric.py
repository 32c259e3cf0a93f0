"""Numeric Recurrences & Primality — factorial, Fibonacci, 6k±1 trial division.

Invariants:
    - factorial and fibonacci raise InvalidArgumentError for n < 0 (only raised error in core/)
    - factorial(0) == 1; fibonacci(0) == 0, fibonacci(1) == 1
    - fibonacci keeps two running values: O(n) time, O(1) space
    - is_prime tests divisors i and i + 2 for i = 5, 11, 17, ... while i * i <= n

Design Decisions:
    - Arbitrary-precision int: no fixed-width wraparound, results are exact for every n
      (ADR: large n costs time, never correctness; the API caps n via settings)
    - Iteration over recursion: no recursion limit, constant stack
"""

from app.core.errors import ErrorContext, InvalidArgumentError


def _require_non_negative(n: int, technique: str) -> None:
    if n < 0:
        raise InvalidArgumentError(
            f"{technique}: negative input is not allowed (n={n})",
            argument="n", value=n,
            context=ErrorContext(technique=technique),
        )


def factorial(n: int) -> int:
    """n! computed iteratively. Raises InvalidArgumentError if n < 0."""
    _require_non_negative(n, "factorial")
    result = 1
    for i in range(1, n + 1):
        result *= i
    return result


def fibonacci(n: int) -> int:
    """F(n) with F(0)=0, F(1)=1. Raises InvalidArgumentError if n < 0."""
    _require_non_negative(n, "fibonacci")
    if n == 0:
        return 0
    if n == 1:
        return 1
    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b


def is_prime(n: int) -> bool:
    """Trial division with the 6k±1 wheel. ~O(sqrt(n))."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True
