"""Elementary loops over the natural numbers: sums, factorials and primes."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Arithmetic:
    """Results of the five integer operations applied to two operands."""

    total: int
    difference: int
    product: int
    quotient: int
    remainder: int


def arithmetic(a: int, b: int) -> Arithmetic:
    """Add, subtract, multiply, divide and take the remainder of two integers.

    Division truncates toward zero and the remainder takes the sign of the
    dividend.
    """
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return Arithmetic(
        total=a + b,
        difference=a - b,
        product=a * b,
        quotient=quotient,
        remainder=a - b * quotient,
    )


def factorial(n: int) -> int:
    """Return the product 1 * 2 * ... * n; 1 when n is below 2."""
    return math.prod(range(1, n + 1))


def count_up(n: int) -> list[int]:
    """Return the numbers from 1 to n inclusive."""
    return list(range(1, n + 1))


def sum_natural(n: int) -> int:
    """Return the sum of the natural numbers from 1 to n."""
    return sum(range(1, n + 1))


def sum_odd(n: int) -> int:
    """Return the sum of the odd numbers from 1 to n."""
    return sum(range(1, n + 1, 2))


def sum_even(n: int) -> int:
    """Return the sum of the even numbers from 1 to n."""
    return sum(range(2, n + 1, 2))


def sum_multiples_of_three(n: int) -> int:
    """Return the sum of the multiples of three from 1 to n."""
    return sum(range(3, n + 1, 3))


def is_prime(n: int) -> bool:
    """Tell whether n is prime, by trial division up to its square root."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def primes_up_to(limit: int) -> list[int]:
    """Return every prime from 2 to limit inclusive, in ascending order."""
    return [candidate for candidate in range(2, limit + 1) if is_prime(candidate)]