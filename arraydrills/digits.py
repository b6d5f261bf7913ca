"""Digit manipulation and fast exponentiation."""

from __future__ import annotations

from collections.abc import Iterator


def _digits(n: int, base: int) -> Iterator[int]:
    """Yield the digits of a positive n in the given base, least significant first."""
    while n > 0:
        n, digit = divmod(n, base)
        yield digit


def decimal_to_binary(n: int) -> int:
    """Return an integer whose decimal digits spell n in binary; 0 if n <= 0."""
    return sum(bit * 10**position for position, bit in enumerate(_digits(n, 2)))


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of n as binary place values; 0 if n <= 0."""
    return sum(digit * 2**position for position, digit in enumerate(_digits(n, 10)))


def reverse_number(n: int) -> int:
    """Return n with its decimal digits reversed; 0 if n <= 0."""
    reversed_value = 0
    for digit in _digits(n, 10):
        reversed_value = reversed_value * 10 + digit
    return reversed_value


def power_steps(x: float, n: int) -> Iterator[tuple[float, int, float]]:
    """Trace binary exponentiation of x to the n-th power.

    Yields ``(base, remaining_exponent, result)`` for the initial state and
    after every squaring; the last result is x ** n. Trivial cases yield a
    single state.
    """
    if n == 0:
        yield x, 0, 1.0
        return
    if x == 0:
        yield x, 0, 0.0
        return
    if x == 1:
        yield x, 0, x
        return
    if x == -1:
        yield x, 0, 1.0 if n % 2 == 0 else -1.0
        return

    base = float(x)
    exponent = n
    if n < 0:
        base = 1 / base
        exponent = -exponent

    result = 1.0
    yield base, exponent, result
    while exponent > 0:
        if exponent % 2 == 1:
            result *= base
        base *= base
        exponent //= 2
        yield base, exponent, result


def power(x: float, n: int) -> float:
    """Return x raised to the integer power n by repeated squaring."""
    *_, (_, _, result) = power_steps(x, n)
    return result