"""Digit and bit puzzles on single integers."""

from __future__ import annotations

from math import prod

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the reversed value does not fit in a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not INT32_MIN <= result <= INT32_MAX:
        return 0
    return result


def is_palindrome_number(x: int) -> bool:
    """Return True if the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def trailing_zeroes(n: int) -> int:
    """Return the number of trailing zeros in ``n!``."""
    count = 0
    while n > 0:
        n //= 5
        count += n
    return count


def subtract_product_and_sum(n: int) -> int:
    """Return the product of the digits of ``n`` minus their sum."""
    digits = [int(d) for d in str(n)] if n > 0 else []
    return prod(digits) - sum(digits)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def count_odds(low: int, high: int) -> int:
    """Return how many odd numbers lie in ``low..high`` inclusive."""
    half = _trunc_div(high - low, 2)
    if low % 2 == 0 and high % 2 == 0:
        return half
    return half + 1


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def add_digits(num: int) -> int:
    """Return the digital root of a non-negative integer."""
    if num < 0:
        raise ValueError("num must not be negative")
    if num == 0:
        return 0
    return 9 if num % 9 == 0 else num % 9