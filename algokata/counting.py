"""Finding odd-one-out, missing and repeated values in integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from functools import reduce
from operator import xor


def single_number(nums: Sequence[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def single_number_ii(nums: Sequence[int]) -> int:
    """Return the value that appears once when every other value appears three times."""
    if not nums:
        raise ValueError("nums must not be empty")
    values = sorted(nums)
    for first, second in zip(values[::3], values[1::3]):
        if first != second:
            return first
    return values[-1]


def cyclic_sort(values: list[int]) -> None:
    """Place each value ``v`` with ``0 <= v < len(values)`` at index ``v``, in place."""
    size = len(values)
    i = 0
    while i < size:
        target = values[i]
        if 0 <= target < size and target != i and values[target] != target:
            values[i], values[target] = values[target], values[i]
        else:
            i += 1


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of ``0..len(nums)`` absent from ``nums``."""
    values = list(nums)
    cyclic_sort(values)
    for index, value in enumerate(values):
        if value != index:
            return index
    return len(values)


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Return, in ascending order, the numbers of ``1..len(nums)`` absent from ``nums``."""
    values = list(nums)
    size = len(values)
    for value in values:
        if not 1 <= value <= size:
            raise ValueError(f"value {value} is outside 1..{size}")
    i = 0
    while i < size:
        correct = values[i] - 1
        if values[i] != values[correct]:
            values[i], values[correct] = values[correct], values[i]
        else:
            i += 1
    return [index + 1 for index, value in enumerate(values) if value != index + 1]


def find_error_nums(nums: Sequence[int]) -> tuple[int, int]:
    """Return ``(duplicate, missing)`` for ``1..len(nums)``; -1 marks a value not found."""
    counts = Counter(nums)
    duplicate = missing = -1
    for number in range(1, len(nums) + 1):
        if counts[number] == 2:
            duplicate = number
        if counts[number] == 0:
            missing = number
    return duplicate, missing