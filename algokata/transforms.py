"""Rearranging, filtering and summarising integer and character sequences."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate

PUSH = "Push"
POP = "Pop"


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Return the squares of a sorted sequence, in non-decreasing order."""
    descending: list[int] = []
    left, right = 0, len(nums) - 1
    while left <= right:
        if abs(nums[left]) > abs(nums[right]):
            descending.append(nums[left] * nums[left])
            left += 1
        else:
            descending.append(nums[right] * nums[right])
            right -= 1
    descending.reverse()
    return descending


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so its first k items are unique; return k."""
    if not nums:
        return 0
    k = 0
    for value in nums:
        if value != nums[k]:
            k += 1
            nums[k] = value
    return k + 1


def remove_element(nums: list[int], val: int) -> int:
    """Move every item equal to ``val`` past the returned count, in place."""
    size = len(nums)
    i = 0
    while i < size:
        if nums[i] == val:
            nums[i], nums[size - 1] = nums[size - 1], nums[i]
            size -= 1
        else:
            i += 1
    return size


def running_sum(nums: Sequence[int]) -> list[int]:
    """Return the prefix sums of ``nums``."""
    return list(accumulate(nums))


def get_concatenation(nums: Sequence[int]) -> list[int]:
    """Return ``nums`` followed by itself."""
    return [*nums, *nums]


def shuffle(nums: Sequence[int], n: int) -> list[int]:
    """Interleave the first ``n`` items with the rest: x1, y1, x2, y2, ...

    The result has the length of ``nums``; positions not filled by a pair are 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    result = [value for pair in zip(nums[:n], nums[n:]) for value in pair]
    result.extend([0] * (len(nums) - len(result)))
    return result


def smaller_numbers_than_current(nums: Sequence[int]) -> list[int]:
    """For each item, return how many items of ``nums`` are strictly smaller."""
    first_index: dict[int, int] = {}
    for index, value in enumerate(sorted(nums)):
        first_index.setdefault(value, index)
    return [first_index[value] for value in nums]


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of 1s."""
    best = run = 0
    for value in nums:
        run = run + 1 if value == 1 else 0
        best = max(best, run)
    return best


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as decimal digits, most significant first."""
    result = list(digits)
    for index in reversed(range(len(result))):
        if result[index] < 9:
            result[index] += 1
            return result
        result[index] = 0
    return [1, *result]


def build_array(target: Sequence[int], n: int) -> list[str]:
    """Return the Push/Pop operations over the stream 1..n that leave ``target`` on a stack."""
    if not target:
        return []
    operations: list[str] = []
    j = 0
    for i in range(1, n + 1):
        operations.append(PUSH)
        if i == target[j]:
            j += 1
            if j == len(target):
                break
        else:
            operations.append(POP)
    return operations


def reverse_string(chars: list[str]) -> None:
    """Reverse a list of characters in place."""
    left, right = 0, len(chars) - 1
    while left < right:
        chars[left], chars[right] = chars[right], chars[left]
        left += 1
        right -= 1