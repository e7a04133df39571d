"""Pair, triple and duplicate searches over integer sequences."""

from __future__ import annotations

from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the indices of the first pair summing to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        remaining = target - value
        if remaining in seen:
            return seen[remaining], index
        seen[value] = index
    return None


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return 1-based indices of a pair summing to ``target`` in a sorted sequence, or None."""
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total > target:
            right -= 1
        elif total < target:
            left += 1
        else:
            return left + 1, right + 1
    return None


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triple of values summing to zero, each in ascending order."""
    values = sorted(nums)
    result: list[list[int]] = []
    count = len(values)
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        target = -first
        left, right = i + 1, count - 1
        while left < right:
            total = values[left] + values[right]
            if total == target:
                result.append([first, values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total > target:
                right -= 1
            else:
                left += 1
    return result


def max_area(height: Sequence[int]) -> int:
    """Return the largest amount of water held between two of the given walls."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Return True if two equal values sit at most ``k`` positions apart."""
    last_index: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_index and abs(last_index[value] - index) <= k:
            return True
        last_index[value] = index
    return False