"""Best contiguous subarrays: largest sum, largest product, circular sum."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def _require_values(nums: Sequence[int]) -> None:
    if not nums:
        raise ValueError("sequence is empty")


def _kadane(nums: Sequence[int]) -> int:
    best = ending_here = nums[0]
    for value in nums[1:]:
        ending_here = max(value, ending_here + value)
        best = max(best, ending_here)
    return best


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    _require_values(nums)
    return _kadane(nums)


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous subarray."""
    _require_values(nums)
    best = highest = lowest = nums[0]
    for value in nums[1:]:
        candidates = (value, value * highest, value * lowest)
        lowest, highest = min(candidates), max(candidates)
        best = max(best, highest)
    return best


def max_subarray_sum_circular(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty subarray of the list seen as a ring.

    Wrapping subarrays are formed from the best prefix and the best suffix
    with at least one element left out between them.
    """
    _require_values(nums)
    if len(nums) == 1:
        return nums[0]
    best = _kadane(nums)
    prefix_best = list(accumulate(accumulate(nums), max))
    suffix_best = list(accumulate(accumulate(reversed(nums)), max))[::-1]
    wrapped = (head + tail for head, tail in zip(prefix_best, suffix_best[2:]))
    return max(best, max(wrapped, default=best))


def max_subarray_sum_circular_minmax(nums: Sequence[int]) -> int:
    """Same as :func:`max_subarray_sum_circular`, as total minus the smallest inner run."""
    _require_values(nums)
    if len(nums) == 1:
        return nums[0]
    best = _kadane(nums)
    inner = nums[1:max(len(nums) - 1, 2)]
    smallest = ending_here = inner[0]
    for value in inner[1:]:
        ending_here = min(value, value + ending_here)
        smallest = min(smallest, ending_here)
    return max(best, sum(nums) - smallest)