"""Binary-search style lookups over sorted data and integers."""

from __future__ import annotations

from collections.abc import Callable, Sequence

# Smallest integer whose square no longer fits in a signed 32-bit value.
_SQRT_CEILING = 46341


def first_bad_version(n: int, is_bad: Callable[[int], bool]) -> int:
    """Return the first version in 1..n for which ``is_bad`` holds.

    Versions are assumed to turn bad at some point and stay bad. If none of
    them is bad, ``n + 1`` is returned.
    """
    low, high = 1, n
    while low <= high:
        mid = (low + high) // 2
        bad = is_bad(mid)
        if bad and mid == low:
            return mid
        if bad:
            high = mid
        else:
            low = mid + 1
    return low


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the one value of a sorted sequence that does not appear twice."""
    n = len(nums)
    if n == 0:
        raise ValueError("sequence is empty")
    if n == 1:
        return nums[0]

    low, high = 0, n - 1
    while low < high:
        mid = (low + high) // 2
        differs_left = mid == 0 or nums[mid - 1] != nums[mid]
        differs_right = mid == n - 1 or nums[mid + 1] != nums[mid]
        if differs_left and differs_right:
            return nums[mid]
        if nums[low + 1] != nums[low]:
            return nums[low]
        if mid % 2:
            if nums[mid] == nums[mid + 1]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] != nums[mid + 1]:
            high = mid - 2
        else:
            low = mid + 2
    return nums[low]


def is_perfect_square(num: int) -> bool:
    """Tell whether ``num`` is the square of a positive integer, by bisection.

    Zero and negative numbers are not counted as perfect squares.
    """
    if num <= 0:
        return False
    if num == 1:
        return True
    low, high = 1, _SQRT_CEILING
    while low < high:
        mid = low // 2 + high // 2
        square = mid * mid
        if square < num:
            low = mid + 1
        elif square > num:
            high = mid - 1
        else:
            return True
    return low * low == num


def is_perfect_square_newton(num: int) -> bool:
    """Tell whether ``num`` is the square of a positive integer, by Newton's method.

    Zero and negative numbers are not counted as perfect squares.
    """
    if num <= 0:
        return False
    if num == 1:
        return True
    root = min(num, _SQRT_CEILING)
    smallest_step = num
    while True:
        estimate = (root + num // root) // 2
        step = abs(estimate - root)
        if smallest_step <= step or smallest_step == 0:
            return root * root == num
        smallest_step = step
        root = estimate


def _median_of_joined(first: Sequence[int], second: Sequence[int]) -> float:
    """Median of ``first`` followed by ``second``, already in sorted order."""
    split = len(first)
    total = split + len(second)

    def at(position: int) -> int:
        return first[position] if position < split else second[position - split]

    middle = total // 2
    if total % 2:
        return float(at(middle))
    return (at(middle - 1) + at(middle)) / 2


def _median(a: Sequence[int], b: Sequence[int]) -> float:
    """Median of two sorted sequences where ``len(a) <= len(b)``."""
    n, m = len(a), len(b)
    if n == 0:
        return _median_of_joined(a, b)
    if a[-1] <= b[0]:
        return _median_of_joined(a, b)
    if a[0] >= b[-1]:
        return _median_of_joined(b, a)

    low, high = 0, n
    half = (n + m) // 2
    while low <= high:
        i = (low + high) // 2
        j = half - i

        balanced = True
        if i > 0:
            balanced = a[i - 1] <= b[j]
        if j > 0 and i < n:
            balanced = balanced and b[j - 1] <= a[i]

        if balanced:
            upper = min(a[i], b[j]) if i < n else b[j]
            if (n + m) % 2:
                return float(upper)
            lower = max(a[i - 1], b[j - 1]) if i > 0 else b[j - 1]
            return (lower + upper) / 2

        if i > 0 and a[i - 1] > b[j]:
            high = i
        else:
            low = i + 1
    return 0.0


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the values of two sorted sequences taken together."""
    if not nums1 and not nums2:
        raise ValueError("both sequences are empty")
    if len(nums1) <= len(nums2):
        return _median(nums1, nums2)
    return _median(nums2, nums1)