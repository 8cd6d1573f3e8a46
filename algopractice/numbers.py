"""Bit tricks and counting puzzles over integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_WORD_BITS = 32
_COUNTED_BITS = 31


def find_complement(n: int) -> int:
    """Flip every bit of ``n`` up to and including its highest set bit."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return n ^ ((1 << n.bit_length()) - 1)


def reverse_bits(n: int) -> int:
    """Reverse the order of the 32 bits of an unsigned 32-bit value."""
    if not 0 <= n < 1 << _WORD_BITS:
        raise ValueError(f"n must fit in {_WORD_BITS} unsigned bits, got {n}")
    return int(format(n, f"0{_WORD_BITS}b")[::-1], 2)


def total_hamming_distance(nums: Sequence[int]) -> int:
    """Sum the Hamming distances of all pairs, over the low 31 bits."""
    total = 0
    for shift in range(_COUNTED_BITS - 1, -1, -1):
        ones = sum(1 for value in nums if value & (1 << shift))
        total += ones * (len(nums) - ones)
    return total


def total_hamming_distance_shift(nums: Iterable[int]) -> int:
    """Same as :func:`total_hamming_distance`, shifting the values right bit by bit."""
    values = list(nums)
    total = 0
    for _ in range(_COUNTED_BITS):
        ones = sum(value & 1 for value in values)
        total += ones * (len(values) - ones)
        values = [value >> 1 for value in values]
        if not any(values):
            break
    return total


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than half the time, by majority voting.

    The sequence is assumed to have such a value.
    """
    if not nums:
        raise ValueError("sequence is empty")
    candidate, count = nums[0], 1
    for value in nums[1:]:
        if value == candidate:
            count += 1
        else:
            count -= 1
            if count == 0:
                candidate, count = value, 1
    return candidate


def has_pair_with_sum(values: Iterable[int], k: int) -> bool:
    """Tell whether two different entries of ``values`` add up to ``k``."""
    seen: set[int] = set()
    for value in values:
        if k - value in seen:
            return True
        seen.add(value)
    return False