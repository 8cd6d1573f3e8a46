"""String puzzles: digit removal, anagram windows and letter counting."""

from __future__ import annotations

from collections import Counter


def _check_removal(num: str, k: int) -> None:
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")


def remove_k_digits(num: str, k: int) -> str:
    """Remove ``k`` digits from ``num`` to leave the smallest possible number."""
    _check_removal(num, k)
    if k >= len(num):
        return "0"
    kept: list[str] = []
    for digit in num:
        while k and kept and kept[-1] > digit:
            kept.pop()
            k -= 1
        kept.append(digit)
    result = "".join(kept).lstrip("0")
    if k >= len(result):
        return "0"
    return result[:len(result) - k]


def remove_k_digits_stack(num: str, k: int) -> str:
    """Same result as :func:`remove_k_digits`, removing the peak of the rising run each time."""
    _check_removal(num, k)
    digits: list[str | None] = list(num)
    rising: list[tuple[str, int]] = []

    def extend_run(start: int, last: str) -> None:
        for position in range(start, len(digits)):
            digit = digits[position]
            if digit is None:
                continue
            if digit < last:
                return
            last = digit
            rising.append((digit, position))

    extend_run(0, "0")
    remaining = k
    while rising and remaining > 0:
        remaining -= 1
        _, removed = rising.pop()
        digits[removed] = None
        for position, digit in enumerate(digits):
            if digit is not None and digit != "0":
                break
            digits[position] = None
        if remaining == 0:
            break
        extend_run(removed + 1, rising[-1][0] if rising else "0")

    return "".join(digit for digit in digits if digit is not None) or "0"


def find_anagrams(s: str, p: str) -> list[int]:
    """Return the start indices of the substrings of ``s`` that are anagrams of ``p``."""
    found: list[int] = []
    n, m = len(s), len(p)
    if n < m:
        return found
    wanted = Counter(p)
    window: Counter[str] = Counter()
    start = end = 0
    while end < n:
        while end < n and end - start + 1 <= m:
            ch = s[end]
            window[ch] += 1
            while start <= end and window[ch] > wanted[ch]:
                window[s[start]] -= 1
                start += 1
            if end - start + 1 == m and window == wanted:
                found.append(start)
            end += 1
        if start < n:
            window[s[start]] -= 1
            start += 1
    return found


def num_jewels_in_stones(jewels: str, stones: str) -> int:
    """Count the stones whose character is one of the jewel characters."""
    kinds = set(jewels)
    return sum(stone in kinds for stone in stones)


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether the note can be cut out of the magazine's letters."""
    if len(ransom_note) > len(magazine):
        return False
    return not Counter(ransom_note) - Counter(magazine)


def first_uniq_char(s: str) -> int:
    """Return the index of the first character occurring only once, or -1."""
    counts = Counter(s)
    return next((index for index, ch in enumerate(s) if counts[ch] == 1), -1)