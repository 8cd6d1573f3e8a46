"""Short counting and checking puzzles over strings and small arrays."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

_FIRST_HOUSE = 1
_LAST_HOUSE = 100
_RAINBOW_TOP = 7


def count_one_substrings(s: str) -> int:
    """Count the substrings of ``s`` that start and end with '1'."""
    ones = s.count("1")
    return ones * (ones + 1) // 2


def is_lapindrome(s: str) -> bool:
    """Tell whether both halves of ``s`` hold the same characters.

    For odd lengths the middle character is ignored.
    """
    half = len(s) // 2
    return Counter(s[:half]) == Counter(s[len(s) - half:])


def is_rainbow_array(values: Sequence[int]) -> bool:
    """Tell whether ``values`` is a palindrome of runs of 1, 2, ..., 7 rising to the middle."""
    i, j = 0, len(values) - 1
    step = 1
    while i <= j:
        matched = False
        while i <= j and values[i] == values[j] == step:
            i += 1
            j -= 1
            matched = True
        if not matched or step > _RAINBOW_TOP:
            return False
        step += 1
    return step == _RAINBOW_TOP + 1


def safe_houses(cop_houses: Iterable[int], speed: int, minutes: int) -> int:
    """Count houses 1..100 that no cop can reach running ``speed`` houses a minute."""
    cops = set(cop_houses)
    for house in cops:
        if not _FIRST_HOUSE <= house <= _LAST_HOUSE:
            raise ValueError(
                f"house numbers run from {_FIRST_HOUSE} to {_LAST_HOUSE}, got {house}"
            )
    reach = speed * minutes
    return sum(
        1
        for house in range(_FIRST_HOUSE, _LAST_HOUSE + 1)
        if all(abs(house - cop) > reach for cop in cops)
    )


def forgotten_words(
    words: Sequence[str], phrases: Iterable[Iterable[str]]
) -> list[bool]:
    """For each word, tell whether it appears in any of the phrases."""
    heard: set[str] = set()
    for phrase in phrases:
        heard.update(phrase)
    return [word in heard for word in words]


def minimum_moves(salaries: Sequence[int]) -> int:
    """Return the moves needed to equalise salaries, one move raising all but one by 1."""
    if not salaries:
        return 0
    return sum(salaries) - len(salaries) * min(salaries)