"""Stack-based puzzles: bracket prefixes, histograms, permutations and parsing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_PRECEDENCE = {operator: rank for rank, operator in enumerate("+-*/^")}


def longest_valid_prefix(expression: str) -> int:
    """Return the length of the longest prefix in which every '<' is closed.

    Any character other than '<' is read as a closing '>'.
    """
    depth = 0
    best = 0
    for length, ch in enumerate(expression, start=1):
        if ch == "<":
            depth += 1
        else:
            depth -= 1
            if depth < 0:
                break
        if depth == 0:
            best = length
    return best


def largest_rectangle(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle that fits under a histogram."""
    best = 0
    rising: list[tuple[int, int]] = []
    for position, height in enumerate(heights):
        best = max(best, height)
        if not rising or rising[-1][0] < height:
            rising.append((height, position))
            continue
        start = position
        while rising and rising[-1][0] > height:
            top, start = rising.pop()
            best = max(best, top * (position - start))
        if not rising or rising[-1][0] < height:
            rising.append((height, start))
    count = len(heights)
    for height, start in rising:
        best = max(best, height * (count - start))
    return best


def next_permutation_digits(digits: Sequence[int]) -> list[int] | None:
    """Return the next larger arrangement of ``digits``, or None if there is none."""
    values = list(digits)
    count = len(values)
    i = count - 1
    while i > 0 and values[i] <= values[i - 1]:
        i -= 1
    if i <= 0:
        return None
    pivot = values[i - 1]
    j = i
    while j < count and pivot < values[j]:
        j += 1
    values[i - 1], values[j - 1] = values[j - 1], values[i - 1]
    values[i:] = sorted(values[i:])
    return values


def max_xor_secondary(values: Iterable[int]) -> int:
    """Return the largest XOR of the maximum and second maximum over all subarrays.

    Sequences with fewer than two values give 0.
    """
    best = 0
    decreasing: list[int] = []
    for value in values:
        while decreasing:
            top = decreasing[-1]
            best = max(best, top ^ value)
            if value < top:
                break
            decreasing.pop()
        decreasing.append(value)
    return best


def to_reverse_polish(expression: str) -> str:
    """Convert an infix expression over + - * / ^ into reverse Polish notation.

    Operators bind in the order + - * / ^ from loosest to tightest and all
    associate to the left. Characters other than operators and parentheses
    are copied as operands.
    """
    output: list[str] = []
    pending: list[str] = []
    for ch in expression:
        if ch == "(":
            pending.append(ch)
        elif ch == ")":
            while pending and pending[-1] != "(":
                output.append(pending.pop())
            if pending:
                pending.pop()
        elif ch in _PRECEDENCE:
            rank = _PRECEDENCE[ch]
            while (
                pending
                and pending[-1] != "("
                and _PRECEDENCE[pending[-1]] >= rank
            ):
                output.append(pending.pop())
            pending.append(ch)
        else:
            output.append(ch)
    output.extend(reversed(pending))
    return "".join(output)


def can_reorder_trucks(order: Iterable[int]) -> bool:
    """Tell whether trucks arriving in ``order`` can leave as 1, 2, 3, ...

    A single side street works as a stack where trucks may wait.
    """
    expected = 1
    side: list[int] = []
    for truck in order:
        if truck == expected:
            expected += 1
            continue
        if not side:
            side.append(truck)
            continue
        while side and side[-1] == expected:
            side.pop()
            expected += 1
        if truck == expected:
            expected += 1
            continue
        if not side or truck < side[-1]:
            side.append(truck)
        else:
            return False
    while side:
        if side.pop() != expected:
            return False
        expected += 1
    return True