"""Puzzles over small graphs, pixel grids and point sets."""

from __future__ import annotations

from collections.abc import Sequence
from math import gcd


def _trust_balance(n: int, trust: Sequence[Sequence[int]]) -> list[int]:
    balance = [0] * (n + 1)
    for truster, trusted in trust:
        balance[trusted] += 1
        balance[truster] -= 1
    return balance


def find_judge(n: int, trust: Sequence[Sequence[int]]) -> int:
    """Return the person 1..n trusted by all others and trusting nobody, or -1.

    ``trust`` holds pairs ``(a, b)`` meaning that ``a`` trusts ``b``.
    """
    balance = _trust_balance(n, trust)
    judge = -1
    for person in range(1, n + 1):
        if balance[person] == n - 1:
            judge = person
    return judge


def find_judge_xor(n: int, trust: Sequence[Sequence[int]]) -> int:
    """Same as :func:`find_judge`, tracking the candidate while reading the pairs."""
    balance = [0] * (n + 1)
    judge = 0
    for truster, trusted in trust:
        balance[trusted] += 1
        balance[truster] -= 1
        if balance[trusted] == n - 1:
            judge ^= trusted
        if balance[truster] == n - 2:
            judge ^= truster
    if judge == 0:
        judge = -1
    if n == 1:
        judge = 1
    return judge


def flood_fill(
    image: list[list[int]], sr: int, sc: int, new_color: int
) -> list[list[int]]:
    """Recolour the 4-connected region around ``(sr, sc)`` in place and return ``image``."""
    original = image[sr][sc]
    if original == new_color:
        return image
    pending = [(sr, sc)]
    while pending:
        row, col = pending.pop()
        if not (0 <= row < len(image) and 0 <= col < len(image[row])):
            continue
        if image[row][col] != original:
            continue
        image[row][col] = new_color
        pending.extend(
            ((row - 1, col), (row, col - 1), (row, col + 1), (row + 1, col))
        )
    return image


def _require_two_points(coordinates: Sequence[Sequence[int]]) -> None:
    if len(coordinates) < 2:
        raise ValueError("at least two points are needed")


def check_straight_line(coordinates: Sequence[Sequence[int]]) -> bool:
    """Tell whether all points lie on the line through the first two."""
    _require_two_points(coordinates)
    (x0, y0), (x1, y1) = coordinates[0], coordinates[1]
    dx, dy = x1 - x0, y1 - y0
    return all(dy * (x - x0) == dx * (y - y0) for x, y in coordinates[2:])


def _reduce(slope: tuple[int, int]) -> tuple[int, int]:
    dx, dy = slope
    if dx == 0 or dy == 0:
        return slope
    divisor = gcd(dx, dy)
    if dy < 0:
        return -dx // divisor, -dy // divisor
    return dx // divisor, dy // divisor


def _same_slope(first: tuple[int, int], second: tuple[int, int]) -> bool:
    if (first[0] == 0 and second[0] == 0) or (first[1] == 0 and second[1] == 0):
        return True
    return first == _reduce(second)


def check_straight_line_reduced(coordinates: Sequence[Sequence[int]]) -> bool:
    """Same as :func:`check_straight_line`, comparing slopes in lowest terms."""
    _require_two_points(coordinates)
    x0, y0 = coordinates[0]
    x1, y1 = coordinates[1]
    slope = _reduce((x1 - x0, y1 - y0))
    return all(_same_slope(slope, (x - x0, y - y0)) for x, y in coordinates[2:])