"""Maximum XOR of two numbers, found with binary tries."""

from __future__ import annotations

from collections.abc import Iterable

_WIDTH = 64
_MASK = (1 << _WIDTH) - 1
_HIGH_BIT_SHIFT = 30


class _BitNode:
    __slots__ = ("children", "count")

    def __init__(self) -> None:
        self.children: list[_BitNode | None] = [None, None]
        self.count = 0


def to_binary(value: int, bits: int = 64) -> str:
    """Return the lowest ``bits`` bits of ``value`` in two's complement."""
    if not 0 <= bits <= _WIDTH:
        raise ValueError(f"bits must be between 0 and {_WIDTH}, got {bits}")
    text = format(value & _MASK, f"0{_WIDTH}b")
    return text[_WIDTH - bits:]


def _to_signed(text: str) -> int:
    if not text:
        return 0
    value = int(text, 2) & _MASK
    return value - (1 << _WIDTH) if value >> (_WIDTH - 1) else value


def _insert_text(root: _BitNode, text: str) -> None:
    node = root
    for ch in text:
        node.count += 1
        bit = int(ch)
        child = node.children[bit]
        if child is None:
            child = node.children[bit] = _BitNode()
        node = child
    node.count += 1


def _best_partner(root: _BitNode, text: str) -> int:
    """Walk the trie preferring the opposite bit of ``text`` at each step."""
    node = root
    path: list[str] = []
    for ch in text:
        preferred = 1 if ch == "0" else 0
        for bit in (preferred, 1 - preferred):
            child = node.children[bit]
            if child is not None:
                node = child
                path.append(str(bit))
                break
        else:
            return _to_signed("".join(path))

    while node.count:
        zero, one = node.children
        if one is not None and (zero is None or one.count >= zero.count):
            node = one
            path.append("1")
        elif zero is not None:
            node = zero
            path.append("0")
        else:
            break
    return _to_signed("".join(path))


def max_xor_of_two(values: Iterable[int]) -> int:
    """Return the largest XOR of two of ``values``, or -1 if there are fewer than two."""
    root = _BitNode()
    best = -1
    for position, value in enumerate(values):
        text = to_binary(value)
        partner = _best_partner(root, text)
        if position:
            best = max(best, partner ^ value)
        _insert_text(root, text)
    return best


def _insert_int(root: _BitNode, value: int) -> None:
    node = root
    for shift in range(_HIGH_BIT_SHIFT, -1, -1):
        bit = 1 if value & (1 << shift) else 0
        child = node.children[bit]
        if child is None:
            child = node.children[bit] = _BitNode()
        node = child


def _xor_partner(root: _BitNode, value: int) -> int | None:
    node = root
    partner = 0
    for shift in range(_HIGH_BIT_SHIFT, -1, -1):
        mask = 1 << shift
        bit = 0 if value & mask else 1
        child = node.children[bit]
        if child is None:
            bit ^= 1
            child = node.children[bit]
            if child is None:
                return None
        node = child
        partner += mask * bit
    return partner


def find_maximum_xor(nums: Iterable[int]) -> int:
    """Return the largest XOR of two numbers below 2**31; 0 for fewer than two."""
    root = _BitNode()
    best = 0
    for value in nums:
        partner = _xor_partner(root, value)
        if partner is not None:
            best = max(best, value ^ partner)
        _insert_int(root, value)
    return best