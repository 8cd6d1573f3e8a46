"""Pairs of words whose concatenation reads the same both ways."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def palindrome_pairs(words: Sequence[str]) -> list[tuple[int, int]]:
    """Return index pairs (i, j), i != j, where words[i] + words[j] is a palindrome.

    Uses a lookup of each word's position; with repeated words the last one wins.
    """
    index = {word: position for position, word in enumerate(words)}
    pairs: list[tuple[int, int]] = []

    def other(text: str, position: int) -> int | None:
        found = index.get(text)
        return found if found is not None and found != position else None

    for position, word in enumerate(words):
        reverse = word[::-1]
        match = other(reverse, position)
        if match is not None:
            pairs.append((position, match))
        length = len(reverse)
        for k in range(1, length + 1):
            if _is_palindrome(reverse[:k]):
                match = other(reverse[k:], position)
                if match is not None:
                    pairs.append((position, match))
            if _is_palindrome(word[:k]):
                match = other(reverse[:length - k], position)
                if match is not None:
                    pairs.append((match, position))
    return pairs


class _Node:
    __slots__ = ("children", "index")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.index: int | None = None


def _insert_reversed(root: _Node, word: str, position: int) -> None:
    node = root
    for ch in reversed(word):
        node = node.children.setdefault(ch, _Node())
    node.index = position


def _palindromic_tails(start: _Node) -> Iterator[int]:
    """Yield indices of words below ``start`` whose remaining path is a palindrome."""
    stack = [(child, ch) for ch, child in start.children.items()]
    while stack:
        node, path = stack.pop()
        if node.index is not None and _is_palindrome(path):
            yield node.index
        stack.extend((child, path + ch) for ch, child in node.children.items())


def _partners(root: _Node, word: str) -> set[int]:
    """Indices j such that word + words[j] is a palindrome (word is non-empty)."""
    found: set[int] = set()
    node = root
    for position, ch in enumerate(word[:-1]):
        node = node.children.get(ch)
        if node is None:
            return found
        if node.index is not None and _is_palindrome(word[position + 1:]):
            found.add(node.index)
    if node.index is not None:
        found.add(node.index)
    node = node.children.get(word[-1])
    if node is None:
        return found
    if node.index is not None:
        found.add(node.index)
    found.update(_palindromic_tails(node))
    return found


def palindrome_pairs_trie(words: Sequence[str]) -> list[tuple[int, int]]:
    """Same result set as :func:`palindrome_pairs`, found with a trie of reversed words."""
    root = _Node()
    empty: int | None = None
    for position, word in enumerate(words):
        _insert_reversed(root, word, position)
        if not word:
            empty = position

    pairs: list[tuple[int, int]] = []
    for position, word in enumerate(words):
        if not word:
            pairs.extend(
                (position, other)
                for other, text in enumerate(words)
                if other != position and _is_palindrome(text)
            )
            continue
        found = _partners(root, word)
        if empty is not None and _is_palindrome(word):
            found.add(empty)
        pairs.extend((position, other) for other in sorted(found) if other != position)
    return pairs