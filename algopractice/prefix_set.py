"""Prefix checks over word lists using a character trie."""

from __future__ import annotations

from collections.abc import Iterable


class _Node:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.terminal = False


def _insert_unless_prefixed(root: _Node, word: str) -> bool:
    node = root
    last = len(word) - 1
    for position, ch in enumerate(word):
        if node.terminal or (position == last and ch in node.children):
            return False
        node = node.children.setdefault(ch, _Node())
    node.terminal = True
    return True


def first_prefix_conflict(words: Iterable[str]) -> str | None:
    """Return the first word that is a prefix of, or prefixed by, an earlier word.

    Returns None when no such word exists (the set is "good").
    """
    root = _Node()
    for word in words:
        if not _insert_unless_prefixed(root, word):
            return word
    return None


def _add(root: _Node, word: str) -> None:
    node = root
    for ch in word:
        node = node.children.setdefault(ch, _Node())
    node.terminal = True


def _built_one_letter_at_a_time(root: _Node, word: str) -> bool:
    node = root
    for ch in word:
        node = node.children[ch]
        if not node.terminal:
            return False
    return True


def longest_word(words: Iterable[str]) -> str:
    """Return the longest word whose every prefix is also a word.

    Ties go to the lexicographically smallest word; "" if there is none.
    """
    words = list(words)
    root = _Node()
    for word in words:
        _add(root, word)
    best = ""
    for word in words:
        better = len(best) < len(word) or (len(best) == len(word) and best > word)
        if better and _built_one_letter_at_a_time(root, word):
            best = word
    return best