"""Online check whether a character stream ends with one of a set of words."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class _Node:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.terminal = False


class StreamChecker:
    """Reports whether the letters received so far end with one of the words."""

    def __init__(self, words: Iterable[str]) -> None:
        self._root = _Node()
        longest = 0
        for word in words:
            node = self._root
            for ch in reversed(word):
                node = node.children.setdefault(ch, _Node())
            node.terminal = True
            longest = max(longest, len(word))
        # Letters older than the longest word can never affect an answer.
        self._stream: deque[str] = deque(maxlen=longest)

    def query(self, letter: str) -> bool:
        """Append ``letter`` and report whether the stream now ends with a word."""
        self._stream.append(letter)
        node = self._root
        for ch in reversed(self._stream):
            if node.terminal:
                return True
            node = node.children.get(ch)
            if node is None:
                return False
        return node.terminal