"""Contact book that counts stored names sharing a prefix."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _Node:
    count: int = 0
    children: dict[str, _Node] = field(default_factory=dict)


class Contacts:
    """Stores names and answers how many of them start with a prefix."""

    def __init__(self) -> None:
        self._root = _Node()

    def add(self, name: str) -> None:
        """Store a name; the same name may be stored more than once."""
        node = self._root
        node.count += 1
        for ch in name:
            node = node.children.setdefault(ch, _Node())
            node.count += 1

    def find(self, prefix: str) -> int:
        """Return how many stored names start with ``prefix``."""
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return 0
        return node.count