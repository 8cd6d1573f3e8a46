"""Binary tree nodes and the cousin relation between two values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def is_cousins(root: TreeNode | None, x: int, y: int) -> bool:
    """Tell whether the nodes valued ``x`` and ``y`` share a depth but not a parent.

    When a value occurs more than once, the last occurrence in pre-order counts.
    """
    found: dict[int, tuple[TreeNode | None, int]] = {}
    pending: list[tuple[TreeNode | None, TreeNode | None, int]] = [(root, None, 0)]
    while pending:
        node, parent, depth = pending.pop()
        if node is None:
            continue
        if node.val in (x, y):
            found[node.val] = (parent, depth)
        pending.append((node.right, node, depth + 1))
        pending.append((node.left, node, depth + 1))
    if x not in found or y not in found:
        return False
    parent_x, depth_x = found[x]
    parent_y, depth_y = found[y]
    return depth_x == depth_y and parent_x is not parent_y