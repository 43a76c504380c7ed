"""Structural validation helpers for :mod:`balanced_tree.bst`.

These checks are deliberately independent from ``BalancedBST`` so that tests
and callers can audit a tree without trusting its own bookkeeping:

* ``is_height_balanced`` – strict balance check applied at *every* node, in
  contrast to the root-only ``BalancedBST.is_balanced``.
* ``satisfies_bst_property`` – ordering check using inherited lower/upper
  bounds, which also rejects duplicate values.
* ``count_nodes`` – node count obtained by walking the structure.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from .bst import Node

__all__ = [
    "count_nodes",
    "is_height_balanced",
    "satisfies_bst_property",
]

BalanceResult = tuple[bool, int]


def _check_height(node: Optional[Node[Any]]) -> BalanceResult:
    """Return whether *node* is balanced at every level together with its height."""

    if node is None:
        return True, -1

    left_balanced, left_height = _check_height(node.left)
    if not left_balanced:
        return False, left_height + 1

    right_balanced, right_height = _check_height(node.right)
    if not right_balanced:
        return False, right_height + 1

    balanced = abs(left_height - right_height) <= 1
    return balanced, max(left_height, right_height) + 1


def is_height_balanced(root: Optional[Node[Any]]) -> bool:
    """Return ``True`` when every node's subtree heights differ by at most one."""

    balanced, _ = _check_height(root)
    return balanced


def satisfies_bst_property(root: Optional[Node[Any]]) -> bool:
    """Return ``True`` when every value lies strictly between its ancestors' bounds."""

    # Each entry carries the exclusive (lower, upper) bounds inherited from ancestors.
    stack: List[Tuple[Node[Any], Optional[Node[Any]], Optional[Node[Any]]]] = []
    if root is not None:
        stack.append((root, None, None))

    while stack:
        node, lower, upper = stack.pop()
        if lower is not None and not lower.value < node.value:
            return False
        if upper is not None and not node.value < upper.value:
            return False
        if node.left is not None:
            stack.append((node.left, lower, node))
        if node.right is not None:
            stack.append((node.right, node, upper))
    return True


def count_nodes(root: Optional[Node[Any]]) -> int:
    """Return the number of nodes reachable from *root*."""

    count = 0
    stack: List[Node[Any]] = [root] if root is not None else []
    while stack:
        node = stack.pop()
        count += 1
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return count
