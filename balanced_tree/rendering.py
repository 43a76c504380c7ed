"""Human-readable renderings of tree shape.

Both renderers return strings and never print, leaving the decision of where
the output goes to the caller.  The glyphs are presentation details only.

``render_tree`` draws the sideways diagram used by the demonstration driver:
the right subtree above its parent, the left subtree below, indentation
reflecting depth::

    │       ┌── 7
    │   ┌── 6
    │   │   └── 5
    └── 4
        │   ┌── 3
        └── 2
            └── 1

``render_levels`` lists the tree level by level with ``·`` placeholders for
missing children.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional

from .bst import Node

__all__ = [
    "EMPTY_TREE",
    "render_levels",
    "render_tree",
]

EMPTY_TREE = "<empty>"

_BRANCH_UP = "┌── "
_BRANCH_DOWN = "└── "
_PIPE = "│   "
_GAP = "    "
_PLACEHOLDER = "·"


def _diagram_lines(node: Node[Any], prefix: str, is_left: bool) -> Iterator[str]:
    if node.right is not None:
        yield from _diagram_lines(node.right, prefix + (_PIPE if is_left else _GAP), False)
    yield f"{prefix}{_BRANCH_DOWN if is_left else _BRANCH_UP}{node.value}"
    if node.left is not None:
        yield from _diagram_lines(node.left, prefix + (_GAP if is_left else _PIPE), True)


def render_tree(root: Optional[Node[Any]]) -> str:
    """Render *root* as a sideways box-drawing diagram."""

    if root is None:
        return EMPTY_TREE
    return "\n".join(_diagram_lines(root, "", True))


def render_levels(root: Optional[Node[Any]]) -> str:
    """Render *root* level-by-level, marking missing nodes with ``·``.

    Each row spans every slot a complete tree would have at that depth, so
    a value's column shows where it hangs under its ancestors.  Rendering
    stops at the first row with no real nodes.
    """

    if root is None:
        return EMPTY_TREE

    lines: List[str] = []
    slots: List[Optional[Node[Any]]] = [root]
    while any(node is not None for node in slots):
        lines.append(" ".join(_PLACEHOLDER if node is None else str(node.value) for node in slots))
        slots = [
            child
            for node in slots
            for child in ((None, None) if node is None else (node.left, node.right))
        ]
    return "\n".join(lines)
