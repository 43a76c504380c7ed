from __future__ import annotations

from balanced_tree.bst import BalancedBST, Node
from balanced_tree.rendering import EMPTY_TREE, render_levels, render_tree


def test_render_tree_draws_right_above_left_below() -> None:
    tree = BalancedBST(range(1, 8))
    expected = "\n".join(
        [
            "│       ┌── 7",
            "│   ┌── 6",
            "│   │   └── 5",
            "└── 4",
            "    │   ┌── 3",
            "    └── 2",
            "        └── 1",
        ]
    )
    assert render_tree(tree.root) == expected


def test_render_tree_single_node() -> None:
    assert render_tree(Node(42)) == "└── 42"


def test_render_tree_empty_tree() -> None:
    assert render_tree(None) == EMPTY_TREE == "<empty>"


def test_render_tree_right_spine() -> None:
    root = Node(1, None, Node(2, None, Node(3)))
    assert render_tree(root).splitlines() == [
        "│       ┌── 3",
        "│   ┌── 2",
        "└── 1",
    ]


def test_render_levels_marks_missing_children() -> None:
    tree = BalancedBST(range(1, 8))
    tree.insert(8)
    assert render_levels(tree.root).splitlines() == [
        "4",
        "2 6",
        "1 3 5 7",
        "· · · · · · · 8",
    ]


def test_render_levels_trims_placeholder_only_levels() -> None:
    assert render_levels(Node(2, Node(1), Node(3))) == "2\n1 3"


def test_render_levels_empty_tree() -> None:
    assert render_levels(None) == "<empty>"
