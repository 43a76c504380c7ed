"""Binary search tree with explicit, on-demand rebalancing."""

from .bst import BalancedBST, DeleteStatus, Node, build_balanced
from .config import ConfigError, DemoConfig, load_demo_config
from .invariants import count_nodes, is_height_balanced, satisfies_bst_property
from .rendering import render_levels, render_tree

__all__ = [
    "BalancedBST",
    "ConfigError",
    "DeleteStatus",
    "DemoConfig",
    "Node",
    "build_balanced",
    "count_nodes",
    "is_height_balanced",
    "load_demo_config",
    "render_levels",
    "render_tree",
    "satisfies_bst_property",
]
