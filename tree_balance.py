"""Command line demonstration of building, unbalancing and rebalancing a BST.

The script builds a ``BalancedBST`` from a list of random integers, prints its
shape and traversals, pushes it out of balance by inserting a handful of large
values and finally rebalances it.  All tree logic lives in
``balanced_tree``; this module only orchestrates the demo and prints the
results.

Parameters come from an optional JSON/YAML configuration file (see
``balanced_tree.config``) and may be overridden on the command line::

    python tree_balance.py --size 12 --seed 3 --log-level DEBUG
"""

from __future__ import annotations

from dataclasses import replace
import argparse
import logging
import random
from typing import Iterable, Iterator, List, Optional, Sequence

from balanced_tree import (
    BalancedBST,
    ConfigError,
    DemoConfig,
    load_demo_config,
    render_tree,
)

logger = logging.getLogger(__name__)


def generate_values(config: DemoConfig) -> List[int]:
    """Return ``config.size`` random integers drawn from ``[0, max_value)``."""

    rng = random.Random(config.seed)
    return [rng.randrange(config.max_value) for _ in range(config.size)]


def _shape_report(tree: BalancedBST[int]) -> Iterator[str]:
    yield render_tree(tree.root)
    yield f"Is balanced {tree.is_balanced()}"
    yield f"Height {tree.height()}"


def _traversal_report(tree: BalancedBST[int]) -> Iterator[str]:
    yield f"Level-order {tree.level_order()}"
    yield f"Pre-order {tree.preorder()}"
    yield f"In-order {tree.inorder()}"
    yield f"Post-order {tree.postorder()}"


def run_demo(config: DemoConfig) -> List[str]:
    """Execute the demonstration flow and return the output lines."""

    values = generate_values(config)
    lines = [f"Values {values}"]

    tree = BalancedBST(values)
    lines.extend(_shape_report(tree))
    lines.extend(_traversal_report(tree))

    for value in config.unbalance_values:
        tree.insert(value)
    logger.info("Inserted %d values without rebalancing", len(config.unbalance_values))
    lines.append("")
    lines.extend(_shape_report(tree))

    tree.rebalance()
    lines.append("")
    lines.extend(_shape_report(tree))
    lines.extend(_traversal_report(tree))
    return lines


def _apply_overrides(config: DemoConfig, args: argparse.Namespace) -> DemoConfig:
    overrides = {
        name: getattr(args, name)
        for name in ("size", "max_value", "seed")
        if getattr(args, name) is not None
    }
    return replace(config, **overrides)


def _emit(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for the tree balancing demonstration."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a JSON or YAML demo configuration file.",
    )
    parser.add_argument("--size", type=int, default=None, help="Number of random values.")
    parser.add_argument(
        "--max-value",
        type=int,
        default=None,
        help="Random values are drawn from [0, MAX_VALUE).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        config = _apply_overrides(load_demo_config(args.config), args)
    except ConfigError as exc:
        logger.error("Invalid demo configuration: %s", exc)
        return 1

    _emit(run_demo(config))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
