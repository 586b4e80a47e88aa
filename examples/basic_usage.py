#!/usr/bin/env python3
"""
Walkthrough of balancetree on random keys.

This example demonstrates:
- Building a balanced tree from unsorted keys with duplicates
- The four traversal orders
- Losing balance through insertions and restoring it with rebalance()
"""

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from balancetree import Tree, pretty_print


def generate_random_numbers(size: int, maximum: int = 100,
                            rng: Optional[random.Random] = None) -> List[int]:
    """Return size random integers in [0, maximum)."""
    rng = rng or random.Random()
    return [rng.randrange(maximum) for _ in range(size)]


def show_traversals(tree: Tree) -> None:
    """Print every key of the tree in each traversal order."""
    for label, traversal in (
        ("Level order", tree.level_order),
        ("Preorder", tree.pre_order),
        ("Inorder", tree.in_order),
        ("Postorder", tree.post_order),
    ):
        print(f"{label}:")
        traversal(print)


def main() -> int:
    parser = argparse.ArgumentParser(description="balancetree walkthrough")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible keys")
    args = parser.parse_args()

    rng = random.Random(args.seed)

    random_numbers = generate_random_numbers(15, rng=rng)
    print("Random numbers:", random_numbers)

    tree = Tree(random_numbers)

    print("Is the tree balanced:")
    print(tree.is_balanced())
    print("======")
    pretty_print(tree.root)

    show_traversals(tree)
    print("=====")

    print("New numbers:")
    more_numbers = generate_random_numbers(6, maximum=1000, rng=rng)
    print(more_numbers)
    print("=====")

    for number in more_numbers:
        tree.insert(number)

    print("Is the tree still balanced:")
    print(tree.is_balanced())
    print("======")
    pretty_print(tree.root)

    tree.rebalance()
    print("Is the tree rebalanced:")
    print(tree.is_balanced())
    print("======")
    pretty_print(tree.root)
    print("=====")

    show_traversals(tree)
    print("=====")
    return 0


if __name__ == "__main__":
    sys.exit(main())
