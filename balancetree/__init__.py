"""balancetree - Binary search tree balanced by reconstruction.

balancetree stores a set of unique, ordered keys in a binary search tree.
Insertions and deletions never rebalance; call ``Tree.rebalance()`` to
rebuild a height-balanced tree from the current keys.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from balancetree import Tree

    tree = Tree([5, 3, 3, 8, 1])
    tree.insert(9)
    tree.in_order(print)
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core import (
    Node,
    Tree,
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .config import TraversalConfig, TraversalStrategy, DepthConfig, parse_strategy
from .errors import InvalidArgumentError, InvalidVisitorError
from .api import (
    build_tree,
    traverse_tree,
    collect_keys,
    count_nodes,
    find_keys,
    get_leaf_keys,
    get_tree_stats,
)
from .display import format_tree, pretty_print

__all__ = [
    "__version__",
    # Core
    "Node",
    "Tree",
    "TreeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "DepthConfig",
    "parse_strategy",
    # Errors
    "InvalidArgumentError",
    "InvalidVisitorError",
    # API
    "build_tree",
    "traverse_tree",
    "collect_keys",
    "count_nodes",
    "find_keys",
    "get_leaf_keys",
    "get_tree_stats",
    # Display
    "format_tree",
    "pretty_print",
]
