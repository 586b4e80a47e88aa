"""High-level API for balancetree.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the Tree and traverser classes for ease
of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .config import TraversalConfig, TraversalStrategy, parse_strategy
from .core.node import Node
from .core.traverser import create_traverser
from .core.tree import Tree
from .errors import InvalidArgumentError


def build_tree(keys: Iterable[Any]) -> Tree:
    """Build a balanced tree from an unsorted collection of keys.

    Example:
        >>> tree = build_tree([5, 3, 3, 8, 1])
        >>> list(tree)
        [1, 3, 5, 8]
    """
    return Tree(keys)


def traverse_tree(
    tree: Tree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Any], bool]] = None,
    **kwargs,
) -> Iterator[Any]:
    """Simple interface for key traversal.

    This is the primary high-level function for walking a tree. The
    configuration is validated before anything is visited, so a bad
    argument fails on the call itself rather than on the first ``next()``.

    Args:
        tree: Tree to walk
        strategy: Visiting order (pre, in, post, level or an alias)
        max_depth: Deepest level to visit (root = 0)
        min_depth: Shallowest level to yield
        include_filter: Predicate on keys; only matching keys are yielded
        **kwargs: Anything else is rejected as an unknown option

    Returns:
        Iterator over the selected keys

    Raises:
        InvalidArgumentError: If the configuration is invalid

    Example:
        >>> tree = build_tree(range(7))
        >>> list(traverse_tree(tree, strategy="level", max_depth=1))
        [3, 1, 5]
    """
    config = _build_config_from_kwargs(
        strategy=strategy,
        max_depth=max_depth,
        min_depth=min_depth,
        include_filter=include_filter,
        **kwargs,
    )
    return (key for key, _ in _execute(tree, config))


def collect_keys(tree: Tree, **kwargs) -> List[Any]:
    """Traverse a tree and return the keys as a list.

    Args:
        tree: Tree to walk
        **kwargs: Traversal options (see traverse_tree)
    """
    return list(traverse_tree(tree, **kwargs))


def count_nodes(tree: Tree, **kwargs) -> int:
    """Count keys in a tree that match the traversal criteria.

    Example:
        >>> count_nodes(build_tree(range(10)), max_depth=1)
        3
    """
    count = 0
    for _ in traverse_tree(tree, **kwargs):
        count += 1
    return count


def find_keys(tree: Tree, predicate: Callable[[Any], bool], **kwargs) -> Iterator[Any]:
    """Find keys that match a predicate.

    Args:
        tree: Tree to walk
        predicate: Function that returns True for matching keys
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Iterator over matching keys
    """
    kwargs['include_filter'] = predicate
    return traverse_tree(tree, **kwargs)


def get_leaf_keys(tree: Tree, **kwargs) -> Iterator[Any]:
    """Iterate over the keys of leaf nodes (nodes with no children).

    A node cut off by ``max_depth`` is not treated as a leaf unless it
    really has no children.
    """
    config = _build_config_from_kwargs(**kwargs)
    return (key for key, node in _execute(tree, config) if node.is_leaf())


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total/leaf/internal node counts, height, per-depth
        node counts and whether the tree is balanced

    Example:
        >>> stats = get_tree_stats(build_tree([1, 3, 5, 8]))
        >>> stats['height'], stats['leaf_nodes']
        (2, 2)
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': -1,
        'depths': {},
    }

    traverser = create_traverser(TraversalStrategy.LEVEL_ORDER.value)
    for node, depth in traverser.traverse(tree.root):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['is_balanced'] = tree.is_balanced()

    return stats


# Helper functions

def _execute(tree: Tree, config: TraversalConfig) -> Iterator[Tuple[Any, Node]]:
    """Validate config, then return a lazy walk of (key, node) pairs."""
    config.ensure_valid()

    traverser = create_traverser(config.strategy.value)
    return (
        (node.key, node) for node, _ in traverser.walk(tree.root, config.depth)
        if config.should_include(node.key)
    )


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments.

    Args:
        **kwargs: Configuration options (strategy, max_depth, min_depth,
            include_filter)

    Returns:
        TraversalConfig instance
    """
    config = TraversalConfig()

    if 'strategy' in kwargs:
        config.strategy = parse_strategy(kwargs.pop('strategy'))

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'include_filter' in kwargs:
        config.include_filter = kwargs.pop('include_filter')

    if kwargs:
        raise InvalidArgumentError(
            f"Unknown traversal options: {', '.join(sorted(kwargs))}"
        )

    return config
