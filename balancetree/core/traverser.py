"""Traversal strategies for balancetree.

Traversers implement the different orders for walking a binary search
tree. They all yield ``(node, depth)`` pairs, with depth relative to the
node the walk started from, and they all work iteratively so that a
degenerate (list-shaped) tree cannot exhaust the recursion limit.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from ..config import DepthConfig
from ..errors import InvalidArgumentError
from .node import Node


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Each subclass defines one visiting order in ``walk``. The depth
    window comes from a DepthConfig: ``min_depth`` suppresses yielding
    shallow nodes, ``max_depth`` prunes everything below it.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse the subtree starting from root.

        Args:
            root: Starting node for traversal (None yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Returns:
            Iterator of (node, depth) tuples, depth relative to root
        """
        return self.walk(root, DepthConfig(min_depth=min_depth, max_depth=max_depth))

    @abstractmethod
    def walk(self, root: Optional[Node], depth: DepthConfig) -> Iterator[Tuple[Node, int]]:
        """Traverse the subtree under root within a depth window."""
        pass


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order: node, then left subtree, then right subtree.

    Good for copying a tree, since a parent is always seen before its
    children.
    """

    def walk(self, root: Optional[Node], depth: DepthConfig) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, level = stack.pop()

            if depth.should_yield(level):
                yield (node, level)

            # Right goes on the stack first so left is popped first
            if depth.should_explore(level):
                if node.right is not None:
                    stack.append((node.right, level + 1))
                if node.left is not None:
                    stack.append((node.left, level + 1))


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order: left subtree, node, right subtree.

    On a binary search tree this yields keys in ascending order.
    """

    def walk(self, root: Optional[Node], depth: DepthConfig) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = []
        current = root
        level = 0

        while stack or current is not None:
            # Slide down the left spine, remembering every node on the way
            while current is not None:
                stack.append((current, level))
                if not depth.should_explore(level):
                    current = None
                    break
                current = current.left
                level += 1

            node, level = stack.pop()
            if depth.should_yield(level):
                yield (node, level)

            if depth.should_explore(level):
                current = node.right
                level += 1


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order: left subtree, right subtree, node.

    A node is only yielded once its whole subtree has been yielded, which
    makes this the order for bottom-up aggregation (heights, sizes).
    """

    def walk(self, root: Optional[Node], depth: DepthConfig) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        # Entries are (node, level, children_done)
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]

        while stack:
            node, level, children_done = stack.pop()

            if children_done:
                if depth.should_yield(level):
                    yield (node, level)
                continue

            stack.append((node, level, True))
            if depth.should_explore(level):
                if node.right is not None:
                    stack.append((node.right, level + 1, False))
                if node.left is not None:
                    stack.append((node.left, level + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    Visits all nodes at depth N, left to right, before any node at depth
    N+1, using a FIFO queue seeded with the root.
    """

    def walk(self, root: Optional[Node], depth: DepthConfig) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, level = queue.popleft()

            if depth.should_yield(level):
                yield (node, level)

            if depth.should_explore(level):
                for child in node.children():
                    queue.append((child, level + 1))


# Factory function for creating traversers by name
def create_traverser(strategy: str) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal order (pre, in, post, level)

    Returns:
        TreeTraverser instance

    Raises:
        InvalidArgumentError: If strategy name is not recognized
    """
    strategies = {
        'pre': PreOrderTraverser,
        'in': InOrderTraverser,
        'post': PostOrderTraverser,
        'level': LevelOrderTraverser,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else None
    if strategy_lower not in strategies:
        raise InvalidArgumentError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
