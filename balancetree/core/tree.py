"""Binary search tree balanced by reconstruction.

The Tree owns its root node and is the only thing that rewires node
slots. Insertions and deletions never rebalance; balance comes back only
when the caller asks for it with :meth:`Tree.rebalance`, which throws the
whole node graph away and rebuilds it from the sorted keys.

All mutations and walks are iterative. Building is the only recursive
step, and its depth is logarithmic in the number of keys.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Sequence, Union

from ..config import DepthConfig, TraversalConfig, TraversalStrategy, parse_strategy
from ..errors import InvalidVisitorError
from .node import Node
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)

Visitor = Callable[[Any], Any]


class Tree:
    """A set of unique, ordered keys stored as a binary search tree.

    Example:
        >>> tree = Tree([5, 3, 3, 8, 1])
        >>> tree.root.key
        5
        >>> list(tree)
        [1, 3, 5, 8]
        >>> tree.delete(5)
        True
        >>> list(tree)
        [1, 3, 8]
    """

    def __init__(self, keys: Iterable[Any] = ()):
        """Build a height-balanced tree from an arbitrary collection.

        Duplicates collapse to one key and order does not matter.

        Args:
            keys: Orderable keys to store
        """
        ordered = sorted(set(keys))
        self._root = self._build(ordered, 0, len(ordered))
        self._size = len(ordered)

    @property
    def root(self) -> Optional[Node]:
        """Root node, or None when the tree is empty."""
        return self._root

    def _build(self, keys: Sequence[Any], start: int, stop: int) -> Optional[Node]:
        """Build a balanced subtree from ``keys[start:stop]``.

        The element at the middle index (upper middle for even lengths)
        becomes the subtree root.
        """
        if start >= stop:
            return None

        mid = start + (stop - start) // 2
        node = Node(keys[mid])
        node._left = self._build(keys, start, mid)
        node._right = self._build(keys, mid + 1, stop)
        return node

    # Mutation

    def insert(self, key: Any) -> bool:
        """Insert a key as a new leaf.

        Args:
            key: Key to add

        Returns:
            True if a node was added, False if the key was already present
        """
        if self._root is None:
            self._root = Node(key)
            self._size += 1
            return True

        current = self._root
        while True:
            if key == current.key:
                return False
            if key < current.key:
                if current.left is None:
                    current._left = Node(key)
                    break
                current = current.left
            else:
                if current.right is None:
                    current._right = Node(key)
                    break
                current = current.right

        self._size += 1
        return True

    def delete(self, key: Any) -> bool:
        """Remove a key, splicing its node out of the tree.

        A node with two children takes over the key of its in-order
        successor, and the successor node (which has no left child) is
        spliced out instead.

        Args:
            key: Key to remove

        Returns:
            True if the key was removed, False if it was not present
        """
        parent: Optional[Node] = None
        node = self._root
        while node is not None and key != node.key:
            parent = node
            node = node.left if key < node.key else node.right

        if node is None:
            return False

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node._key = successor.key
            parent, node = successor_parent, successor

        # node now has at most one child
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent._left = child
        else:
            parent._right = child

        self._size -= 1
        return True

    def rebalance(self) -> None:
        """Rebuild the tree from its in-order keys so it is balanced again.

        Every existing Node is discarded; references held by callers no
        longer belong to this tree afterwards.
        """
        keys = [node.key for node, _ in InOrderTraverser().traverse(self._root)]
        self._root = self._build(keys, 0, len(keys))
        self._size = len(keys)

    # Search

    def find_node(self, key: Any) -> Optional[Node]:
        """Return the node holding key, or None."""
        current = self._root
        while current is not None:
            if key == current.key:
                return current
            current = current.left if key < current.key else current.right
        return None

    def find(self, key: Any) -> Optional[Any]:
        """Return the stored key equal to key, or None if it is absent."""
        node = self.find_node(key)
        return node.key if node is not None else None

    def min(self) -> Optional[Any]:
        """Smallest key, or None for an empty tree."""
        current = self._root
        if current is None:
            return None
        while current.left is not None:
            current = current.left
        return current.key

    def max(self) -> Optional[Any]:
        """Largest key, or None for an empty tree."""
        current = self._root
        if current is None:
            return None
        while current.right is not None:
            current = current.right
        return current.key

    # Balance queries

    def height(self, node: Optional[Node]) -> int:
        """Number of edges on the longest path from node down to a leaf.

        Args:
            node: Subtree root (pass ``tree.root`` for the whole tree)

        Returns:
            -1 for None, 0 for a leaf
        """
        if node is None:
            return -1
        return max(depth for _, depth in LevelOrderTraverser().traverse(node))

    def depth(self, node: Optional[Node]) -> int:
        """Number of edges from the root to the node holding ``node.key``.

        The search descends by key comparison, so any node carrying a key
        stored in this tree resolves to that key's position.

        Returns:
            Depth of the node (root = 0), or -1 if node is None or its key
            is not in the tree
        """
        if node is None:
            return -1

        key = node.key
        current = self._root
        depth = 0
        while current is not None:
            if key == current.key:
                return depth
            current = current.left if key < current.key else current.right
            depth += 1
        return -1

    def is_balanced(self) -> bool:
        """Check that every node's child subtrees differ in height by at most 1."""
        return self._checked_height(self._root) is not None

    def _checked_height(self, root: Optional[Node]) -> Optional[int]:
        """Height of root's subtree, or None as soon as any node is unbalanced.

        Heights are computed bottom-up in one post-order pass, so each
        subtree is measured exactly once.
        """
        # Keyed by id(node); a child's entry is dropped once its parent is done.
        # Absent children are never stored and read back as -1.
        heights: Dict[int, int] = {}
        for node, _ in PostOrderTraverser().traverse(root):
            left = heights.pop(id(node.left), -1)
            right = heights.pop(id(node.right), -1)
            if abs(left - right) > 1:
                return None
            heights[id(node)] = 1 + max(left, right)
        return heights.get(id(root), -1)

    # Traversals

    def pre_order(self, visitor: Visitor) -> None:
        """Call visitor with each key: node, then left, then right."""
        self._visit(PreOrderTraverser(), visitor)

    def in_order(self, visitor: Visitor) -> None:
        """Call visitor with each key in ascending order."""
        self._visit(InOrderTraverser(), visitor)

    def post_order(self, visitor: Visitor) -> None:
        """Call visitor with each key: left, then right, then node."""
        self._visit(PostOrderTraverser(), visitor)

    def level_order(self, visitor: Visitor) -> None:
        """Call visitor with each key breadth-first, left to right per level."""
        self._visit(LevelOrderTraverser(), visitor)

    def _visit(self, traverser: TreeTraverser, visitor: Visitor) -> None:
        # Checked before the first node is touched
        if not callable(visitor):
            raise InvalidVisitorError(visitor)

        for node, _ in traverser.traverse(self._root):
            visitor(node.key)

    def traverse(self,
                 strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Any]:
        """Lazily yield keys in the requested order.

        The strategy and depth window are checked immediately, so a bad
        argument fails here rather than on the first ``next()``.

        Args:
            strategy: TraversalStrategy or a name ("pre", "in", "post",
                "level" or an alias such as "preorder" or "bfs")
            max_depth: Deepest level to visit (None = unlimited)
            min_depth: Shallowest level to yield

        Returns:
            Single-pass iterator over keys

        Raises:
            InvalidArgumentError: If the strategy or depth window is invalid
        """
        config = TraversalConfig(
            strategy=parse_strategy(strategy),
            depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        ).ensure_valid()
        traverser = create_traverser(config.strategy.value)
        return (node.key for node, _ in traverser.walk(self._root, config.depth))

    # Container protocol

    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self.traverse(TraversalStrategy.IN_ORDER)

    def __contains__(self, key: Any) -> bool:
        return self.find_node(key) is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"
