"""Node element type for balancetree.

A Node is a small data container: one key and at most two child slots.
Children are owned exclusively by their parent, so the node graph is
always a strict tree. The public surface is read-only; only the Tree
that owns a node rewires its slots.
"""

from typing import Any, Iterator, Optional


class Node:
    """A single binary search tree node.

    Renderers and other read-only consumers may inspect ``key``, ``left``
    and ``right``. Structural changes go through :class:`~balancetree.Tree`
    operations, which write the private slots directly.
    """

    __slots__ = ("_key", "_left", "_right")

    def __init__(self, key: Any):
        self._key = key
        self._left: Optional["Node"] = None
        self._right: Optional["Node"] = None

    @property
    def key(self) -> Any:
        """The key stored at this node."""
        return self._key

    @property
    def left(self) -> Optional["Node"]:
        """Left child (every key in it is smaller), or None."""
        return self._left

    @property
    def right(self) -> Optional["Node"]:
        """Right child (every key in it is larger), or None."""
        return self._right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self._left is None and self._right is None

    def children(self) -> Iterator["Node"]:
        """Yield the present children, left before right."""
        if self._left is not None:
            yield self._left
        if self._right is not None:
            yield self._right

    def __str__(self) -> str:
        return str(self._key)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self._key!r})"
