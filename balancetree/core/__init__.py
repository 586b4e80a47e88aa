"""Core building blocks for balancetree.

This package holds the node type, the traversal strategies and the Tree
that ties them together.
"""

from .node import Node
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .tree import Tree

__all__ = [
    "Node",
    "TreeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "Tree",
]
