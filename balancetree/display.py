"""Text rendering of a tree's shape.

The tree is drawn sideways: the right subtree sits above its parent and
the left subtree below, so tilting your head to the left shows the tree
with the root at the top.
"""

import sys
from typing import List, Optional, TextIO

from .core.node import Node


def format_tree(root: Optional[Node]) -> List[str]:
    """Render the subtree under root as a list of lines.

    Args:
        root: Subtree root (``tree.root`` for the whole tree)

    Returns:
        One line per node, empty for an empty tree

    Example:
        >>> from balancetree import Tree
        >>> print("\\n".join(format_tree(Tree([1, 2, 3]).root)))
        │   ┌── 3
        └── 2
            └── 1
    """
    lines: List[str] = []
    # Explicit stack of (node, prefix, is_left, expanded)
    stack = [(root, "", True, False)] if root is not None else []

    while stack:
        node, prefix, is_left, expanded = stack.pop()

        if expanded:
            lines.append(f"{prefix}{'└── ' if is_left else '┌── '}{node.key}")
            continue

        # Pushed in reverse of output order: right, self, left
        if node.left is not None:
            stack.append((node.left, prefix + ("    " if is_left else "│   "), True, False))
        stack.append((node, prefix, is_left, True))
        if node.right is not None:
            stack.append((node.right, prefix + ("│   " if is_left else "    "), False, False))

    return lines


def pretty_print(root: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Print the subtree under root (see format_tree).

    Args:
        root: Subtree root
        file: Output stream (default sys.stdout)
    """
    out = file if file is not None else sys.stdout
    for line in format_tree(root):
        print(line, file=out)
