"""Configuration system for balancetree.

This module defines how callers describe a traversal: which order to
visit keys in, which depths to report, and which keys to keep.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Union

from .errors import InvalidArgumentError


class TraversalStrategy(Enum):
    """Order in which a traversal visits keys."""
    PRE_ORDER = "pre"       # Node, left, right
    IN_ORDER = "in"         # Left, node, right (ascending keys)
    POST_ORDER = "post"     # Left, right, node
    LEVEL_ORDER = "level"   # Breadth-first, left to right


# Accepted spellings for each strategy
_STRATEGY_ALIASES = {
    'pre': TraversalStrategy.PRE_ORDER,
    'preorder': TraversalStrategy.PRE_ORDER,
    'pre_order': TraversalStrategy.PRE_ORDER,
    'dfs_pre': TraversalStrategy.PRE_ORDER,
    'in': TraversalStrategy.IN_ORDER,
    'inorder': TraversalStrategy.IN_ORDER,
    'in_order': TraversalStrategy.IN_ORDER,
    'sorted': TraversalStrategy.IN_ORDER,
    'post': TraversalStrategy.POST_ORDER,
    'postorder': TraversalStrategy.POST_ORDER,
    'post_order': TraversalStrategy.POST_ORDER,
    'dfs_post': TraversalStrategy.POST_ORDER,
    'level': TraversalStrategy.LEVEL_ORDER,
    'level_order': TraversalStrategy.LEVEL_ORDER,
    'levelorder': TraversalStrategy.LEVEL_ORDER,
    'bfs': TraversalStrategy.LEVEL_ORDER,
    'breadth_first': TraversalStrategy.LEVEL_ORDER,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string (case-insensitive alias)

    Returns:
        TraversalStrategy enum value

    Raises:
        InvalidArgumentError: If the name is not a known strategy
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else None
    if strategy_lower in _STRATEGY_ALIASES:
        return _STRATEGY_ALIASES[strategy_lower]

    raise InvalidArgumentError(f"Unknown traversal strategy: {strategy}")


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a meaningful depth
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                # Minimum depth to yield
    max_depth: Optional[int] = None   # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded.

        Args:
            depth: Current depth (root = 0)

        Returns:
            True if depth is within configured range
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at this depth should be explored.

        Args:
            depth: Current depth (root = 0)

        Returns:
            True if we should go deeper
        """
        if self.max_depth is not None:
            return depth < self.max_depth
        return True  # No limit

    def validate(self) -> List[str]:
        """Validate the depth window.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        min_ok = _is_int(self.min_depth)
        max_ok = self.max_depth is None or _is_int(self.max_depth)
        if not min_ok:
            errors.append(f"min_depth must be an int, got {self.min_depth!r}")
        if not max_ok:
            errors.append(f"max_depth must be an int or None, got {self.max_depth!r}")
        if not (min_ok and max_ok):
            return errors

        if self.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.max_depth is not None:
            if self.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.max_depth < self.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        return errors


@dataclass
class TraversalConfig:
    """Complete configuration for a key traversal.

    This is the primary way callers describe a walk over a tree.
    ``ensure_valid()`` is run before any node is visited.
    """

    # Visiting order
    strategy: TraversalStrategy = TraversalStrategy.IN_ORDER

    # Depth control
    depth: DepthConfig = field(default_factory=DepthConfig)

    # Key filtering
    include_filter: Optional[Callable[[Any], bool]] = None

    def should_include(self, key: Any) -> bool:
        """Check if a key passes the include filter."""
        if self.include_filter is None:
            return True
        return bool(self.include_filter(key))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        errors.extend(self.depth.validate())

        if self.include_filter is not None and not callable(self.include_filter):
            errors.append("include_filter must be callable")

        return errors

    def ensure_valid(self) -> 'TraversalConfig':
        """Raise if the configuration is invalid, else return it.

        Raises:
            InvalidArgumentError: Listing every validation error
        """
        config_errors = self.validate()
        if config_errors:
            raise InvalidArgumentError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )
        return self
