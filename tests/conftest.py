"""Shared pytest configuration for the balancetree test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from balancetree import Tree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large-tree tests excluded from quick runs")


@pytest.fixture
def seven_tree():
    """Perfect tree over 1..7.

    Structure:
              4
            /   \\
           2     6
          / \\   / \\
         1   3 5   7
    """
    return Tree(range(1, 8))


@pytest.fixture
def scenario_tree():
    """Tree([5, 3, 3, 8, 1]): root 5, left 3 -> 1, right 8."""
    return Tree([5, 3, 3, 8, 1])
