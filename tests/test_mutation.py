"""Tests for insertion and deletion.

Neither operation rebalances; shapes below are exact.
"""

import pytest

from balancetree import Tree


def _pre_order(tree):
    keys = []
    tree.pre_order(keys.append)
    return keys


class TestInsert:
    """Insertion attaches a new leaf or leaves the tree alone."""

    def test_insert_into_empty_tree_sets_root(self):
        tree = Tree()
        assert tree.insert(10) is True
        assert tree.root.key == 10
        assert len(tree) == 1

    def test_insert_attaches_leaf(self, seven_tree):
        assert seven_tree.insert(8) is True
        assert seven_tree.root.right.right.right.key == 8
        assert list(seven_tree) == [1, 2, 3, 4, 5, 6, 7, 8]
        assert len(seven_tree) == 8

    def test_insert_left_side(self, scenario_tree):
        scenario_tree.insert(2)
        # 2 goes left of 5, left of 3, right of 1
        assert scenario_tree.root.left.left.right.key == 2
        assert scenario_tree.find(2) == 2

    def test_duplicate_is_noop(self, seven_tree):
        """Equal key leaves shape and size unchanged."""
        before = _pre_order(seven_tree)
        for key in range(1, 8):
            assert seven_tree.insert(key) is False
        assert _pre_order(seven_tree) == before
        assert len(seven_tree) == 7

    def test_duplicate_detected_by_key_equality(self):
        """1.0 == 1, so it counts as already present."""
        tree = Tree([1, 2, 3])
        assert tree.insert(1.0) is False
        assert len(tree) == 3

    def test_insertions_do_not_rebalance(self):
        tree = Tree([1, 2, 3])
        tree.insert(4)
        tree.insert(5)
        assert tree.root.key == 2
        assert tree.is_balanced() is False
        assert list(tree) == [1, 2, 3, 4, 5]


class TestDelete:
    """Deletion by structural case."""

    def test_missing_key_is_noop(self, seven_tree):
        before = _pre_order(seven_tree)
        assert seven_tree.delete(42) is False
        assert _pre_order(seven_tree) == before
        assert len(seven_tree) == 7

    def test_delete_from_empty_tree(self):
        tree = Tree()
        assert tree.delete(1) is False
        assert tree.root is None

    def test_delete_leaf(self, seven_tree):
        assert seven_tree.delete(1) is True
        assert seven_tree.root.left.left is None
        assert list(seven_tree) == [2, 3, 4, 5, 6, 7]
        assert seven_tree.find(1) is None
        assert len(seven_tree) == 6

    def test_delete_node_with_one_child(self, seven_tree):
        seven_tree.delete(1)
        # 2 now only has its right child 3, which takes its place
        assert seven_tree.delete(2) is True
        assert seven_tree.root.left.key == 3
        assert list(seven_tree) == [3, 4, 5, 6, 7]

    def test_delete_node_with_two_children(self, seven_tree):
        """Root takes its successor's key; the successor leaf goes away."""
        assert seven_tree.delete(4) is True
        assert seven_tree.root.key == 5
        assert seven_tree.root.right.key == 6
        assert seven_tree.root.right.left is None
        assert list(seven_tree) == [1, 2, 3, 5, 6, 7]

    def test_delete_scenario_root(self, scenario_tree):
        """Deleting 5 from [1, 3, 5, 8] promotes 8."""
        assert scenario_tree.delete(5) is True
        assert scenario_tree.root.key == 8
        assert scenario_tree.root.right is None
        assert scenario_tree.root.left.key == 3
        assert list(scenario_tree) == [1, 3, 8]

    def test_successor_with_right_child(self):
        """Successor's right subtree is reattached to the successor's parent."""
        tree = Tree([10, 5, 20])
        tree.insert(15)
        tree.insert(17)
        # 20 -> left 15 -> right 17; successor of 10 is 15
        assert tree.delete(10) is True
        assert tree.root.key == 15
        assert tree.root.right.key == 20
        assert tree.root.right.left.key == 17
        assert list(tree) == [5, 15, 17, 20]

    def test_delete_root_with_single_left_child(self):
        tree = Tree([1, 2])
        assert tree.delete(2) is True
        assert tree.root.key == 1
        assert tree.root.is_leaf()

    def test_delete_last_key_empties_tree(self):
        tree = Tree([7])
        assert tree.delete(7) is True
        assert tree.root is None
        assert len(tree) == 0
        assert tree.is_empty()

    @pytest.mark.parametrize("key", [1, 2, 3, 4, 5, 6, 7])
    def test_delete_every_key(self, seven_tree, key):
        seven_tree.delete(key)
        remaining = [k for k in range(1, 8) if k != key]
        assert list(seven_tree) == remaining
        assert key not in seven_tree
        assert len(seven_tree) == 6

    def test_delete_all_keys_in_turn(self, seven_tree):
        for key in [4, 2, 6, 1, 3, 5, 7]:
            assert seven_tree.delete(key) is True
        assert seven_tree.root is None
        assert len(seven_tree) == 0
