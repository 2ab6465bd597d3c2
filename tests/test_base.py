"""Unified test base classes for AVL-G tree tests."""

from typing import Iterable, List, Optional
import logging
import unittest

from avlg_trees.avlg_tree import AVLGTree
from avlg_trees.base import AVLGNode
from avlg_trees.invariants import check_keys_in_order
from avlg_trees.tree_stats import avlg_stats_
from tests.utils import assert_tree_invariants_tc

from avlg_trees.logging_config import get_test_logger

logger = get_test_logger("TestBase")


def build_nodes(shape) -> Optional[AVLGNode]:
    """
    Build a node graph from a nested ``(key, left, right)`` tuple, bypassing
    insertion and rebalancing. A bare key stands for a leaf and None for an
    absent child. Cached heights are computed from the shape.
    """
    if shape is None:
        return None
    if not isinstance(shape, tuple):
        return AVLGNode(shape)
    key, left, right = shape
    return AVLGNode(key, build_nodes(left), build_nodes(right))


def tree_from_nodes(shape, max_imbalance: int = 1) -> AVLGTree:
    """Wrap a hand-built node graph in a tree with a matching size."""
    tree = AVLGTree(max_imbalance)
    tree.root = build_nodes(shape)
    tree.size = sum(1 for _ in tree)
    return tree


def snapshot(node: Optional[AVLGNode]):
    """Nested ``(key, height, left, right)`` tuples describing the exact shape."""
    if node is None:
        return None
    return (node.key, node.height, snapshot(node.left), snapshot(node.right))


class BaseTreeTestCase(unittest.TestCase):
    """Base class for all tree tests with common functionality."""

    def tearDown(self):
        """Common tearDown logic for tree tests."""
        # nothing to do if no tree
        if getattr(self, 'tree', None) is None:
            return

        stats = avlg_stats_(self.tree)
        assert_tree_invariants_tc(self, self.tree, stats, self.tree.print_structure())

        # --- optional invariants ---
        expected_root = getattr(self, 'expected_root', None)
        if expected_root is not None:
            self.assertEqual(
                self.tree.get_root(), expected_root,
                f"Root {self.tree.get_root()} does not match expected {expected_root}\n"
                f"Tree structure:\n{self.tree.print_structure()}"
            )

        expected_height = getattr(self, 'expected_height', None)
        if expected_height is not None:
            self.assertEqual(
                self.tree.get_height(), expected_height,
                f"Height {self.tree.get_height()} does not match expected {expected_height}\n"
                f"Tree structure:\n{self.tree.print_structure()}"
            )

        expected_keys = getattr(self, 'expected_keys', None)
        keys, presence_ok, order_ok = check_keys_in_order(self.tree, expected_keys)

        self.assertTrue(order_ok, f"Keys must be in sorted order, got {keys}")
        if expected_keys is not None:
            self.assertTrue(
                presence_ok,
                f"Keys {keys} do not match expected {expected_keys}"
            )


class AVLGTreeTestCase(BaseTreeTestCase):
    """Test case creating a fresh tree with ``G`` as imbalance bound."""

    G = 1

    def setUp(self):
        self.tree = AVLGTree(self.G)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Created AVLGTree test with G={self.G}")

    def insert_all(self, keys: Iterable, tree: Optional[AVLGTree] = None) -> List:
        tree = self.tree if tree is None else tree
        keys = list(keys)
        for key in keys:
            tree.insert(key)
        return keys
