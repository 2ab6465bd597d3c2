"""Tests for rotations and the budget-reducing rebalance step.

Covers:

- single and double rotations performed directly on hand-built subtrees
- ``_rebalance`` descending into the heavy child with a reduced budget
- rotation counting
- cached heights after rotations
"""

import unittest

from avlg_trees.avlg_tree import AVLGTree
from avlg_trees.base import node_height

from tests.test_base import AVLGTreeTestCase, build_nodes, snapshot


class TestSingleRotations(unittest.TestCase):
    """Rotations relink nodes and refresh cached heights."""

    def setUp(self):
        self.tree = AVLGTree(1)

    def test_rotate_left_moves_inner_grandchild(self):
        node = build_nodes((10, 5, (20, 15, 30)))
        top = self.tree._rotate_left(node)
        self.assertEqual(top.key, 20)
        self.assertEqual(top.left.key, 10)
        self.assertEqual(top.left.right.key, 15)
        self.assertEqual(top.right.key, 30)
        self.assertEqual(top.left.height, 1)
        self.assertEqual(top.height, 2)
        self.assertEqual(self.tree.rotation_count, 1)

    def test_rotate_right_moves_inner_grandchild(self):
        node = build_nodes((30, (20, 10, 25), 40))
        top = self.tree._rotate_right(node)
        self.assertEqual(top.key, 20)
        self.assertEqual(top.left.key, 10)
        self.assertEqual(top.right.key, 30)
        self.assertEqual(top.right.left.key, 25)
        self.assertEqual(top.right.right.key, 40)

    def test_rotation_leaves_no_placeholder_children(self):
        node = build_nodes((1, None, (2, None, 3)))
        top = self.tree._rotate_left(node)
        self.assertEqual(top.key, 2)
        self.assertTrue(top.left.is_leaf())
        self.assertIsNone(top.left.left)
        self.assertIsNone(top.left.right)
        self.assertTrue(top.right.is_leaf())
        self.assertEqual(top.left.height, 0)
        self.assertEqual(top.height, 1)

    def test_double_rotations_compose_two_singles(self):
        node = build_nodes((10, None, (30, 20, None)))
        top = self.tree._rotate_right_left(node)
        self.assertEqual(snapshot(top), (20, 1, (10, 0, None, None), (30, 0, None, None)))
        self.assertEqual(self.tree.rotation_count, 2)

        node = build_nodes((30, (10, None, 20), None))
        top = self.tree._rotate_left_right(node)
        self.assertEqual(snapshot(top), (20, 1, (10, 0, None, None), (30, 0, None, None)))
        self.assertEqual(self.tree.rotation_count, 4)


class TestRebalanceBudget(AVLGTreeTestCase):
    """
    With G = 2 a node leaning right by three levels whose right child leans
    left by exactly two is fixed by rebalancing the child with budget 1
    first, then rotating left at the node.
    """
    G = 2

    def test_child_rotated_right_then_node_rotated_left(self):
        self.insert_all([10, 30, 20, 15])
        self.assertEqual(self.tree.rotation_count, 2)
        self.assertEqual(self.tree.root.left.key, 10)
        self.assertEqual(self.tree.root.left.right.key, 15)
        self.assertEqual(self.tree.root.right.key, 30)
        self.expected_root = 20
        self.expected_height = 2

    def test_child_double_rotated_then_node_rotated_left(self):
        self.insert_all([10, 30, 20, 25])
        self.assertEqual(self.tree.rotation_count, 3)
        self.assertEqual(self.tree.root.left.key, 10)
        self.assertEqual(self.tree.root.left.right.key, 20)
        self.assertEqual(self.tree.root.right.key, 30)
        self.expected_root = 25
        self.expected_height = 2

    def test_mirror_image(self):
        self.insert_all([30, 10, 20, 25])
        self.assertEqual(self.tree.rotation_count, 2)
        self.assertEqual(self.tree.root.left.key, 10)
        self.assertEqual(self.tree.root.right.key, 30)
        self.assertEqual(self.tree.root.right.left.key, 25)
        self.expected_root = 20

    def test_child_within_reduced_budget_only_node_rotates(self):
        self.insert_all([10, 30, 20, 40])
        self.assertEqual(self.tree.rotation_count, 0)
        # 10 now leans right by three while 30 leans left by one, which
        # budget 1 tolerates: a single left rotation at 10 suffices
        self.tree.insert(15)
        self.assertEqual(self.tree.rotation_count, 1)
        self.assertEqual(self.tree.root.left.key, 10)
        self.assertEqual(self.tree.root.left.right.key, 20)
        self.assertEqual(self.tree.root.left.right.left.key, 15)
        self.assertEqual(self.tree.root.right.key, 40)
        self.expected_root = 30
        self.expected_keys = [10, 15, 20, 30, 40]


class TestRebalanceDirect(unittest.TestCase):
    """``_rebalance`` on hand-built subtrees."""

    def test_within_budget_is_unchanged(self):
        tree = AVLGTree(2)
        node = build_nodes((3, (2, 1, None), None))
        self.assertIs(tree._rebalance(node, 2), node)
        self.assertEqual(tree.rotation_count, 0)

    def test_budget_zero_corrects_any_lean(self):
        tree = AVLGTree(3)
        node = build_nodes((2, 1, (4, 3, 5)))
        top = tree._rebalance(node, 0)
        self.assertEqual(top.key, 4)
        self.assertEqual(tree.rotation_count, 1)

    def test_nested_budget_stays_at_zero(self):
        """
        Three levels of opposite leans: the innermost node 40 leans left and
        must be rotated right, not left as a negative budget would demand.
        """
        tree = AVLGTree(1)
        node = build_nodes((
            50,
            (20, 10, (40, (35, 33, 37), 45)),
            (70, 60, (80, None, 90)),
        ))
        top = tree._rebalance(node, 0)
        self.assertEqual(top.key, 35)
        self.assertEqual(top.left.key, 20)
        self.assertEqual(top.left.right.key, 33)
        self.assertEqual(top.right.key, 50)
        self.assertEqual(top.right.left.key, 40)
        self.assertEqual(top.right.left.left.key, 37)
        self.assertEqual(top.right.left.right.key, 45)
        self.assertEqual(tree.rotation_count, 3)

    def test_single_rotation_preferred_on_tie(self):
        tree = AVLGTree(1)
        node = build_nodes((5, None, (7, 6, 8)))
        top = tree._rebalance(node, 1)
        self.assertEqual(top.key, 7)
        self.assertEqual(top.left.key, 5)
        self.assertEqual(top.left.right.key, 6)
        self.assertEqual(tree.rotation_count, 1)


class TestRotationCounts(unittest.TestCase):
    """Rotation bookkeeping across imbalance bounds."""

    def test_larger_g_rotates_less(self):
        counts = []
        for G in (1, 2, 4, 8):
            tree = AVLGTree(G)
            for key in range(256):
                tree.insert(key)
            self.assertTrue(tree.is_avlg_balanced())
            counts.append(tree.rotation_count)
        self.assertTrue(all(c <= counts[0] for c in counts), counts)
        self.assertGreater(counts[0], counts[-1])

    def test_clear_keeps_rotation_count(self):
        tree = AVLGTree(1)
        for key in (1, 2, 3):
            tree.insert(key)
        tree.clear()
        self.assertEqual(tree.rotation_count, 1)


class TestCachedHeights(AVLGTreeTestCase):
    G = 1

    def test_heights_match_structure(self):
        self.insert_all([41, 20, 65, 11, 29, 50, 26, 23, 55, 54])

        def check(node):
            if node is None:
                return -1
            h = 1 + max(check(node.left), check(node.right))
            self.assertEqual(node.height, h, f"stale height at {node.key}")
            return h

        self.assertEqual(check(self.tree.root), self.tree.get_height())
        self.assertEqual(self.tree.physical_height(), self.tree.get_height())
        self.assertEqual(node_height(None), -1)


if __name__ == "__main__":
    unittest.main()
