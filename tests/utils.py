"""Utility functions for testing AVL-G tree invariants."""

from typing import Optional

from avlg_trees.avlg_tree import AVLGTree
from avlg_trees.invariants import TREE_FLAGS
from avlg_trees.tree_stats import Stats
from avlg_trees.utils import max_height_for_size


def assert_tree_invariants_tc(tc, t: AVLGTree, stats: Stats, err_msg: Optional[str] = "") -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False \n\n{err_msg}"
        )

    tc.assertEqual(
        stats.node_count, t.get_count(),
        f"Invariant failed: node_count={stats.node_count} ≠ get_count()={t.get_count()}\n\n{err_msg}"
    )
    tc.assertEqual(
        stats.height, t.get_height(),
        f"Invariant failed: stats.height={stats.height} ≠ get_height()={t.get_height()}\n\n{err_msg}"
    )
    tc.assertLessEqual(
        stats.height, max_height_for_size(stats.node_count, t.max_imbalance),
        f"Invariant failed: height={stats.height} exceeds the AVL-G bound for "
        f"n={stats.node_count}, G={t.max_imbalance}\n\n{err_msg}"
    )

    # The public checks must agree with the single-pass stats
    tc.assertEqual(t.is_bst(), stats.is_search_tree, f"is_bst() disagrees with stats\n\n{err_msg}")
    tc.assertEqual(
        t.is_avlg_balanced(), stats.is_avlg_balanced,
        f"is_avlg_balanced() disagrees with stats\n\n{err_msg}"
    )

    if not t.is_empty():
        tc.assertGreater(
            stats.node_count, 0,
            f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.least_key,
            f"Invariant failed: least_key is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.greatest_key,
            f"Invariant failed: greatest_key is None for non-empty tree\n\n{err_msg}"
        )
