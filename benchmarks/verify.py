"""Correctness verification for the trees the benchmarks build."""

import logging
from typing import List

from avlg_trees.avlg_tree import AVLGTree
from avlg_trees.invariants import TREE_FLAGS, check_keys_in_order
from avlg_trees.tree_stats import Stats, avlg_stats_
from avlg_trees.utils import max_height_for_size
from benchmarks.benchmark_utils import BenchmarkUtils
from benchmarks.config import BenchmarkConfig

DISTRIBUTIONS = ('uniform', 'sequential', 'clustered', 'descending')


def verify_invariants(tree: AVLGTree, stats: Stats) -> bool:
    """
    Check all tree invariants.

    This is the verify phase - not timed in benchmarks. Failures are logged
    rather than raised so one run reports every broken configuration.

    Args:
        tree: The AVLGTree to verify
        stats: Computed statistics for the tree

    Returns:
        True if all invariants pass, False otherwise
    """
    all_passed = True

    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            logging.error("Invariant failed: %s is False", flag)
            all_passed = False

    if stats.node_count != tree.get_count():
        logging.error(
            "Invariant failed: node_count=%d ≠ get_count()=%d",
            stats.node_count, tree.get_count()
        )
        all_passed = False

    bound = max_height_for_size(stats.node_count, tree.max_imbalance)
    if stats.height > bound:
        logging.error(
            "Invariant failed: height=%d > bound=%d for n=%d, G=%d",
            stats.height, bound, stats.node_count, tree.max_imbalance
        )
        all_passed = False

    return all_passed


def verify_keys(tree: AVLGTree, expected_keys: List[int]) -> bool:
    """In-order keys must be sorted and match ``expected_keys`` as a set."""
    keys, presence_ok, order_ok = check_keys_in_order(tree, expected_keys)
    if not order_ok:
        logging.error("Keys out of order: %s...", keys[:10])
    if not presence_ok:
        logging.error("Expected %d keys, found %d", len(expected_keys), len(keys))
    return presence_ok and order_ok


def verify_config(config: BenchmarkConfig) -> bool:
    """
    Build every tree the benchmarks would build, delete half of its keys,
    and verify the result after each phase.
    """
    all_passed = True
    for max_imbalance in config.max_imbalances:
        for size in config.sizes:
            for distribution in DISTRIBUTIONS:
                keys = BenchmarkUtils.generate_deterministic_keys(
                    size=size,
                    seed=config.seed,
                    distribution=distribution
                )
                tree = BenchmarkUtils.build_tree(keys, max_imbalance)
                ok = verify_invariants(tree, avlg_stats_(tree)) and verify_keys(tree, keys)

                for key in keys[: size // 2]:
                    tree.delete(key)
                remaining = keys[size // 2:]
                ok = ok and verify_invariants(tree, avlg_stats_(tree)) and verify_keys(tree, remaining)

                logging.info(
                    "G=%d size=%d %s: %s (rotations=%d)",
                    max_imbalance, size, distribution, "ok" if ok else "FAILED",
                    tree.rotation_count
                )
                all_passed = all_passed and ok
    return all_passed
