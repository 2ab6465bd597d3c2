"""Shared invariant-checking utilities.

This module provides tree invariant validation that can be used by both
the stats scripts and the test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from avlg_trees.logging_config import get_logger
from avlg_trees.utils import max_height_for_size

logger = get_logger(__name__)

if TYPE_CHECKING:
    from avlg_trees.avlg_tree import AVLGTree
    from avlg_trees.tree_stats import Stats

TREE_FLAGS = (
    "is_search_tree",
    "is_avlg_balanced",
    "heights_consistent",
)


class InvariantError(Exception):
    """Raised when an AVL-G tree invariant is violated."""


def assert_tree_invariants_raise(
    t: AVLGTree,
    stats: Stats,
) -> None:
    """Check all invariants, raising :class:`InvariantError` on the first failure."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            raise InvariantError(f"Invariant failed: {flag} is False")

    if stats.node_count != t.get_count():
        raise InvariantError(
            f"Invariant failed: node_count={stats.node_count} ≠ t.get_count()={t.get_count()}"
        )

    if stats.height != t.get_height():
        raise InvariantError(
            f"Invariant failed: stats.height={stats.height} ≠ t.get_height()={t.get_height()}"
        )

    bound = max_height_for_size(stats.node_count, t.max_imbalance)
    if stats.height > bound:
        raise InvariantError(
            f"Invariant failed: height={stats.height} > bound={bound} "
            f"for n={stats.node_count}, G={t.max_imbalance}"
        )

    if not t.is_empty():
        if stats.least_key is None:
            raise InvariantError("Invariant failed: least_key is None for non-empty tree")
        if stats.greatest_key is None:
            raise InvariantError("Invariant failed: greatest_key is None for non-empty tree")


def check_keys_in_order(
    tree: AVLGTree,
    expected_keys: list[Any] | None = None,
) -> tuple[list[Any], bool, bool]:
    """Traverse the tree in order and validate its keys.

    Returns
    -------
    (keys, presence_ok, order_ok)
    """
    keys = list(tree)

    order_ok = all(a < b for a, b in zip(keys, keys[1:]))

    presence_ok = True
    if expected_keys is not None:
        if len(keys) != len(expected_keys):
            presence_ok = False
        else:
            presence_ok = set(keys) == set(expected_keys)

    return keys, presence_ok, order_ok
