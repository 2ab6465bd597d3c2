"""Statistics and invariant checking for AVL-G tree structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from avlg_trees.logging_config import get_logger

if TYPE_CHECKING:
    from avlg_trees.avlg_tree import AVLGTree
    from avlg_trees.base import AVLGNode

logger = get_logger(__name__)


@dataclass
class Stats:
    """Aggregated statistics for an AVL-G tree or one of its subtrees."""

    height: int
    node_count: int
    leaf_count: int
    max_abs_balance: int
    least_key: Any | None
    greatest_key: Any | None
    is_search_tree: bool
    is_avlg_balanced: bool
    heights_consistent: bool


def _empty_stats() -> Stats:
    return Stats(
        height=-1,
        node_count=0,
        leaf_count=0,
        max_abs_balance=0,
        least_key=None,
        greatest_key=None,
        is_search_tree=True,
        is_avlg_balanced=True,
        heights_consistent=True,
    )


def _node_stats(node: AVLGNode | None, max_imbalance: int) -> Stats:
    if node is None:
        return _empty_stats()

    left = _node_stats(node.left, max_imbalance)
    right = _node_stats(node.right, max_imbalance)

    height = 1 + max(left.height, right.height)
    balance = left.height - right.height

    # Search tree property: left.greatest < key < right.least, inherited from children
    is_search_tree = left.is_search_tree and right.is_search_tree
    if is_search_tree and left.greatest_key is not None and not left.greatest_key < node.key:
        is_search_tree = False
    if is_search_tree and right.least_key is not None and not node.key < right.least_key:
        is_search_tree = False

    return Stats(
        height=height,
        node_count=1 + left.node_count + right.node_count,
        leaf_count=(1 if node.is_leaf() else left.leaf_count + right.leaf_count),
        max_abs_balance=max(abs(balance), left.max_abs_balance, right.max_abs_balance),
        least_key=node.key if left.least_key is None else left.least_key,
        greatest_key=node.key if right.greatest_key is None else right.greatest_key,
        is_search_tree=is_search_tree,
        is_avlg_balanced=(
            left.is_avlg_balanced and right.is_avlg_balanced and abs(balance) <= max_imbalance
        ),
        heights_consistent=(
            left.heights_consistent and right.heights_consistent and node.height == height
        ),
    )


def avlg_stats_(t: AVLGTree) -> Stats:
    """
    Returns aggregated statistics for an AVL-G tree in **O(n)** time.

    Heights are recomputed from structure; ``heights_consistent`` reports
    whether every cached node height agrees with the recomputed one.
    """
    if t is None or t.root is None:
        return _empty_stats()

    stats = _node_stats(t.root, t.max_imbalance)
    logger.debug(
        "stats: nodes=%d height=%d max|balance|=%d",
        stats.node_count, stats.height, stats.max_abs_balance,
    )
    return stats
