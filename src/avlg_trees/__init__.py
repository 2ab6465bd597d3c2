"""
avlg_trees — AVL trees with a tunable imbalance bound.

Quick-start imports::

    from avlg_trees import AVLGTree

    tree = AVLGTree(max_imbalance=2)
    tree.insert(20)
"""

from avlg_trees.avlg_tree import AVLGTree
from avlg_trees.base import (
    AVLGNode,
    AVLGTreeError,
    EmptyTreeError,
    InvalidBalanceError,
    KeyNotFoundError,
)
from avlg_trees.display import print_pretty
from avlg_trees.invariants import (
    InvariantError,
    assert_tree_invariants_raise,
    check_keys_in_order,
)
from avlg_trees.tree_stats import Stats, avlg_stats_
from avlg_trees.utils import max_height_for_size, min_nodes_for_height

__all__ = [
    # Tree
    "AVLGNode",
    "AVLGTree",
    # Errors
    "AVLGTreeError",
    "EmptyTreeError",
    "InvalidBalanceError",
    "InvariantError",
    "KeyNotFoundError",
    # Stats & invariants
    "Stats",
    "assert_tree_invariants_raise",
    "avlg_stats_",
    "check_keys_in_order",
    "max_height_for_size",
    "min_nodes_for_height",
    "print_pretty",
]
