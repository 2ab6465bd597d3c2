"""AVL-G tree implementation"""

from __future__ import annotations
from typing import Any, Iterator, Optional

from avlg_trees.base import (
    AVLGNode,
    EmptyTreeError,
    InvalidBalanceError,
    KeyNotFoundError,
    debug_log,
    node_height,
)


class AVLGTree:
    """
    A binary search tree whose subtrees may lean by up to ``max_imbalance``
    (G) levels before a rotation restores balance.

    G = 1 gives a classic AVL tree. Larger values of G accept deeper search
    paths in exchange for fewer rotations on insert and delete.

    Attributes:
        root (Optional[AVLGNode]): Root node, or None for an empty tree.
        max_imbalance (int): The tolerated height difference G (>= 1).
        size (int): Number of keys currently stored.
        rotation_count (int): Single rotations performed over the tree's
            lifetime; a double rotation counts as two.
    """
    __slots__ = ("root", "max_imbalance", "size", "rotation_count")

    def __init__(self, max_imbalance: int) -> None:
        if isinstance(max_imbalance, bool) or not isinstance(max_imbalance, int):
            raise InvalidBalanceError(
                f"max_imbalance must be an int, got {type(max_imbalance).__name__}"
            )
        if max_imbalance < 1:
            raise InvalidBalanceError(f"max_imbalance must be >= 1, got {max_imbalance}")
        self.root: Optional[AVLGNode] = None
        self.max_imbalance = max_imbalance
        self.size = 0
        self.rotation_count = 0

    def __str__(self):
        if self.is_empty():
            return f"Empty AVLGTree(G={self.max_imbalance})"
        return f"AVLGTree(G={self.max_imbalance}, size={self.size}, root={self.root})"

    __repr__ = __str__

    def __len__(self) -> int:
        return self.size

    def __bool__(self) -> bool:
        return self.size > 0

    def __contains__(self, key: Any) -> bool:
        return key is not None and self._find_node(key) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield the stored keys in ascending order."""
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    # Public API
    def insert(self, key: Any) -> None:
        """
        Public method (O(log n) descents): Insert ``key`` into the tree.

        Every ancestor on the insertion path is rebalanced bottom-up with the
        tree's imbalance budget. Inserting a key that is already present is
        a no-op: the size does not change and no rotation happens.

        Raises:
            TypeError: If key is None.
        """
        if key is None:
            raise TypeError("insert(): key must not be None")
        self.root, inserted = self._insert(self.root, key)
        if inserted:
            self.size += 1

    def delete(self, key: Any) -> Any:
        """
        Remove ``key`` from the tree and return the stored key.

        An internal node takes over the key of its in-order successor when it
        has a right subtree, otherwise that of its in-order predecessor; the
        borrowed key is then removed from the corresponding subtree.

        Raises:
            TypeError: If key is None.
            EmptyTreeError: If the tree holds no keys.
            KeyNotFoundError: If key is not in the tree. The tree is left
                untouched.
        """
        if key is None:
            raise TypeError("delete(): key must not be None")
        if self.is_empty():
            raise EmptyTreeError("delete(): tree is empty")
        found = self._find_node(key)
        if found is None:
            raise KeyNotFoundError(key)
        stored = found.key
        self.root = self._delete(self.root, key)
        self.size -= 1
        return stored

    def search(self, key: Any) -> Optional[Any]:
        """
        Look up ``key``.

        Returns:
            The stored key equal to ``key``, or None if it is absent.

        Raises:
            TypeError: If key is None.
            EmptyTreeError: If the tree holds no keys.
        """
        if key is None:
            raise TypeError("search(): key must not be None")
        if self.is_empty():
            raise EmptyTreeError("search(): tree is empty")
        node = self._find_node(key)
        return None if node is None else node.key

    def get_height(self) -> int:
        """Height of the root; 0 for a single node and -1 for an empty tree."""
        return node_height(self.root)

    def physical_height(self) -> int:
        """Height recomputed from the node structure, ignoring cached heights."""
        def _height(node: Optional[AVLGNode]) -> int:
            if node is None:
                return -1
            return 1 + max(_height(node.left), _height(node.right))
        return _height(self.root)

    def is_empty(self) -> bool:
        return self.size == 0

    def get_root(self) -> Any:
        """Key stored at the root node."""
        if self.is_empty():
            raise EmptyTreeError("get_root(): tree is empty")
        return self.root.key

    def min_key(self) -> Any:
        if self.is_empty():
            raise EmptyTreeError("min_key(): tree is empty")
        return self._leftmost(self.root).key

    def max_key(self) -> Any:
        if self.is_empty():
            raise EmptyTreeError("max_key(): tree is empty")
        return self._rightmost(self.root).key

    def keys(self) -> list:
        return list(self)

    def is_bst(self) -> bool:
        """
        True if every key in a node's left subtree is smaller and every key
        in its right subtree is larger than the node's own key, for all
        nodes. Bounds are carried down, so the check is transitive rather
        than limited to direct children.
        """
        # low_node and high_node are the nearest ancestors bounding the subtree
        def _check(
            node: Optional[AVLGNode],
            low_node: Optional[AVLGNode],
            high_node: Optional[AVLGNode],
        ) -> bool:
            if node is None:
                return True
            if low_node is not None and not low_node.key < node.key:
                return False
            if high_node is not None and not node.key < high_node.key:
                return False
            return _check(node.left, low_node, node) and _check(node.right, node, high_node)
        return _check(self.root, None, None)

    def is_avlg_balanced(self) -> bool:
        """
        True if no node anywhere in the tree leans by more than
        ``max_imbalance`` levels. Heights are recomputed from structure.
        """
        G = self.max_imbalance

        def _balanced_height(node: Optional[AVLGNode]) -> Optional[int]:
            if node is None:
                return -1
            left_height = _balanced_height(node.left)
            if left_height is None:
                return None
            right_height = _balanced_height(node.right)
            if right_height is None:
                return None
            if abs(left_height - right_height) > G:
                return None
            return 1 + max(left_height, right_height)
        return _balanced_height(self.root) is not None

    def clear(self) -> None:
        """Drop every key. ``rotation_count`` is a lifetime total and is kept."""
        self.root = None
        self.size = 0

    def get_count(self) -> int:
        return self.size

    def get_max_imbalance(self) -> int:
        return self.max_imbalance

    def print_structure(self) -> str:
        from avlg_trees.display import print_pretty
        return print_pretty(self)

    # Private Methods
    def _find_node(self, key: Any) -> Optional[AVLGNode]:
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                return node
        return None

    @staticmethod
    def _leftmost(node: AVLGNode) -> AVLGNode:
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _rightmost(node: AVLGNode) -> AVLGNode:
        while node.right is not None:
            node = node.right
        return node

    def _insert(self, node: Optional[AVLGNode], key: Any) -> tuple[AVLGNode, bool]:
        """Insert below ``node``; returns the new subtree root and whether a node was added."""
        if node is None:
            debug_log("insert: new leaf %r", key)
            return AVLGNode(key), True

        if key < node.key:
            node.left, inserted = self._insert(node.left, key)
        elif node.key < key:
            node.right, inserted = self._insert(node.right, key)
        else:
            debug_log("insert: key %r already present, ignoring", key)
            return node, False

        if not inserted:
            return node, False
        return self._rebalance(node, self.max_imbalance), True

    def _delete(self, node: AVLGNode, key: Any) -> Optional[AVLGNode]:
        """Remove ``key`` (known to be present) below ``node``; returns the new subtree root."""
        if key < node.key:
            node.left = self._delete(node.left, key)
        elif node.key < key:
            node.right = self._delete(node.right, key)
        elif node.is_leaf():
            debug_log("delete: unlinking leaf %r", key)
            return None
        elif node.right is not None:
            successor = self._leftmost(node.right).key
            debug_log("delete: replacing %r with successor %r", key, successor)
            node.key = successor
            node.right = self._delete(node.right, successor)
        else:
            predecessor = self._rightmost(node.left).key
            debug_log("delete: replacing %r with predecessor %r", key, predecessor)
            node.key = predecessor
            node.left = self._delete(node.left, predecessor)

        return self._rebalance(node, self.max_imbalance)

    def _rebalance(self, node: AVLGNode, budget: int) -> AVLGNode:
        """
        Restore the balance condition at ``node`` for the given budget and
        return the (possibly new) subtree root.

        When the heavy child leans the other way and its inner grandchild is
        not a leaf, the child is first rebalanced with ``budget - 1`` and a
        single rotation follows at ``node``. The budget handed down never
        drops below 0; a negative budget would rotate a balanced or
        opposite-leaning child the wrong way.
        """
        node.update_height()
        balance = node.balance()

        if balance < -budget:
            right = node.right
            if right.balance() <= 0:
                return self._rotate_left(node)
            if right.left.is_leaf():
                return self._rotate_right_left(node)
            inner_budget = max(budget - 1, 0)
            debug_log("rebalance: descending into %r with budget %d", right.key, inner_budget)
            node.right = self._rebalance(right, inner_budget)
            return self._rotate_left(node)

        if balance > budget:
            left = node.left
            if left.balance() >= 0:
                return self._rotate_right(node)
            if left.right.is_leaf():
                return self._rotate_left_right(node)
            inner_budget = max(budget - 1, 0)
            debug_log("rebalance: descending into %r with budget %d", left.key, inner_budget)
            node.left = self._rebalance(left, inner_budget)
            return self._rotate_right(node)

        return node

    def _rotate_left(self, node: AVLGNode) -> AVLGNode:
        pivot = node.right
        node.right = pivot.left
        pivot.left = node
        node.update_height()
        pivot.update_height()
        self.rotation_count += 1
        debug_log("rotate left at %r, new subtree root %r", node.key, pivot.key)
        return pivot

    def _rotate_right(self, node: AVLGNode) -> AVLGNode:
        pivot = node.left
        node.left = pivot.right
        pivot.right = node
        node.update_height()
        pivot.update_height()
        self.rotation_count += 1
        debug_log("rotate right at %r, new subtree root %r", node.key, pivot.key)
        return pivot

    def _rotate_right_left(self, node: AVLGNode) -> AVLGNode:
        node.right = self._rotate_right(node.right)
        return self._rotate_left(node)

    def _rotate_left_right(self, node: AVLGNode) -> AVLGNode:
        node.left = self._rotate_left(node.left)
        return self._rotate_right(node)
