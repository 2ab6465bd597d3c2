"""Node type, error hierarchy and shared helpers for AVL-G trees."""

from typing import Any, Optional
import logging

from avlg_trees.logging_config import get_logger

# Get logger for this module
logger = get_logger("AVLGTree")


class AVLGTreeError(Exception):
    """Base class for all errors raised by an AVL-G tree."""


class InvalidBalanceError(AVLGTreeError, ValueError):
    """Raised when a tree is constructed with a maximum imbalance below 1."""


class EmptyTreeError(AVLGTreeError):
    """Raised when an operation needs at least one key but the tree is empty."""


class KeyNotFoundError(AVLGTreeError, KeyError):
    """Raised when deleting a key that is not stored in the tree."""


class AVLGNode:
    """
    A single node of an AVL-G tree.

    Children are owned exclusively by their parent; there are no parent
    pointers. ``height`` caches the length of the longest downward path to a
    leaf (0 for a leaf) and is refreshed bottom-up by the tree after every
    structural change.
    """
    __slots__ = ("key", "left", "right", "height")

    def __init__(
        self,
        key: Any,
        left: Optional["AVLGNode"] = None,
        right: Optional["AVLGNode"] = None,
    ) -> None:
        self.key = key
        self.left = left
        self.right = right
        self.height = 1 + max(node_height(left), node_height(right))

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def update_height(self) -> None:
        """Recompute the cached height from the children's cached heights."""
        self.height = 1 + max(node_height(self.left), node_height(self.right))

    def balance(self) -> int:
        """height(left) - height(right); positive means left-heavy."""
        return node_height(self.left) - node_height(self.right)

    def short_key(self) -> str:
        """Create a short representation of the key for display purposes."""
        if isinstance(self.key, (bytes, bytearray)):
            s = self.key.hex()
        else:
            s = str(self.key)
        return s if len(s) <= 10 else f"{s[:3]}...{s[-3:]}"

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        return f"{cls}(key={self.key!r}, height={self.height})"

    def __str__(self):
        cls = self.__class__.__name__
        return f"{cls}(key={self.short_key()})"


def node_height(node: Optional[AVLGNode]) -> int:
    """Cached height of ``node``; an absent node has height -1."""
    if node is None:
        return -1
    return node.height


def debug_log(message, *args, **kwargs):
    """Log a debug message only if debug logging is enabled"""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(message, *args, **kwargs)
