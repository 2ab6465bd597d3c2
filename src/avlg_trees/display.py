"""Pretty-printing and display utilities for AVL-G tree structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from avlg_trees.avlg_tree import AVLGTree
    from avlg_trees.base import AVLGNode


# ANSI colour codes
PRIMARY = '\033[32m'    # green
SECONDARY = '\033[33m'  # yellow
RESET = '\033[0m'

EMPTY_SLOT = "."


def print_pretty(tree: Optional[AVLGTree], max_depth: int = 6, color: bool = False) -> str:
    """
    Renders an AVL-G tree so:
      • Lines go from the root (depth 0) down.
      • Within a line, slots appear left→right; absent children are shown
        as ``.`` so every node sits centred above its two child slots.
      • All slots have the same width.
      • Nodes leaning by exactly the tree's imbalance bound are highlighted
        when ``color`` is set.

    Levels deeper than ``max_depth`` are elided.
    """
    from avlg_trees.avlg_tree import AVLGTree

    if tree is None:
        return f"{type(tree).__name__}: None"

    if not isinstance(tree, AVLGTree):
        raise TypeError(f"print_pretty() expects AVLGTree, got {type(tree).__name__}")

    header = f"AVLGTree(G={tree.max_imbalance}, size={tree.size}, height={tree.get_height()})"
    if tree.root is None:
        return f"{header}: Empty"

    # 1) First pass: collect one list of slots per depth
    layers: List[List[Optional[AVLGNode]]] = []
    current: List[Optional[AVLGNode]] = [tree.root]
    while any(n is not None for n in current) and len(layers) <= max_depth:
        layers.append(current)
        nxt: List[Optional[AVLGNode]] = []
        for n in current:
            nxt.append(n.left if n is not None else None)
            nxt.append(n.right if n is not None else None)
        current = nxt
    truncated = any(n is not None for n in current)

    width = max(len(n.short_key()) for layer in layers for n in layer if n is not None)
    width = max(width, len(EMPTY_SLOT))

    # 2) Second pass: lay out each depth with uniform spacing
    depth_count = len(layers)
    lines = [header]
    for depth, layer in enumerate(layers):
        span = 2 ** (depth_count - depth - 1)
        indent = (span - 1) * (width + 1) // 2
        gap = (span - 1) * width + span
        texts = []
        for n in layer:
            if n is None:
                texts.append(EMPTY_SLOT.center(width))
                continue
            text = n.short_key().center(width)
            if color and abs(n.balance()) == tree.max_imbalance:
                text = f"{SECONDARY}{text}{RESET}"
            elif color and n is tree.root:
                text = f"{PRIMARY}{text}{RESET}"
            texts.append(text)
        lines.append((" " * indent + (" " * gap).join(texts)).rstrip())

    if truncated:
        lines.append(f"... (levels below depth {max_depth} elided)")
    return "\n".join(lines)
