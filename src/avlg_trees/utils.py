"""
Height and size bounds for AVL-G trees.
"""
from functools import lru_cache


def _check_imbalance(max_imbalance: int) -> None:
    if max_imbalance < 1:
        raise ValueError("max_imbalance must be >= 1")


@lru_cache(maxsize=None)
def _min_nodes(height: int, max_imbalance: int) -> int:
    if height < 0:
        return 0
    if height == 0:
        return 1
    shorter = max(height - 1 - max_imbalance, -1)
    return 1 + _min_nodes(height - 1, max_imbalance) + _min_nodes(shorter, max_imbalance)


def min_nodes_for_height(height: int, max_imbalance: int) -> int:
    """
    Smallest number of keys an AVL-G tree of the given height can hold.

    The sparsest tree of height h has one subtree of height h - 1 and the
    other as short as the imbalance bound allows:
    N(h) = 1 + N(h - 1) + N(h - 1 - G), with N(-1) = 0 and N(0) = 1.

    Parameters:
        height (int): Tree height, -1 for the empty tree.
        max_imbalance (int): The imbalance bound G, must be >= 1.

    Returns:
        int: The minimum node count.

    Raises:
        ValueError: If max_imbalance is below 1.
    """
    _check_imbalance(max_imbalance)
    # Fill the cache bottom-up so deep heights do not recurse deeply.
    for h in range(0, height):
        _min_nodes(h, max_imbalance)
    return _min_nodes(height, max_imbalance)


def max_height_for_size(size: int, max_imbalance: int) -> int:
    """
    Largest height an AVL-G tree holding ``size`` keys can reach.

    Returns -1 for size 0. For fixed G the result grows logarithmically in
    size; it equals size - 1 only in the degenerate limit of G >= size.
    """
    _check_imbalance(max_imbalance)
    if size < 0:
        raise ValueError("size must be >= 0")
    if size == 0:
        return -1
    height = 0
    while min_nodes_for_height(height + 1, max_imbalance) <= size:
        height += 1
    return height
