"""
trees.py

Huffman tree construction and read-only traversal helpers.
"""


import heapq
import itertools
from typing import Iterator, Optional

from .distributions import Distribution
from .errors import EmptyInputError
from .logger import Logger, TreeBuildLog
from .models import HuffmanLeaf, HuffmanNode, HuffmanTree


def build_tree(distribution: Distribution, logger: Optional[Logger] = None) -> HuffmanTree:
    """
    Build a Huffman tree by repeatedly merging the two least probable trees.

    The first tree popped from the queue becomes the left child and the
    second the right child. Equal probabilities are ordered by insertion, so
    the result is deterministic for a given distribution.

    Args:
        distribution (Distribution): Mapping of symbol to probability.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        HuffmanTree: A lone HuffmanLeaf for a one-symbol distribution, otherwise a HuffmanNode.

    Raises:
        EmptyInputError: If the distribution is empty.
    """
    if distribution is None:
        raise ValueError("Distribution cannot be None")
    if len(distribution) == 0:
        raise EmptyInputError("Cannot build a Huffman tree from an empty distribution")

    sequence = itertools.count()
    heap = [(p, next(sequence), HuffmanLeaf(p, symbol)) for symbol, p in distribution.items()]
    heapq.heapify(heap)

    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = HuffmanNode(left, right)
        heapq.heappush(heap, (merged.probability, next(sequence), merged))

    tree = heap[0][2]
    if logger is not None:
        logger.log(TreeBuildLog(len(distribution), tree_depth(tree)))
    return tree


def tree_probability(tree: HuffmanTree) -> float:
    if isinstance(tree, (HuffmanLeaf, HuffmanNode)):
        return tree.probability
    raise TypeError(f"Not a Huffman tree: {tree!r}")


def iter_leaves(tree: HuffmanTree) -> Iterator[HuffmanLeaf]:
    """Yield the leaves left to right."""
    stack = [tree]
    while stack:
        current = stack.pop()
        if isinstance(current, HuffmanLeaf):
            yield current
        elif isinstance(current, HuffmanNode):
            stack.append(current.right)
            stack.append(current.left)
        else:
            raise TypeError(f"Not a Huffman tree: {current!r}")


def count_leaves(tree: HuffmanTree) -> int:
    return sum(1 for _ in iter_leaves(tree))


def tree_depth(tree: HuffmanTree) -> int:
    """Length of the longest root-to-leaf path; 0 for a lone leaf."""
    depth = 0
    stack = [(tree, 0)]
    while stack:
        current, level = stack.pop()
        if isinstance(current, HuffmanLeaf):
            depth = max(depth, level)
        elif isinstance(current, HuffmanNode):
            stack.append((current.left, level + 1))
            stack.append((current.right, level + 1))
        else:
            raise TypeError(f"Not a Huffman tree: {current!r}")
    return depth
