"""
tables.py

Symbol to code lookup tables derived from a Huffman tree.
"""


from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from .models import Bit, Code, HuffmanLeaf, HuffmanNode, HuffmanTree


Table = Mapping[Any, Code]


def generate_table(tree: HuffmanTree) -> Table:
    """
    Walk the tree depth first and record the path to every leaf.

    Descending left appends Bit.LEFT, descending right appends Bit.RIGHT.
    A lone leaf gets the empty code. The walk uses an explicit stack, so
    the depth of the tree is not bounded by the recursion limit.

    Args:
        tree (HuffmanTree): The Huffman tree.

    Returns:
        Table: Read-only mapping of symbol to a tuple of bits.

    Raises:
        ValueError: If two leaves hold the same symbol.
    """
    table: Dict[Any, Code] = {}
    stack: List[Tuple[HuffmanTree, Code]] = [(tree, ())]
    while stack:
        current, code = stack.pop()
        if isinstance(current, HuffmanNode):
            # right first so the left subtree is visited first
            stack.append((current.right, code + (Bit.RIGHT,)))
            stack.append((current.left, code + (Bit.LEFT,)))
        elif isinstance(current, HuffmanLeaf):
            if current.symbol in table:
                raise ValueError(f"Symbol appears in more than one leaf: {current.symbol!r}")
            table[current.symbol] = code
        else:
            raise TypeError(f"Not a Huffman tree: {current!r}")
    return MappingProxyType(table)
