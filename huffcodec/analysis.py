"""
analysis.py

Measurements of a Huffman code against the distribution it was built from.
"""


from itertools import combinations

import numpy as np

from .distributions import Distribution
from .errors import SymbolNotFoundError
from .settings import BITS_PER_BYTE
from .tables import Table


def entropy(distribution: Distribution) -> float:
    """
    Shannon entropy of the distribution in bits per symbol.

    This is the lower bound on the expected length of any prefix-free code.
    """
    probs = np.array(list(distribution.values()), dtype=np.float64)
    probs = probs[probs > 0]
    return float(-np.sum(probs * np.log2(probs)))


def expected_code_length(table: Table, distribution: Distribution) -> float:
    """
    Average code length in bits, weighted by symbol probability.

    Raises:
        SymbolNotFoundError: If a symbol of the distribution has no code.
    """
    lengths = []
    probs = []
    for symbol, p in distribution.items():
        if symbol not in table:
            raise SymbolNotFoundError(symbol)
        lengths.append(len(table[symbol]))
        probs.append(p)
    return float(np.dot(np.array(probs, dtype=np.float64), np.array(lengths, dtype=np.float64)))


def is_prefix_free(table: Table) -> bool:
    """Check that no code is a prefix of another one."""
    codes = [tuple(code) for code in table.values()]
    for a, b in combinations(codes, 2):
        shorter, longer = (a, b) if len(a) <= len(b) else (b, a)
        if longer[:len(shorter)] == shorter:
            return False
    return True


def compression_ratio(symbol_count: int, encoded_bits: int, bits_per_symbol: int = BITS_PER_BYTE) -> float:
    """
    Ratio of the raw size to the encoded size.

    Raises:
        ValueError: If encoded_bits is not positive.
    """
    if encoded_bits <= 0:
        raise ValueError("Encoded size must be positive")
    return (symbol_count * bits_per_symbol) / encoded_bits
