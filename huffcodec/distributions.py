"""
distributions.py

Empirical symbol distributions.

A distribution is a read-only mapping from symbol to probability. Iteration
follows the order in which symbols were first seen, but nothing downstream
depends on it.
"""


from collections import Counter
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Union

import numpy as np

from .errors import EmptyInputError
from .models import SymbolFrequency
from .settings import PROBABILITY_TOLERANCE
from .validators import validate_hashable


Distribution = Mapping[Any, float]


def symbol_frequencies(symbols: Iterable[Any]) -> List[SymbolFrequency]:
    """
    Count how often each symbol occurs.

    Args:
        symbols (Iterable[Any]): Hashable symbols.

    Returns:
        List[SymbolFrequency]: One entry per distinct symbol, in first-seen order.
    """
    if symbols is None:
        raise ValueError("Symbols cannot be None")
    counts: Counter = Counter()
    for symbol in symbols:
        validate_hashable(symbol)
        counts[symbol] += 1
    return [SymbolFrequency(symbol, count) for symbol, count in counts.items()]


def from_frequencies(frequencies: Union[Mapping[Any, int], List[SymbolFrequency]]) -> Distribution:
    """
    Normalize absolute counts into a probability distribution.

    Symbols with a zero count are dropped.

    Args:
        frequencies: Either a mapping of symbol to count or a list of SymbolFrequency.

    Returns:
        Distribution: Read-only mapping of symbol to probability.

    Raises:
        EmptyInputError: If there are no symbols or every count is zero.
        ValueError: If a count is negative.
    """
    if frequencies is None:
        raise ValueError("Frequencies cannot be None")
    if isinstance(frequencies, Mapping):
        pairs = list(frequencies.items())
    else:
        pairs = [(sf.symbol, sf.frequency) for sf in frequencies]

    pairs = [(symbol, count) for symbol, count in pairs if count != 0]
    if not pairs:
        raise EmptyInputError()

    counts = np.array([count for _, count in pairs], dtype=np.float64)
    if np.any(counts < 0):
        raise ValueError("Frequencies must be non-negative")
    probabilities = counts / np.sum(counts)
    return MappingProxyType({symbol: float(p) for (symbol, _), p in zip(pairs, probabilities)})


def symbol_probabilities(symbols: Iterable[Any]) -> Distribution:
    """
    Estimate the probability of each symbol as its count divided by the total.

    Args:
        symbols (Iterable[Any]): Hashable symbols, N >= 1 of them.

    Returns:
        Distribution: Read-only mapping of symbol to probability.

    Raises:
        EmptyInputError: If the sequence is empty.
    """
    return from_frequencies(symbol_frequencies(symbols))


def validate_distribution(distribution: Distribution, tolerance: float = PROBABILITY_TOLERANCE) -> None:
    """
    Check that every probability is positive and the total is 1.

    Raises:
        EmptyInputError: If the distribution has no symbols.
        ValueError: If a probability is not in (0, 1] or they do not sum to 1.
    """
    if distribution is None:
        raise ValueError("Distribution cannot be None")
    if len(distribution) == 0:
        raise EmptyInputError("Cannot build a Huffman tree from an empty distribution")
    try:
        probs = np.array(list(distribution.values()), dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValueError("Invalid probability values provided: " + str(e))
    if np.any(np.isnan(probs)) or np.any(probs <= 0) or np.any(probs > 1):
        raise ValueError("Probabilities must be in the range (0, 1]")
    if not np.isclose(np.sum(probs), 1.0, rtol=0.0, atol=tolerance):
        raise ValueError(f"The input probabilities must sum to 1 (got {np.sum(probs)})")
