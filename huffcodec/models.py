"""
models.py

The shared objects used in huffcodec.

"""


from enum import IntEnum
from typing import Any, Iterable, Tuple, Union


class Symbol:
    """
    Represents a single symbol in the data.
    """
    def __init__(self, data: bytes) -> None:
        if not isinstance(data, bytes):
            raise ValueError("Data must be of type bytes")
        self.data: bytes = data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Symbol):
            return self.data == other.data
        return False

    def __str__(self) -> str:
        return str(self.data)

    def __repr__(self) -> str:
        return str(self.data)

    def __hash__(self) -> int:
        return hash(self.data)


class SymbolFrequency:
    """
    Represents a symbol together with its absolute frequency.
    """
    def __init__(self, symbol: Any, frequency: int) -> None:
        if frequency < 0:
            raise ValueError("Frequency must be non-negative")
        self.symbol: Any = symbol
        self.frequency: int = frequency

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolFrequency):
            return self.symbol == other.symbol and self.frequency == other.frequency
        return False

    def __str__(self) -> str:
        return f"[{self.symbol}, {self.frequency}]"

    def __repr__(self) -> str:
        return f"[{self.symbol}, {self.frequency}]"


class Dictionary:
    """
    Represents a dictionary of unique symbols found in the data.
    """
    def __init__(self) -> None:
        self.symbols: set = set()

    def add(self, symbol: Symbol) -> bool:
        """
        Add a symbol to the dictionary.

        Returns:
            bool: True if the symbol was already present; False if added.
        """
        if symbol in self.symbols:
            return True
        self.symbols.add(symbol)
        return False

    def add_multiple(self, symbols: Iterable[Symbol]) -> int:
        """
        Add multiple symbols to the dictionary.

        Args:
            symbols (Iterable[Symbol]): Iterable of symbols to add.

        Returns:
            int: Count of symbols that were already present.
        """
        count = 0
        for symbol in symbols:
            if self.add(symbol):
                count += 1
        return count

    def get_size(self) -> int:
        return len(self.symbols)

    def contains(self, symbol: Symbol) -> bool:
        return symbol in self.symbols

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dictionary):
            return False
        return self.symbols == other.symbols


class Bit(IntEnum):
    """
    One traversal step in the Huffman tree.
    """
    LEFT = 0
    RIGHT = 1


Code = Tuple[Bit, ...]


class HuffmanLeaf:
    """
    Terminal tree element holding one symbol.
    """
    __slots__ = ("_probability", "_symbol")

    def __init__(self, probability: float, symbol: Any) -> None:
        self._probability = float(probability)
        self._symbol = symbol

    @property
    def probability(self) -> float:
        return self._probability

    @property
    def symbol(self) -> Any:
        return self._symbol

    def __repr__(self) -> str:
        return f"HuffmanLeaf({self._probability!r}, {self._symbol!r})"


class HuffmanNode:
    """
    Internal tree element owning exactly two subtrees.

    The probability is the sum of both children's probabilities.
    """
    __slots__ = ("_probability", "_left", "_right")

    def __init__(self, left: "HuffmanTree", right: "HuffmanTree") -> None:
        if not isinstance(left, (HuffmanLeaf, HuffmanNode)) or not isinstance(right, (HuffmanLeaf, HuffmanNode)):
            raise ValueError("Node children must be HuffmanLeaf or HuffmanNode instances")
        self._probability = left.probability + right.probability
        self._left = left
        self._right = right

    @property
    def probability(self) -> float:
        return self._probability

    @property
    def left(self) -> "HuffmanTree":
        return self._left

    @property
    def right(self) -> "HuffmanTree":
        return self._right

    def child(self, bit: int) -> "HuffmanTree":
        """Return the subtree a bit routes to."""
        if bit == Bit.LEFT:
            return self._left
        if bit == Bit.RIGHT:
            return self._right
        raise ValueError(f"Not a bit: {bit!r}")

    def __repr__(self) -> str:
        return f"HuffmanNode({self._probability!r}, {self._left!r}, {self._right!r})"


HuffmanTree = Union[HuffmanLeaf, HuffmanNode]
