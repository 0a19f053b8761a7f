"""
coders.py

Huffman encoding and decoding of symbol sequences.

"""


import abc
from types import MappingProxyType
from typing import Any, Iterable, List, Optional

from .distributions import Distribution, symbol_probabilities, validate_distribution
from .errors import DegenerateAlphabetError, MalformedCodeError, SymbolNotFoundError
from .logger import CodingLog, CodingProgressStep, DegenerateAlphabetLog, EncodedSymbolCode, Logger
from .models import Bit, Code, HuffmanLeaf, HuffmanNode, HuffmanTree
from .settings import HuffmanCoderSettings
from .tables import Table, generate_table
from .trees import build_tree, iter_leaves
from .validators import validate_type


class CoderBase(abc.ABC):
    """
    Abstract base class for coders.
    """

    @abc.abstractmethod
    def encode(self, symbols: Iterable[Any]) -> List[Bit]:
        """
        Encode a sequence of symbols into a sequence of bits.

        Args:
            symbols (Iterable[Any]): The symbols to be encoded.

        Returns:
            List[Bit]: The encoded bits.
        """
        pass

    @abc.abstractmethod
    def decode(self, bits: Iterable[int], num_symbols: Optional[int] = None) -> List[Any]:
        """
        Decode a sequence of bits back into symbols.

        Args:
            bits (Iterable[int]): The encoded bits.
            num_symbols (Optional[int]): Number of symbols expected, if known.

        Returns:
            List[Any]: The decoded symbols.
        """
        pass

    @abc.abstractmethod
    def get_coder_code(self) -> int:
        """
        Get the code for the coder.

        Returns:
            int: The coder code.
        """
        pass


class HuffmanCoder(CoderBase):
    """
    Huffman coder bundling a tree and the table derived from it.

    The tree is used for decoding and the table for encoding. Neither is
    modified after construction, so one instance can serve any number of
    encode and decode calls.
    """

    def __init__(
        self,
        distribution: Distribution,
        settings: Optional[HuffmanCoderSettings] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._setup(distribution, None, settings, logger)

    def _setup(
        self,
        distribution: Distribution,
        tree: Optional[HuffmanTree],
        settings: Optional[HuffmanCoderSettings],
        logger: Optional[Logger],
    ) -> None:
        if settings is None:
            settings = HuffmanCoderSettings()
        validate_type(settings, "settings", HuffmanCoderSettings)
        if distribution is None:
            raise ValueError("Distribution cannot be None")
        # Own copy; the tree and table are built from this mapping.
        distribution = MappingProxyType(dict(distribution))
        if settings.validate_distribution:
            validate_distribution(distribution, settings.tolerance)

        self.settings: HuffmanCoderSettings = settings
        self.logger: Optional[Logger] = logger
        self.coder_code: int = 3
        self.distribution: Distribution = distribution
        self.tree: HuffmanTree = tree if tree is not None else build_tree(distribution, logger)
        self.table: Table = generate_table(self.tree)

        if self.is_degenerate and self.logger is not None:
            self.logger.log(DegenerateAlphabetLog(self.tree.symbol))

    @classmethod
    def from_symbols(
        cls,
        symbols: Iterable[Any],
        settings: Optional[HuffmanCoderSettings] = None,
        logger: Optional[Logger] = None,
    ) -> "HuffmanCoder":
        """
        Estimate the distribution of the given symbols and build a coder for it.

        Raises:
            EmptyInputError: If there are no symbols.
        """
        return cls(symbol_probabilities(symbols), settings, logger)

    @classmethod
    def from_tree(
        cls,
        tree: HuffmanTree,
        settings: Optional[HuffmanCoderSettings] = None,
        logger: Optional[Logger] = None,
    ) -> "HuffmanCoder":
        """
        Build a coder around an existing tree without rebuilding it.

        The distribution is taken from the tree's leaf probabilities.
        """
        if not isinstance(tree, (HuffmanLeaf, HuffmanNode)):
            raise ValueError("Tree must be a HuffmanLeaf or HuffmanNode")
        distribution = MappingProxyType({leaf.symbol: leaf.probability for leaf in iter_leaves(tree)})
        coder = cls.__new__(cls)
        coder._setup(distribution, tree, settings, logger)
        return coder

    @property
    def is_degenerate(self) -> bool:
        """True when the alphabet has a single symbol and every code is empty."""
        return isinstance(self.tree, HuffmanLeaf)

    def code_for(self, symbol: Any) -> Code:
        """
        Look up the code of one symbol.

        Raises:
            SymbolNotFoundError: If the symbol is not in the table.
        """
        try:
            return self.table[symbol]
        except (KeyError, TypeError):
            raise SymbolNotFoundError(symbol) from None

    def encode(self, symbols: Iterable[Any]) -> List[Bit]:
        """
        Encode symbols by concatenating their codes in input order.

        Args:
            symbols (Iterable[Any]): The symbols to encode.

        Returns:
            List[Bit]: The encoded bits. Empty for a single-symbol alphabet.

        Raises:
            SymbolNotFoundError: If a symbol is not in the table. Nothing is returned in that case.
        """
        if symbols is None:
            raise ValueError("Symbols cannot be None")
        encoded: List[Bit] = []
        symbol_count = 0
        for symbol in symbols:
            code = self.code_for(symbol)
            encoded.extend(code)
            symbol_count += 1
            if self.logger is not None:
                if self.settings.log_symbols:
                    self.logger.log(EncodedSymbolCode(symbol, code))
                self.logger.log(CodingProgressStep("Encoding symbols"))

        if self.logger is not None:
            self.logger.log(CodingLog(symbol_count, len(encoded)))
        return encoded

    def decode(self, bits: Iterable[int], num_symbols: Optional[int] = None) -> List[Any]:
        """
        Decode bits by walking the tree from the root, restarting after each leaf.

        Args:
            bits (Iterable[int]): Bit values, Bit.LEFT/0 or Bit.RIGHT/1.
            num_symbols (Optional[int]): Number of symbols expected. Required for a single-symbol alphabet.

        Returns:
            List[Any]: The decoded symbols.

        Raises:
            MalformedCodeError: If the bits end mid-path, contain a non-bit value,
                or decode to a different number of symbols than num_symbols.
            DegenerateAlphabetError: If the tree is a single leaf and num_symbols is not given.
        """
        if bits is None:
            raise ValueError("Bits cannot be None")
        if num_symbols is not None:
            validate_type(num_symbols, "num_symbols", int)
            if num_symbols < 0:
                raise ValueError("num_symbols must be non-negative")

        if self.is_degenerate:
            return self._decode_degenerate(bits, num_symbols)

        decoded: List[Any] = []
        cursor: HuffmanTree = self.tree
        bit_count = 0
        for bit in bits:
            try:
                cursor = cursor.child(bit)
            except ValueError:
                raise MalformedCodeError(f"Invalid bit value at position {bit_count}: {bit!r}") from None
            bit_count += 1
            if isinstance(cursor, HuffmanLeaf):
                decoded.append(cursor.symbol)
                cursor = self.tree
                if self.logger is not None:
                    self.logger.log(CodingProgressStep("Decoding symbols"))

        if cursor is not self.tree:
            raise MalformedCodeError(f"Code ends in the middle of a symbol after {bit_count} bits")
        if num_symbols is not None and len(decoded) != num_symbols:
            raise MalformedCodeError(f"Expected {num_symbols} symbols, decoded {len(decoded)}")

        if self.logger is not None:
            self.logger.log(CodingLog(len(decoded), bit_count))
        return decoded

    def _decode_degenerate(self, bits: Iterable[int], num_symbols: Optional[int]) -> List[Any]:
        bits = list(bits)
        if bits:
            raise MalformedCodeError(f"Single-symbol alphabet has no bits to consume, got {len(bits)}")
        if num_symbols is None:
            raise DegenerateAlphabetError(self.tree.symbol)
        if self.logger is not None:
            self.logger.log(CodingLog(num_symbols, 0))
        return [self.tree.symbol] * num_symbols

    def get_coder_code(self) -> int:
        """
        Get the coder code.

        Returns:
            int: The code (3 for the Huffman coder).
        """
        return self.coder_code
