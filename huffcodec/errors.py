"""
errors.py

Exceptions raised by huffcodec.

All of them derive from ValueError so callers that already guard against
invalid input keep working.
"""


from typing import Any


class HuffmanError(ValueError):
    """Base class for every huffcodec error."""


class EmptyInputError(HuffmanError):
    """Raised when a distribution or tree is requested from no symbols at all."""

    def __init__(self, message: str = "Cannot estimate a distribution from an empty symbol sequence") -> None:
        super().__init__(message)


class SymbolNotFoundError(HuffmanError):
    """Raised when a symbol has no entry in the coding table."""

    def __init__(self, symbol: Any) -> None:
        self.symbol = symbol
        super().__init__(f"Symbol not found in the coding table: {symbol!r}")


class MalformedCodeError(HuffmanError):
    """Raised when a bit sequence cannot be decoded against the tree."""


class DegenerateAlphabetError(HuffmanError):
    """
    Raised when decoding against a single-symbol tree without a symbol count.

    A one-symbol alphabet gets a zero-length code, so the number of encoded
    symbols cannot be recovered from the bits alone.
    """

    def __init__(self, symbol: Any) -> None:
        self.symbol = symbol
        super().__init__(
            f"Alphabet has a single symbol ({symbol!r}); pass num_symbols to decode it"
        )
