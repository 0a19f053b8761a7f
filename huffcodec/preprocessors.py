import abc
from typing import List, Optional, Tuple

from .logger import Logger, PreprocessingProgressStep
from .models import Dictionary, Symbol


class BasePreprocessor(abc.ABC):
    @property
    @abc.abstractmethod
    def code(self) -> int:
        """Return the unique identification code for the preprocessor."""
        pass

    @abc.abstractmethod
    def convert_to_symbols(self, data) -> Tuple[List[Symbol], Dictionary]:
        """
        Convert raw data to a list of symbols and construct a dictionary.

        Args:
            data: The input data.

        Returns:
            Tuple[List[Symbol], Dictionary]: A tuple containing the list of symbols and the constructed dictionary.
        """
        pass

    @abc.abstractmethod
    def convert_from_symbols(self, symbols: List[Symbol]):
        """
        Convert a list of symbols back to data.

        Args:
            symbols (List[Symbol]): The list of symbols.

        Returns:
            The reconstructed data.
        """
        pass

    def construct_dictionary_from_symbols(self, symbols: List[Symbol]) -> Dictionary:
        dictionary = Dictionary()
        dictionary.add_multiple(symbols)
        return dictionary


class BytePreprocessor(BasePreprocessor):
    """
    Byte Preprocessor: Each byte of data is assigned to a symbol.
    """
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @property
    def code(self) -> int:
        return 1

    def convert_to_symbols(self, data: bytes) -> Tuple[List[Symbol], Dictionary]:
        if not isinstance(data, bytes):
            raise ValueError("Data should be in form of bytes")

        dictionary = Dictionary()
        symbols: List[Symbol] = []
        cache = {}
        for b in data:
            if b not in cache:
                symbol = Symbol(bytes([b]))
                cache[b] = symbol
                dictionary.add(symbol)
            symbols.append(cache[b])
            if self.logger is not None:
                self.logger.log(PreprocessingProgressStep("Converting data to symbols", len(data)))

        return symbols, dictionary

    def convert_from_symbols(self, symbols: List[Symbol]) -> bytes:
        return b''.join(symbol.data for symbol in symbols)


class CharPreprocessor(BasePreprocessor):
    """
    Character Preprocessor: Each character of a text is assigned to a symbol
    holding its UTF-8 encoding.
    """
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @property
    def code(self) -> int:
        return 2

    def convert_to_symbols(self, data: str) -> Tuple[List[Symbol], Dictionary]:
        if not isinstance(data, str):
            raise ValueError("Data should be in form of str")

        symbols: List[Symbol] = []
        cache = {}
        for char in data:
            if char not in cache:
                cache[char] = Symbol(char.encode('utf-8'))
            symbols.append(cache[char])
            if self.logger is not None:
                self.logger.log(PreprocessingProgressStep("Converting text to symbols", len(data)))

        return symbols, self.construct_dictionary_from_symbols(symbols)

    def convert_from_symbols(self, symbols: List[Symbol]) -> str:
        return b''.join(symbol.data for symbol in symbols).decode('utf-8')


class TokenPreprocessor(BasePreprocessor):
    """
    Token Preprocessor: Each whitespace separated token of a text is assigned
    to a symbol. Runs of whitespace collapse to a single space on the way back.
    """
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @property
    def code(self) -> int:
        return 3

    def convert_to_symbols(self, data: str) -> Tuple[List[Symbol], Dictionary]:
        if not isinstance(data, str):
            raise ValueError("Data should be in form of str")

        tokens = data.split()
        symbols: List[Symbol] = []
        for token in tokens:
            symbols.append(Symbol(token.encode('utf-8')))
            if self.logger is not None:
                self.logger.log(PreprocessingProgressStep("Converting tokens to symbols", len(tokens)))

        return symbols, self.construct_dictionary_from_symbols(symbols)

    def convert_from_symbols(self, symbols: List[Symbol]) -> str:
        return ' '.join(symbol.data.decode('utf-8') for symbol in symbols)


def get_preprocessor(code: int, logger: Optional[Logger] = None) -> BasePreprocessor:
    """
    Retrieve a preprocessor instance based on the given code.

    Args:
        code (int): The preprocessor code.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        BasePreprocessor: An instance of a preprocessor.

    Raises:
        ValueError: If the preprocessor code is not supported.
    """
    if code == 1:
        return BytePreprocessor(logger)
    elif code == 2:
        return CharPreprocessor(logger)
    elif code == 3:
        return TokenPreprocessor(logger)
    else:
        raise ValueError("Preprocessor code not supported")
