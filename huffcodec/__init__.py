"""
huffcodec: A Python library for Huffman coding of arbitrary symbol sequences.
"""

from .models import (
    Symbol,
    SymbolFrequency,
    Dictionary,
    Bit,
    Code,
    HuffmanLeaf,
    HuffmanNode,
    HuffmanTree,
)

from .errors import (
    HuffmanError,
    EmptyInputError,
    SymbolNotFoundError,
    MalformedCodeError,
    DegenerateAlphabetError,
)

from .distributions import (
    Distribution,
    symbol_frequencies,
    symbol_probabilities,
    from_frequencies,
    validate_distribution,
)

from .trees import (
    build_tree,
    tree_probability,
    iter_leaves,
    count_leaves,
    tree_depth,
)

from .tables import (
    Table,
    generate_table,
)

from .coders import (
    CoderBase,
    HuffmanCoder,
)

from .preprocessors import (
    BasePreprocessor,
    BytePreprocessor,
    CharPreprocessor,
    TokenPreprocessor,
    get_preprocessor,
)

from .analysis import (
    entropy,
    expected_code_length,
    is_prefix_free,
    compression_ratio,
)

from .settings import HuffmanCoderSettings, PROBABILITY_TOLERANCE

from .logger import (
    Logger,
    Log,
    LogLevel,
    TreeBuildLog,
    CodingLog,
    EncodedSymbolCode,
    DegenerateAlphabetLog,
    PreprocessingProgressStep,
    CodingProgressStep,
)

__all__ = [

    "Symbol",
    "SymbolFrequency",
    "Dictionary",
    "Bit",
    "Code",
    "HuffmanLeaf",
    "HuffmanNode",
    "HuffmanTree",

    "HuffmanError",
    "EmptyInputError",
    "SymbolNotFoundError",
    "MalformedCodeError",
    "DegenerateAlphabetError",

    "Distribution",
    "symbol_frequencies",
    "symbol_probabilities",
    "from_frequencies",
    "validate_distribution",

    "build_tree",
    "tree_probability",
    "iter_leaves",
    "count_leaves",
    "tree_depth",

    "Table",
    "generate_table",

    "CoderBase",
    "HuffmanCoder",

    "BasePreprocessor",
    "BytePreprocessor",
    "CharPreprocessor",
    "TokenPreprocessor",
    "get_preprocessor",

    "entropy",
    "expected_code_length",
    "is_prefix_free",
    "compression_ratio",

    "HuffmanCoderSettings",
    "PROBABILITY_TOLERANCE",

    "Logger",
    "Log",
    "LogLevel",
    "TreeBuildLog",
    "CodingLog",
    "EncodedSymbolCode",
    "DegenerateAlphabetLog",
    "PreprocessingProgressStep",
    "CodingProgressStep",
]
