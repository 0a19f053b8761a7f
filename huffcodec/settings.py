"""
settings.py

Default configuration values for huffcodec.
"""


PROBABILITY_TOLERANCE = 1e-9
BITS_PER_BYTE = 8


class HuffmanCoderSettings:
    """
    Settings for the Huffman coder.
    """

    def __init__(
        self,
        tolerance: float = PROBABILITY_TOLERANCE,
        validate_distribution: bool = True,
        log_symbols: bool = False,
    ) -> None:
        if tolerance < 0:
            raise ValueError("Tolerance must be non-negative")
        self.tolerance: float = tolerance
        self.validate_distribution: bool = validate_distribution
        self.log_symbols: bool = log_symbols
