"""
validators.py

Shared codes for input validation in huffcodec.
"""


from typing import Any


def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_hashable(symbol: Any) -> None:
    """Validate that a symbol can be used as a table key."""
    try:
        hash(symbol)
    except TypeError:
        raise ValueError(f"Symbol must be hashable: {symbol!r}") from None
