"""
validators.py

Shared codes for input validation in huffcodec.
"""


import numbers
from typing import Any, Iterable, List

import numpy as np


def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_non_negative(value: int, name: str) -> None:
    """Validate that value is an int greater than or equal to zero."""
    validate_type(value, name, int)
    if value < 0:
        raise ValueError(f"{name} must be non-negative")


def validate_max(value: int, name: str, maximum: int) -> None:
    """Validate that value fits in a header field whose largest value is maximum."""
    validate_non_negative(value, name)
    if value > maximum:
        raise ValueError(f"{name} {value} exceeds the maximum of {maximum}")


def validate_bits(bits: Iterable[Any], name: str = "Bits") -> List[bool]:
    """Validate a bit sequence and return it as a list of bools.

    Accepts bools (numpy bools included) and the integers 0 and 1.
    """
    if bits is None:
        raise ValueError(f"{name} cannot be None")
    result = []
    for bit in bits:
        if isinstance(bit, (bool, np.bool_)):
            result.append(bool(bit))
        elif isinstance(bit, numbers.Integral) and bit in (0, 1):
            result.append(bool(bit))
        else:
            raise ValueError(f"{name} must contain only 0/1 or booleans, got {bit!r}")
    return result
