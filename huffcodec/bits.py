"""
bits.py

Conversion between bit sequences and packed bytes.

Within each byte the first bit goes to the least significant position. The
last byte is padded with zero bits on its high end.
"""


from typing import Any, Iterable, List, Optional

import numpy as np

from .settings import BIT_ORDER
from .validators import validate_bits, validate_type, validate_non_negative


def packed_size(bit_count: int) -> int:
    """Number of bytes needed to hold bit_count bits."""
    validate_non_negative(bit_count, "Bit count")
    return (bit_count + 7) // 8


def pack_bits(bits: Iterable[Any]) -> bytes:
    """
    Pack a sequence of bits into bytes.

    Args:
        bits (Iterable[Any]): Booleans or 0/1 ints.

    Returns:
        bytes: Packed bytes, zero padded to a byte boundary.
    """
    checked = validate_bits(bits)
    if not checked:
        return b""
    return np.packbits(np.array(checked, dtype=np.uint8), bitorder=BIT_ORDER).tobytes()


def unpack_bits(data: bytes, byte_count: Optional[int] = None) -> List[bool]:
    """
    Unpack bytes into a sequence of bits.

    Args:
        data (bytes): The packed bytes.
        byte_count (Optional[int]): How many leading bytes to unpack; all of them if None.

    Returns:
        List[bool]: byte_count * 8 bits, padding included.
    """
    if isinstance(data, bytearray):
        data = bytes(data)
    validate_type(data, "Data", bytes)
    if byte_count is None:
        byte_count = len(data)
    validate_non_negative(byte_count, "Byte count")
    if byte_count > len(data):
        raise ValueError(f"Byte count {byte_count} exceeds data length {len(data)}")
    if byte_count == 0:
        return []
    buffer = np.frombuffer(data, dtype=np.uint8, count=byte_count)
    return np.unpackbits(buffer, bitorder=BIT_ORDER).astype(bool).tolist()
