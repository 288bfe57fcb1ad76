"""
coders.py

Huffman encoding and decoding over a built tree.

"""


import abc
from typing import Any, Hashable, Iterable, List, Optional

from .bits import pack_bits, packed_size, unpack_bits
from .errors import MalformedBitstreamError, UnknownSymbolError
from .logger import Logger, CodingLog, CodingProgressStep, DecodingProgressStep
from .settings import HUFFMAN_CODER_CODE
from .tree import HuffmanTree, LeafNode
from .validators import validate_bits, validate_type, validate_non_negative


def encode(tree: HuffmanTree, symbols: Iterable[Hashable], logger: Optional[Logger] = None) -> List[bool]:
    """
    Concatenate the code of every symbol, in input order.

    Args:
        tree (HuffmanTree): The tree built for this input.
        symbols (Iterable[Hashable]): The symbols to encode.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        List[bool]: The encoded bits.

    Raises:
        UnknownSymbolError: If a symbol has no leaf in the tree.
    """
    validate_type(tree, "Tree", HuffmanTree)
    if symbols is None:
        raise ValueError("Symbols cannot be None")
    codes = tree.get_code_table()
    bits: List[bool] = []
    symbol_count = 0
    for symbol in symbols:
        code = codes.get(symbol)
        if code is None:
            raise UnknownSymbolError(symbol)
        bits.extend(code)
        symbol_count += 1
        if logger is not None:
            logger.log(CodingProgressStep("Encoding symbols"))
    if logger is not None:
        logger.log(CodingLog(symbol_count, len(bits)))
    return bits


def decode(tree: HuffmanTree, bits: Iterable[Any], logger: Optional[Logger] = None) -> List[Any]:
    """
    Walk the tree bit by bit and emit a symbol at every leaf.

    False moves to the left child and True to the right child. After a leaf
    the walk restarts at the root.

    Args:
        tree (HuffmanTree): The tree the bits were encoded with.
        bits (Iterable[Any]): Booleans or 0/1 ints.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        List[Any]: The decoded symbols.

    Raises:
        MalformedBitstreamError: If the bits do not end on a code boundary.
    """
    validate_type(tree, "Tree", HuffmanTree)
    checked = validate_bits(bits)
    nodes = tree.nodes
    root_index = len(nodes) - 1
    decoded: List[Any] = []

    if tree.is_leaf(tree.root):
        for position, bit in enumerate(checked):
            if bit:
                raise MalformedBitstreamError(f"Unexpected 1 bit at position {position} for a single-symbol tree", position)
            decoded.append(tree.root.symbol)
            if logger is not None:
                logger.log(DecodingProgressStep("Decoding symbols"))
        return decoded

    current = root_index
    for bit in checked:
        node = nodes[current]
        current = node.right if bit else node.left
        child = nodes[current]
        if isinstance(child, LeafNode):
            decoded.append(child.symbol)
            current = root_index
            if logger is not None:
                logger.log(DecodingProgressStep("Decoding symbols"))

    if current != root_index:
        raise MalformedBitstreamError("Bit sequence ends in the middle of a code", len(checked))
    return decoded


class CoderBase(abc.ABC):
    """
    Abstract base class for coders.
    """

    @abc.abstractmethod
    def encode(self, symbols: List[Hashable], tree: HuffmanTree) -> bytes:
        """
        Encode a sequence of symbols into a packed byte stream.

        Args:
            symbols (List[Hashable]): The list of symbols to be encoded.
            tree (HuffmanTree): The tree built for these symbols.

        Returns:
            bytes: The encoded data.
        """
        pass

    @abc.abstractmethod
    def decode(self, data: bytes, tree: HuffmanTree, bit_count: int) -> List[Any]:
        """
        Decode a packed byte stream back into symbols.

        Args:
            data (bytes): The encoded data.
            tree (HuffmanTree): The tree used during encoding.
            bit_count (int): Number of meaningful bits in data.

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
    Static Huffman coder producing packed, zero padded bytes.

    The packed output does not record its own bit length; after encode it is
    available as last_bit_count.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger
        self.coder_code: int = HUFFMAN_CODER_CODE
        self.last_bit_count: Optional[int] = None

    def encode(self, symbols: List[Hashable], tree: HuffmanTree) -> bytes:
        if symbols is None or not isinstance(symbols, list):
            raise ValueError("Symbols must be a list")
        bits = encode(tree, symbols, self.logger)
        self.last_bit_count = len(bits)
        return pack_bits(bits)

    def decode(self, data: bytes, tree: HuffmanTree, bit_count: int) -> List[Any]:
        if isinstance(data, bytearray):
            data = bytes(data)
        validate_type(data, "data", bytes)
        validate_non_negative(bit_count, "Bit count")
        byte_count = packed_size(bit_count)
        if byte_count > len(data):
            raise ValueError(f"Data holds {len(data) * 8} bits but {bit_count} were requested")
        bits = unpack_bits(data, byte_count)[:bit_count]
        return decode(tree, bits, self.logger)

    def get_coder_code(self) -> int:
        return self.coder_code


def get_coder(code: int, logger: Optional[Logger] = None) -> CoderBase:
    """
    Retrieve a coder instance based on the given code.

    Args:
        code (int): The coder code.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        CoderBase: An instance of a coder.

    Raises:
        ValueError: If the coder code is unknown.
    """
    if code == HUFFMAN_CODER_CODE:
        return HuffmanCoder(logger)
    else:
        raise ValueError("Unknown coder code: " + str(code))
