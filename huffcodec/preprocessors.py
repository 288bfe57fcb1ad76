import abc
import struct
from typing import List, Tuple, Optional

from .models import Symbol, FrequencyTable
from .logger import Logger, Log, LogLevel
from .settings import BYTE_PREPROCESSOR_CODE, TEXT_PREPROCESSOR_CODE, MAX_UINT32
from .validators import validate_type, validate_max


class BasePreprocessor(abc.ABC):
    @property
    @abc.abstractmethod
    def code(self) -> int:
        """Return the unique identification code for the preprocessor."""
        pass

    @abc.abstractmethod
    def convert_to_symbols(self, data) -> Tuple[List[Symbol], FrequencyTable]:
        """
        Convert raw data to a list of symbols and count them.

        Args:
            data: The input data.

        Returns:
            Tuple[List[Symbol], FrequencyTable]: The symbols and their frequency table.
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

    @abc.abstractmethod
    def encode_symbol(self, symbol: Symbol) -> bytes:
        """Binary form of one symbol inside a header."""
        pass

    @abc.abstractmethod
    def read_symbol(self, data: bytes, offset: int) -> Tuple[Symbol, int]:
        """Read one symbol from header data, returning it and the next offset."""
        pass

    def construct_frequency_table_from_symbols(self, symbols: List[Symbol]) -> FrequencyTable:
        """
        Construct a frequency table from a list of symbols.

        Args:
            symbols (List[Symbol]): A collection of symbols.

        Returns:
            FrequencyTable: Counts in first-seen order.
        """
        table = FrequencyTable()
        table.add_multiple(symbols)
        return table

    def encode_frequency_table_for_header(self, table: FrequencyTable) -> bytes:
        """
        Convert a frequency table into its binary representation to be stored in a header.

        The format:
          - symbol count (4 bytes, big-endian unsigned int)
          - per symbol, in table order: the encoded symbol, then its
            frequency (4 bytes, big-endian unsigned int)

        Args:
            table (FrequencyTable): The table to encode.

        Returns:
            bytes: The binary representation of the table.
        """
        validate_type(table, "Frequency table", FrequencyTable)
        validate_max(table.get_size(), "Symbol count", MAX_UINT32)
        header = struct.pack(">I", table.get_size())
        for symbol, frequency in table.items():
            validate_max(frequency, "Frequency", MAX_UINT32)
            header += self.encode_symbol(symbol)
            header += struct.pack(">I", frequency)
        return header

    def construct_frequency_table_from_header(self, data: bytes) -> FrequencyTable:
        """
        Construct a frequency table from header data.

        Args:
            data (bytes): The header data.

        Returns:
            FrequencyTable: The reconstructed table, in the order it was written.
        """
        validate_type(data, "Header data", bytes)
        if len(data) < 4:
            raise ValueError("Header data is too short")
        count, = struct.unpack(">I", data[:4])
        offset = 4
        table = FrequencyTable()
        for _ in range(count):
            symbol, offset = self.read_symbol(data, offset)
            if len(data) < offset + 4:
                raise ValueError("Header data is incomplete for symbol frequency")
            frequency, = struct.unpack(">I", data[offset:offset + 4])
            offset += 4
            if table.add(symbol, frequency):
                raise ValueError(f"Duplicate symbol in header: {symbol!r}")
        if offset != len(data):
            raise ValueError("Header data has trailing bytes")
        return table


class TextPreprocessor(BasePreprocessor):
    """
    Text Preprocessor: Each character of a string is assigned to a symbol.
    """
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @property
    def code(self) -> int:
        return TEXT_PREPROCESSOR_CODE

    def convert_to_symbols(self, data: str) -> Tuple[List[Symbol], FrequencyTable]:
        if not isinstance(data, str):
            raise ValueError("Data should be in form of str")

        cache = {}
        symbols: List[Symbol] = []
        for char in data:
            if char not in cache:
                cache[char] = Symbol(char)
            symbols.append(cache[char])
        table = self.construct_frequency_table_from_symbols(symbols)
        if self.logger is not None:
            self.logger.log(Log("Preprocessing_log", LogLevel.INFO, f"Characters: {len(symbols)}, Distinct: {table.get_size()}"))
        return symbols, table

    def convert_from_symbols(self, symbols: List[Symbol]) -> str:
        return "".join(symbol.data for symbol in symbols)

    def encode_symbol(self, symbol: Symbol) -> bytes:
        validate_type(symbol, "Symbol", Symbol)
        if symbol.width != "char":
            raise ValueError("Text headers can only hold character symbols")
        encoded = symbol.data.encode("utf-8", "surrogatepass")
        return bytes([len(encoded)]) + encoded

    def read_symbol(self, data: bytes, offset: int) -> Tuple[Symbol, int]:
        if len(data) < offset + 1:
            raise ValueError("Header data is incomplete for symbol length")
        length = data[offset]
        offset += 1
        if len(data) < offset + length:
            raise ValueError("Header data is incomplete for symbol")
        char = data[offset:offset + length].decode("utf-8", "surrogatepass")
        return Symbol(char), offset + length


class BytePreprocessor(BasePreprocessor):
    """
    Byte Preprocessor: Each byte of data is assigned to a symbol.
    """
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @property
    def code(self) -> int:
        return BYTE_PREPROCESSOR_CODE

    def convert_to_symbols(self, data: bytes) -> Tuple[List[Symbol], FrequencyTable]:
        if isinstance(data, bytearray):
            data = bytes(data)
        if not isinstance(data, bytes):
            raise ValueError("Data should be in form of bytes")

        cache = {}
        symbols: List[Symbol] = []
        for b in data:
            if b not in cache:
                cache[b] = Symbol(bytes([b]))
            symbols.append(cache[b])
        table = self.construct_frequency_table_from_symbols(symbols)
        if self.logger is not None:
            self.logger.log(Log("Preprocessing_log", LogLevel.INFO, f"Bytes: {len(symbols)}, Distinct: {table.get_size()}"))
        return symbols, table

    def convert_from_symbols(self, symbols: List[Symbol]) -> bytes:
        return b"".join(symbol.data for symbol in symbols)

    def encode_symbol(self, symbol: Symbol) -> bytes:
        validate_type(symbol, "Symbol", Symbol)
        if symbol.width != "byte":
            raise ValueError("Byte headers can only hold byte symbols")
        return symbol.data

    def read_symbol(self, data: bytes, offset: int) -> Tuple[Symbol, int]:
        if len(data) < offset + 1:
            raise ValueError("Header data is incomplete for symbol")
        return Symbol(data[offset:offset + 1]), offset + 1


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
    if code == BYTE_PREPROCESSOR_CODE:
        return BytePreprocessor(logger)
    elif code == TEXT_PREPROCESSOR_CODE:
        return TextPreprocessor(logger)
    else:
        raise ValueError("Preprocessor code not supported")
