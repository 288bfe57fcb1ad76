import struct
from typing import Any, Optional, Tuple

from .validators import validate_type, validate_non_negative, validate_max
from .preprocessors import BasePreprocessor, BytePreprocessor, TextPreprocessor, get_preprocessor
from .coders import HuffmanCoder, get_coder
from .bits import packed_size
from .tree import HuffmanTree
from .logger import Logger
from .settings import VERSION, FILE_SIGNATURE, MAX_UINT32


class CompressedModel:
    """Represents a compressed payload together with what is needed to decode it."""

    def __init__(
        self,
        preprocessor_code: int,
        version: int,
        coder_code: int,
        bit_count: int,
        frequency_header: bytes,
        data: bytes,
    ) -> None:
        validate_type(preprocessor_code, "Preprocessor code", int)
        validate_type(version, "Version", int)
        validate_type(coder_code, "Coder code", int)
        validate_non_negative(bit_count, "Bit count")
        validate_type(frequency_header, "Frequency header", bytes)
        validate_type(data, "Data", bytes)

        get_preprocessor(preprocessor_code)
        get_coder(coder_code)

        if version != VERSION:
            raise ValueError("Version not supported")
        if len(data) != packed_size(bit_count):
            raise ValueError(f"Data length {len(data)} does not match bit count {bit_count}")

        self.preprocessor_code = preprocessor_code
        self.version = version
        self.coder_code = coder_code
        self.bit_count = bit_count
        self.frequency_header = frequency_header
        self.data = data

    @staticmethod
    def serialize(model: 'CompressedModel') -> bytes:
        """
        Serialize a CompressedModel instance into bytes.

        The format (little-endian):
          - file signature (3 bytes)
          - preprocessor_code (4 bytes, unsigned int)
          - version (4 bytes, unsigned int)
          - coder_code (4 bytes, unsigned int)
          - bit_count (8 bytes, unsigned long long)
          - frequency header length (4 bytes, unsigned int)
          - frequency header (variable length)
          - data length (4 bytes, unsigned int)
          - data (variable length)
        """
        validate_max(len(model.frequency_header), "Frequency header length", MAX_UINT32)
        validate_max(len(model.data), "Data length", MAX_UINT32)
        serialized = FILE_SIGNATURE
        serialized += struct.pack(
            "<IIIQ",
            model.preprocessor_code,
            model.version,
            model.coder_code,
            model.bit_count,
        )
        serialized += struct.pack("<I", len(model.frequency_header))
        serialized += model.frequency_header
        serialized += struct.pack("<I", len(model.data))
        serialized += model.data
        return serialized

    @staticmethod
    def deserialize(serialized: bytes) -> 'CompressedModel':
        """
        Deserialize bytes into a CompressedModel instance.
        The byte structure is expected to be the same as produced by serialize().
        """
        validate_type(serialized, "Serialized data", bytes)
        offset = len(FILE_SIGNATURE)
        if serialized[:offset] != FILE_SIGNATURE:
            raise ValueError("Invalid file signature")
        if len(serialized) < offset + 20:
            raise ValueError("Serialized data is too short")
        preprocessor_code, version, coder_code, bit_count = struct.unpack("<IIIQ", serialized[offset:offset + 20])
        offset += 20

        if len(serialized) < offset + 4:
            raise ValueError("Serialized data is incomplete for frequency header length")
        header_length, = struct.unpack("<I", serialized[offset:offset + 4])
        offset += 4
        if len(serialized) < offset + header_length:
            raise ValueError("Serialized data is incomplete for frequency header")
        frequency_header = serialized[offset:offset + header_length]
        offset += header_length

        if len(serialized) < offset + 4:
            raise ValueError("Serialized data is incomplete for data length")
        data_length, = struct.unpack("<I", serialized[offset:offset + 4])
        offset += 4
        if len(serialized) != offset + data_length:
            raise ValueError("Serialized data length does not match the recorded data length")
        data = serialized[offset:offset + data_length]

        return CompressedModel(preprocessor_code, version, coder_code, bit_count, frequency_header, data)


class HuffmanCodec:
    def compress_raw(
        self,
        data: Any,
        preprocessor: BasePreprocessor,
        logger: Optional[Logger] = None,
    ) -> Tuple[bytes, HuffmanTree, int]:
        """
        Compress data into bare packed bytes.

        The packed bytes carry neither the tree nor the bit count; both are
        returned and must be supplied again to decompress_raw.

        Args:
            data: The data to compress, in the form the preprocessor accepts.
            preprocessor: An instance of BasePreprocessor.
            logger: Logger instance for logging.

        Returns:
            Tuple[bytes, HuffmanTree, int]: Packed bytes, the tree and the number of meaningful bits.
        """
        if not isinstance(preprocessor, BasePreprocessor):
            raise ValueError("Preprocessor must be an instance of BasePreprocessor")
        syms, table = preprocessor.convert_to_symbols(data)
        tree = HuffmanTree.from_frequency_table(table, logger)
        coder = HuffmanCoder(logger)
        packed = coder.encode(syms, tree)
        return packed, tree, coder.last_bit_count

    def decompress_raw(
        self,
        packed: bytes,
        tree: HuffmanTree,
        bit_count: int,
        preprocessor: BasePreprocessor,
        logger: Optional[Logger] = None,
    ) -> Any:
        """
        Decompress bare packed bytes with the tree they were encoded with.

        Args:
            packed (bytes): The packed bytes.
            tree (HuffmanTree): The tree from compress_raw, or one rebuilt from the original input.
            bit_count (int): The number of meaningful bits.
            preprocessor: The preprocessor used for compression.
            logger: Logger instance for logging.

        Returns:
            The decompressed data.
        """
        if not isinstance(preprocessor, BasePreprocessor):
            raise ValueError("Preprocessor must be an instance of BasePreprocessor")
        syms = HuffmanCoder(logger).decode(packed, tree, bit_count)
        return preprocessor.convert_from_symbols(syms)

    def compress(
        self,
        data: Any,
        preprocessor: BasePreprocessor,
        logger: Optional[Logger] = None,
    ) -> CompressedModel:
        """
        Compress the input data.

        Args:
            data: The data to compress.
            preprocessor: An instance of BasePreprocessor.
            logger: Logger instance for logging.

        Returns:
            CompressedModel: The resulting compressed model.
        """
        if not isinstance(preprocessor, BasePreprocessor):
            raise ValueError("Preprocessor must be an instance of BasePreprocessor")

        syms, table = preprocessor.convert_to_symbols(data)
        tree = HuffmanTree.from_frequency_table(table, logger)
        coder = HuffmanCoder(logger)
        encoded_data = coder.encode(syms, tree)
        return CompressedModel(
            preprocessor.code,
            VERSION,
            coder.get_coder_code(),
            coder.last_bit_count,
            preprocessor.encode_frequency_table_for_header(table),
            encoded_data,
        )

    def decompress(
        self,
        compressed_model: CompressedModel,
        logger: Optional[Logger] = None,
    ) -> Any:
        """
        Decompress the encoded data.

        Args:
            compressed_model (CompressedModel): The compressed model.
            logger: Logger instance for logging.

        Returns:
            The decompressed data.
        """
        if not isinstance(compressed_model, CompressedModel):
            raise ValueError("Input must be a CompressedModel instance")
        if compressed_model.version != VERSION:
            raise ValueError("Version not supported")

        preprocessor = get_preprocessor(compressed_model.preprocessor_code, logger=logger)
        table = preprocessor.construct_frequency_table_from_header(compressed_model.frequency_header)
        tree = HuffmanTree.from_frequency_table(table, logger)
        coder = get_coder(compressed_model.coder_code, logger=logger)
        syms = coder.decode(compressed_model.data, tree, compressed_model.bit_count)
        return preprocessor.convert_from_symbols(syms)


class TextHuffmanCodec(HuffmanCodec):
    def compress(self, data: str, logger: Optional[Logger] = None) -> CompressedModel:
        """
        Compress a string, one symbol per character.

        Args:
            data (str): The text to compress.
            logger: Logger instance for logging.

        Returns:
            CompressedModel: The resulting compressed model.
        """
        validate_type(data, "Data", str)
        return super().compress(data, TextPreprocessor(logger), logger)


class ByteHuffmanCodec(HuffmanCodec):
    def compress(self, data: bytes, logger: Optional[Logger] = None) -> CompressedModel:
        """
        Compress binary data, one symbol per byte.

        Args:
            data (bytes): The data to compress.
            logger: Logger instance for logging.

        Returns:
            CompressedModel: The resulting compressed model.
        """
        validate_type(data, "Data", bytes)
        return super().compress(data, BytePreprocessor(logger), logger)
