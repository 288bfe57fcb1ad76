"""
huffcodec: Huffman coding for text and binary data.
"""

from .codecs import (
    CompressedModel,
    HuffmanCodec,
    TextHuffmanCodec,
    ByteHuffmanCodec,
)

from .coders import (
    CoderBase,
    HuffmanCoder,
    encode,
    decode,
    get_coder,
)

from .bits import (
    pack_bits,
    unpack_bits,
    packed_size,
)

from .tree import (
    HuffmanTree,
    LeafNode,
    InternalNode,
    build,
)

from .models import (
    Symbol,
    SymbolFrequency,
    FrequencyTable,
    build_frequency_table,
)

from .preprocessors import (
    BasePreprocessor,
    TextPreprocessor,
    BytePreprocessor,
    get_preprocessor,
)

from .errors import (
    HuffmanError,
    EmptyInputError,
    UnknownSymbolError,
    MalformedBitstreamError,
)

from .settings import VERSION

from .logger import (
    Logger,
    Log,
    LogLevel,
    TreeBuildLog,
    CodingLog,
    CodingProgressStep,
    DecodingProgressStep,
)

# Validators
from .validators import *

__all__ = [

    "CompressedModel",
    "HuffmanCodec",
    "TextHuffmanCodec",
    "ByteHuffmanCodec",

    "CoderBase",
    "HuffmanCoder",
    "encode",
    "decode",
    "get_coder",

    "pack_bits",
    "unpack_bits",
    "packed_size",

    "HuffmanTree",
    "LeafNode",
    "InternalNode",
    "build",

    "Symbol",
    "SymbolFrequency",
    "FrequencyTable",
    "build_frequency_table",

    "BasePreprocessor",
    "TextPreprocessor",
    "BytePreprocessor",
    "get_preprocessor",

    "HuffmanError",
    "EmptyInputError",
    "UnknownSymbolError",
    "MalformedBitstreamError",

    "VERSION",

    "Logger",
    "Log",
    "LogLevel",
    "TreeBuildLog",
    "CodingLog",
    "CodingProgressStep",
    "DecodingProgressStep",
]
