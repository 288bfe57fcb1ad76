"""
settings.py

Package-wide constants for huffcodec.
"""

VERSION = 1
FILE_SIGNATURE = b'HFC'

BYTE_PREPROCESSOR_CODE = 3
TEXT_PREPROCESSOR_CODE = 4

HUFFMAN_CODER_CODE = 1

# Bit 0 of every packed byte holds the earliest bit.
BIT_ORDER = "little"

CODING_STEP_INTERVAL_COUNT = 1000
DECODING_STEP_INTERVAL_COUNT = 1000

# Largest count or length a 4-byte header field can hold.
MAX_UINT32 = 0xFFFFFFFF
