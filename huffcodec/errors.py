"""
errors.py

Errors raised by the Huffman codec. All of them are ValueErrors so callers
that already guard against bad input keep working.
"""


class HuffmanError(ValueError):
    """Base class for codec errors."""
    pass


class EmptyInputError(HuffmanError):
    """Raised when a tree is requested for an input with no symbols."""

    def __init__(self, message: str = "Cannot build a Huffman tree from empty input") -> None:
        super().__init__(message)


class UnknownSymbolError(HuffmanError):
    """Raised when encoding a symbol that has no leaf in the tree."""

    def __init__(self, symbol: object) -> None:
        self.symbol = symbol
        super().__init__(f"Symbol not present in the Huffman tree: {symbol!r}")


class MalformedBitstreamError(HuffmanError):
    """Raised when a bit sequence does not end on a code boundary."""

    def __init__(self, message: str, position: int = -1) -> None:
        self.position = position
        super().__init__(message)
