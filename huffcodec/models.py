"""
models.py

The shared objects used in the huffcodec.

"""


from typing import Any, Dict, Hashable, Iterable, Iterator, List, Tuple, Union


class Symbol:
    """
    Represents a single symbol in the data: one character or one byte.
    """
    def __init__(self, data: Union[str, bytes]) -> None:
        if not isinstance(data, (str, bytes)):
            raise ValueError("Data must be of type str or bytes")
        if len(data) != 1:
            raise ValueError("Data must hold exactly one character or one byte")
        self.data: Union[str, bytes] = data

    @property
    def width(self) -> str:
        return "char" if isinstance(self.data, str) else "byte"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Symbol):
            return self.data == other.data
        return False

    def __str__(self) -> str:
        return str(self.data)

    def __repr__(self) -> str:
        return repr(self.data)

    def __hash__(self) -> int:
        return hash(self.data)


class SymbolFrequency:
    """
    Represents a symbol together with its frequency.
    """
    def __init__(self, symbol: Hashable, frequency: int) -> None:
        self.symbol = symbol
        self.frequency: int = frequency

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolFrequency):
            return self.symbol == other.symbol and self.frequency == other.frequency
        return False

    def __str__(self) -> str:
        return f"[{self.symbol}, {self.frequency}]"

    def __repr__(self) -> str:
        return f"[{self.symbol}, {self.frequency}]"


class FrequencyTable:
    """
    Occurrence count of every distinct symbol, kept in first-seen order.

    The order matters: the tree builder seeds its leaves in this order, so two
    tables with the same items in the same order always yield the same tree.
    """
    def __init__(self) -> None:
        self._counts: Dict[Any, int] = {}

    def add(self, symbol: Hashable, count: int = 1) -> bool:
        """
        Add occurrences of a symbol to the table.

        Returns:
            bool: True if the symbol was already present; False if added.
        """
        if not isinstance(count, int) or count < 0:
            raise ValueError("Count must be a non-negative int")
        if symbol in self._counts:
            self._counts[symbol] += count
            return True
        self._counts[symbol] = count
        return False

    def add_multiple(self, symbols: Iterable[Hashable]) -> int:
        """
        Add one occurrence for each symbol.

        Args:
            symbols (Iterable[Hashable]): Iterable of symbols to add.

        Returns:
            int: Count of symbols that were already present.
        """
        count = 0
        for symbol in symbols:
            if self.add(symbol):
                count += 1
        return count

    def get_frequency(self, symbol: Hashable) -> int:
        return self._counts.get(symbol, 0)

    def contains(self, symbol: Hashable) -> bool:
        return symbol in self._counts

    def get_size(self) -> int:
        """Number of distinct symbols."""
        return len(self._counts)

    def get_total(self) -> int:
        """Number of symbols counted, repeats included."""
        return sum(self._counts.values())

    def items(self) -> List[Tuple[Any, int]]:
        return list(self._counts.items())

    def get_symbol_frequencies(self) -> List[SymbolFrequency]:
        return [SymbolFrequency(symbol, freq) for symbol, freq in self._counts.items()]

    def copy(self) -> "FrequencyTable":
        table = FrequencyTable()
        table._counts = dict(self._counts)
        return table

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._counts)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._counts

    def __eq__(self, other: object) -> bool:
        """Tables are equal when they hold the same counts in the same order."""
        if not isinstance(other, FrequencyTable):
            return False
        return list(self._counts.items()) == list(other._counts.items())

    def __repr__(self) -> str:
        return f"FrequencyTable({self._counts!r})"


def build_frequency_table(symbols: Iterable[Hashable]) -> FrequencyTable:
    """
    Count every distinct symbol in a single pass.

    Args:
        symbols (Iterable[Hashable]): The input sequence. May be empty.

    Returns:
        FrequencyTable: Counts keyed by symbol in first-seen order.
    """
    if symbols is None:
        raise ValueError("Symbols cannot be None")
    table = FrequencyTable()
    table.add_multiple(symbols)
    return table
