"""
tree.py

Huffman tree construction and symbol code lookup.

Nodes live in a flat list (the arena) and internal nodes refer to their
children by index. The root is always the last node in the arena.
"""


import heapq
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple, Union

from .errors import EmptyInputError
from .logger import Logger, TreeBuildLog
from .models import FrequencyTable, build_frequency_table
from .validators import validate_type


Code = Tuple[bool, ...]


class LeafNode:
    """A node holding exactly one symbol."""
    __slots__ = ("symbol", "frequency")

    def __init__(self, symbol: Hashable, frequency: int) -> None:
        self.symbol = symbol
        self.frequency = frequency

    def __repr__(self) -> str:
        return f"LeafNode({self.symbol!r}, {self.frequency})"


class InternalNode:
    """A merge of two subtrees; left and right are arena indices."""
    __slots__ = ("frequency", "left", "right")

    def __init__(self, frequency: int, left: int, right: int) -> None:
        self.frequency = frequency
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"InternalNode({self.frequency}, left={self.left}, right={self.right})"


Node = Union[LeafNode, InternalNode]


class HuffmanTree:
    """
    Immutable Huffman tree built from a frequency table.

    Use HuffmanTree.build or HuffmanTree.from_frequency_table rather than the
    constructor.
    """

    def __init__(self, nodes: List[Node], frequency_table: FrequencyTable) -> None:
        if not nodes:
            raise EmptyInputError()
        self._nodes: Tuple[Node, ...] = tuple(nodes)
        self._frequency_table = frequency_table.copy()
        self._codes: Dict[Any, Code] = {}
        self._depth = 0
        self._build_code_table()

    @classmethod
    def from_frequency_table(cls, frequency_table: FrequencyTable, logger: Optional[Logger] = None) -> 'HuffmanTree':
        """
        Build the tree by repeatedly merging the two lightest subtrees.

        Ties on frequency are broken by arena index: leaves in table order
        first, then internal nodes in creation order. The first node popped
        becomes the left child.

        Args:
            frequency_table (FrequencyTable): Symbol counts.
            logger (Optional[Logger]): Logger instance for logging.

        Returns:
            HuffmanTree: The built tree.

        Raises:
            EmptyInputError: If the table holds no symbols.
        """
        validate_type(frequency_table, "Frequency table", FrequencyTable)
        if frequency_table.get_size() == 0:
            raise EmptyInputError()

        nodes: List[Node] = []
        heap: List[Tuple[int, int]] = []
        for symbol, frequency in frequency_table.items():
            nodes.append(LeafNode(symbol, frequency))
            heap.append((frequency, len(nodes) - 1))
        heapq.heapify(heap)

        while len(heap) > 1:
            left_freq, left = heapq.heappop(heap)
            right_freq, right = heapq.heappop(heap)
            nodes.append(InternalNode(left_freq + right_freq, left, right))
            heapq.heappush(heap, (left_freq + right_freq, len(nodes) - 1))

        tree = cls(nodes, frequency_table)
        if logger is not None:
            logger.log(TreeBuildLog(tree.get_leaf_count(), tree.get_depth()))
        return tree

    @classmethod
    def build(cls, symbols: Iterable[Hashable], logger: Optional[Logger] = None) -> 'HuffmanTree':
        """Count the symbols and build their tree."""
        return cls.from_frequency_table(build_frequency_table(symbols), logger)

    @staticmethod
    def is_leaf(node: Node) -> bool:
        return isinstance(node, LeafNode)

    @property
    def root(self) -> Node:
        return self._nodes[-1]

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return self._nodes

    @property
    def frequency_table(self) -> FrequencyTable:
        return self._frequency_table

    def get_node(self, index: int) -> Node:
        return self._nodes[index]

    def _build_code_table(self) -> None:
        # A lone leaf gets a one-bit code so every occurrence still consumes a bit.
        if self.is_leaf(self.root):
            self._codes[self.root.symbol] = (False,)
            return
        stack: List[Tuple[int, Code]] = [(len(self._nodes) - 1, ())]
        while stack:
            index, path = stack.pop()
            node = self._nodes[index]
            if isinstance(node, LeafNode):
                self._codes[node.symbol] = path
                self._depth = max(self._depth, len(path))
            else:
                stack.append((node.right, path + (True,)))
                stack.append((node.left, path + (False,)))

    def get_code_table(self) -> Dict[Any, Code]:
        return dict(self._codes)

    def get_code(self, symbol: Hashable) -> Optional[Code]:
        return self._codes.get(symbol)

    def contains(self, symbol: Hashable) -> bool:
        return symbol in self._codes

    def traverse(self, symbol: Hashable) -> Optional[List[bool]]:
        """
        Search the tree for a symbol and return its path from the root.

        Left edges are False and right edges are True.

        Args:
            symbol (Hashable): The symbol to look for.

        Returns:
            Optional[List[bool]]: The path, or None if no leaf holds the symbol.
        """
        if self.is_leaf(self.root):
            return [False] if self.root.symbol == symbol else None
        stack: List[Tuple[int, List[bool]]] = [(len(self._nodes) - 1, [])]
        while stack:
            index, path = stack.pop()
            node = self._nodes[index]
            if isinstance(node, LeafNode):
                if node.symbol == symbol:
                    return path
                continue
            stack.append((node.right, path + [True]))
            stack.append((node.left, path + [False]))
        return None

    def get_depth(self) -> int:
        """Length of the longest root-to-leaf path; 0 for a lone leaf."""
        return self._depth

    def get_leaf_count(self) -> int:
        return len(self._codes)

    def weighted_path_length(self) -> int:
        """Sum of frequency times code length: the encoded size of the input in bits."""
        return sum(self._frequency_table.get_frequency(symbol) * len(code) for symbol, code in self._codes.items())

    def __repr__(self) -> str:
        return f"HuffmanTree(leaves={self.get_leaf_count()}, depth={self.get_depth()})"


def build(symbols: Iterable[Hashable], logger: Optional[Logger] = None) -> HuffmanTree:
    """
    Build a Huffman tree for a symbol sequence.

    Raises:
        EmptyInputError: If the sequence is empty.
    """
    return HuffmanTree.build(symbols, logger)
