import math
import unittest

from huffcodec.errors import EmptyInputError
from huffcodec.logger import Logger
from huffcodec.models import FrequencyTable, build_frequency_table
from huffcodec.tree import HuffmanTree, LeafNode, InternalNode, build


def fibonacci(n):
    values = [1, 1]
    while len(values) < n:
        values.append(values[-1] + values[-2])
    return values[:n]


class TestHuffmanTreeBuild(unittest.TestCase):
    def setUp(self):
        self.text = "abracadabra"
        self.tree = build(self.text)

    def test_root_frequency_is_input_length(self):
        self.assertEqual(self.tree.root.frequency, len(self.text))

    def test_internal_frequencies_are_sums(self):
        for node in self.tree.nodes:
            if isinstance(node, InternalNode):
                left = self.tree.get_node(node.left)
                right = self.tree.get_node(node.right)
                self.assertEqual(node.frequency, left.frequency + right.frequency)

    def test_one_leaf_per_distinct_symbol(self):
        leaves = [node.symbol for node in self.tree.nodes if isinstance(node, LeafNode)]
        self.assertEqual(sorted(leaves), sorted(set(self.text)))
        self.assertEqual(self.tree.get_leaf_count(), 5)
        # A strict binary tree with k leaves has k - 1 internal nodes.
        self.assertEqual(len(self.tree.nodes), 2 * 5 - 1)

    def test_every_node_but_root_has_one_parent(self):
        children = []
        for node in self.tree.nodes:
            if isinstance(node, InternalNode):
                children.extend([node.left, node.right])
        self.assertEqual(sorted(children), list(range(len(self.tree.nodes) - 1)))

    def test_abracadabra_is_optimal(self):
        self.assertEqual(self.tree.weighted_path_length(), 23)
        self.assertEqual(len(self.tree.get_code('a')), 1)

    def test_known_optimal_cost(self):
        table = FrequencyTable()
        for symbol, count in [('a', 1), ('b', 1), ('c', 2), ('d', 4)]:
            table.add(symbol, count)
        tree = HuffmanTree.from_frequency_table(table)
        self.assertEqual(tree.weighted_path_length(), 14)

    def test_never_worse_than_fixed_width(self):
        for text in ["abracadabra", "mississippi river", "the quick brown fox jumps over the lazy dog", "abcdefgh" * 3]:
            tree = build(text)
            distinct = len(set(text))
            fixed_width = math.ceil(math.log2(distinct)) * len(text)
            self.assertLessEqual(tree.weighted_path_length(), fixed_width)

    def test_codes_are_prefix_free(self):
        tree = build("the quick brown fox jumps over the lazy dog")
        codes = list(tree.get_code_table().values())
        for i, first in enumerate(codes):
            for j, second in enumerate(codes):
                if i != j:
                    self.assertNotEqual(second[:len(first)], first)

    def test_rebuild_from_table_is_identical(self):
        table = build_frequency_table("she sells sea shells by the sea shore")
        first = HuffmanTree.from_frequency_table(table)
        second = HuffmanTree.from_frequency_table(table)
        self.assertEqual(first.get_code_table(), second.get_code_table())
        self.assertEqual(first.get_code_table(), build("she sells sea shells by the sea shore").get_code_table())

    def test_tree_keeps_its_own_table(self):
        table = build_frequency_table("aab")
        tree = HuffmanTree.from_frequency_table(table)
        table.add('c', 10)
        self.assertFalse(tree.frequency_table.contains('c'))

    def test_empty_input_raises(self):
        with self.assertRaises(EmptyInputError):
            build([])
        with self.assertRaises(EmptyInputError):
            HuffmanTree.from_frequency_table(FrequencyTable())
        with self.assertRaises(ValueError):
            build("")

    def test_invalid_table_type(self):
        with self.assertRaises(ValueError):
            HuffmanTree.from_frequency_table({'a': 1})

    def test_skewed_tree_is_handled_without_recursion(self):
        table = FrequencyTable()
        weights = fibonacci(60)
        for symbol, weight in enumerate(weights):
            table.add(symbol, weight)
        tree = HuffmanTree.from_frequency_table(table)
        self.assertEqual(tree.get_depth(), len(weights) - 1)
        self.assertEqual(tree.get_leaf_count(), len(weights))

    def test_logs_tree_build(self):
        logger = Logger()
        tree = build("abracadabra", logger)
        logs = logger.get_logs("Tree_build_log")
        self.assertEqual(len(logs), 1)
        self.assertEqual(logs[0].leaf_count, 5)
        self.assertEqual(logs[0].depth, tree.get_depth())


class TestSingleSymbolTree(unittest.TestCase):
    def test_single_leaf(self):
        tree = build("aaaa")
        self.assertTrue(tree.is_leaf(tree.root))
        self.assertEqual(len(tree.nodes), 1)
        self.assertEqual(tree.get_depth(), 0)

    def test_single_leaf_has_one_bit_code(self):
        tree = build("aaaa")
        self.assertEqual(tree.get_code('a'), (False,))
        self.assertEqual(tree.traverse('a'), [False])
        self.assertEqual(tree.weighted_path_length(), 4)


class TestTraverse(unittest.TestCase):
    def test_traverse_matches_code_table(self):
        tree = build("abracadabra")
        for symbol, code in tree.get_code_table().items():
            self.assertEqual(tree.traverse(symbol), list(code))

    def test_traverse_absent_symbol(self):
        tree = build("abracadabra")
        self.assertIsNone(tree.traverse('z'))
        self.assertIsNone(tree.get_code('z'))
        self.assertFalse(tree.contains('z'))
        self.assertIsNone(build("aaa").traverse('z'))

if __name__ == '__main__':
    unittest.main()
