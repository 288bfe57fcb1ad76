import unittest
from huffcodec.models import Symbol, SymbolFrequency, FrequencyTable, build_frequency_table

class TestSymbol(unittest.TestCase):
    def test_equality_and_hash(self):
        s1 = Symbol('a')
        s2 = Symbol('a')
        s3 = Symbol('b')
        self.assertEqual(s1, s2)
        self.assertNotEqual(s1, s3)
        self.assertEqual(hash(s1), hash(s2))

    def test_char_and_byte_symbols_differ(self):
        self.assertNotEqual(Symbol('a'), Symbol(b'a'))
        self.assertEqual(Symbol('a').width, "char")
        self.assertEqual(Symbol(b'a').width, "byte")

    def test_invalid_data(self):
        with self.assertRaises(ValueError):
            Symbol(97)
        with self.assertRaises(ValueError):
            Symbol('ab')
        with self.assertRaises(ValueError):
            Symbol(b'')

    def test_str_and_repr(self):
        s = Symbol(b'c')
        self.assertIn("b'c'", str(s))
        self.assertIn("b'c'", repr(s))

class TestSymbolFrequency(unittest.TestCase):
    def test_str_and_repr(self):
        s = Symbol('x')
        sf = SymbolFrequency(s, 10)
        expected = f"[{s}, 10]"
        self.assertEqual(str(sf), expected)
        self.assertEqual(repr(sf), expected)

class TestFrequencyTable(unittest.TestCase):
    def test_add_and_contains(self):
        table = FrequencyTable()
        self.assertFalse(table.add('a'))
        self.assertTrue(table.add('a'))
        self.assertTrue(table.contains('a'))
        self.assertIn('a', table)
        self.assertEqual(table.get_frequency('a'), 2)
        self.assertEqual(table.get_frequency('z'), 0)

    def test_add_with_count(self):
        table = FrequencyTable()
        table.add('a', 5)
        table.add('a', 3)
        self.assertEqual(table.get_frequency('a'), 8)
        with self.assertRaises(ValueError):
            table.add('b', -1)

    def test_add_multiple_and_size(self):
        table = FrequencyTable()
        count = table.add_multiple(['a', 'b', 'a', 'c', 'b'])
        self.assertEqual(count, 2)
        self.assertEqual(table.get_size(), 3)
        self.assertEqual(len(table), 3)
        self.assertEqual(table.get_total(), 5)

    def test_keeps_first_seen_order(self):
        table = build_frequency_table("banana")
        self.assertEqual(list(table), ['b', 'a', 'n'])
        self.assertEqual(table.items(), [('b', 1), ('a', 3), ('n', 2)])
        self.assertEqual(table.get_symbol_frequencies(),
                         [SymbolFrequency('b', 1), SymbolFrequency('a', 3), SymbolFrequency('n', 2)])

    def test_equality_depends_on_order(self):
        first = FrequencyTable()
        first.add('a', 1)
        first.add('b', 2)
        second = FrequencyTable()
        second.add('b', 2)
        second.add('a', 1)
        self.assertNotEqual(first, second)
        self.assertEqual(first, first.copy())

    def test_copy_is_independent(self):
        table = build_frequency_table("aab")
        copied = table.copy()
        copied.add('a')
        self.assertEqual(table.get_frequency('a'), 2)
        self.assertEqual(copied.get_frequency('a'), 3)

class TestBuildFrequencyTable(unittest.TestCase):
    def test_abracadabra(self):
        table = build_frequency_table("abracadabra")
        self.assertEqual(table.items(), [('a', 5), ('b', 2), ('r', 2), ('c', 1), ('d', 1)])

    def test_empty_input(self):
        table = build_frequency_table([])
        self.assertEqual(table.get_size(), 0)
        self.assertEqual(table.get_total(), 0)

    def test_bytes_input_counts_byte_values(self):
        table = build_frequency_table(b"\x01\x02\x01")
        self.assertEqual(table.items(), [(1, 2), (2, 1)])

    def test_none_input(self):
        with self.assertRaises(ValueError):
            build_frequency_table(None)

if __name__ == '__main__':
    unittest.main()
