import random
import unittest
from concurrent.futures import ThreadPoolExecutor

from huffcodec.coders import CoderBase, HuffmanCoder
from huffcodec.distributions import from_frequencies, symbol_probabilities
from huffcodec.errors import (
    DegenerateAlphabetError,
    EmptyInputError,
    MalformedCodeError,
    SymbolNotFoundError,
)
from huffcodec.logger import CodingLog, DegenerateAlphabetLog, EncodedSymbolCode, Logger, TreeBuildLog
from huffcodec.models import Bit, HuffmanLeaf, Symbol
from huffcodec.settings import HuffmanCoderSettings
from huffcodec.trees import build_tree

class TestHuffmanCoder(unittest.TestCase):
    def setUp(self):
        self.text = "aaaabbbccd"
        self.coder = HuffmanCoder.from_symbols(self.text)

    def test_is_coder(self):
        self.assertIsInstance(self.coder, CoderBase)
        self.assertEqual(self.coder.get_coder_code(), 3)
        self.assertFalse(self.coder.is_degenerate)

    def test_round_trip(self):
        encoded = self.coder.encode(self.text)
        self.assertEqual(len(encoded), 19)
        self.assertEqual(self.coder.decode(encoded), list(self.text))

    def test_round_trip_subset_and_reordered(self):
        message = "dcba" * 3 + "a"
        self.assertEqual(self.coder.decode(self.coder.encode(message)), list(message))

    def test_encode_concatenates_codes(self):
        expected = list(self.coder.code_for('d')) + list(self.coder.code_for('a'))
        self.assertEqual(self.coder.encode("da"), expected)

    def test_encode_empty(self):
        self.assertEqual(self.coder.encode(""), [])
        self.assertEqual(self.coder.decode([]), [])

    def test_two_balanced_symbols(self):
        coder = HuffmanCoder.from_symbols("aabb")
        encoded = coder.encode("ab")
        self.assertEqual(encoded, [Bit.LEFT, Bit.RIGHT])
        self.assertEqual(coder.decode(encoded), ['a', 'b'])

    def test_decode_accepts_ints(self):
        coder = HuffmanCoder.from_symbols("aabb")
        self.assertEqual(coder.decode([1, 0, 0]), ['b', 'a', 'a'])

    def test_unknown_symbol(self):
        coder = HuffmanCoder.from_symbols("abc")
        with self.assertRaises(SymbolNotFoundError) as context:
            coder.encode("abcd")
        self.assertEqual(context.exception.symbol, 'd')
        with self.assertRaises(SymbolNotFoundError):
            coder.code_for('z')

    def test_unhashable_symbol(self):
        with self.assertRaises(SymbolNotFoundError):
            self.coder.encode([['a']])

    def test_truncated_code(self):
        encoded = self.coder.encode(self.text)
        with self.assertRaises(MalformedCodeError):
            self.coder.decode(encoded[:-1])

    def test_invalid_bit(self):
        with self.assertRaises(MalformedCodeError):
            self.coder.decode([0, 2])

    def test_symbol_count_mismatch(self):
        encoded = self.coder.encode("ab")
        self.assertEqual(self.coder.decode(encoded, num_symbols=2), ['a', 'b'])
        with self.assertRaises(MalformedCodeError):
            self.coder.decode(encoded, num_symbols=3)

    def test_invalid_symbol_count(self):
        with self.assertRaises(ValueError):
            self.coder.decode([], num_symbols=-1)
        with self.assertRaises(ValueError):
            self.coder.decode([], num_symbols="2")

    def test_none_inputs(self):
        with self.assertRaises(ValueError):
            self.coder.encode(None)
        with self.assertRaises(ValueError):
            self.coder.decode(None)

    def test_empty_input(self):
        with self.assertRaises(EmptyInputError):
            HuffmanCoder.from_symbols([])

    def test_invalid_distribution(self):
        with self.assertRaises(ValueError):
            HuffmanCoder({'a': 0.5, 'b': 0.4})
        coder = HuffmanCoder({'a': 0.5, 'b': 0.4}, HuffmanCoderSettings(validate_distribution=False))
        self.assertEqual(coder.decode(coder.encode("ab")), ['a', 'b'])

    def test_invalid_settings(self):
        with self.assertRaises(ValueError):
            HuffmanCoder({'a': 1.0}, settings="fast")

    def test_distribution_is_a_private_copy(self):
        distribution = {'a': 0.5, 'b': 0.5}
        coder = HuffmanCoder(distribution)
        distribution['a'] = 0.1
        distribution['z'] = 0.4
        self.assertEqual(dict(coder.distribution), {'a': 0.5, 'b': 0.5})
        self.assertEqual(set(coder.distribution), set(coder.table))
        with self.assertRaises(TypeError):
            coder.distribution['c'] = 0.2

    def test_none_distribution(self):
        with self.assertRaises(ValueError):
            HuffmanCoder(None)

    def test_skewed_distribution(self):
        # doubling counts yield a tree whose depth exceeds the recursion limit
        coder = HuffmanCoder(from_frequencies({i: 2 ** i for i in range(1020)}))
        self.assertEqual(len(coder.table), 1020)
        self.assertEqual(len(coder.code_for(0)), 1019)
        message = [0, 1019, 500, 1]
        self.assertEqual(coder.decode(coder.encode(message)), message)

    def test_table_matches_tree(self):
        for symbol, code in self.coder.table.items():
            self.assertEqual(self.coder.decode(code), [symbol])

    def test_generic_symbols(self):
        symbols = [Symbol(b'x'), Symbol(b'yy'), Symbol(b'x'), Symbol(b'z')]
        coder = HuffmanCoder.from_symbols(symbols)
        self.assertEqual(coder.decode(coder.encode(symbols)), symbols)

        tokens = [(0, 1), (1, 0), (0, 1), 42]
        coder = HuffmanCoder.from_symbols(tokens)
        self.assertEqual(coder.decode(coder.encode(tokens)), tokens)

    def test_random_round_trip(self):
        rng = random.Random(1234)
        data = [rng.choice("abcdefghij") for _ in range(2000)] + [rng.randint(0, 500) for _ in range(500)]
        coder = HuffmanCoder.from_symbols(data)
        self.assertEqual(coder.decode(coder.encode(data), num_symbols=len(data)), data)

    def test_concurrent_use(self):
        messages = ["abcd" * 10, "dddd", "aaaabbbccd" * 5, "cab"]
        with ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(lambda m: self.coder.decode(self.coder.encode(m)), messages * 5))
        self.assertEqual(results, [list(m) for m in messages * 5])

class TestHuffmanCoderFromTree(unittest.TestCase):
    def test_from_tree(self):
        distribution = symbol_probabilities("abracadabra")
        tree = build_tree(distribution)
        coder = HuffmanCoder.from_tree(tree)
        self.assertIs(coder.tree, tree)
        self.assertEqual(dict(coder.table), dict(HuffmanCoder(distribution).table))
        for symbol, p in distribution.items():
            self.assertAlmostEqual(coder.distribution[symbol], p)
        self.assertEqual(coder.decode(coder.encode("cadabra")), list("cadabra"))

    def test_from_tree_invalid(self):
        with self.assertRaises(ValueError):
            HuffmanCoder.from_tree({'a': 1.0})

class TestDegenerateAlphabet(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.logger.display_warning = False
        self.coder = HuffmanCoder.from_symbols("aaaa", logger=self.logger)

    def test_tree_and_table(self):
        self.assertTrue(self.coder.is_degenerate)
        self.assertIsInstance(self.coder.tree, HuffmanLeaf)
        self.assertEqual(dict(self.coder.table), {'a': ()})

    def test_encode_emits_no_bits(self):
        self.assertEqual(self.coder.encode("aaaa"), [])

    def test_decode_requires_symbol_count(self):
        with self.assertRaises(DegenerateAlphabetError):
            self.coder.decode([])
        self.assertEqual(self.coder.decode([], num_symbols=4), list("aaaa"))

    def test_decode_rejects_bits(self):
        with self.assertRaises(MalformedCodeError):
            self.coder.decode([Bit.LEFT], num_symbols=1)

    def test_unknown_symbol(self):
        with self.assertRaises(SymbolNotFoundError):
            self.coder.encode("ab")

    def test_warning_logged(self):
        logs = self.logger.get_logs(DegenerateAlphabetLog)
        self.assertEqual(len(logs), 1)
        self.assertEqual(logs[0].symbol, 'a')

class TestCoderLogging(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()

    def test_coding_logs(self):
        coder = HuffmanCoder.from_symbols("aabb", logger=self.logger)
        self.assertEqual(len(self.logger.get_logs(TreeBuildLog)), 1)
        encoded = coder.encode("abab")
        coder.decode(encoded)
        coding_logs = self.logger.get_logs(CodingLog)
        self.assertEqual(len(coding_logs), 2)
        self.assertEqual(coding_logs[0].symbol_count, 4)
        self.assertEqual(coding_logs[0].encoded_bits, 4)
        self.assertEqual(coding_logs[1].symbol_count, 4)
        self.assertEqual(self.logger.get_logs(EncodedSymbolCode), [])

    def test_symbol_logs(self):
        coder = HuffmanCoder.from_symbols("aabb", HuffmanCoderSettings(log_symbols=True), self.logger)
        coder.encode("ab")
        logs = self.logger.get_logs(EncodedSymbolCode)
        self.assertEqual([log.symbol for log in logs], ['a', 'b'])
        self.assertEqual(logs[0].code, (Bit.LEFT,))

if __name__ == '__main__':
    unittest.main()
