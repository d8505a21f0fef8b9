import operator
import pathlib
import random
import sys
import unittest

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from fenwick import Bit, FenwickTree
from modint import ModInt, RuntimePrimeModulus


class BitTests(unittest.TestCase):
    def test_prefix_scenario(self):
        bit = Bit([1, 2, 3, 4, 5])
        self.assertEqual(bit.query(3), 6)
        bit.update(1, 10)
        self.assertEqual(bit.query(3), 16)
        self.assertEqual(bit.query(5), 25)

    def test_query_matches_prefix_sums(self):
        rng = random.Random(0)
        for n in range(0, 40):
            s = [rng.randrange(-100, 100) for _ in range(n)]
            bit = Bit(s)
            self.assertEqual(len(bit), n)
            for k in range(n + 1):
                self.assertEqual(bit.query(k), sum(s[:k]))

    def test_update_then_total(self):
        rng = random.Random(1)
        s = [rng.randrange(0, 1000) for _ in range(33)]
        for i in range(len(s)):
            bit = Bit(s)
            d = rng.randrange(-50, 50)
            bit.update(i, d)
            self.assertEqual(bit.query(len(s)), sum(s) + d)

    def test_range_query(self):
        bit = Bit([1, 2, 3, 4, 5, 6, 7])
        self.assertEqual(bit.range_query(0, 0), 0)
        self.assertEqual(bit.range_query(0, 1), 1)
        self.assertEqual(bit.range_query(5, 6), 6)
        self.assertEqual(bit.range_query(1, 6), 20)
        self.assertEqual(bit.range_query(), 28)
        self.assertEqual(bit.range_query(2), 25)
        self.assertEqual(bit.range_query(stop=3), 6)

    def test_add_and_sub(self):
        bit = Bit([1, 2, 3, 4, 5, 6, 7])
        self.assertEqual(bit.range_query(0, 7), 28)
        bit.add(0, 3)
        self.assertEqual(bit.range_query(0, 7), 31)
        bit.sub(5, 2)
        self.assertEqual(bit.range_query(1, 6), 18)
        self.assertEqual(bit.values(), [4, 2, 3, 4, 5, 4, 7])
        self.assertEqual(bit[5], 4)
        self.assertEqual(bit[-1], 7)

    def test_random_ops_against_list(self):
        rng = random.Random(2)
        s = [0] * 50
        bit = Bit.with_size(50)
        for _ in range(500):
            i = rng.randrange(50)
            d = rng.randrange(-10, 10)
            s[i] += d
            bit.update(i, d)
            a = rng.randrange(51)
            b = rng.randrange(a, 51)
            self.assertEqual(bit.range_query(a, b), sum(s[a:b]))

    def test_out_of_range(self):
        bit = Bit([1, 2, 3])
        with self.assertRaises(IndexError):
            bit.update(3, 1)
        with self.assertRaises(IndexError):
            bit.update(-1, 1)
        with self.assertRaises(IndexError):
            bit.query(4)
        with self.assertRaises(IndexError):
            bit.query(-1)
        with self.assertRaises(IndexError):
            bit.range_query(2, 1)
        with self.assertRaises(ValueError):
            Bit.with_size(-1)

    def test_generic_operator(self):  # xor is its own inverse.
        s = [5, 9, 12, 7, 3]
        bit = Bit(s, op=operator.xor, inverse=operator.xor, identity=0)
        acc = 0
        for k, v in enumerate(s):
            self.assertEqual(bit.query(k), acc)
            acc ^= v
        bit.update(2, 12)
        self.assertEqual(bit.get(2), 0)

    def test_modint_values(self):
        p = RuntimePrimeModulus(13)
        s = [ModInt(v, p) for v in (12, 11, 10)]
        bit = Bit(s, identity=ModInt.zero(p))
        self.assertEqual(bit.query(0), ModInt(0, p))
        self.assertEqual(bit.query(3), ModInt(33, p))
        bit.update(0, ModInt(1, p))
        self.assertEqual(bit.query(1), ModInt(0, p))

    def test_equality_and_repr(self):
        self.assertEqual(Bit([1, 2, 3]), FenwickTree([1, 2, 3]))
        self.assertNotEqual(Bit([1, 2, 3]), Bit([1, 2, 4]))
        self.assertEqual(repr(Bit([1, 2, 3])), "Bit([1, 2, 3])")
        self.assertEqual(Bit.with_size(3).values(), [0, 0, 0])


if __name__ == "__main__":
    unittest.main()
