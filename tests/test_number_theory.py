import pathlib
import sys
import unittest

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from number_theory import gcd, is_prime


class NumberTheoryTests(unittest.TestCase):
    def test_gcd(self):
        self.assertEqual(gcd(1, 2), 1)
        self.assertEqual(gcd(99, 0), 99)
        self.assertEqual(gcd(0, 99), 99)
        self.assertEqual(gcd(6, 9), 3)
        self.assertEqual(gcd(9, 6), 3)
        self.assertEqual(gcd(-6, 9), 3)
        self.assertEqual(gcd(0, 0), 0)

    def test_is_prime_small(self):  # Compare against trial division.
        for n in range(-5, 2000):
            expected = n >= 2 and all(n % d for d in range(2, int(n**0.5) + 1))
            self.assertEqual(is_prime(n), expected, n)

    def test_is_prime_large(self):
        self.assertTrue(is_prime(1_000_000_007))
        self.assertTrue(is_prime(998_244_353))
        self.assertTrue(is_prime((1 << 61) - 1))
        self.assertFalse(is_prime(1_000_000_007 * 998_244_353))
        self.assertFalse(is_prime(3_215_031_751))  # strong pseudoprime to bases 2, 3, 5, 7
        self.assertFalse(is_prime(561))


if __name__ == "__main__":
    unittest.main()
