import unittest

from sympy import factorint

from converter.facts import (
    TRIAL_DIVISION_LIMIT,
    _divisors_from_factorization,
    facts,
    factors,
    is_prime,
    scientific,
)


def naive_factors(n):
    return [i for i in range(1, n + 1) if n % i == 0]


class TestFactors(unittest.TestCase):
    def test_matches_naive_enumeration(self):
        for n in range(1, 400):
            with self.subTest(n=n):
                self.assertEqual(factors(n), naive_factors(n))

    def test_examples(self):
        self.assertEqual(factors(1), [1])
        self.assertEqual(factors(12), [1, 2, 3, 4, 6, 12])
        self.assertEqual(factors(49), [1, 7, 49])

    def test_non_positive_is_empty(self):
        self.assertEqual(factors(0), [])
        self.assertEqual(factors(-12), [])

    def test_large_numbers(self):
        n = 10 ** 15
        divs = factors(n)
        self.assertEqual(len(divs), 256)
        self.assertEqual(divs[:6], [1, 2, 4, 5, 8, 10])
        self.assertEqual(divs[-1], n)
        self.assertEqual(divs, sorted(set(divs)))
        self.assertTrue(all(n % d == 0 for d in divs))

    def test_both_strategies_agree_at_the_limit(self):
        n = TRIAL_DIVISION_LIMIT
        self.assertEqual(factors(n), _divisors_from_factorization(factorint(n)))
        self.assertEqual(factors(n)[-2:], [n // 2, n])


class TestIsPrime(unittest.TestCase):
    def test_matches_factor_count(self):
        for n in range(-5, 500):
            with self.subTest(n=n):
                self.assertEqual(is_prime(n), n > 1 and len(factors(n)) == 2)

    def test_known_values(self):
        self.assertFalse(is_prime(1))
        self.assertTrue(is_prime(2))
        self.assertTrue(is_prime(97))
        self.assertFalse(is_prime(91))
        self.assertTrue(is_prime(1_000_000_007))

    def test_large_numbers(self):
        self.assertTrue(is_prime(10 ** 12 + 39))
        self.assertFalse(is_prime(10 ** 12 + 41))
        self.assertTrue(is_prime(2 ** 61 - 1))
        self.assertFalse(is_prime(999_999_999_989 * 3))


class TestScientific(unittest.TestCase):
    def test_examples(self):
        cases = {
            0: "0.00e+0",
            1: "1.00e+0",
            42: "4.20e+1",
            100: "1.00e+2",
            1225: "1.23e+3",
            1235: "1.24e+3",
            12345: "1.23e+4",
            99999: "1.00e+5",
            10 ** 17: "1.00e+17",
            -1000: "-1.00e+3",
        }
        for n, expected in cases.items():
            with self.subTest(n=n):
                self.assertEqual(scientific(n), expected)


class TestFacts(unittest.TestCase):
    def test_record(self):
        self.assertEqual(facts(12), {
            "is_prime": False,
            "is_even": True,
            "is_odd": False,
            "is_composite": True,
            "factors": [1, 2, 3, 4, 6, 12],
            "scientific": "1.20e+1",
        })

    def test_prime(self):
        f = facts(13)
        self.assertTrue(f["is_prime"])
        self.assertFalse(f["is_composite"])
        self.assertTrue(f["is_odd"])

    def test_one_and_zero_are_neither_prime_nor_composite(self):
        for n in (0, 1, -7):
            with self.subTest(n=n):
                f = facts(n)
                self.assertFalse(f["is_prime"])
                self.assertFalse(f["is_composite"])

    def test_parity_is_complementary(self):
        for n in (-3, -2, 0, 1, 2, 10 ** 17 + 1):
            with self.subTest(n=n):
                f = facts(n)
                self.assertNotEqual(f["is_even"], f["is_odd"])

    def test_composite_means_more_than_two_factors(self):
        for n in range(0, 200):
            with self.subTest(n=n):
                f = facts(n)
                self.assertEqual(f["is_composite"], len(f["factors"]) > 2)


if __name__ == "__main__":
    unittest.main()
