import unittest

from mazerank import InvalidSeedError, RandomSource
from mazerank.random_source import MODULUS


class RandomSourceTests(unittest.TestCase):
    def test_follows_park_miller_sequence(self) -> None:
        rng = RandomSource(1)
        rng.next()
        self.assertEqual(rng.state, 16807)
        rng.next()
        self.assertEqual(rng.state, 282475249)
        rng.next()
        self.assertEqual(rng.state, 1622650073)

    def test_floats_are_normalized(self) -> None:
        rng = RandomSource(1)
        self.assertAlmostEqual(rng.next(), 16806 / 2147483646)
        values = [rng.next() for _ in range(1000)]
        self.assertTrue(all(0.0 <= value < 1.0 for value in values))

    def test_same_seed_reproduces_stream(self) -> None:
        first = RandomSource(42)
        second = RandomSource(42)
        self.assertEqual(
            [first.next_int(0, 99) for _ in range(50)],
            [second.next_int(0, 99) for _ in range(50)],
        )

    def test_reseed_restarts_stream(self) -> None:
        rng = RandomSource(7)
        expected = [rng.next() for _ in range(5)]
        rng.seed(7)
        self.assertEqual([rng.next() for _ in range(5)], expected)

    def test_next_int_is_inclusive(self) -> None:
        rng = RandomSource(12345)
        seen = {rng.next_int(1, 3) for _ in range(500)}
        self.assertEqual(seen, {1, 2, 3})

    def test_single_value_range(self) -> None:
        rng = RandomSource(99)
        self.assertEqual([rng.next_int(1, 1) for _ in range(10)], [1] * 10)

    def test_empty_range_rejected(self) -> None:
        with self.assertRaises(ValueError):
            RandomSource(3).next_int(2, 1)

    def test_invalid_seeds_rejected(self) -> None:
        for seed in (0, -5, MODULUS, 2 * MODULUS, MODULUS + 1, 2**53, 1.5, "42", None, True):
            with self.subTest(seed=seed):
                with self.assertRaises(InvalidSeedError):
                    RandomSource(seed)

    def test_largest_seed_accepted(self) -> None:
        rng = RandomSource(MODULUS - 1)
        rng.next()
        self.assertEqual(rng.state, (MODULUS - 1) * 16807 % MODULUS)


if __name__ == "__main__":
    unittest.main()
