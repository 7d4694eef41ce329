# tests/test_rng.py
import unittest
from unittest import mock

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from terrain_engine.core.utils.rng import RNG, seed_from_any, seed_from_time


class TestRNG(unittest.TestCase):

    def test_deterministic(self):
        a, b = RNG(123), RNG(123)
        self.assertEqual([a.u64() for _ in range(5)], [b.u64() for _ in range(5)])

    def test_uniform_ranges(self):
        rng = RNG(9)
        for _ in range(2000):
            self.assertTrue(0.0 <= rng.uniform() < 1.0)
            self.assertTrue(0.0 <= rng.uniform_closed() <= 1.0)

    def test_uniform_closed_reaches_one(self):
        # все 53 бита единицы -> ровно 1.0
        with mock.patch.object(RNG, "u64", return_value=0xFFFFFFFFFFFFFFFF):
            self.assertEqual(RNG(0).uniform_closed(), 1.0)

    def test_seed_from_any(self):
        self.assertEqual(seed_from_any(5), 5)
        self.assertEqual(seed_from_any(-1), 0xFFFFFFFFFFFFFFFF)
        self.assertEqual(seed_from_any("abc"), seed_from_any(b"abc"))
        with self.assertRaises(TypeError):
            seed_from_any(1.5)
        with self.assertRaises(TypeError):
            seed_from_any(True)

    def test_seed_from_time(self):
        self.assertIsInstance(seed_from_time(), int)


if __name__ == '__main__':
    unittest.main()
