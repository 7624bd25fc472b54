import unittest
from collections import Counter

from tetris_engine.game import PIECE_TYPES, SequenceRandomizer, UniformRandomizer


class UniformRandomizerTests(unittest.TestCase):
    def test_seeded_draws_repeat(self):
        a = UniformRandomizer(7)
        b = UniformRandomizer(7)
        self.assertEqual([a.next() for _ in range(50)], [b.next() for _ in range(50)])

    def test_covers_all_types(self):
        rng = UniformRandomizer(0)
        counts = Counter(rng.next() for _ in range(7000))
        self.assertEqual(set(counts), {int(t) for t in PIECE_TYPES})
        for n in counts.values():
            self.assertGreater(n, 800)

    def test_reseed(self):
        rng = UniformRandomizer(1)
        first = [rng.next() for _ in range(10)]
        rng.seed(1)
        self.assertEqual([rng.next() for _ in range(10)], first)


class SequenceRandomizerTests(unittest.TestCase):
    def test_cycles(self):
        rng = SequenceRandomizer([1, 4])
        self.assertEqual([rng.next() for _ in range(5)], [1, 4, 1, 4, 1])

    def test_exhausted_without_cycle(self):
        rng = SequenceRandomizer([2], cycle=False)
        self.assertEqual(rng.next(), 2)
        with self.assertRaises(IndexError):
            rng.next()

    def test_rejects_empty_or_placeholder(self):
        with self.assertRaises(ValueError):
            SequenceRandomizer([])
        with self.assertRaises(ValueError):
            SequenceRandomizer([0, 1])
        with self.assertRaises(ValueError):
            SequenceRandomizer([9])


if __name__ == "__main__":
    unittest.main()
