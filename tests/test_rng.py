import random
import unittest

from tetris_piece import KINDS
from tetris_rng import BagRandom


class BagRandomTests(unittest.TestCase):
    def test_each_bag_deals_every_kind_once(self):
        bag = BagRandom(random.Random(7))
        draws = [bag.next_piece() for _ in range(7 * 20)]
        for i in range(0, len(draws), 7):
            self.assertEqual(sorted(draws[i:i+7]), sorted(KINDS))

    def test_reshuffle_when_exhausted(self):
        bag = BagRandom(random.Random(1))
        first = list(bag.bag)
        for _ in range(7):
            bag.next_piece()
        self.assertEqual(bag.cursor, 7)
        t = bag.next_piece()
        self.assertEqual(bag.cursor, 1)
        self.assertEqual(t, bag.bag[0])
        self.assertEqual(sorted(bag.bag), sorted(first))

    def test_same_seed_same_sequence(self):
        a = BagRandom(random.Random(42))
        b = BagRandom(random.Random(42))
        self.assertEqual([a.next_piece() for _ in range(21)], [b.next_piece() for _ in range(21)])

    def test_empty_catalog_rejected(self):
        with self.assertRaises(ValueError):
            BagRandom(random.Random(0), kinds=())


if __name__ == "__main__":
    unittest.main()
