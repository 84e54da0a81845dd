"""7-bag randomizer module"""
import logging
import random
from typing import List, Optional, Sequence

from tetris_piece import KINDS

logger = logging.getLogger(__name__)

class BagRandom:
    """
    Deals every kind once, in shuffled order, before any kind repeats.

    The bag is a shuffled permutation plus a cursor. When the cursor runs
    off the end a fresh bag replaces the old one, its first kind is dealt
    and the cursor restarts at 1. Shuffling is random.Random.shuffle
    (Fisher-Yates), so each permutation is equally likely.
    """

    def __init__(self, rng: Optional[random.Random] = None, kinds: Sequence[str] = KINDS):
        if not kinds:
            raise ValueError("piece catalog is empty")
        self.rng = rng if rng is not None else random.Random()
        self.kinds = tuple(kinds)
        self.bag: List[str] = self.new_bag()
        self.cursor = 0

    def new_bag(self) -> List[str]:
        bag = list(self.kinds)
        self.rng.shuffle(bag)
        logger.debug("new bag %s", "".join(bag))
        return bag

    def next_piece(self) -> str:
        if self.cursor >= len(self.bag):
            self.bag = self.new_bag()
            self.cursor = 0
        t = self.bag[self.cursor]
        self.cursor += 1
        return t

