"""Shared test doubles."""
from typing import List, Sequence


class FixedRandom:
    """
    Deterministic stand-in for random.Random.

    uniform(a, b) walks a fixed list of fractions in [0, 1] (cycled), so
    fraction 0.5 means "zero jitter". choice() always returns the first item.
    """

    def __init__(self, fractions: Sequence[float] = (0.5,)):
        self.fractions: List[float] = list(fractions)
        self.calls = 0

    def uniform(self, a: float, b: float) -> float:
        f = self.fractions[self.calls % len(self.fractions)]
        self.calls += 1
        return a + (b - a) * f

    def choice(self, seq):
        return seq[0]


NEUTRAL = [50, 50, 50, 50, 50, 50]
