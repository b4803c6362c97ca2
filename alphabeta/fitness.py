"""
fitness.py

Scores compared by the search. Lower is better for the guesser.
"""

from __future__ import annotations

import sys
from typing import NamedTuple, Optional

from alphabeta.word import Word


class Fitness(NamedTuple):
    """
    Fitness score of a guess word, compared lexicographically as a tuple.

    max_count
        Worst-case number of answers still possible after the guess. This is
        the metric that matters: it is what the adversary can force.
    depth
        Ply at which the value was produced. Among equal worst cases the
        guesser prefers to finish sooner, the adversary later.
    """

    max_count: int
    depth: int

    @classmethod
    def maxi(cls) -> "Fitness":
        """As bad as possible. Seeds a minimizer's running best."""
        return cls(sys.maxsize, sys.maxsize)

    @classmethod
    def mini(cls) -> "Fitness":
        """As good as possible. Seeds a maximizer's running best."""
        return cls(0, 0)

    @classmethod
    def solved(cls, depth: int = 0) -> "Fitness":
        return cls(0, depth)

    def successor(self) -> "Fitness":
        """Smallest fitness that is strictly worse than this one."""
        return Fitness(self.max_count, self.depth + 1)

    def __str__(self) -> str:
        return f"(maxCount={self.max_count}, depth={self.depth})"


class SearchResult(NamedTuple):
    fitness: Fitness
    word: Optional[Word]

    @classmethod
    def maxi(cls) -> "SearchResult":
        return cls(Fitness.maxi(), None)

    @classmethod
    def mini(cls) -> "SearchResult":
        return cls(Fitness.mini(), None)

    def __str__(self) -> str:
        return f"{self.fitness} {self.word}"
