"""
search.py

Depth-bounded minimax with alpha-beta pruning over the guessing game.

- mini: the guesser picks the word that keeps the number of remaining
  answers as low as possible
- maxi: the adversary picks, among the remaining answers, the one that
  leaves the most candidates after the guess is revealed

See https://en.wikipedia.org/wiki/Alpha%E2%80%93beta_pruning#Pseudocode

Only the root minimizer runs in parallel; everything below it runs
sequentially in the worker thread that owns the root branch.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import List, Optional, Sequence

from alphabeta.constraints import WordConstraints
from alphabeta.feedback import feedback
from alphabeta.fitness import Fitness, SearchResult
from alphabeta.parallel import Continue, default_workers, for_each
from alphabeta.word import Word

logger = logging.getLogger(__name__)


class PreconditionError(ValueError):
    """Raised when the search is asked to move without any answers or guesses."""


class AlphaBetaSearch:
    """
    Finds the guess that minimizes the worst-case number of remaining answers.

    Parameters
    ----------
    allowed_guesses : Sequence[Word]
        Every word the guesser may enter, in the order they are tried. The
        order matters for speed (good guesses first prune more) and for ties
        (the earliest guess wins).
    max_depth : int, default=4
        Number of plies to search. Guesses sit on odd plies, so 2 looks one
        guess ahead and 4 looks two guesses ahead.
    workers : int | None
        Threads used at the root. Defaults to the number of CPUs.
    """

    def __init__(
        self,
        allowed_guesses: Sequence[Word],
        *,
        max_depth: int = 4,
        workers: Optional[int] = None,
    ) -> None:
        if not isinstance(max_depth, int) or max_depth < 1:
            raise ValueError("max_depth must be a positive integer")
        if workers is None:
            workers = default_workers()
        if not isinstance(workers, int) or workers < 1:
            raise ValueError("workers must be a positive integer")

        self._allowed: List[Word] = list(allowed_guesses)
        self.max_depth = max_depth
        self.workers = workers

    def run(
        self,
        remaining_answers: Sequence[Word],
        constraints: Optional[WordConstraints] = None,
    ) -> SearchResult:
        """
        Search from the root and return the best guess with its fitness.

        If `constraints` is given, the answers are filtered through it first
        and it becomes the root state of every branch.
        """
        if constraints is None:
            constraints = WordConstraints.empty()
            remaining = list(remaining_answers)
        else:
            remaining = constraints.filter(remaining_answers)

        if not remaining:
            raise PreconditionError("no remaining answers to search")
        if len(remaining) == 1:
            return SearchResult(Fitness.solved(0), remaining[0])
        if not self._allowed:
            raise PreconditionError("no allowed guesses to choose from")

        logger.debug(
            "searching %d guesses x %d answers, max_depth=%d, workers=%d",
            len(self._allowed), len(remaining), self.max_depth, self.workers,
        )
        t0 = time.perf_counter()
        result = self._mini_root(constraints, remaining, Fitness.mini(), Fitness.maxi())
        logger.debug("search done in %.2fs: %s", time.perf_counter() - t0, result)
        return result

    def _mini_root(
        self,
        constraints: WordConstraints,
        remaining: List[Word],
        alpha: Fitness,
        beta: Fitness,
    ) -> SearchResult:
        lock = threading.Lock()
        best = SearchResult.maxi()
        best_index = len(self._allowed)

        def evaluate(item) -> Continue:
            nonlocal best, best_index, beta
            index, guess = item
            with lock:
                # a guess ahead of the recorded best must see a tie, so widen by one
                window = beta if index > best_index else beta.successor()
            value = self._maxi(constraints.copy(), guess, remaining, 1, alpha, window)
            with lock:
                if (value, index) < (best.fitness, best_index):
                    best = SearchResult(value, guess)
                    best_index = index
                    logger.info(
                        "0: %r alpha=%d, beta=%d, fitness=%s",
                        str(guess), alpha.max_count, beta.max_count, value,
                    )
                if best.fitness <= alpha:
                    # alpha cutoff, stop iterating. run() starts from Fitness.mini() and
                    # every root value has depth >= 1, so only a caller passing a
                    # tighter alpha gets here
                    return Continue.NO
                beta = min(beta, best.fitness)
            return Continue.YES

        for_each(list(enumerate(self._allowed)), evaluate, self.workers)
        return best

    def _mini(
        self,
        constraints: WordConstraints,
        remaining: List[Word],
        depth: int,
        alpha: Fitness,
        beta: Fitness,
    ) -> SearchResult:
        if len(remaining) == 1:
            return SearchResult(Fitness.solved(depth), remaining[0])

        best = SearchResult.maxi()
        for guess in self._allowed:
            value = self._maxi(constraints, guess, remaining, depth + 1, alpha, beta)
            if value < best.fitness:
                best = SearchResult(value, guess)
            if best.fitness <= alpha:
                # alpha cutoff, stop iterating
                break
            beta = min(beta, best.fitness)
        return best

    def _maxi(
        self,
        constraints: WordConstraints,
        guess: Word,
        remaining: List[Word],
        depth: int,
        alpha: Fitness,
        beta: Fitness,
    ) -> Fitness:
        best = Fitness.mini()
        leaf = depth + 1 >= self.max_depth
        for answer in remaining:
            child = constraints.folded(guess, feedback(answer, guess))
            if leaf:
                count = 0
                for word in remaining:
                    if word != guess and child.is_valid(word):
                        count += 1
                value = Fitness(count, depth)
            else:
                filtered = child.filter(remaining, exclude=guess)
                if filtered:
                    value = self._mini(child, filtered, depth + 1, alpha, beta).fitness
                else:
                    # the guess was the answer
                    value = Fitness.solved(depth)

            if value > best:
                best = value
                if best >= beta:
                    # beta cutoff, stop iterating
                    break
                alpha = max(alpha, best)
        return best


def search(
    allowed_guesses: Sequence[Word],
    remaining_answers: Sequence[Word],
    max_depth: int = 4,
    *,
    constraints: Optional[WordConstraints] = None,
    workers: Optional[int] = None,
) -> SearchResult:
    """Convenience wrapper: build an AlphaBetaSearch and run it once."""
    return AlphaBetaSearch(allowed_guesses, max_depth=max_depth, workers=workers).run(
        remaining_answers, constraints
    )
