"""
env.py

A minimal Wordle game for play mode and for exercising the solver.
- Actions: guesses (any Word, the game does not check a dictionary)
- Each step reveals the feedback and the answers still consistent with it
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from alphabeta.constraints import WordConstraints
from alphabeta.feedback import consistent_with, feedback
from alphabeta.sampler import WordSampler
from alphabeta.vocab import WordVocab
from alphabeta.word import Feedback, Word


class WordleEnv:
    """
    Wordle game.

    API
    ---
    reset(answer: Optional[Word] = None) -> list[Word]
        Starts a new game. If `answer` is given it must be in the vocabulary
        (useful for tests), otherwise the sampler picks one. Returns the
        candidate list.

    step(guess: Word) -> tuple[Feedback, bool, dict]
        Applies a guess. Returns (feedback, done, info).
    """

    def __init__(
        self,
        vocab: WordVocab,
        sampler: WordSampler,
        *,
        max_guesses: int = 6,
    ) -> None:
        if not isinstance(vocab, WordVocab):
            raise TypeError("vocab must be a WordVocab")
        if not isinstance(sampler, WordSampler):
            raise TypeError("sampler must be a WordSampler")
        if max_guesses < 1:
            raise ValueError("max_guesses must be >= 1")

        self.vocab = vocab
        self.sampler = sampler
        self.max_guesses = int(max_guesses)

        # Game state
        self._answer: Optional[Word] = None
        self._history: List[Tuple[Word, Feedback]] = []
        self._constraints = WordConstraints.empty()
        self._candidates: List[Word] = []
        self._done = False

    # -------------------------
    # Core game API
    # -------------------------
    def reset(self, answer: Optional[Word] = None) -> List[Word]:
        """Start a new game and return the candidate list."""
        if answer is None:
            answer = self.sampler.choice_word()
        elif not self.vocab.contains(answer):
            raise ValueError(f"answer not in vocabulary: {answer}")
        self._answer = answer

        self._history = []
        self._constraints = WordConstraints.empty()
        self._candidates = self.vocab.words()
        self._done = False
        return list(self._candidates)

    def step(self, guess: Word) -> Tuple[Feedback, bool, dict]:
        """
        Take a guess.

        Returns
        -------
        feedback: Feedback
        done: bool
        info: dict  (includes 'guess', 'remaining', 'step', 'solved', 'answer')
        """
        if self._answer is None:
            raise RuntimeError("call reset() before step()")
        if self._done:
            raise RuntimeError("game is over, call reset()")
        if not isinstance(guess, Word):
            raise TypeError("guess must be a Word")

        fb = feedback(self._answer, guess)
        self._history.append((guess, fb))
        self._constraints.fold(guess, fb)

        solved = fb.solved
        if solved:
            self._candidates = [self._answer]
        else:
            self._candidates = [w for w in self._candidates if consistent_with(w, guess, fb)]

        self._done = solved or len(self._history) >= self.max_guesses

        info = {
            "guess": guess,
            "remaining": len(self._candidates),
            "step": len(self._history),
            "solved": solved,
            "answer": self._answer if self._done else None,
        }
        return fb, self._done, info

    # -------------------------
    # Introspection helpers
    # -------------------------
    @property
    def history(self) -> List[Tuple[Word, Feedback]]:
        return list(self._history)

    @property
    def answer(self) -> Optional[Word]:
        return self._answer

    @property
    def constraints(self) -> WordConstraints:
        return self._constraints.copy()

    @property
    def candidates(self) -> List[Word]:
        return list(self._candidates)
