"""
constraints.py

Keeps track of Wordle-style constraints and filters candidate words.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from alphabeta.alphabet import ALPHABET_SIZE, AlphabetMap
from alphabeta.word import WORD_LENGTH, Feedback, Symbol, Word, letter_char


class WordConstraints:
    """
    Accumulated knowledge from one or more (guess, feedback) pairs.

    State
    -----
    - per position, an AlphabetMap of letters still allowed there
    - per letter, how many times it must occur in the answer (the maximum
      seen within any single feedback event, never a sum across events)

    `is_valid` is called once per candidate per search node, so it is kept
    allocation-free for the common rejection path.
    """

    __slots__ = ("_allowed", "_mandatory", "_num_mandatory")

    def __init__(self) -> None:
        # initially, all letters are allowed everywhere
        self._allowed = [AlphabetMap(True) for _ in range(WORD_LENGTH)]
        self._mandatory = AlphabetMap()
        self._num_mandatory = 0

    @classmethod
    def empty(cls) -> "WordConstraints":
        return cls()

    @classmethod
    def from_history(cls, history: Iterable[Tuple[Word, Feedback]]) -> "WordConstraints":
        constraints = cls()
        for guess, fb in history:
            constraints.fold(guess, fb)
        return constraints

    def copy(self) -> "WordConstraints":
        clone = WordConstraints.__new__(WordConstraints)
        clone._allowed = [allowed.copy() for allowed in self._allowed]
        clone._mandatory = self._mandatory.copy()
        clone._num_mandatory = self._num_mandatory
        return clone

    def fold(self, guess: Word, fb: Feedback) -> "WordConstraints":
        """
        Merge one feedback event into the constraints, in place.

        - NOT_INCLUDED: if the same letter is marked WRONG_SPOT or CORRECT
          anywhere in this event, the letter exists, so only this position is
          forbidden. Otherwise the letter is forbidden everywhere.
        - WRONG_SPOT: forbid the letter here, count one mandatory occurrence.
        - CORRECT: only this letter stays allowed here, count one mandatory
          occurrence. Applied after the other marks.

        Mandatory counts are merged with max(), so repeating an event is a no-op.
        Returns `self` so calls can be chained.
        """
        if len(guess) != WORD_LENGTH or len(fb) != WORD_LENGTH:
            raise ValueError(f"guess and feedback must have length {WORD_LENGTH}")

        # decided from the whole event, not from what has been applied so far
        present = {li for li, s in zip(guess, fb) if s != Symbol.NOT_INCLUDED}
        event_counts = AlphabetMap()

        for i, (li, s) in enumerate(zip(guess, fb)):
            if s == Symbol.NOT_INCLUDED:
                if li in present:
                    # TODO cap the occurrence count of li at event_counts[li]
                    self._allowed[i][li] = False
                else:
                    for allowed in self._allowed:
                        allowed[li] = False
            elif s == Symbol.WRONG_SPOT:
                self._allowed[i][li] = False
                event_counts[li] += 1

        for i, (li, s) in enumerate(zip(guess, fb)):
            if s == Symbol.CORRECT:
                # an earlier event may already have ruled li out here
                still_allowed = self._allowed[i][li]
                self._allowed[i] = AlphabetMap(False)
                self._allowed[i][li] = still_allowed
                event_counts[li] += 1

        for li in range(ALPHABET_SIZE):
            if event_counts[li] > self._mandatory[li]:
                self._mandatory[li] = event_counts[li]
        self._num_mandatory = sum(self._mandatory)
        return self

    def folded(self, guess: Word, fb: Feedback) -> "WordConstraints":
        """Like `fold`, but returns a new instance and leaves `self` untouched."""
        return self.copy().fold(guess, fb)

    def is_valid(self, word: Word) -> bool:
        """
        True if `word` is acceptable under the accumulated constraints.

        Highly performance relevant!
        """
        allowed = self._allowed
        for i in range(WORD_LENGTH):
            if not allowed[i][word[i]]:
                return False

        if not self._num_mandatory:
            return True

        # each letter of the word satisfies at most one mandatory occurrence
        counts = self._mandatory.copy()
        missing = self._num_mandatory
        for li in word:
            if counts[li]:
                counts[li] -= 1
                missing -= 1
        return missing == 0

    def filter(self, words: Iterable[Word], exclude: Optional[Word] = None) -> List[Word]:
        """Words that are still valid, in input order, optionally dropping `exclude`."""
        is_valid = self.is_valid
        return [w for w in words if w != exclude and is_valid(w)]

    def mandatory_counts(self) -> AlphabetMap:
        return self._mandatory.copy()

    def __str__(self) -> str:
        rows = ["".join(letter_char(li) for li in range(ALPHABET_SIZE)), "-" * ALPHABET_SIZE]
        for allowed in self._allowed:
            rows.append("".join(letter_char(li) if ok else "." for li, ok in enumerate(allowed)))
        rows.append("-" * ALPHABET_SIZE)
        mandatory = "".join(letter_char(li) * n for li, n in enumerate(self._mandatory))
        rows.append(f"mandatory: {mandatory or '-'}")
        return "\n".join(rows)


def filter_candidates(words: Sequence[Word], history: List[Tuple[Word, Feedback]]) -> List[Word]:
    """
    Keep only candidates that pass the constraints built from *all* (guess, feedback) pairs.
    """
    return WordConstraints.from_history(history).filter(words)
