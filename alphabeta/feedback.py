"""
Feedback for a guess against a hypothetical answer.
"""

from __future__ import annotations

from alphabeta.alphabet import AlphabetMap
from alphabeta.word import WORD_LENGTH, Feedback, Symbol, Word


def feedback(answer: Word, guess: Word) -> Feedback:
    """
    Compute the per-position feedback for `guess` against `answer`.

    Returns
    -------
    Feedback
        WORD_LENGTH symbols where:
        - CORRECT      the letter matches the answer at that position
        - WRONG_SPOT   the letter is in the answer, but somewhere else
        - NOT_INCLUDED the letter is not in the answer, or it is already used
                       up by earlier marks of the same letter

    Duplicate Handling (two-pass rule)
    ----------------------------------
    1) CORRECT pass: mark matching positions; every unmatched answer letter
       goes into a per-letter remaining count.
    2) WRONG_SPOT pass, left to right: an unmatched guess letter with a
       positive remaining count becomes WRONG_SPOT and consumes one count.

    So for answer 'abcde' the guess 'xaaxx' gives '01000': only the first
    'a' gets a mark.
    """
    marks = [Symbol.NOT_INCLUDED] * WORD_LENGTH
    remaining = AlphabetMap()

    # Pass 1: greens, count what is left of the answer
    for i in range(WORD_LENGTH):
        if guess[i] == answer[i]:
            marks[i] = Symbol.CORRECT
        else:
            remaining[answer[i]] += 1

    # Pass 2: yellows where counts allow
    for i in range(WORD_LENGTH):
        if marks[i] == Symbol.NOT_INCLUDED and remaining[guess[i]]:
            marks[i] = Symbol.WRONG_SPOT
            remaining[guess[i]] -= 1

    return Feedback(marks)


def consistent_with(word: Word, guess: Word, fb: Feedback) -> bool:
    """
    True iff `word`, taken as the answer, would have produced exactly `fb` for `guess`.

    Delegates to `feedback` so the two can never diverge.
    """
    return feedback(word, guess) == fb
