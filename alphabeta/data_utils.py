from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from alphabeta.alphabet import ALPHABET_SIZE
from alphabeta.vocab import WordVocab, letter_matrix
from alphabeta.word import Word


def load_dictionaries(prefix: str) -> Tuple[WordVocab, WordVocab]:
    """
    Load `<prefix>_allowed.txt` and `<prefix>_correct.txt`.

    Returns (allowed guesses, possible answers).
    """
    allowed = WordVocab.from_file(f"{prefix}_allowed.txt")
    correct = WordVocab.from_file(f"{prefix}_correct.txt")
    return allowed, correct


def load_answer_vocab(csv_path: str) -> WordVocab:
    """
    Load only the official Wordle answers from the CSV.
    Keeps rows where 'day' is not null, and returns a WordVocab.
    """
    return WordVocab.from_csv(csv_path, answers_only=True)


def heuristic_sort(words: Sequence[Word]) -> List[Word]:
    """
    Order words by how common their letters are, rarest first.

    Each word scores the summed frequency (over `words`) of its distinct
    letters. The sort is stable, so equal scores keep their input order.
    Reverse the result to try the most informative words first.
    """
    if not words:
        return []
    letters = letter_matrix(words)
    frequency = np.bincount(letters.ravel(), minlength=ALPHABET_SIZE)

    # count every letter once per word
    has_letter = np.zeros((len(words), ALPHABET_SIZE), dtype=bool)
    has_letter[np.arange(len(words))[:, None], letters] = True
    scores = has_letter.astype(np.int64) @ frequency

    order = np.argsort(scores, kind="stable")
    return [words[i] for i in order]
