from __future__ import annotations

from typing import Iterable, List, Sequence, TextIO

import numpy as np
import pandas as pd

from alphabeta.word import WORD_LENGTH, Word


def parse_dict(lines: Iterable[str]) -> List[Word]:
    """
    Read whitespace-separated words and keep the usable ones.

    Uppercase letters are lowercased. Words of the wrong length or with any
    character outside a..z are skipped. Duplicates keep the first occurrence.
    """
    words: List[Word] = []
    seen = set()
    for line in lines:
        for token in line.split():
            w = token.lower()
            if len(w) != WORD_LENGTH or not w.isascii() or not w.isalpha():
                continue
            if w in seen:
                continue
            seen.add(w)
            words.append(Word.from_str(w))
    return words


def letter_matrix(words: Sequence[Word]) -> np.ndarray:
    """Letter indices as a (len(words), WORD_LENGTH) uint8 array."""
    return np.array(words, dtype=np.uint8).reshape(len(words), WORD_LENGTH)


class WordVocab:
    def __init__(self, words: List[Word]) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of Word")
        if not words:
            raise ValueError("no words provided")
        if not all(isinstance(w, Word) for w in words):
            raise TypeError("all items in `words` must be Word")

        # Enforce uniqueness (first occurrence policy is handled by the loaders)
        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")

        self._words: List[Word] = list(words)
        self._index = {w: i for i, w in enumerate(self._words)}

    # ---------- Construction helpers ----------

    @classmethod
    def from_strings(cls, words: Iterable[str]) -> "WordVocab":
        return cls([Word.from_str(w) for w in words])

    @classmethod
    def from_text(cls, fin: TextIO) -> "WordVocab":
        """Build a vocabulary from an open text dictionary (see `parse_dict`)."""
        words = parse_dict(fin)
        if not words:
            raise ValueError("no valid words in dictionary")
        return cls(words)

    @classmethod
    def from_file(cls, path: str) -> "WordVocab":
        with open(path, "r", encoding="utf-8", errors="ignore") as fin:
            return cls.from_text(fin)

    @classmethod
    def from_csv(
        cls,
        path: str,
        column: str = "word",
        *,
        answers_only: bool = False,
    ) -> "WordVocab":
        """
        Load words from a CSV and build a WordVocab.

        Parameters
        ----------
        path : str
            Path to CSV file.
        column : str
            Column name containing words.
        answers_only : bool, default=False
            If True, keep only rows where the 'day' column is set (the
            official answers).

        Raises
        ------
        FileNotFoundError, KeyError, ValueError
        """
        df = pd.read_csv(path)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")
        if answers_only:
            if "day" not in df.columns:
                raise KeyError(f"column 'day' not found in {path}")
            df = df[df["day"].notna()]

        words = parse_dict(df[column].dropna().astype(str).tolist())
        if not words:
            raise ValueError("no valid words after filtering")
        return cls(words)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def words(self) -> List[Word]:
        """Return a copy of the internal word list (to avoid external mutation)."""
        return list(self._words)

    def contains(self, word: Word) -> bool:
        return word in self._index

    def index_of(self, word: Word) -> int:
        """Return the index for `word`; raise KeyError if unknown."""
        try:
            return self._index[word]
        except KeyError:
            raise KeyError(f"unknown word: {word}") from None

    def word_at(self, idx: int) -> Word:
        """Return the word at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]
