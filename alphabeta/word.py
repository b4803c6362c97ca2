"""
word.py

Value types for fixed-length words and their feedback.

A Word holds letter indices 0..25, a Feedback holds one Symbol per position.
Both are tuples, so equality and hashing are by value.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

from alphabeta.alphabet import ALPHABET_SIZE

# hardcoded: every word has exactly this many letters
WORD_LENGTH = 5


class Symbol(IntEnum):
    NOT_INCLUDED = 0
    WRONG_SPOT = 1
    CORRECT = 2


def letter_index(ch: str) -> int:
    """Map a lowercase letter to 0..25."""
    return ord(ch) - 97


def letter_char(li: int) -> str:
    return chr(li + 97)


class Word(tuple):
    """
    An immutable sequence of WORD_LENGTH letter indices.

    Raises
    ------
    TypeError
        if a letter is not an int.
    ValueError
        on wrong length or a letter outside 0..25.
    """

    __slots__ = ()

    def __new__(cls, letters: Iterable[int]) -> "Word":
        letters = tuple(letters)
        if len(letters) != WORD_LENGTH:
            raise ValueError(f"word must have {WORD_LENGTH} letters, got {len(letters)}")
        for li in letters:
            if isinstance(li, bool) or not isinstance(li, int):
                raise TypeError("letters must be integers")
            if li < 0 or li >= ALPHABET_SIZE:
                raise ValueError(f"letter index out of range: {li}")
        return super().__new__(cls, letters)

    @classmethod
    def from_str(cls, text: str) -> "Word":
        """Build a Word from lowercase text such as 'crane'."""
        if not isinstance(text, str):
            raise TypeError("word text must be a string")
        if len(text) != WORD_LENGTH:
            raise ValueError(f"word must be length {WORD_LENGTH}: {text!r}")
        if not text.isascii() or not text.isalpha() or not text.islower():
            raise ValueError(f"word must be lowercase alphabetic: {text!r}")
        return cls(letter_index(ch) for ch in text)

    def __str__(self) -> str:
        return "".join(letter_char(li) for li in self)

    def __repr__(self) -> str:
        return f"Word({str(self)!r})"


class Feedback(tuple):
    """
    An immutable sequence of WORD_LENGTH Symbols, aligned with a guess.

    Text form uses '0' (not included), '1' (wrong spot) and '2' (correct).
    """

    __slots__ = ()

    def __new__(cls, symbols: Iterable[int]) -> "Feedback":
        symbols = tuple(symbols)
        if len(symbols) != WORD_LENGTH:
            raise ValueError(f"feedback must have {WORD_LENGTH} symbols, got {len(symbols)}")
        try:
            symbols = tuple(Symbol(s) for s in symbols)
        except ValueError:
            raise ValueError(f"feedback symbols must be in {{0,1,2}}: {symbols!r}") from None
        return super().__new__(cls, symbols)

    @classmethod
    def from_str(cls, text: str) -> "Feedback":
        if not isinstance(text, str):
            raise TypeError("feedback text must be a string")
        if len(text) != WORD_LENGTH or any(ch not in "012" for ch in text):
            raise ValueError(f"feedback must be {WORD_LENGTH} chars of 0/1/2: {text!r}")
        return cls(int(ch) for ch in text)

    @classmethod
    def all_correct(cls) -> "Feedback":
        return cls([Symbol.CORRECT] * WORD_LENGTH)

    @property
    def solved(self) -> bool:
        return all(s == Symbol.CORRECT for s in self)

    def __str__(self) -> str:
        return "".join(str(int(s)) for s in self)

    def __repr__(self) -> str:
        return f"Feedback({str(self)!r})"
