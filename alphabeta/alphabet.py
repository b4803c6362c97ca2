"""
alphabet.py

Fixed-size lookup table for the 26 lowercase letters.
"""

from __future__ import annotations

ALPHABET_SIZE = 26


class AlphabetMap(list):
    """
    A list of exactly 26 slots, indexed by letter (0 = 'a' .. 25 = 'z').

    Used in place of a dict wherever the key is a letter. Indexing is plain
    list indexing, there is no bounds or type check on the key.
    """

    __slots__ = ()

    def __init__(self, value=0) -> None:
        super().__init__([value] * ALPHABET_SIZE)

    def copy(self) -> "AlphabetMap":
        clone = AlphabetMap()
        clone[:] = self
        return clone
