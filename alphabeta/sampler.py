from __future__ import annotations

import random

from alphabeta.vocab import WordVocab
from alphabeta.word import Word


class WordSampler:
    def __init__(self, vocab: WordVocab, seed: int | None = None) -> None:
        if not isinstance(vocab, WordVocab):
            raise TypeError("vocab must be a WordVocab")
        if len(vocab) == 0:
            raise ValueError("vocab is empty")

        self._vocab = vocab
        # deterministic if seed provided
        self._rng = random.Random(seed)

    def choice_index(self) -> int:
        return self._rng.randrange(len(self._vocab))

    def choice_word(self) -> Word:
        return self._vocab.word_at(self.choice_index())
