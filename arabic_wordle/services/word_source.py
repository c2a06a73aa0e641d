"""
Word Source

Supplies the word of the day, random target words, and the dictionary of
accepted guesses.
"""

import random
from datetime import date
from typing import Iterable, Optional, Union

from ..config.game_settings import WORD_LIST


class WordSource:
    """
    Deterministic word provider over a fixed word list.

    The word of the day is the entry at ``days since epoch`` modulo the list
    size, so every player sees the same word on the same calendar day.
    """

    def __init__(self, words: Iterable[str] = WORD_LIST,
                 epoch: Union[date, str] = date(2024, 1, 1)):
        self.words = list(words)
        if not self.words:
            raise ValueError("Word list cannot be empty")
        self.all_words = frozenset(self.words)
        self.epoch = date.fromisoformat(epoch) if isinstance(epoch, str) else epoch

    def get_word_of_the_day(self, today: Optional[date] = None) -> str:
        today = today or date.today()
        index = (today - self.epoch).days % len(self.words)
        return self.words[index]

    def random_word(self, rng: Optional[random.Random] = None) -> str:
        return (rng or random).choice(self.words)

    def is_valid_word(self, word: str) -> bool:
        return word in self.all_words

    def __contains__(self, word: object) -> bool:
        return word in self.all_words

    def __len__(self) -> int:
        return len(self.words)
