"""
Vocabulary Service

Supplies secret words and decides which guesses are acceptable.
"""

import random
from typing import Iterable, List, Optional

from ..config.game_settings import ANSWER_LIST, GUESS_LIST


class Vocabulary:
    """
    Word source for the game service.

    Secrets are drawn from the answers list. Guesses are accepted when they
    appear in either the answers or the extra guess list.
    """

    def __init__(self, answers: Iterable[str], guesses: Iterable[str] = (),
                 rng: Optional[random.Random] = None):
        self.answers: List[str] = [word.lower() for word in answers]
        if not self.answers:
            raise ValueError("Vocabulary needs at least one answer word")
        self.valid_guesses = set(self.answers) | {word.lower() for word in guesses}
        self._rng = rng or random.Random()

    def is_valid_guess(self, word_length: int, text: str) -> bool:
        return len(text) == word_length and text in self.valid_guesses

    def pick_random_secret(self) -> str:
        return self._rng.choice(self.answers)


def default_vocabulary() -> Vocabulary:
    """Vocabulary backed by the shipped JSON word lists."""
    return Vocabulary(ANSWER_LIST, GUESS_LIST)
