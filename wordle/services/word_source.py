"""
Word Source

Supplies secret words and decides which guesses are acceptable.
"""

import random
from typing import Iterable, Optional

from ..config.app_config import Config
from ..config.game_settings import ANSWER_WORDS, GUESS_WORDS, NUM_COLS
from ..utils.helpers import is_word


class WordSource:
    """
    Answer-word source and guess-validity checker for game sessions.

    With ``strict`` disabled any alphabetic guess of the right length is
    accepted, so a small guess list never blocks real English words. With
    ``strict`` enabled the guess must appear in the guess list.
    """

    def __init__(self,
                 answer_words: Optional[Iterable[str]] = None,
                 guess_words: Optional[Iterable[str]] = None,
                 word_length: int = NUM_COLS,
                 strict: bool = Config.STRICT_WORD_CHECK,
                 rng: Optional[random.Random] = None):
        self.answer_words = [word.upper() for word in (answer_words if answer_words is not None else ANSWER_WORDS)]
        if not self.answer_words:
            raise ValueError("Answer word list cannot be empty")

        self.guess_words = {word.upper() for word in (guess_words if guess_words is not None else GUESS_WORDS)}
        # Answers are always valid guesses
        self.guess_words.update(self.answer_words)

        self.word_length = word_length
        self.strict = strict
        self._rng = rng or random.Random()

    def pick_secret(self) -> str:
        """Choose a secret word uniformly at random from the answer list."""
        return self._rng.choice(self.answer_words)

    def is_allowed(self, word: str) -> bool:
        """Check whether an assembled guess may be submitted."""
        if not word or not isinstance(word, str):
            return False

        normalized = word.strip().upper()
        if not is_word(normalized, self.word_length):
            return False

        if self.strict:
            return normalized in self.guess_words

        return True
