"""
Game Configuration Constants Module

This module defines the board dimensions and the word lists the game draws
from. Both word lists are loaded from JSON files that ship beside this module.
"""

import json
import os
from typing import List, Final

from .app_config import Config

# Board dimensions
NUM_ROWS: Final[int] = Config.MAX_ROWS
"""
Number of guess attempts (board rows) allowed per game.
"""

NUM_COLS: Final[int] = Config.WORD_LENGTH
"""
Number of letters per word (board columns).
"""


def _load_word_list(file_name: str) -> List[str]:
    """
    Load a word list from a JSON file in the config directory.

    Args:
        file_name: Name of the JSON file holding an array of words

    Returns:
        List[str]: List of uppercase words of length NUM_COLS

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, file_name)

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_name}: {e}")

    if not isinstance(word_list, list):
        raise ValueError(f"{file_name} must contain an array of words")

    if not word_list:
        raise ValueError(f"Word list {file_name} cannot be empty")

    uppercase_words = [word.upper() for word in word_list]

    for word in uppercase_words:
        if len(word) != NUM_COLS:
            raise ValueError(f"Word '{word}' is not {NUM_COLS} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return uppercase_words


# Words that can be chosen as the secret word
ANSWER_WORDS: Final[List[str]] = _load_word_list('answer_words.json')

# Words that are allowed as guesses (superset of the answers)
GUESS_WORDS: Final[List[str]] = _load_word_list('guess_words.json')


def validate_word_list_integrity() -> bool:
    """
    Validates the integrity and consistency of both word lists.

    Checks that:
    1. Neither list contains duplicate entries
    2. Every answer word is also an allowed guess

    Returns:
        bool: True if the word lists pass all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    for name, words in (('answer', ANSWER_WORDS), ('guess', GUESS_WORDS)):
        if len(words) != len(set(words)):
            duplicates = sorted({word for word in words if words.count(word) > 1})
            raise ValueError(f"Duplicate words found in {name} list: {duplicates}")

    missing = [word for word in ANSWER_WORDS if word not in GUESS_WORDS]
    if missing:
        raise ValueError(f"Answer words missing from guess list: {missing}")

    return True
