"""
Game Configuration Constants Module

Loads and validates the word lists the game is played with. Both lists
live beside this module as JSON arrays:

- answers.json: candidate secret words
- words.json: additional words accepted as guesses

Every word accepted as a guess is either an answer or listed in words.json.
"""

import json
import os
from typing import Final, List

CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))


def _load_word_list(filename: str) -> List[str]:
    """
    Load a word list from a JSON file in the config directory.

    Args:
        filename: Name of the JSON file

    Returns:
        List[str]: Lower case words in file order

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed or the list is empty
    """
    json_file_path = os.path.join(CONFIG_DIR, filename)

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {filename}: {e}")

    if not isinstance(word_list, list):
        raise ValueError(f"{filename} must contain an array of words")

    if not word_list:
        raise ValueError(f"{filename} cannot be empty")

    return [word.strip().lower() for word in word_list]


def validate_word_list_integrity(word_list: List[str], word_length: int) -> bool:
    """
    Validates a word list before it is used for play.

    Checks that every word has the expected length, contains only letters
    and appears once.

    Returns:
        bool: True if the word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not word_list:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(word_list):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

    if len(word_list) != len(set(word_list)):
        seen = set()
        duplicates = sorted({word for word in word_list if word in seen or seen.add(word)})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


ANSWER_LIST: Final[List[str]] = _load_word_list('answers.json')
"""Candidate secret words."""

WORD_LENGTH: Final[int] = len(ANSWER_LIST[0])
"""Length shared by every shipped word."""

GUESS_LIST: Final[List[str]] = _load_word_list('words.json')
"""Words accepted as guesses in addition to the answers."""

validate_word_list_integrity(ANSWER_LIST, WORD_LENGTH)
validate_word_list_integrity(GUESS_LIST, WORD_LENGTH)
