"""
Game Configuration Constants Module

This module defines all game configuration constants. All game parameters
are centralized here to enable easy modification.
"""

import json
import os
from typing import Dict, Final, List, Optional

from ..exceptions import EmptyCandidateListError

# Core Game Configuration Constants
MAX_ATTEMPTS: Final[int] = 10
"""
Maximum number of guesses allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

WORD_LENGTH: Final[int] = 5

HIGH_SCORE_LIMIT: Final[int] = 10
"""Number of entries kept in the persisted high-score table."""

# Scoring
BASE_SCORE: Final[int] = 1000
PENALTY_PER_ATTEMPT: Final[int] = 50
MIN_SCORE: Final[int] = 100

# Key-value store keys
HIGH_SCORES_KEY: Final[str] = 'jottoHighScores'
HAS_VISITED_KEY: Final[str] = 'jottoHasVisited'

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def load_word_list(path: Optional[str] = None) -> List[str]:
    """
    Load the candidate word list from a JSON file.

    Args:
        path: JSON file holding an array of words. Defaults to the bundled words.json.

    Returns:
        List[str]: List of lowercase 5-letter words

    Raises:
        FileNotFoundError: If the file is not found
        EmptyCandidateListError: If the word list is empty
        ValueError: If the JSON is malformed or contains invalid words
    """
    json_file_path = path or DEFAULT_WORD_LIST_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise EmptyCandidateListError("Word list cannot be empty")

    lowercase_words = []
    for word in word_list:
        if not isinstance(word, str):
            raise ValueError(f"Word list entry {word!r} is not a string")
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")
        lowercase_words.append(word.lower())

    return lowercase_words


# Curated word database loaded from JSON file
WORD_LIST: Final[List[str]] = load_word_list()


def validate_word_list_integrity(words: Optional[List[str]] = None) -> bool:
    """
    Validates the integrity and consistency of a word database.

    Checks that every word is exactly 5 alphabetic lowercase characters and
    that there are no duplicate entries.

    Args:
        words: Words to check. Defaults to the bundled WORD_LIST.

    Returns:
        bool: True if the word list passes all validation checks

    Raises:
        EmptyCandidateListError: If the list is empty
        ValueError: If any other validation check fails
    """
    if words is None:
        words = WORD_LIST

    if not words:
        raise EmptyCandidateListError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: Optional[List[str]] = None) -> Dict:
    """
    Returns statistical information about a word list.

    Returns:
        dict: total_words, avg_distinct_letters, letter_frequency and
        most_common_letters (counted once per word, the way Jotto scores them)
    """
    if words is None:
        words = WORD_LIST

    if not words:
        return {"error": "Word list is empty"}

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in set(word):
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    total_distinct = sum(len(set(word)) for word in words)

    return {
        "total_words": len(words),
        "avg_distinct_letters": round(total_distinct / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: (-x[1], x[0]))[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
