"""
Match Engine

Letter-overlap scoring for Jotto. A guess is answered only with the number of
distinct letters it shares with the secret word: no positions, no identities.
"""

from typing import Dict, Iterable

from ..models.game import GuessRecord, LetterStatus

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def match_count(guess: str, secret: str) -> int:
    """
    Count the distinct letters that appear in both words.

    Each letter counts at most once however often it repeats, so
    match_count("apple", "apple") == 4.

    Returns:
        int: Size of the letter-set intersection, 0 if either word is empty
    """
    if not guess or not secret or not isinstance(guess, str) or not isinstance(secret, str):
        return 0

    return len(set(guess.lower()) & set(secret.lower()))


def is_exact_match(guess: str, secret: str) -> bool:
    """True iff the two words are equal ignoring case."""
    if not isinstance(guess, str) or not isinstance(secret, str):
        return False
    return guess.lower() == secret.lower()


def distinct_letters(word: str) -> int:
    """Number of distinct letters in a word."""
    return len(set(word.lower())) if word else 0


def letter_statuses(history: Iterable[GuessRecord]) -> Dict[str, str]:
    """
    Derive the letter tracker from the guess history.

    A letter is ELIMINATED once it appears in any guess that scored zero
    matches, USED if it appears in any other guess, UNUSED otherwise.

    Returns:
        Dict[str, str]: Letter -> LetterStatus value for every letter a-z
    """
    used = set()
    eliminated = set()
    for record in history:
        letters = set(record.word.lower())
        used |= letters
        if record.match_count == 0:
            eliminated |= letters

    statuses = {}
    for letter in ALPHABET:
        if letter in eliminated:
            statuses[letter] = LetterStatus.ELIMINATED.value
        elif letter in used:
            statuses[letter] = LetterStatus.USED.value
        else:
            statuses[letter] = LetterStatus.UNUSED.value
    return statuses
