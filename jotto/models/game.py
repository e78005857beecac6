"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class GameStatus(Enum):
    """Session status. WON and LOST are terminal."""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class LetterStatus(Enum):
    """Letter tracker status derived from the guess history."""
    UNUSED = "unused"
    USED = "used"
    ELIMINATED = "eliminated"


@dataclass(frozen=True)
class GuessRecord:
    """One submitted guess and the number of distinct letters it shares with the secret."""
    word: str
    match_count: int

    def to_dict(self) -> Dict:
        return {'word': self.word, 'match_count': self.match_count}


@dataclass(frozen=True)
class Session:
    """
    Immutable snapshot of one game.

    Transitions build a new Session rather than mutating this one, so a
    rendering layer can compare snapshots directly.
    """
    secret_word: str
    history: Tuple[GuessRecord, ...] = field(default_factory=tuple)
    status: GameStatus = GameStatus.PLAYING
    score: int = 0

    @property
    def attempt_count(self) -> int:
        return len(self.history)

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.PLAYING

    @property
    def guesses(self) -> Tuple[str, ...]:
        return tuple(record.word for record in self.history)

    @property
    def matches(self) -> Tuple[int, ...]:
        return tuple(record.match_count for record in self.history)
