"""
Score Data Models

Contains the high-score table entry.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class HighScoreEntry:
    """A persisted record of one won game."""
    score: int
    word: str
    attempts: int
    timestamp: str  # ISO-8601

    def to_dict(self) -> Dict[str, Any]:
        """Serialise using the stored field name ``date`` for the timestamp."""
        return {
            'score': self.score,
            'word': self.word,
            'attempts': self.attempts,
            'date': self.timestamp
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HighScoreEntry':
        """
        Build an entry from its stored form.

        Raises:
            KeyError: If a required field is missing
            TypeError, ValueError: If a field has the wrong type
            OverflowError: If a numeric field is infinite
        """
        timestamp = data['date'] if 'date' in data else data['timestamp']
        if not isinstance(timestamp, str) or not isinstance(data['word'], str):
            raise TypeError("word and date must be strings")
        return cls(
            score=int(data['score']),
            word=data['word'],
            attempts=int(data['attempts']),
            timestamp=timestamp
        )
