"""
Score Ledger

Score calculation and the persisted top-N high-score table.
"""

import json
import logging
from typing import Iterable, Tuple

from ..config.game_settings import (
    BASE_SCORE, PENALTY_PER_ATTEMPT, MIN_SCORE, HIGH_SCORE_LIMIT,
    HIGH_SCORES_KEY, HAS_VISITED_KEY
)
from ..exceptions import StorageError
from ..models.score import HighScoreEntry
from .storage import KeyValueStore

logger = logging.getLogger('jotto_game.scores')

HighScoreTable = Tuple[HighScoreEntry, ...]


def compute_score(attempts_used: int) -> int:
    """
    Score for a won game.

    1000 points minus 50 per attempt, never below 100.
    """
    return max(MIN_SCORE, BASE_SCORE - PENALTY_PER_ATTEMPT * attempts_used)


def record(table: Iterable[HighScoreEntry], entry: HighScoreEntry,
           limit: int = HIGH_SCORE_LIMIT) -> HighScoreTable:
    """
    Return a new table with ``entry`` added, best score first, cut to ``limit``.

    Ties keep insertion order (sorted() is stable), so an older entry stays
    ahead of a newer one with the same score.
    """
    entries = list(table) + [entry]
    entries.sort(key=lambda e: e.score, reverse=True)
    return tuple(entries[:limit])


class ScoreLedger:
    """
    Reads and writes the high-score table through a key-value store.

    Storage failures never reach the caller: a failed load yields an empty
    table and a failed save leaves the caller with its in-memory table.
    """

    def __init__(self, store: KeyValueStore, limit: int = HIGH_SCORE_LIMIT):
        self.store = store
        self.limit = limit

    def load(self) -> HighScoreTable:
        """Load the persisted table, or an empty one if it is missing or unreadable."""
        try:
            raw = self.store.get(HIGH_SCORES_KEY)
        except StorageError as e:
            logger.warning(f"High scores unavailable, starting empty: {e}")
            return ()

        if not raw:
            return ()

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError("high score table is not a list")
            entries = [HighScoreEntry.from_dict(item) for item in data]
        except (ValueError, KeyError, TypeError, OverflowError) as e:
            logger.warning(f"Discarding malformed high score table: {e}")
            return ()

        entries.sort(key=lambda e: e.score, reverse=True)
        return tuple(entries[:self.limit])

    def save(self, table: Iterable[HighScoreEntry]) -> bool:
        """
        Persist the table.

        Returns:
            bool: False if the store rejected the write
        """
        payload = json.dumps([entry.to_dict() for entry in table])
        try:
            self.store.set(HIGH_SCORES_KEY, payload)
        except StorageError as e:
            logger.error(f"Failed to save high scores: {e}")
            return False
        return True

    def add(self, table: Iterable[HighScoreEntry], entry: HighScoreEntry) -> HighScoreTable:
        """Record an entry and persist the resulting table."""
        updated = record(table, entry, self.limit)
        self.save(updated)
        return updated

    def has_visited(self) -> bool:
        """Whether the first-visit flag has been set."""
        try:
            return self.store.get(HAS_VISITED_KEY) == 'true'
        except StorageError as e:
            logger.warning(f"Visit flag unavailable: {e}")
            return False

    def mark_visited(self) -> None:
        try:
            self.store.set(HAS_VISITED_KEY, 'true')
        except StorageError as e:
            logger.warning(f"Failed to save visit flag: {e}")

    def first_visit(self) -> bool:
        """
        Check and set the first-visit flag in one step.

        Returns:
            bool: True only the first time it is called against a given store
        """
        visited = self.has_visited()
        if not visited:
            self.mark_visited()
        return not visited
