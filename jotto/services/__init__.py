"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameSession, get_game_service, initialize_game_service
from .match_engine import match_count, is_exact_match, letter_statuses
from .score_ledger import ScoreLedger, compute_score, record
from .storage import KeyValueStore, InMemoryStore, JsonFileStore
from .word_source import pick_secret

__all__ = [
    'GameSession', 'get_game_service', 'initialize_game_service',
    'match_count', 'is_exact_match', 'letter_statuses',
    'ScoreLedger', 'compute_score', 'record',
    'KeyValueStore', 'InMemoryStore', 'JsonFileStore',
    'pick_secret'
]
