"""
Data Models Package

Contains all data models used throughout the application.
"""

from .game import GameStatus, GuessRecord, LetterStatus, Session
from .score import HighScoreEntry

__all__ = ['GameStatus', 'GuessRecord', 'LetterStatus', 'Session', 'HighScoreEntry']
