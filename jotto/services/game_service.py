"""
Game Service

Contains the Jotto game session state machine.
"""

import logging
import random
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from ..config.game_settings import MAX_ATTEMPTS, WORD_LENGTH
from ..exceptions import EmptyCandidateListError, InvalidInputError
from ..models.game import GameStatus, GuessRecord, Session
from ..models.score import HighScoreEntry
from .match_engine import is_exact_match, letter_statuses, match_count
from .score_ledger import HighScoreTable, ScoreLedger, compute_score
from .word_source import pick_secret

logger = logging.getLogger('jotto_game.session')


def normalize_guess(raw: str) -> str:
    """
    Validate and canonicalise a guess.

    Returns:
        str: The guess stripped and lowercased

    Raises:
        InvalidInputError: If the guess is not exactly 5 letters
    """
    if not raw or not isinstance(raw, str):
        raise InvalidInputError("Guess must be a valid string")

    guess = raw.strip()
    if len(guess) != WORD_LENGTH:
        raise InvalidInputError(f"Guess must be exactly {WORD_LENGTH} letters")

    # str.isalpha() accepts non-ASCII letters; the game is a-z only
    if not (guess.isascii() and guess.isalpha()):
        raise InvalidInputError("Only letters are allowed")

    return guess.lower()


class GameSession:
    """
    Single-player Jotto game.

    This class handles:
    - Secret word selection for each new game
    - Guess validation and match counting
    - Win/loss detection and scoring
    - Recording wins in the persisted high-score table

    Every transition replaces ``self.session`` with a new immutable Session
    and returns it.
    """

    def __init__(self, words: Sequence[str], ledger: ScoreLedger,
                 rng: Optional[random.Random] = None, max_attempts: int = MAX_ATTEMPTS):
        if not words:
            raise EmptyCandidateListError("Word list cannot be empty")

        self.words: List[str] = [word.lower() for word in words]
        self.ledger = ledger
        self.rng = rng
        self.max_attempts = max_attempts
        self.high_scores: HighScoreTable = ledger.load()
        self.session: Session = self.start_new_game()

    def start_new_game(self) -> Session:
        """
        Replace the current session with a fresh one.

        Callable from any state, including after a win or a loss.
        """
        secret_word = pick_secret(self.words, self.rng)
        self.session = Session(secret_word=secret_word)

        logger.info("New game started")
        logger.debug(f"Secret word: {secret_word}")
        return self.session

    def submit_guess(self, raw: str) -> Session:
        """
        Processes a guess and advances the game.

        A guess submitted after the game is over is ignored and the current
        session is returned unchanged. An exact match always wins, even on the
        last allowed attempt.

        Args:
            raw: The player's guess, any case

        Returns:
            The new Session

        Raises:
            InvalidInputError: If the guess is not 5 letters; the session is unchanged
        """
        current = self.session
        if current.status is not GameStatus.PLAYING:
            logger.info(f"Guess ignored, game already {current.status.value}")
            return current

        guess = normalize_guess(raw)
        count = match_count(guess, current.secret_word)
        history = current.history + (GuessRecord(word=guess, match_count=count),)
        attempts = len(history)

        if is_exact_match(guess, current.secret_word):
            score = compute_score(attempts - 1)
            self.session = Session(
                secret_word=current.secret_word,
                history=history,
                status=GameStatus.WON,
                score=score
            )
            entry = HighScoreEntry(
                score=score,
                word=current.secret_word,
                attempts=attempts,
                timestamp=datetime.now(timezone.utc).isoformat()
            )
            self.high_scores = self.ledger.add(self.high_scores, entry)
            logger.info(f"Game won in {attempts} attempts, score {score}")
        elif attempts >= self.max_attempts:
            self.session = Session(
                secret_word=current.secret_word,
                history=history,
                status=GameStatus.LOST
            )
            logger.info(f"Game lost after {attempts} attempts")
        else:
            self.session = Session(secret_word=current.secret_word, history=history)

        return self.session

    def progress(self) -> Dict:
        """Attempts used and remaining, with a low/medium/high band for display."""
        attempts = self.session.attempt_count
        percentage = round(attempts / self.max_attempts * 100, 1)

        if percentage < 40:
            band = 'low'
        elif percentage < 70:
            band = 'medium'
        else:
            band = 'high'

        return {
            'attempts': attempts,
            'max_attempts': self.max_attempts,
            'remaining': max(0, self.max_attempts - attempts),
            'percentage': percentage,
            'band': band
        }

    def letters(self) -> Dict[str, str]:
        return letter_statuses(self.session.history)

    def snapshot(self) -> Dict:
        """
        Returns the observable game state as a JSON-ready dict.

        The secret word is included: this is a single-player client-side game.
        """
        session = self.session
        return {
            'secret_word': session.secret_word,
            'guesses': list(session.guesses),
            'matches': list(session.matches),
            'history': [record.to_dict() for record in session.history],
            'status': session.status.value,
            'attempt_count': session.attempt_count,
            'max_attempts': self.max_attempts,
            'score': session.score,
            'high_scores': [entry.to_dict() for entry in self.high_scores]
        }


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameSession]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(words: Sequence[str], ledger: ScoreLedger,
                            rng: Optional[random.Random] = None,
                            max_attempts: int = MAX_ATTEMPTS) -> GameSession:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameSession(words, ledger, rng=rng, max_attempts=max_attempts)
    return _game_service
