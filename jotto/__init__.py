"""
Jotto Game Application Package

A single-player word-guessing game: guess the secret 5-letter word, learning
after each guess only how many distinct letters it shares with the secret.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config, load_word_list
from .services.game_service import initialize_game_service
from .services.score_ledger import ScoreLedger
from .services.storage import InMemoryStore, JsonFileStore
from .utils.game_logger import game_logger


def create_app(config_class=Config, store=None, rng=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        store: Key-value store for high scores; built from SCORE_STORE_PATH when omitted
        rng: Random source for secret word selection

    Returns:
        Flask application instance with the game service initialized

    Raises:
        EmptyCandidateListError: If the configured word list is empty
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    if not app.config.get('TESTING'):
        game_logger.configure(app.config['LOG_DIR'], app.config['LOG_LEVEL'])

    # Initialize extensions
    CORS(app)

    # Initialize the game service
    if store is None:
        store_path = app.config.get('SCORE_STORE_PATH')
        store = JsonFileStore(store_path) if store_path else InMemoryStore()

    words = load_word_list(app.config.get('WORD_LIST_PATH'))
    ledger = ScoreLedger(store, limit=app.config['HIGH_SCORE_LIMIT'])
    initialize_game_service(words, ledger, rng=rng, max_attempts=app.config['MAX_ATTEMPTS'])

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    return app
