"""
Jotto Game Server - Main Entry Point

Serves the game to a local browser client. Select the configuration with the
APP_ENV environment variable (development, production, testing).
"""

import os
from jotto import create_app
from jotto.config import config, validate_word_list_integrity, get_word_statistics
from jotto.exceptions import JottoError
from jotto.utils.game_logger import game_logger


def main():
    """Validate the word list, build the app and run it."""
    config_class = config.get(os.getenv('APP_ENV', 'default'), config['default'])

    try:
        print("Starting Jotto Game Server...")
        print("=" * 50)

        if not config_class.WORD_LIST_PATH:
            validate_word_list_integrity()
            stats = get_word_statistics()
            print(f"✓ Word list validated ({stats['total_words']} words)")

        print("Creating Flask application...")
        app = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Jotto Server Starting")

        print(f"\nStarting Jotto Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Jotto Server shutting down (KeyboardInterrupt)")
    except JottoError as e:
        print(f"Configuration error: {e}")
        game_logger.logger.error(f"Configuration error: {e}")
        raise


if __name__ == '__main__':
    main()
