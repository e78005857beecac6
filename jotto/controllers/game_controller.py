"""
Game Controller

Handles all game-related HTTP endpoints for the browser client.
"""

from flask import Blueprint, request, jsonify
from ..exceptions import InvalidInputError
from ..models.game import GameStatus
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _error_response(action: str, error: Exception, status_code: int = 500):
    game_logger.log_error(error, action)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(action, False, error_response)
    return jsonify(error_response), status_code


@game_bp.route('/state', methods=['GET'])
def get_state():
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state')

        response_data = {
            'success': True,
            'state': game_service.snapshot()
        }
        game_logger.log_server_response('get_state', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('get_state', e)


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Start a new game, replacing the current one."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_game')

        game_service.start_new_game()
        response_data = {
            'success': True,
            'state': game_service.snapshot()
        }

        game_logger.log_server_response(
            'new_game', True, response_data, max_attempts=game_service.max_attempts
        )
        game_logger.log_game_event('game_started')
        return jsonify(response_data)

    except Exception as e:
        return _error_response('new_game', e)


@game_bp.route('/guess', methods=['POST'])
def make_guess():
    """Submit a guess for evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response('submit_guess', False, error_response)
            return jsonify(error_response), 400

        guess = data['guess']
        game_logger.log_user_action(request, 'submit_guess', guess=guess)

        was_over = game_service.session.is_over
        try:
            session = game_service.submit_guess(guess)
        except InvalidInputError as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(
                'submit_guess', False, error_response,
                validation_error=str(e), attempted_guess=guess
            )
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'state': game_service.snapshot()
        }
        game_logger.log_server_response(
            'submit_guess', True, response_data,
            guess=guess, attempt=session.attempt_count, status=session.status.value
        )

        if session.is_over and not was_over:
            if session.status is GameStatus.WON:
                game_logger.log_game_event(
                    'game_won', attempts=session.attempt_count,
                    score=session.score, secret_word=session.secret_word
                )
            else:
                game_logger.log_game_event(
                    'game_lost', attempts=session.attempt_count,
                    secret_word=session.secret_word, final_guess=guess
                )

        return jsonify(response_data)

    except Exception as e:
        return _error_response('submit_guess', e)


@game_bp.route('/high_scores', methods=['GET'])
def get_high_scores():
    """Get the persisted high-score table."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_high_scores')
        return jsonify({
            'success': True,
            'high_scores': [entry.to_dict() for entry in game_service.high_scores]
        })

    except Exception as e:
        return _error_response('get_high_scores', e)


@game_bp.route('/letters', methods=['GET'])
def get_letters():
    """Get the letter tracker for the current game."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        return jsonify({
            'success': True,
            'letters': game_service.letters()
        })

    except Exception as e:
        return _error_response('get_letters', e)


@game_bp.route('/progress', methods=['GET'])
def get_progress():
    """Get attempts used and remaining."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        return jsonify({
            'success': True,
            'progress': game_service.progress()
        })

    except Exception as e:
        return _error_response('get_progress', e)


@game_bp.route('/visit', methods=['GET'])
def visit():
    """Report whether this is the player's first visit, and record the visit."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        first_visit = game_service.ledger.first_visit()
        game_logger.log_user_action(request, 'visit', first_visit=first_visit)
        return jsonify({
            'success': True,
            'first_visit': first_visit
        })

    except Exception as e:
        return _error_response('visit', e)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()
    return jsonify({
        'status': 'healthy' if game_service else 'degraded',
        'game_available': game_service is not None,
        'log_stats': game_logger.get_log_stats()
    })
