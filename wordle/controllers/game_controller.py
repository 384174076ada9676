"""
Game Controller

Handles all game-related HTTP endpoints. Each endpoint maps onto a single
GameSession operation and answers with a snapshot of the session.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..models.game import GameOutcome, GuessError
from ..services.session_service import get_session_service
from ..utils.decorators import require_session
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)

ERROR_MESSAGES = {
    GuessError.INCOMPLETE_GUESS: 'Not enough letters',
    GuessError.INVALID_WORD: 'Not in word list',
    GuessError.NOT_ACTIVE: 'Game is over',
}


def outcome_message(outcome: GameOutcome, answer: str) -> str:
    """User-facing text for a finished game."""
    if outcome is GameOutcome.WON:
        return 'You won! 🎉'
    if outcome is GameOutcome.LOST:
        return f'You lost. The word was {answer}.'
    return ''


def _error_response(action, error, game_id=None, status=500):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), status


def _state_response(action, log_game_id, session, **extra):
    response_data = {
        'success': True,
        'state': asdict(session.get_game_state()),
        **extra
    }
    game_logger.log_server_response(
        request, action, True, response_data, log_game_id,
        current_row=session.current_row, current_col=session.current_col
    )
    return jsonify(response_data)


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        session_service = get_session_service()
        if not session_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'new_game')

        game_id = session_service.create_session()
        session = session_service.get_session(game_id)

        return _state_response('new_game', game_id, session, game_id=game_id)

    except Exception as e:
        return _error_response('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_session
def get_state(game_id, session=None):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)
        return _state_response('get_state', game_id, session)

    except Exception as e:
        return _error_response('get_state', e, game_id)


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
@require_session
def restart_game(game_id, session=None):
    """Start a new game in the same session, keeping cumulative stats."""
    try:
        game_logger.log_user_action(request, 'restart', game_id)
        get_session_service().restart_session(game_id)
        return _state_response('restart', game_id, session)

    except Exception as e:
        return _error_response('restart', e, game_id)


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@require_session
def press_key(game_id, session=None):
    """Handle a logical key press (a letter, Enter or Backspace)."""
    try:
        data = request.get_json(silent=True) or {}
        key = data.get('key')
        if not isinstance(key, str) or not key:
            error_response = {
                'success': False,
                'error': 'Key is required'
            }
            game_logger.log_server_response(request, 'key', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'key', game_id, key=key)

        result = session.handle_key(key)
        if result is None:
            return _state_response('key', game_id, session)
        return _guess_response(game_id, session, result)

    except Exception as e:
        return _error_response('key', e, game_id)


@game_bp.route('/game/<game_id>/letter', methods=['POST'])
@require_session
def add_letter(game_id, session=None):
    """Add a letter to the current row."""
    try:
        data = request.get_json(silent=True) or {}
        letter = data.get('letter')
        game_logger.log_user_action(request, 'add_letter', game_id, letter=letter)

        session.add_letter(letter)
        return _state_response('add_letter', game_id, session)

    except Exception as e:
        return _error_response('add_letter', e, game_id)


@game_bp.route('/game/<game_id>/letter', methods=['DELETE'])
@require_session
def delete_letter(game_id, session=None):
    """Remove the last letter from the current row."""
    try:
        game_logger.log_user_action(request, 'delete_letter', game_id)

        session.delete_letter()
        return _state_response('delete_letter', game_id, session)

    except Exception as e:
        return _error_response('delete_letter', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_session
def submit_guess(game_id, session=None):
    """Submit the current row for evaluation."""
    try:
        game_logger.log_user_action(request, 'submit_guess', game_id, guess=session.current_guess)

        result = session.submit_guess()
        return _guess_response(game_id, session, result)

    except Exception as e:
        return _error_response('submit_guess', e, game_id)


def _guess_response(game_id, session, result):
    state = session.get_game_state()

    if not result.success:
        error_response = {
            'success': False,
            'error': result.error.value,
            'message': ERROR_MESSAGES[result.error],
            'state': asdict(state)
        }
        game_logger.log_server_response(
            request, 'submit_guess', False, error_response, game_id,
            validation_error=result.error.value, attempted_guess=session.current_guess
        )
        return jsonify(error_response), 400

    response_data = {
        'success': True,
        'result': result.to_dict(),
        'message': outcome_message(result.outcome, state.answer),
        'state': asdict(state)
    }
    game_logger.log_server_response(
        request, 'submit_guess', True, response_data, game_id,
        guess=result.guess, row=result.row, outcome=result.outcome.value
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/hint', methods=['POST'])
@require_session
def use_hint(game_id, session=None):
    """Reveal the first letter of the secret word (once per game)."""
    try:
        game_logger.log_user_action(request, 'hint', game_id)

        hint = session.use_hint()
        message = f'Hint: The word starts with "{hint}".' if hint else ''
        return _state_response('hint', game_id, session, hint=hint, message=message)

    except Exception as e:
        return _error_response('hint', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        session_service = get_session_service()
        if not session_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = session_service.delete_session(game_id)
        response_data = {
            'success': success
        }
        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        return jsonify(response_data), (200 if success else 404)

    except Exception as e:
        return _error_response('delete_game', e, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        session_service = get_session_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': session_service.active_count if session_service else 0,
            'log_stats': game_logger.get_log_stats()
        }
        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
