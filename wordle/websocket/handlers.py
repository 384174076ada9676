"""
WebSocket Event Handlers

Relays keyboard events from connected clients into game sessions and pushes
the resulting state back to everyone watching the game.
"""

from dataclasses import asdict
from flask_socketio import emit, join_room, leave_room
from ..controllers.game_controller import ERROR_MESSAGES, outcome_message
from ..models.game import GameOutcome
from ..utils.decorators import websocket_session_required
from ..utils.game_logger import game_logger


def game_room(game_id: str) -> str:
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    def broadcast_state(session):
        state = asdict(session.get_game_state())
        socketio.emit('state_update', state, room=game_room(session.session_id))

    @socketio.on('join_game')
    @websocket_session_required
    def handle_join_game(data, session=None):
        """Join a game room and receive its current state."""
        join_room(game_room(session.session_id))
        emit('state_update', asdict(session.get_game_state()))

    @socketio.on('leave_game')
    @websocket_session_required
    def handle_leave_game(data, session=None):
        leave_room(game_room(session.session_id))

    @socketio.on('key')
    @websocket_session_required
    def handle_key(data, session=None):
        """Apply a key press (letter, Enter or Backspace) to the session."""
        key = data.get('key')
        if not isinstance(key, str) or not key:
            emit('error', {'error': 'Key is required'})
            return

        try:
            result = session.handle_key(key)
        except Exception as e:
            game_logger.logger.error(f"Error handling key {key!r} for game {session.session_id}: {e}")
            emit('error', {'error': str(e)})
            return

        if result is not None and not result.success:
            emit('guess_rejected', {
                'error': result.error.value,
                'message': ERROR_MESSAGES[result.error],
                'row': session.current_row
            })
            return

        broadcast_state(session)

        if result is not None and result.outcome is not GameOutcome.ACTIVE:
            state = session.get_game_state()
            socketio.emit('game_over', {
                'game_id': session.session_id,
                'won': state.won,
                'answer': state.answer,
                'message': outcome_message(result.outcome, state.answer),
                'stats': state.stats
            }, room=game_room(session.session_id))

    @socketio.on('hint')
    @websocket_session_required
    def handle_hint(data, session=None):
        """Send the one-time hint back to the requesting client."""
        hint = session.use_hint()
        emit('hint', {
            'hint': hint,
            'message': f'Hint: The word starts with "{hint}".' if hint else ''
        })
        if hint:
            broadcast_state(session)
