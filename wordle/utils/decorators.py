"""
Session Decorators

Contains decorators that resolve a game session for HTTP and WebSocket handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_session(f):
    """
    Decorator resolving the ``game_id`` URL parameter to a live GameSession.

    The wrapped view receives the session as the ``session`` keyword argument.
    """
    @wraps(f)
    def decorated_function(game_id, *args, **kwargs):
        from ..services.session_service import get_session_service

        session_service = get_session_service()
        if not session_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        session = session_service.get_session(game_id)
        if session is None:
            return jsonify({
                'success': False,
                'error': 'Game not found'
            }), 404

        return f(game_id, *args, session=session, **kwargs)

    return decorated_function


def websocket_session_required(f):
    """Decorator for WebSocket events carrying a ``game_id`` in their payload."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.session_service import get_session_service

        session_service = get_session_service()
        if not session_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = args[0] if args and isinstance(args[0], dict) else {}
        game_id = data.get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        session = session_service.get_session(game_id)
        if session is None:
            emit('error', {'error': 'Game not found'})
            return

        kwargs['session'] = session
        return f(*args, **kwargs)

    return decorated_function
