"""
Game Logger Module for the Wordle Server

Writes one JSON document per line for every request handled, every response
sent and every game event (started, won, lost, hint used).
"""

import logging
import json
from collections import Counter
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config
from .helpers import get_user_identity

# Event types written into each entry, counted back by get_log_stats()
EVENT_TYPES = ('USER_ACTION', 'SERVER_RESPONSE', 'GAME_EVENT', 'ERROR')


class GameLogger:
    """
    Structured JSON logging for the Wordle game server.

    Entries go to a dated file under ``log_dir``; warnings and errors are
    echoed to the console.
    """

    def __init__(self, log_dir: str = Config.LOG_DIR, level: str = Config.LOG_LEVEL):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.logger = self._setup_logger(logging.getLevelName(level.upper()))

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self, level) -> logging.Logger:
        logger = logging.getLogger('wordle_game')
        logger.setLevel(level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    def _write(self, level: int, event_type: str, action: str, request, details: Dict[str, Any]):
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': get_user_identity(request),
            'details': details
        }
        self.logger.log(level, json.dumps(log_entry, ensure_ascii=False, default=str))

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """
        Log a request against the game API.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'new_game', 'key', 'submit_guess')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        self._write(logging.INFO, 'USER_ACTION', action, request, {
            'game_id': game_id,
            'endpoint': request.endpoint,
            'method': request.method,
            **kwargs
        })

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """Log the response to a request; rejected requests are logged as warnings."""
        self._write(logging.INFO if success else logging.WARNING, 'SERVER_RESPONSE', action, request, {
            'game_id': game_id,
            'success': success,
            'response_data': self._summarize_response(response_data),
            **kwargs
        })

    def log_game_event(self, game_id: Optional[str], event: str, **kwargs):
        """
        Log a change in a game's lifecycle ('game_started', 'game_won', 'game_lost', 'hint_used').

        The acting user is taken from the current request when there is one.
        """
        self._write(logging.INFO, 'GAME_EVENT', event, None, {'game_id': game_id, **kwargs})

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        """Log an unexpected exception raised while handling a request."""
        self._write(logging.ERROR, 'ERROR', action, request, {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error)
        })

    def _summarize_response(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Replace a full board snapshot by its progress and never log an unfinished game's answer."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        summary = data.copy()
        state = summary.get('state')
        if isinstance(state, dict):
            summary['state'] = {
                'current_row': state.get('current_row'),
                'current_col': state.get('current_col'),
                'game_over': state.get('game_over'),
                'won': state.get('won'),
                'hint_used': state.get('hint_used'),
                'answer_revealed': state.get('answer') is not None
            }
        return summary

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's entries by event type (reported by the health endpoint)."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        counts = Counter()
        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    counts['total_entries'] += 1
                    for event_type in EVENT_TYPES:
                        if f'"event_type": "{event_type}"' in line:
                            counts[event_type.lower()] += 1
                            break
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': counts['total_entries'],
            **{event_type.lower(): counts[event_type.lower()] for event_type in EVENT_TYPES}
        }


# Global logger instance
game_logger = GameLogger()
