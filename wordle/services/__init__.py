"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import evaluate_guess
from .game_session import GameSession
from .session_service import SessionService, get_session_service, initialize_session_service
from .word_source import WordSource

__all__ = [
    'evaluate_guess',
    'GameSession',
    'SessionService', 'get_session_service', 'initialize_session_service',
    'WordSource'
]
