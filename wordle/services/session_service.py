"""
Session Service

Keeps the in-memory game sessions served by the web adapter.
"""

import uuid
from typing import Dict, Optional

from .game_session import GameSession
from .word_source import WordSource


class SessionService:
    """
    Registry of game sessions keyed by a unique game ID.

    This class handles:
    - Creating sessions and starting their first game
    - Restarting a session with a freshly picked secret word
    - Looking up and removing sessions
    """

    def __init__(self, word_source: Optional[WordSource] = None):
        self.word_source = word_source or WordSource()
        self.sessions: Dict[str, GameSession] = {}

    def create_session(self) -> str:
        """
        Creates a new session and starts a game with a random secret word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        session = GameSession(self.word_source.is_allowed, session_id=game_id)
        session.reset(self.word_source.pick_secret())

        self.sessions[game_id] = session
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.sessions.get(game_id)

    def restart_session(self, game_id: str) -> Optional[GameSession]:
        """
        Starts a new game in an existing session, keeping its cumulative stats.

        Returns:
            The restarted session or None if not found
        """
        session = self.sessions.get(game_id)
        if session is None:
            return None

        session.reset(self.word_source.pick_secret())
        return session

    def delete_session(self, game_id: str) -> bool:
        """
        Removes a session from memory.

        Returns:
            bool: True if the session was deleted, False if not found
        """
        return self.sessions.pop(game_id, None) is not None

    @property
    def active_count(self) -> int:
        return len(self.sessions)


# Global service instance
_session_service = None


def get_session_service() -> Optional[SessionService]:
    """Get the global session service instance."""
    return _session_service


def initialize_session_service(word_source: Optional[WordSource] = None) -> SessionService:
    """Initialize the global session service instance."""
    global _session_service
    _session_service = SessionService(word_source)
    return _session_service
