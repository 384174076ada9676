"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class LetterStatus(Enum):
    """Per-letter feedback for a guess, ordered CORRECT > PRESENT > ABSENT."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def priority(self) -> int:
        return _STATUS_PRIORITY[self]


_STATUS_PRIORITY = {
    LetterStatus.CORRECT: 3,
    LetterStatus.PRESENT: 2,
    LetterStatus.ABSENT: 1,
}


class GameOutcome(Enum):
    """Where a game stands after a submitted guess."""
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


class GuessError(Enum):
    """Reasons a guess submission is rejected without changing state."""
    INCOMPLETE_GUESS = "incomplete_guess"
    INVALID_WORD = "invalid_word"
    NOT_ACTIVE = "not_active"


@dataclass
class SubmitResult:
    """Result of submitting the current row as a guess."""
    success: bool
    row: Optional[int] = None
    guess: Optional[str] = None
    evaluation: List[LetterStatus] = field(default_factory=list)
    outcome: Optional[GameOutcome] = None
    error: Optional[GuessError] = None

    @classmethod
    def failure(cls, error: GuessError) -> "SubmitResult":
        return cls(success=False, error=error)

    def to_dict(self) -> Dict:
        return {
            'success': self.success,
            'row': self.row,
            'guess': self.guess,
            'evaluation': [status.value for status in self.evaluation],
            'outcome': self.outcome.value if self.outcome else None,
            'error': self.error.value if self.error else None,
        }


@dataclass
class GameStats:
    """Cumulative results across the games of one session."""
    games_played: int = 0
    games_won: int = 0
    current_streak: int = 0


@dataclass
class GameState:
    """JSON-friendly snapshot of a game session."""
    game_id: Optional[str]
    current_row: int
    current_col: int
    max_rows: int
    word_length: int
    game_over: bool
    won: bool
    hint_used: bool
    board: List[str]
    evaluations: List[List[str]]  # Status values as strings for JSON serialization
    key_statuses: Dict[str, str]
    stats: Dict[str, int]
    answer: Optional[str] = None  # Only included when game is over
