"""
Game Session

Holds the state of one player's board and drives it through a game:
letter entry, deletion, guess submission, win/loss detection and the
one-time hint. Cumulative stats survive across resets of the same session.
"""

from dataclasses import asdict
from typing import Callable, Dict, List, Optional

from ..config.game_settings import NUM_COLS, NUM_ROWS
from ..models.game import GameOutcome, GameState, GameStats, GuessError, LetterStatus, SubmitResult
from ..utils.game_logger import game_logger
from ..utils.helpers import is_word, normalize_letter
from .evaluator import evaluate_guess


class GameSession:
    """
    State machine for a single Wordle board.

    A session is Active while accepting input and becomes Over on a correct
    guess or once every row has been used. All operations silently ignore
    input that does not fit the current state, so a stray key press can
    never corrupt the board.

    Args:
        is_allowed: Guess validity check, called with the assembled guess
        max_rows: Number of guesses allowed per game
        word_length: Letters per word
        session_id: Identifier used in snapshots and log entries
    """

    def __init__(self,
                 is_allowed: Callable[[str], bool],
                 max_rows: int = NUM_ROWS,
                 word_length: int = NUM_COLS,
                 session_id: Optional[str] = None):
        self._is_allowed = is_allowed
        self.max_rows = max_rows
        self.word_length = word_length
        self.session_id = session_id

        self._stats = GameStats()
        self._secret = ""
        self._clear_round()

    def _clear_round(self) -> None:
        self._current_row = 0
        self._current_col = 0
        self._game_over = False
        self._won = False
        self._hint_used = False
        self._key_statuses: Dict[str, LetterStatus] = {}
        self._board: List[List[str]] = [[""] * self.word_length for _ in range(self.max_rows)]
        self._evaluations: List[List[LetterStatus]] = []

    # Read-only accessors

    @property
    def current_row(self) -> int:
        return self._current_row

    @property
    def current_col(self) -> int:
        return self._current_col

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def won(self) -> bool:
        return self._won

    @property
    def hint_used(self) -> bool:
        return self._hint_used

    @property
    def is_active(self) -> bool:
        return bool(self._secret) and not self._game_over

    @property
    def outcome(self) -> GameOutcome:
        if not self._game_over:
            return GameOutcome.ACTIVE
        return GameOutcome.WON if self._won else GameOutcome.LOST

    @property
    def key_statuses(self) -> Dict[str, LetterStatus]:
        return dict(self._key_statuses)

    @property
    def stats(self) -> GameStats:
        return GameStats(**asdict(self._stats))

    @property
    def current_guess(self) -> str:
        if self._current_row >= self.max_rows:
            return ""
        return "".join(self._board[self._current_row][:self._current_col])

    # State transitions

    def reset(self, secret_word: str) -> None:
        """Start a new game with the given secret word."""
        secret = secret_word.strip().upper() if isinstance(secret_word, str) else ""
        if not is_word(secret, self.word_length):
            game_logger.logger.warning(
                f"Session {self.session_id}: ignoring reset with unusable secret word {secret_word!r}"
            )
            return

        self._clear_round()
        self._secret = secret
        game_logger.log_game_event(self.session_id, 'game_started', games_played=self._stats.games_played)

    def add_letter(self, letter: str) -> None:
        """Place a letter in the next free tile of the current row."""
        if not self.is_active:
            return
        if self._current_col >= self.word_length or self._current_row >= self.max_rows:
            return

        normalized = normalize_letter(letter)
        if normalized is None:
            return

        self._board[self._current_row][self._current_col] = normalized
        self._current_col += 1

    def delete_letter(self) -> None:
        """Remove the last letter from the current row."""
        if self._current_col == 0 or not self.is_active:
            return

        self._current_col -= 1
        self._board[self._current_row][self._current_col] = ""

    def submit_guess(self) -> SubmitResult:
        """
        Submit the current row as a guess.

        Returns:
            SubmitResult carrying the row, evaluation and outcome on success,
            or the GuessError explaining why nothing changed
        """
        if not self.is_active:
            return SubmitResult.failure(GuessError.NOT_ACTIVE)

        if self._current_col < self.word_length:
            return SubmitResult.failure(GuessError.INCOMPLETE_GUESS)

        guess = self.current_guess
        if not self._is_allowed(guess):
            return SubmitResult.failure(GuessError.INVALID_WORD)

        row = self._current_row
        evaluation = evaluate_guess(guess, self._secret)
        self._evaluations.append(evaluation)

        for letter, status in zip(guess, evaluation):
            self._update_key_status(letter, status)

        if guess == self._secret:
            self._end_game(True)
        else:
            self._current_row += 1
            self._current_col = 0
            if self._current_row == self.max_rows:
                self._end_game(False)

        return SubmitResult(
            success=True,
            row=row,
            guess=guess,
            evaluation=evaluation,
            outcome=self.outcome
        )

    def use_hint(self) -> Optional[str]:
        """
        Reveal the first letter of the secret word.

        Only the first call in a game marks the hint as used; later calls
        return the same letter. Returns None once the game is over or before
        a game has started.
        """
        if self._game_over or not self._secret:
            return None

        if not self._hint_used:
            self._hint_used = True
            game_logger.log_game_event(self.session_id, 'hint_used', row=self._current_row)

        return self._secret[0]

    def handle_key(self, key: str) -> Optional[SubmitResult]:
        """
        Handle a logical key press from a physical or on-screen keyboard.

        Returns:
            The SubmitResult when the key was Enter, otherwise None
        """
        if key == "Enter":
            return self.submit_guess()
        if key == "Backspace":
            self.delete_letter()
        elif normalize_letter(key) is not None:
            self.add_letter(key)
        return None

    def _update_key_status(self, letter: str, new_status: LetterStatus) -> None:
        """Keep the highest-priority status seen so far for a letter."""
        current = self._key_statuses.get(letter)
        if current is None or new_status.priority > current.priority:
            self._key_statuses[letter] = new_status

    def _end_game(self, did_win: bool) -> None:
        self._game_over = True
        self._won = did_win

        self._stats.games_played += 1
        if did_win:
            self._stats.games_won += 1
            self._stats.current_streak += 1
        else:
            self._stats.current_streak = 0

        game_logger.log_game_event(
            self.session_id,
            'game_won' if did_win else 'game_lost',
            rounds_used=len(self._evaluations),
            target_word=self._secret,
            **asdict(self._stats)
        )

    def get_game_state(self) -> GameState:
        """Snapshot the session without revealing an unfinished game's answer."""
        return GameState(
            game_id=self.session_id,
            current_row=self._current_row,
            current_col=self._current_col,
            max_rows=self.max_rows,
            word_length=self.word_length,
            game_over=self._game_over,
            won=self._won,
            hint_used=self._hint_used,
            board=["".join(row) for row in self._board],
            evaluations=[[status.value for status in evaluation] for evaluation in self._evaluations],
            key_statuses={letter: status.value for letter, status in sorted(self._key_statuses.items())},
            stats=asdict(self._stats),
            answer=self._secret if self._game_over else None
        )
