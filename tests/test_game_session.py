from wordle.models.game import GameOutcome, GuessError, LetterStatus
from wordle.services.game_session import GameSession
from wordle.services.word_source import WordSource


def test_new_game_starts_empty(session):
    assert session.current_row == 0
    assert session.current_col == 0
    assert session.is_active
    assert session.outcome is GameOutcome.ACTIVE
    assert session.key_statuses == {}
    assert session.get_game_state().answer is None


def test_add_letter_fills_row_and_stops_at_word_length(session, type_word):
    type_word(session, "trace")
    assert session.current_col == 5
    assert session.current_guess == "TRACE"

    session.add_letter("S")
    assert session.current_col == 5
    assert session.current_guess == "TRACE"


def test_add_letter_ignores_non_letters(session):
    for key in ("1", "", "AB", "é", None, " "):
        session.add_letter(key)
    assert session.current_col == 0


def test_delete_letter(session, type_word):
    session.delete_letter()
    assert session.current_col == 0

    type_word(session, "TRA")
    session.delete_letter()
    assert session.current_col == 2
    assert session.current_guess == "TR"
    assert session.get_game_state().board[0] == "TR"


def test_incomplete_guess_leaves_state_unchanged(session, type_word):
    type_word(session, "TRA")
    result = session.submit_guess()

    assert not result.success
    assert result.error is GuessError.INCOMPLETE_GUESS
    assert session.current_row == 0
    assert session.current_col == 3


def test_invalid_word_leaves_state_unchanged(type_word):
    source = WordSource(answer_words=["CRANE"], guess_words=["TRACE"], strict=True)
    game = GameSession(source.is_allowed)
    game.reset("CRANE")

    type_word(game, "XXXXX")
    result = game.submit_guess()

    assert result.error is GuessError.INVALID_WORD
    assert game.current_row == 0
    assert game.current_col == 5
    assert game.key_statuses == {}


def test_wrong_guess_advances_row(session, type_word):
    type_word(session, "TRACE")
    result = session.submit_guess()

    assert result.success
    assert result.row == 0
    assert result.guess == "TRACE"
    assert result.outcome is GameOutcome.ACTIVE
    assert result.evaluation == [
        LetterStatus.ABSENT, LetterStatus.CORRECT, LetterStatus.CORRECT,
        LetterStatus.PRESENT, LetterStatus.CORRECT,
    ]
    assert session.current_row == 1
    assert session.current_col == 0


def test_correct_guess_wins(session, type_word):
    type_word(session, "CRANE")
    result = session.submit_guess()

    assert result.outcome is GameOutcome.WON
    assert session.game_over
    assert session.won
    assert session.current_row == 0
    stats = session.stats
    assert (stats.games_played, stats.games_won, stats.current_streak) == (1, 1, 1)
    assert session.get_game_state().answer == "CRANE"


def test_losing_after_all_rows_resets_streak(session, type_word):
    type_word(session, "CRANE")
    session.submit_guess()
    session.reset("STONE")

    for row in range(session.max_rows):
        type_word(session, "APPLE")
        result = session.submit_guess()
        expected = GameOutcome.LOST if row == session.max_rows - 1 else GameOutcome.ACTIVE
        assert result.outcome is expected

    assert session.game_over
    assert not session.won
    assert session.current_row == session.max_rows
    stats = session.stats
    assert (stats.games_played, stats.games_won, stats.current_streak) == (2, 1, 0)


def test_input_ignored_once_game_is_over(session, type_word):
    type_word(session, "CRANE")
    session.submit_guess()

    session.add_letter("A")
    session.delete_letter()
    result = session.submit_guess()

    assert result.error is GuessError.NOT_ACTIVE
    assert (session.current_row, session.current_col) == (0, 5)
    assert session.stats.games_played == 1


def test_key_statuses_never_downgrade(session, type_word):
    type_word(session, "TRACE")
    session.submit_guess()
    assert session.key_statuses["R"] is LetterStatus.CORRECT
    assert session.key_statuses["C"] is LetterStatus.PRESENT
    assert session.key_statuses["T"] is LetterStatus.ABSENT

    # R only scores present/absent in CARRY, C moves up to correct
    type_word(session, "CARRY")
    session.submit_guess()
    assert session.key_statuses["R"] is LetterStatus.CORRECT
    assert session.key_statuses["C"] is LetterStatus.CORRECT


def test_hint_returns_first_letter_and_marks_used_once(session):
    assert not session.hint_used
    assert session.use_hint() == "C"
    assert session.hint_used
    assert session.use_hint() == "C"
    assert session.hint_used


def test_hint_unavailable_when_over_or_not_started(session, type_word):
    idle = GameSession(lambda word: True)
    assert idle.use_hint() is None

    type_word(session, "CRANE")
    session.submit_guess()
    assert session.use_hint() is None


def test_reset_clears_round_but_keeps_stats(session, type_word):
    session.use_hint()
    type_word(session, "CRANE")
    session.submit_guess()

    session.reset("stone")

    assert session.is_active
    assert not session.hint_used
    assert session.key_statuses == {}
    assert (session.current_row, session.current_col) == (0, 0)
    assert session.stats.games_won == 1
    assert session.use_hint() == "S"


def test_reset_with_unusable_secret_is_ignored(session, type_word):
    type_word(session, "TR")
    for secret in ("", "CAT", "CR4NE", None):
        session.reset(secret)
    assert session.current_col == 2
    assert session.use_hint() == "C"


def test_session_without_secret_ignores_input():
    idle = GameSession(lambda word: True)
    idle.add_letter("A")
    assert idle.current_col == 0
    assert idle.submit_guess().error is GuessError.NOT_ACTIVE


def test_handle_key_dispatch(session):
    for key in "cran":
        assert session.handle_key(key) is None
    session.handle_key("Backspace")
    session.handle_key("Shift")
    assert session.current_guess == "CRA"

    for key in "NE":
        session.handle_key(key)
    result = session.handle_key("Enter")
    assert result.outcome is GameOutcome.WON


def test_game_state_snapshot(session, type_word):
    type_word(session, "TRACE")
    session.submit_guess()
    type_word(session, "CR")

    state = session.get_game_state()
    assert state.game_id == "test-game"
    assert state.board[:2] == ["TRACE", "CR"]
    assert state.evaluations == [["absent", "correct", "correct", "present", "correct"]]
    assert state.key_statuses["R"] == "correct"
    assert state.stats == {"games_played": 0, "games_won": 0, "current_streak": 0}
    assert state.answer is None
