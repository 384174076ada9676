from wordle.services.session_service import SessionService


def test_create_and_get_session(word_source):
    service = SessionService(word_source)
    game_id = service.create_session()

    session = service.get_session(game_id)
    assert session is not None
    assert session.session_id == game_id
    assert session.is_active
    assert session.use_hint() == "C"
    assert service.active_count == 1


def test_restart_keeps_stats(word_source):
    service = SessionService(word_source)
    game_id = service.create_session()
    session = service.get_session(game_id)
    for key in "CRANE":
        session.add_letter(key)
    session.submit_guess()

    restarted = service.restart_session(game_id)

    assert restarted is session
    assert session.is_active
    assert session.stats.current_streak == 1


def test_unknown_session(word_source):
    service = SessionService(word_source)
    assert service.get_session("missing") is None
    assert service.restart_session("missing") is None
    assert service.delete_session("missing") is False


def test_delete_session(word_source):
    service = SessionService(word_source)
    game_id = service.create_session()
    assert service.delete_session(game_id) is True
    assert service.get_session(game_id) is None
    assert service.active_count == 0
