import os
import random
import tempfile

import pytest

# Keep log files out of the working tree; must happen before wordle is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle-logs-'))

from wordle import create_app  # noqa: E402
from wordle.config import TestingConfig  # noqa: E402
from wordle.services.game_session import GameSession  # noqa: E402
from wordle.services.session_service import initialize_session_service  # noqa: E402
from wordle.services.word_source import WordSource  # noqa: E402


def allow_everything(word):
    return True


@pytest.fixture
def session():
    game = GameSession(allow_everything, session_id='test-game')
    game.reset('CRANE')
    return game


@pytest.fixture
def type_word():
    def _type(game, word):
        for letter in word:
            game.add_letter(letter)
    return _type


@pytest.fixture
def word_source():
    return WordSource(answer_words=['CRANE'], rng=random.Random(7))


@pytest.fixture
def app(word_source):
    initialize_session_service(word_source)
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
