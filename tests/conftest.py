"""
Pytest configuration for the Arabic Wordle tests.

LOG_DIR is pointed at a temporary directory before the package is imported
so the module-level game logger never writes into the working tree.
"""

import os
import tempfile
from datetime import date

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="arabic_wordle_logs_"))

import pytest  # noqa: E402

from arabic_wordle import create_app  # noqa: E402
from arabic_wordle.config import TestingConfig, WORD_LIST  # noqa: E402
from arabic_wordle.services import game_service as game_service_module  # noqa: E402
from arabic_wordle.services.game_service import GameService  # noqa: E402
from arabic_wordle.services.word_source import WordSource  # noqa: E402

TARGET = "لعبوا"
# Valid words sharing no letter with TARGET
MISSES = ["مدرسة", "حديقة", "مدينة", "مهندس", "مكنسة", "تمرين"]


@pytest.fixture
def dictionary():
    return frozenset(WORD_LIST)


@pytest.fixture
def word_source():
    """Word source whose word of the day is TARGET today."""
    words = [TARGET] + [word for word in WORD_LIST if word != TARGET]
    return WordSource(words, epoch=date.today())


@pytest.fixture
def service(word_source):
    return GameService(word_source=word_source)


@pytest.fixture
def app(service, monkeypatch):
    monkeypatch.setattr(game_service_module, "_game_service", service)
    flask_app, _ = create_app(TestingConfig)
    yield flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
