import os
import sys
import random
import tempfile
import pytest

# Ensure the project root (containing the `wordle_server` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# Keep test logs out of the working tree
os.environ.setdefault('LOG_DIR', os.path.join(tempfile.gettempdir(), 'wordle_server_test_logs'))

from wordle_server import create_app
from wordle_server.config import TestingConfig
from wordle_server.services.game_service import GameService
from wordle_server.services.vocabulary import Vocabulary
from wordle_server.storage import MemoryGameStore

ANSWERS = ['mower']
GUESSES = ['owler', 'camel', 'shout', 'salad', 'cauld', 'llama', 'allan', 'crane']


@pytest.fixture()
def vocabulary():
    # A single answer makes every new game's secret 'mower'
    return Vocabulary(ANSWERS, GUESSES, rng=random.Random(0))


@pytest.fixture()
def store():
    return MemoryGameStore()


@pytest.fixture()
def game_service(store, vocabulary):
    return GameService(store, vocabulary, retry_limit=3)


@pytest.fixture()
def flask_app(game_service):
    return create_app(TestingConfig, game_service=game_service)


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()
