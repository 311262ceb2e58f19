import random

import pytest
from fastapi.testclient import TestClient

from wordscramble.dictionary import WordSetDictionary
from wordscramble.game_logic import RoundState
from wordscramble.word_list import StaticWordListProvider

WORDS = [
    'listen', 'silent', 'tinsel', 'enlist', 'inlet', 'stein', 'tiles', 'tile', 'list',
    'lint', 'lent', 'lens', 'nest', 'net', 'sit', 'tin', 'ten', 'set', 'lists', 'to',
    'is', 'it', 'cat',
]


class TestConfig:
    TESTING = True
    DICTIONARY_BACKEND = 'wordset'
    DICTIONARY_LOCALE = 'en'
    LOG_LEVEL = 'DEBUG'
    CORS_ORIGINS = ['*']
    WORD_LIST_PATH = 'unused.txt'


@pytest.fixture()
def dictionary():
    return WordSetDictionary(WORDS)


@pytest.fixture()
def round_state(dictionary):
    state = RoundState(dictionary, rng=random.Random(7))
    state.start_round(['listen'])
    return state


@pytest.fixture()
def fastapi_app(dictionary):
    from wordscramble.main import create_app
    return create_app(TestConfig, words=StaticWordListProvider(['listen']), dictionary=dictionary)


@pytest.fixture()
def client(fastapi_app):
    return TestClient(fastapi_app)


class SwitchableWords:
    """Word list provider whose list a test can empty mid-session."""

    def __init__(self, words):
        self.current = list(words)

    def words(self):
        return list(self.current)
