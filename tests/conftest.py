import os
import random
import sys
import pytest

# Ensure the project root (containing the `jotto` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from jotto import create_app
from jotto.config import TestingConfig
from jotto.exceptions import StorageError
from jotto.services.game_service import GameSession
from jotto.services.score_ledger import ScoreLedger
from jotto.services.storage import InMemoryStore, KeyValueStore


class FailingStore(KeyValueStore):
    """Store whose every read and write fails."""

    def get(self, key):
        raise StorageError('store offline')

    def set(self, key, value):
        raise StorageError('store offline')


@pytest.fixture()
def store():
    return InMemoryStore()


@pytest.fixture()
def ledger(store):
    return ScoreLedger(store)


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def make_game(ledger, rng):
    """Build a GameSession whose secret is drawn from the given words."""
    def _make(words=('mouse',), **kwargs):
        return GameSession(list(words), kwargs.pop('ledger', ledger), rng=rng, **kwargs)
    return _make


@pytest.fixture()
def flask_app(store):
    application = create_app(TestingConfig, store=store, rng=random.Random(7))
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()
