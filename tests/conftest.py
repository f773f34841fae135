"""
Pytest configuration and shared fixtures.

Provides:
- A stub sentence source with a fixed schedule
- Fresh engine and session service instances
- A Flask app and test client wired to stub services
"""

import os
import tempfile

# Keep test logs out of the working tree; must happen before sentence_game is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='sentence_game_logs_'))

import pytest

from sentence_game.exceptions import SentenceLoadError, SentenceNotFoundError
from sentence_game.models.sentence import SentencePayload


HELLO_WORLD = "Hello World!"


class StubSentenceSource:
    """Sentence source backed by a dict of date -> sentence."""

    def __init__(self, sentences=None, difficulty='easy', error=None):
        self.sentences = dict(sentences or {})
        self.difficulty = difficulty
        self.error = error
        self.requested_dates = []

    async def get_sentence(self, date):
        self.requested_dates.append(date)
        if self.error is not None:
            raise self.error
        if date not in self.sentences:
            raise SentenceNotFoundError(date)
        return SentencePayload(sentence=self.sentences[date], difficulty=self.difficulty, date=date)


class BrokenSentenceSource:
    """Sentence source returning a payload that is not a usable sentence."""

    def __init__(self, payload):
        self.payload = payload

    async def get_sentence(self, date):
        return self.payload


@pytest.fixture
def game_date():
    return '2026-10-19'


@pytest.fixture
def stub_source(game_date):
    return StubSentenceSource({game_date: HELLO_WORLD})


@pytest.fixture
def failing_source():
    return StubSentenceSource(error=SentenceLoadError("Upstream unavailable"))
