"""
Tests for server startup and shutdown in main.py
"""

from unittest.mock import MagicMock

import pytest

import main
from sentence_game.services import leaderboard_service as leaderboard_module
from sentence_game.services.leaderboard_service import LeaderboardService


@pytest.fixture
def mongo_client():
    return MagicMock()


@pytest.fixture
def installed_leaderboard(monkeypatch, mongo_client):
    service = LeaderboardService(client=mongo_client)
    monkeypatch.setattr(leaderboard_module, '_leaderboard_service', service)
    return service


class TestShutdown:
    """Releasing resources when the server stops."""

    def test_closes_mongo_client(self, installed_leaderboard, mongo_client):
        main.shutdown_services()

        mongo_client.close.assert_called_once()

    def test_without_leaderboard_is_a_no_op(self, monkeypatch):
        monkeypatch.setattr(leaderboard_module, '_leaderboard_service', None)

        main.shutdown_services()

    def test_keyboard_interrupt_closes_mongo_client(self, monkeypatch, installed_leaderboard, mongo_client):
        """Ctrl+C during startup still releases the connection."""
        def interrupt(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr(main.Config, 'MONGO_URI', None)
        monkeypatch.setattr(main.Config, 'SENTENCE_SOURCE', 'file')
        monkeypatch.setattr(main, 'initialize_sentence_source', interrupt)

        main.main()

        mongo_client.close.assert_called_once()

    def test_startup_error_closes_mongo_client(self, monkeypatch, installed_leaderboard, mongo_client):
        def fail(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(main.Config, 'MONGO_URI', None)
        monkeypatch.setattr(main.Config, 'SENTENCE_SOURCE', 'file')
        monkeypatch.setattr(main, 'initialize_sentence_source', fail)

        with pytest.raises(RuntimeError):
            main.main()

        mongo_client.close.assert_called_once()
