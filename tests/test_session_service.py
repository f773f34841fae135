"""
Unit Tests for GameSessionService

Covers session creation, guess routing, public state and idle eviction.
"""

import time

import pytest

from sentence_game.exceptions import DuplicateGuessError, SentenceNotFoundError, SessionNotFoundError
from sentence_game.services.session_service import GameSessionService

from conftest import HELLO_WORLD


@pytest.fixture
def service(stub_source):
    return GameSessionService(stub_source)


class TestSessions:
    """Creating, looking up and deleting sessions."""

    @pytest.mark.asyncio
    async def test_create_session_returns_unique_ids(self, service, game_date):
        first = await service.create_session(game_date)
        second = await service.create_session(game_date)

        assert first != second
        assert service.get_active_session_count() == 2

    @pytest.mark.asyncio
    async def test_sessions_do_not_share_state(self, service, game_date):
        first = await service.create_session(game_date)
        second = await service.create_session(game_date)

        service.process_guess(first, 'H')

        assert service.get_game_state(first).guessed_letters == {'H'}
        assert service.get_game_state(second).guessed_letters == set()
        # The same letter is still fresh in the other session
        service.process_guess(second, 'H')

    @pytest.mark.asyncio
    async def test_create_session_for_unknown_date(self, service):
        with pytest.raises(SentenceNotFoundError):
            await service.create_session('2001-01-01')

        assert service.get_active_session_count() == 0

    def test_unknown_session(self, service):
        with pytest.raises(SessionNotFoundError, match="Game session not found"):
            service.get_engine('missing')

    @pytest.mark.asyncio
    async def test_engine_errors_propagate(self, service, game_date):
        session_id = await service.create_session(game_date)
        service.process_guess(session_id, 'H')

        with pytest.raises(DuplicateGuessError):
            service.process_guess(session_id, 'H')

    @pytest.mark.asyncio
    async def test_delete_session(self, service, game_date):
        session_id = await service.create_session(game_date)

        assert service.delete_session(session_id) is True
        assert service.delete_session(session_id) is False
        assert service.get_active_session_count() == 0


class TestPublicState:
    """State views sent to clients."""

    @pytest.mark.asyncio
    async def test_sentence_hidden_while_in_progress(self, service, game_date):
        session_id = await service.create_session(game_date)
        service.process_guess(session_id, 'H')

        state = service.get_public_state(session_id)

        assert 'current_sentence' not in state
        assert state['display_sentence'] == "H____ _____!"
        assert state['status'] == 'active'
        assert state['session_id'] == session_id
        assert state['difficulty'] == 'easy'
        assert state['guessed_letters'] == ['H']
        assert 'H' not in state['remaining_letters']
        assert len(state['remaining_letters']) == 25

    @pytest.mark.asyncio
    async def test_sentence_revealed_when_complete(self, service, game_date):
        session_id = await service.create_session(game_date)
        for letter in 'HELOWRD':
            service.process_guess(session_id, letter)

        state = service.get_public_state(session_id)

        assert state['current_sentence'] == HELLO_WORLD
        assert state['is_complete'] is True
        assert state['status'] == 'complete'


class TestRestore:
    """Creating sessions from snapshots."""

    @pytest.mark.asyncio
    async def test_restore_session_from_snapshot(self, service, game_date):
        session_id = await service.create_session(game_date)
        service.process_guess(session_id, 'L')
        service.process_guess(session_id, 'Z')
        snapshot = service.get_game_state(session_id)

        restored_id = await service.restore_session(snapshot)

        assert restored_id != session_id
        assert service.get_game_state(restored_id) == snapshot


class TestCleanup:
    """Idle session eviction."""

    @pytest.mark.asyncio
    async def test_only_idle_sessions_are_removed(self, service, game_date):
        stale = await service.create_session(game_date)
        fresh = await service.create_session(game_date)
        now = time.time()
        service.sessions[stale].last_activity = now - 7200
        service.sessions[fresh].last_activity = now - 10

        removed = service.cleanup_stale_sessions(3600, now=now)

        assert removed == 1
        assert stale not in service.sessions
        assert fresh in service.sessions

    @pytest.mark.asyncio
    async def test_activity_keeps_session_alive(self, service, game_date):
        session_id = await service.create_session(game_date)
        service.sessions[session_id].last_activity = time.time() - 7200

        service.process_guess(session_id, 'H')

        assert service.cleanup_stale_sessions(3600) == 0
