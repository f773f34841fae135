"""
Unit Tests for SessionTokenService
"""

import datetime

import jwt
import pytest

from sentence_game.exceptions import InvalidSessionTokenError
from sentence_game.models.game import GameState
from sentence_game.services.token_service import SessionTokenService

SECRET = 'unit-test-session-secret-0123456789abcdef'


@pytest.fixture
def token_service():
    return SessionTokenService(SECRET, expiration_days=2)


@pytest.fixture
def state():
    return GameState(
        current_sentence='Hello World!',
        revealed_letters={'H', 'L'},
        guessed_letters={'H', 'L', 'Z'},
        score=45,
        streak_multiplier=1.0,
        consecutive_correct=0,
        is_complete=False,
        game_date='2026-10-19'
    )


class TestEncodeDecode:
    """Signing and verifying snapshots."""

    def test_round_trip_without_sentence(self, token_service, state):
        """Everything but the sentence survives the token."""
        decoded = token_service.decode_state(token_service.encode_state(state))

        assert decoded.current_sentence == ''
        assert decoded.revealed_letters == state.revealed_letters
        assert decoded.guessed_letters == state.guessed_letters
        assert decoded.score == 45
        assert decoded.game_date == '2026-10-19'

    def test_sentence_not_in_payload(self, token_service, state):
        token = token_service.encode_state(state)

        payload = jwt.decode(token, options={"verify_signature": False})

        assert 'current_sentence' not in payload['state']
        assert 'exp' in payload


class TestRejectedTokens:
    """Tokens that must not be accepted."""

    def test_missing_token(self, token_service):
        with pytest.raises(InvalidSessionTokenError, match="Token is required"):
            token_service.decode_state('')

    def test_wrong_secret(self, token_service, state):
        forged = SessionTokenService('another-secret-that-is-long-enough-1234').encode_state(state)

        with pytest.raises(InvalidSessionTokenError, match="Invalid token"):
            token_service.decode_state(forged)

    def test_garbage_token(self, token_service):
        with pytest.raises(InvalidSessionTokenError, match="Invalid token"):
            token_service.decode_state('not.a.jwt')

    def test_expired_token(self, token_service, state):
        expired = jwt.encode({
            "state": state.to_dict(include_sentence=False),
            "exp": datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(minutes=1)
        }, SECRET, algorithm="HS256")

        with pytest.raises(InvalidSessionTokenError, match="Token has expired"):
            token_service.decode_state(expired)

    def test_tampered_score(self, token_service, state):
        """Changing the payload without re-signing breaks the signature."""
        header, payload, signature = token_service.encode_state(state).split('.')
        other = token_service.encode_state(GameState(score=9999, game_date='2026-10-19'))
        tampered = '.'.join([header, other.split('.')[1], signature])

        with pytest.raises(InvalidSessionTokenError):
            token_service.decode_state(tampered)

    def test_missing_state(self, token_service):
        token = jwt.encode({"something": "else"}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidSessionTokenError, match="Invalid token payload"):
            token_service.decode_state(token)

    def test_state_without_game_date(self, token_service):
        token = jwt.encode({"state": {"score": 10}}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidSessionTokenError, match="Invalid token payload"):
            token_service.decode_state(token)
