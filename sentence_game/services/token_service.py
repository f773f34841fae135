"""
Session Token Service

Signs game snapshots as JWTs so clients can keep a session and resume it
later without being able to alter its score.
"""

import datetime
from typing import Optional

import jwt

from ..exceptions import InvalidSessionTokenError
from ..models.game import GameState


class SessionTokenService:
    """Encodes GameState snapshots into signed tokens and back."""

    def __init__(self, secret: str, expiration_days: int = 2):
        """
        Args:
            secret: Secret key for HS256 signing
            expiration_days: Token lifetime in days
        """
        self.secret = secret
        self.expiration_days = expiration_days

    def encode_state(self, state: GameState) -> str:
        """
        Sign a snapshot.

        The sentence itself is left out; restoring reloads it by date, and a
        JWT payload is readable by anyone holding the token.
        """
        token_payload = {
            "state": state.to_dict(include_sentence=False),
            "exp": datetime.datetime.now(datetime.timezone.utc) + datetime.timedelta(days=self.expiration_days)
        }
        return jwt.encode(token_payload, self.secret, algorithm="HS256")

    def decode_state(self, token: str) -> GameState:
        """
        Verify a token and rebuild its snapshot.

        Raises:
            InvalidSessionTokenError: If the token is missing, expired, forged
            or carries a malformed snapshot
        """
        if not token:
            raise InvalidSessionTokenError("Token is required")

        try:
            payload = jwt.decode(token, self.secret, algorithms=["HS256"])
        except jwt.ExpiredSignatureError:
            raise InvalidSessionTokenError("Token has expired")
        except jwt.InvalidTokenError:
            raise InvalidSessionTokenError("Invalid token")

        state = payload.get("state")
        if not isinstance(state, dict):
            raise InvalidSessionTokenError("Invalid token payload")

        try:
            return GameState.from_dict(state)
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidSessionTokenError(f"Invalid token payload: {e}") from e


# Global service instance
_token_service = None


def get_token_service() -> Optional[SessionTokenService]:
    """Get the global token service instance."""
    return _token_service


def initialize_token_service(secret: str, expiration_days: int = 2) -> SessionTokenService:
    """Initialize the global token service instance."""
    global _token_service
    _token_service = SessionTokenService(secret, expiration_days)
    return _token_service
