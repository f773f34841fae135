"""
Game Session Service

Hosts many concurrent game sessions on the server, one GameEngine each.
"""

import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..exceptions import SessionNotFoundError
from ..models.game import GameState, GuessResult
from ..utils.game_logger import game_logger
from .game_engine import GameEngine
from .sentence_service import SentenceSource


@dataclass
class GameSession:
    """A hosted engine and its bookkeeping."""
    engine: GameEngine
    created_at: float = field(default_factory=time.time)
    last_activity: float = field(default_factory=time.time)

    def touch(self) -> None:
        self.last_activity = time.time()


class GameSessionService:
    """
    Session registry keyed by session id.

    This class handles:
    - Creating sessions with unique ids and loading the day's sentence
    - Routing guesses to the right engine
    - Game state views that keep the sentence secret until it is solved
    - Restoring sessions from snapshots and evicting idle ones

    Sessions never share state; each one owns its own engine.
    """

    def __init__(self, sentence_source: SentenceSource):
        self.sentence_source = sentence_source
        self.sessions: Dict[str, GameSession] = {}

    def _get_session(self, session_id: str) -> GameSession:
        session = self.sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        session.touch()
        return session

    async def create_session(self, date: Optional[str] = None) -> str:
        """
        Creates a new session for a date.

        Args:
            date: Game date (YYYY-MM-DD), today when omitted

        Returns:
            str: Unique session id

        Raises:
            SentenceLoadError: If the sentence for the date cannot be loaded
        """
        engine = GameEngine(self.sentence_source)
        await engine.initialize_game(date)

        session_id = str(uuid.uuid4())
        self.sessions[session_id] = GameSession(engine=engine)

        game_logger.log_game_event(
            session_id, 'session_created', 'system',
            game_date=engine.get_game_date(), difficulty=engine.get_difficulty()
        )
        return session_id

    async def restore_session(self, state: GameState) -> str:
        """
        Creates a session from a saved snapshot.

        Returns:
            str: Unique id of the restored session

        Raises:
            SentenceLoadError: If the sentence for the snapshot date cannot be loaded
        """
        engine = GameEngine(self.sentence_source)
        await engine.restore_game_state(state)

        session_id = str(uuid.uuid4())
        self.sessions[session_id] = GameSession(engine=engine)

        game_logger.log_game_event(
            session_id, 'session_restored', 'system',
            game_date=engine.get_game_date(), score=engine.get_current_score(),
            complete=engine.is_complete()
        )
        return session_id

    def get_engine(self, session_id: str) -> GameEngine:
        return self._get_session(session_id).engine

    def process_guess(self, session_id: str, letter: str) -> GuessResult:
        """
        Applies a guess to a session.

        Raises:
            SessionNotFoundError: If the session does not exist
            InvalidInputError, GameProtocolError: Propagated from the engine
        """
        engine = self.get_engine(session_id)
        result = engine.process_guess(letter)

        if result.game_complete:
            game_logger.log_game_event(
                session_id, 'sentence_solved', 'system',
                game_date=engine.get_game_date(),
                final_score=result.score_result.new_total,
                guesses_used=len(engine.get_guessed_letters())
            )
        return result

    def get_game_state(self, session_id: str) -> GameState:
        return self.get_engine(session_id).get_game_state()

    def get_public_state(self, session_id: str) -> Dict[str, Any]:
        """
        Returns the state of a session without revealing the sentence.

        The full sentence is only included once the session is complete.
        """
        engine = self.get_engine(session_id)
        state = engine.get_game_state()

        public_state = state.to_dict(include_sentence=state.is_complete)
        public_state.update({
            'session_id': session_id,
            'status': engine.status,
            'display_sentence': engine.get_display_sentence(),
            'difficulty': engine.get_difficulty(),
            'remaining_letters': sorted(engine.get_remaining_letters()),
        })
        return public_state

    def delete_session(self, session_id: str) -> bool:
        """
        Removes a session from memory.

        Returns:
            bool: True if the session was deleted, False if not found
        """
        if session_id in self.sessions:
            del self.sessions[session_id]
            return True
        return False

    def cleanup_stale_sessions(self, max_idle_seconds: int, now: Optional[float] = None) -> int:
        """
        Evicts sessions idle for longer than max_idle_seconds.

        Returns:
            int: Number of sessions removed
        """
        now = time.time() if now is None else now
        stale_ids = [
            session_id for session_id, session in list(self.sessions.items())
            if now - session.last_activity > max_idle_seconds
        ]
        for session_id in stale_ids:
            self.sessions.pop(session_id, None)
        return len(stale_ids)

    def get_active_session_count(self) -> int:
        return len(self.sessions)


# Global service instance
_session_service = None


def get_session_service() -> Optional[GameSessionService]:
    """Get the global session service instance."""
    return _session_service


def initialize_session_service(sentence_source: SentenceSource) -> GameSessionService:
    """Initialize the global session service instance."""
    global _session_service
    _session_service = GameSessionService(sentence_source)
    return _session_service
