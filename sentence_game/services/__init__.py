"""
Services Package

Contains the game core (score calculator, sentence manager, game engine)
and the services built around it.
"""

from .score_calculator import ScoreCalculator
from .sentence_manager import SentenceManager
from .game_engine import GameEngine
from .sentence_service import (
    SentenceSource, FileSentenceSource, MongoSentenceSource,
    get_sentence_source, initialize_sentence_source
)
from .session_service import GameSessionService, get_session_service, initialize_session_service
from .token_service import SessionTokenService, get_token_service, initialize_token_service
from .leaderboard_service import LeaderboardService, get_leaderboard_service, initialize_leaderboard_service

__all__ = [
    'ScoreCalculator', 'SentenceManager', 'GameEngine',
    'SentenceSource', 'FileSentenceSource', 'MongoSentenceSource',
    'get_sentence_source', 'initialize_sentence_source',
    'GameSessionService', 'get_session_service', 'initialize_session_service',
    'SessionTokenService', 'get_token_service', 'initialize_token_service',
    'LeaderboardService', 'get_leaderboard_service', 'initialize_leaderboard_service'
]
