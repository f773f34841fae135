"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState, GuessResult, ScoreResult
from .leaderboard import DailyScoreEntry, LeaderboardEntry
from .sentence import SentencePayload

__all__ = ['GameState', 'GuessResult', 'ScoreResult', 'DailyScoreEntry', 'LeaderboardEntry', 'SentencePayload']
