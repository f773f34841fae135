"""
Leaderboard Data Models

Contains leaderboard rows. Their dict form keeps the camelCase field names
of the public leaderboard API.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class LeaderboardEntry:
    """Cumulative performance of one player."""
    rank: int
    player_name: str
    cumulative_score: int
    games_played: int
    last_played_date: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'rank': self.rank,
            'playerName': self.player_name,
            'cumulativeScore': self.cumulative_score,
            'gamesPlayed': self.games_played,
            'lastPlayedDate': self.last_played_date,
        }


@dataclass
class DailyScoreEntry:
    """One player's score for a single day."""
    rank: int
    player_name: str
    daily_score: int
    game_date: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'rank': self.rank,
            'playerName': self.player_name,
            'dailyScore': self.daily_score,
            'gameDate': self.game_date,
        }
