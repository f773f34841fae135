"""
Leaderboard Service

Persists daily scores and cumulative player totals in MongoDB and serves
the overall and per-day leaderboards.
"""

import datetime
from typing import Any, Dict, Optional

from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..models.leaderboard import DailyScoreEntry, LeaderboardEntry
from ..utils.game_logger import game_logger
from ..utils.validation import is_valid_game_date, is_valid_score, sanitize_player_name


class LeaderboardService:
    """
    Leaderboard persistence for daily and cumulative scores.

    Every player may submit one score per game date. Submitting adds the
    daily score to the player's cumulative total and games-played count.
    """

    def __init__(self, mongo_uri: Optional[str] = None, database_name: str = 'guess_the_sentence',
                 max_player_name_length: int = 50, max_daily_score: int = 1000000,
                 max_leaderboard_entries: int = 100, client: Optional[MongoClient] = None):
        """
        Initialize the leaderboard service with a MongoDB connection.

        Args:
            mongo_uri: MongoDB connection string
            database_name: Database holding the leaderboard collections
            max_player_name_length: Longest player name kept after sanitizing
            max_daily_score: Highest accepted daily score
            max_leaderboard_entries: Upper bound for leaderboard page sizes
            client: Already constructed client, used instead of mongo_uri
        """
        self.max_player_name_length = max_player_name_length
        self.max_daily_score = max_daily_score
        self.max_leaderboard_entries = max_leaderboard_entries

        self.client = client if client is not None else MongoClient(mongo_uri, server_api=ServerApi('1'))
        self.db = self.client[database_name]
        self.players_collection = self.db.players
        self.daily_scores_collection = self.db.daily_scores
        self.sentences_collection = self.db.sentences

        # Test connection
        try:
            self.client.admin.command('ping')
            game_logger.logger.info("Successfully connected to MongoDB")
        except PyMongoError as e:
            game_logger.logger.error(f"MongoDB connection error: {e}")
            raise

        self.players_collection.create_index("player_name", unique=True)
        self.players_collection.create_index([("cumulative_score", DESCENDING)])
        self.daily_scores_collection.create_index(
            [("player_name", ASCENDING), ("game_date", ASCENDING)], unique=True
        )
        self.daily_scores_collection.create_index([("game_date", ASCENDING), ("daily_score", DESCENDING)])
        self.sentences_collection.create_index("date", unique=True)

    def _clamp_limit(self, limit: Any) -> int:
        try:
            limit = int(limit)
        except (TypeError, ValueError):
            limit = 10
        return max(1, min(limit, self.max_leaderboard_entries))

    def submit_score(self, player_name: str, daily_score: int, game_date: str,
                     today: Optional[datetime.date] = None) -> Dict[str, Any]:
        """
        Record a player's score for a game date.

        Args:
            player_name: Display name, sanitized before storage
            daily_score: Score achieved in that day's game
            game_date: Date of the game (YYYY-MM-DD)
            today: Current date, defaults to today's UTC date

        Returns:
            Dictionary with success status and the player's updated totals,
            or an error message with an error code
        """
        if not isinstance(player_name, str) or not player_name.strip():
            return {"success": False, "error": "Player name is required", "code": "INVALID_INPUT"}

        if not is_valid_score(daily_score, self.max_daily_score):
            return {
                "success": False,
                "error": f"Daily score must be a valid integer between 0 and {self.max_daily_score:,}",
                "code": "INVALID_INPUT"
            }

        if not is_valid_game_date(game_date):
            return {"success": False, "error": "Valid game date is required (YYYY-MM-DD)", "code": "INVALID_INPUT"}

        today = today or datetime.datetime.now(datetime.timezone.utc).date()
        if game_date > today.isoformat():
            return {"success": False, "error": "Cannot submit scores for future dates", "code": "FUTURE_DATE"}

        sanitized_name = sanitize_player_name(player_name, self.max_player_name_length)
        if not sanitized_name:
            return {"success": False, "error": "Player name contains invalid characters", "code": "INVALID_INPUT"}

        now = datetime.datetime.now(datetime.timezone.utc)
        try:
            self.daily_scores_collection.insert_one({
                "player_name": sanitized_name,
                "game_date": game_date,
                "daily_score": daily_score,
                "created_at": now
            })
        except DuplicateKeyError:
            return {
                "success": False,
                "error": "Score already submitted for this date",
                "code": "DUPLICATE_SUBMISSION"
            }
        except PyMongoError as e:
            game_logger.logger.error(f"Failed to store daily score for '{sanitized_name}': {e}")
            return {"success": False, "error": "Failed to submit score", "code": "STORAGE_ERROR"}

        try:
            player = self.players_collection.find_one_and_update(
                {"player_name": sanitized_name},
                {
                    "$inc": {"cumulative_score": daily_score, "games_played": 1},
                    "$max": {"last_played": game_date},
                    "$setOnInsert": {"created_at": now}
                },
                upsert=True,
                return_document=ReturnDocument.AFTER
            )
        except PyMongoError as e:
            game_logger.logger.error(f"Failed to update totals for '{sanitized_name}': {e}")
            return {"success": False, "error": "Failed to submit score", "code": "STORAGE_ERROR"}

        game_logger.log_game_event(
            None, 'score_submitted', 'system',
            player_name=sanitized_name, daily_score=daily_score, game_date=game_date
        )

        return {
            "success": True,
            "message": "Score submitted successfully",
            "playerName": sanitized_name,
            "dailyScore": daily_score,
            "gameDate": game_date,
            "cumulativeScore": player.get("cumulative_score", daily_score),
            "gamesPlayed": player.get("games_played", 1)
        }

    def get_leaderboard(self, limit: Any = 10) -> Dict[str, Any]:
        """
        Top players by cumulative score.

        Args:
            limit: Number of entries, clamped to 1..max_leaderboard_entries

        Returns:
            Dictionary with success status and ranked leaderboard entries
        """
        limit = self._clamp_limit(limit)
        try:
            cursor = self.players_collection.find(
                {"games_played": {"$gt": 0}},
                {"_id": 0, "player_name": 1, "cumulative_score": 1, "games_played": 1, "last_played": 1}
            ).sort("cumulative_score", DESCENDING).limit(limit)
            rows = list(cursor)
        except PyMongoError as e:
            game_logger.logger.error(f"Failed to read leaderboard: {e}")
            return {"success": False, "error": "Failed to retrieve leaderboard", "code": "STORAGE_ERROR"}

        leaderboard = [
            LeaderboardEntry(
                rank=index + 1,
                player_name=row["player_name"],
                cumulative_score=row.get("cumulative_score", 0),
                games_played=row.get("games_played", 0),
                last_played_date=row.get("last_played", "")
            ).to_dict()
            for index, row in enumerate(rows)
        ]

        return {
            "success": True,
            "leaderboard": leaderboard,
            "totalPlayers": len(leaderboard),
            "lastUpdated": datetime.datetime.now(datetime.timezone.utc).isoformat()
        }

    def get_daily_leaderboard(self, game_date: str, limit: Any = 10) -> Dict[str, Any]:
        """
        Top scores for a single game date.

        Returns:
            Dictionary with success status and ranked daily entries
        """
        if not is_valid_game_date(game_date):
            return {"success": False, "error": "Valid game date is required (YYYY-MM-DD)", "code": "INVALID_INPUT"}

        limit = self._clamp_limit(limit)
        try:
            cursor = self.daily_scores_collection.find(
                {"game_date": game_date},
                {"_id": 0, "player_name": 1, "daily_score": 1, "game_date": 1}
            ).sort("daily_score", DESCENDING).limit(limit)
            rows = list(cursor)
        except PyMongoError as e:
            game_logger.logger.error(f"Failed to read daily leaderboard for {game_date}: {e}")
            return {"success": False, "error": "Failed to retrieve leaderboard", "code": "STORAGE_ERROR"}

        leaderboard = [
            DailyScoreEntry(
                rank=index + 1,
                player_name=row["player_name"],
                daily_score=row.get("daily_score", 0),
                game_date=row.get("game_date", game_date)
            ).to_dict()
            for index, row in enumerate(rows)
        ]

        return {
            "success": True,
            "gameDate": game_date,
            "leaderboard": leaderboard,
            "totalPlayers": len(leaderboard)
        }

    def close_connection(self):
        """Close the MongoDB connection."""
        if self.client:
            self.client.close()


# Global service instance
_leaderboard_service = None


def get_leaderboard_service() -> Optional[LeaderboardService]:
    """Get the global leaderboard service instance."""
    return _leaderboard_service


def initialize_leaderboard_service(mongo_uri: str, **kwargs) -> Optional[LeaderboardService]:
    """Initialize the global leaderboard service instance."""
    global _leaderboard_service
    try:
        _leaderboard_service = LeaderboardService(mongo_uri, **kwargs)
        return _leaderboard_service
    except PyMongoError as e:
        game_logger.logger.error(f"Failed to initialize leaderboard service: {e}")
        _leaderboard_service = None
        return None
