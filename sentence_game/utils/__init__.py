"""
Utilities Package

Contains utility functions, decorators, validation and logging helpers.
"""

from .decorators import require_session_token
from .helpers import get_user_identity, get_today_date, get_today_date_string
from .game_logger import game_logger

__all__ = ['require_session_token', 'get_user_identity', 'get_today_date', 'get_today_date_string', 'game_logger']
