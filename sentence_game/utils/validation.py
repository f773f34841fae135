"""
Input Validation

Validation helpers for letters, sentences, dates, scores and player names.
"""

import re
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from ..config.game_settings import (
    DATE_PATTERN, LETTER_PATTERN, MAX_SENTENCE_LENGTH, MIN_SENTENCE_LENGTH, SENTENCE_ALLOWED_PATTERN
)

_UNSAFE_NAME_CHARACTERS = re.compile(r"[<>\"'&]")


def is_valid_letter(value) -> bool:
    """True if value is exactly one ASCII letter."""
    return isinstance(value, str) and re.fullmatch(LETTER_PATTERN, value) is not None


def normalize_letter(value) -> str:
    """
    Uppercase a single letter.

    Raises:
        ValueError: If value is not a single ASCII letter
    """
    if not is_valid_letter(value):
        raise ValueError("Invalid letter input")
    return value.upper()


def is_valid_sentence(value) -> bool:
    """
    Check that a sentence is usable for the game.

    The trimmed sentence must be 10-200 characters long, contain at least one
    letter and use only letters, digits, whitespace and basic punctuation.
    """
    if not isinstance(value, str):
        return False

    trimmed = value.strip()
    if len(trimmed) < MIN_SENTENCE_LENGTH or len(trimmed) > MAX_SENTENCE_LENGTH:
        return False

    if not re.search(LETTER_PATTERN, trimmed):
        return False

    return re.fullmatch(SENTENCE_ALLOWED_PATTERN, trimmed) is not None


def is_valid_game_date(value) -> bool:
    """True if value is a real calendar date in YYYY-MM-DD format."""
    if not isinstance(value, str) or not re.fullmatch(DATE_PATTERN, value):
        return False
    try:
        datetime.strptime(value, '%Y-%m-%d')
    except ValueError:
        return False
    return True


def is_valid_score(value, max_score: int) -> bool:
    """True if value is an integer between 0 and max_score inclusive."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= max_score


def sanitize_player_name(name, max_length: int) -> str:
    """Trim a player name, strip markup characters and cap its length."""
    if not isinstance(name, str):
        return ''
    return _UNSAFE_NAME_CHARACTERS.sub('', name.strip())[:max_length].strip()


def check_game_date_window(value: str, today: date, history_days: int) -> Optional[Tuple[str, int]]:
    """
    Apply the date policy for daily sentences.

    Args:
        value: Requested date string
        today: Current date
        history_days: How many days back a sentence may still be requested

    Returns:
        None when the date is acceptable, otherwise (error_message, http_status)
    """
    if not isinstance(value, str) or not re.fullmatch(DATE_PATTERN, value):
        return 'Date must be in YYYY-MM-DD format', 400

    if not is_valid_game_date(value):
        return 'Invalid date provided', 400

    requested = datetime.strptime(value, '%Y-%m-%d').date()
    if requested > today:
        return 'Cannot access future sentences', 403

    if requested < today - timedelta(days=history_days):
        return 'Date too far in the past', 400

    return None
