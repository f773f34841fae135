"""
Helper Functions

Contains utility functions used throughout the application.
"""

from datetime import date, datetime, timezone
from typing import Dict
from flask import request


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = request_obj.remote_addr or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': None,
        'username': None
    }


def get_today_date() -> date:
    """Today in UTC; daily games roll over at UTC midnight."""
    return datetime.now(timezone.utc).date()


def get_today_date_string() -> str:
    """Today's date as YYYY-MM-DD, the key of a daily game."""
    return get_today_date().isoformat()
