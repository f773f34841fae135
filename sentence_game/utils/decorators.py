"""
Session Token Decorators

Contains decorators that verify saved-game tokens on HTTP endpoints.
"""

from functools import wraps
from flask import request, jsonify

from ..exceptions import InvalidSessionTokenError


def require_session_token(f):
    """
    Decorator for endpoints that resume a saved game.

    Reads a Bearer token from the Authorization header, verifies it and puts
    the decoded GameState on request.game_state. Wraps async views.
    """
    @wraps(f)
    async def decorated_function(*args, **kwargs):
        from ..services.token_service import get_token_service

        token_service = get_token_service()
        if not token_service:
            return jsonify({
                'success': False,
                'error': 'Session token service unavailable'
            }), 500

        auth_header = request.headers.get('Authorization')
        if not auth_header or not auth_header.startswith('Bearer '):
            return jsonify({
                'success': False,
                'error': 'Session token required'
            }), 401

        token = auth_header.split(' ', 1)[1]

        try:
            request.game_state = token_service.decode_state(token)
        except InvalidSessionTokenError as e:
            return jsonify({
                'success': False,
                'error': str(e)
            }), 401

        return await f(*args, **kwargs)

    return decorated_function
