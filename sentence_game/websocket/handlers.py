"""
WebSocket Event Handlers

Handles WebSocket events for live leaderboard updates.
"""

from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.leaderboard_service import get_leaderboard_service
from ..utils.game_logger import game_logger

LEADERBOARD_ROOM = "leaderboard"

# Simple tracking of leaderboard subscribers
subscribers = set()  # socket ids


def _leaderboard_snapshot(limit=10):
    leaderboard_service = get_leaderboard_service()
    if not leaderboard_service:
        return {'success': False, 'error': 'Leaderboard service unavailable'}
    return leaderboard_service.get_leaderboard(limit)


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('disconnect')
    def handle_disconnect():
        """Handle WebSocket disconnection."""
        subscribers.discard(request.sid)

    @socketio.on('subscribe_leaderboard')
    def handle_subscribe_leaderboard(data=None):
        """Join the leaderboard room and receive the current standings."""
        join_room(LEADERBOARD_ROOM)
        subscribers.add(request.sid)

        limit = (data or {}).get('limit', 10)
        emit('leaderboard_state', _leaderboard_snapshot(limit))

    @socketio.on('unsubscribe_leaderboard')
    def handle_unsubscribe_leaderboard(data=None):
        """Leave the leaderboard room."""
        leave_room(LEADERBOARD_ROOM)
        subscribers.discard(request.sid)

    @socketio.on('get_leaderboard')
    def handle_get_leaderboard(data=None):
        """Send the current standings to the requesting client only."""
        limit = (data or {}).get('limit', 10)
        emit('leaderboard_state', _leaderboard_snapshot(limit))


def broadcast_leaderboard_update(socketio, limit=10):
    """Broadcast the overall leaderboard to every subscribed client."""
    leaderboard_service = get_leaderboard_service()
    if not leaderboard_service or socketio is None:
        return

    leaderboard = leaderboard_service.get_leaderboard(limit)
    if not leaderboard.get('success'):
        game_logger.logger.error(f"Skipping leaderboard broadcast: {leaderboard.get('error')}")
        return

    socketio.emit('leaderboard_update', leaderboard, room=LEADERBOARD_ROOM)
