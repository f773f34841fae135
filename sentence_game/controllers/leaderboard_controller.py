"""
Leaderboard Controller

Handles score submission and leaderboard HTTP endpoints.
"""

from flask import Blueprint, current_app, request, jsonify
from ..services.leaderboard_service import get_leaderboard_service
from ..utils.game_logger import game_logger
from ..websocket.handlers import broadcast_leaderboard_update

leaderboard_bp = Blueprint('leaderboard', __name__)

ERROR_STATUS_CODES = {
    'INVALID_INPUT': 400,
    'FUTURE_DATE': 403,
    'DUPLICATE_SUBMISSION': 409,
    'STORAGE_ERROR': 500,
}


def _leaderboard_unavailable():
    return jsonify({
        'success': False,
        'error': 'Leaderboard service unavailable'
    }), 503


def _result_response(action, result, **kwargs):
    """Turn a leaderboard service result into an HTTP response."""
    success = result.get('success', False)
    game_logger.log_server_response(request, action, success, result, **kwargs)
    if success:
        return jsonify(result)
    return jsonify(result), ERROR_STATUS_CODES.get(result.get('code'), 400)


@leaderboard_bp.route('/scores', methods=['POST'])
def submit_score():
    """Submit a player's score for a game date."""
    leaderboard_service = get_leaderboard_service()
    if not leaderboard_service:
        return _leaderboard_unavailable()

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({
            'success': False,
            'error': 'Invalid JSON in request body',
            'code': 'INVALID_INPUT'
        }), 400

    player_name = data.get('playerName')
    daily_score = data.get('dailyScore')
    game_date = data.get('gameDate')

    game_logger.log_user_action(
        request, 'submit_score', player_name=player_name, daily_score=daily_score, game_date=game_date
    )

    result = leaderboard_service.submit_score(player_name, daily_score, game_date)
    if result.get('success'):
        broadcast_leaderboard_update(current_app.socketio)

    return _result_response('submit_score', result)


@leaderboard_bp.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    """Get the top players by cumulative score."""
    leaderboard_service = get_leaderboard_service()
    if not leaderboard_service:
        return _leaderboard_unavailable()

    limit = request.args.get('limit', 10)
    game_logger.log_user_action(request, 'get_leaderboard', limit=limit)

    return _result_response('get_leaderboard', leaderboard_service.get_leaderboard(limit))


@leaderboard_bp.route('/leaderboard/<game_date>', methods=['GET'])
def get_daily_leaderboard(game_date):
    """Get the top scores for a single game date."""
    leaderboard_service = get_leaderboard_service()
    if not leaderboard_service:
        return _leaderboard_unavailable()

    limit = request.args.get('limit', 10)
    game_logger.log_user_action(request, 'get_daily_leaderboard', game_date=game_date, limit=limit)

    return _result_response(
        'get_daily_leaderboard', leaderboard_service.get_daily_leaderboard(game_date, limit),
        game_date=game_date
    )
