"""
Game Controller

Handles all game-session HTTP endpoints.
"""

from datetime import datetime, timezone
from flask import Blueprint, current_app, request, jsonify

from ..exceptions import (
    DuplicateGuessError, GameCompleteError, InvalidInputError, SentenceLoadError,
    SentenceNotFoundError, SessionNotFoundError
)
from ..services.session_service import get_session_service
from ..services.token_service import get_token_service
from ..services.leaderboard_service import get_leaderboard_service
from ..utils.decorators import require_session_token
from ..utils.game_logger import game_logger
from ..utils.helpers import get_today_date, get_today_date_string
from ..utils.validation import check_game_date_window
from ..websocket.handlers import broadcast_leaderboard_update, subscribers

game_bp = Blueprint('game', __name__)


def _error_response(action, message, status, session_id=None, **kwargs):
    error_response = {
        'success': False,
        'error': message
    }
    game_logger.log_server_response(request, action, False, error_response, session_id, **kwargs)
    return jsonify(error_response), status


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _state_payload(session_service, session_id):
    """Public state of a session plus a signed token for resuming it."""
    payload = {
        'success': True,
        'session_id': session_id,
        'state': session_service.get_public_state(session_id)
    }
    token_service = get_token_service()
    if token_service:
        payload['token'] = token_service.encode_state(session_service.get_game_state(session_id))
    return payload


@game_bp.route('/game', methods=['POST'])
async def new_game():
    """Create a new game session for a date (today by default)."""
    session_service = get_session_service()
    if not session_service:
        return _service_unavailable()

    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return _error_response('new_game', 'Invalid JSON in request body', 400)

    game_date = data.get('date') or get_today_date_string()

    game_logger.log_user_action(request, 'new_game', game_date=game_date)

    date_error = check_game_date_window(
        game_date, get_today_date(), current_app.config.get('SENTENCE_HISTORY_DAYS', 365)
    )
    if date_error:
        message, status = date_error
        return _error_response('new_game', message, status, game_date=game_date)

    try:
        session_id = await session_service.create_session(game_date)
    except SentenceNotFoundError as e:
        return _error_response('new_game', str(e), 404, game_date=game_date)
    except SentenceLoadError as e:
        game_logger.log_error(request, e, 'new_game')
        return _error_response('new_game', 'Failed to load sentence', 502, game_date=game_date)

    response_data = _state_payload(session_service, session_id)
    game_logger.log_server_response(request, 'new_game', True, response_data, session_id)
    return jsonify(response_data)


@game_bp.route('/game/restore', methods=['POST'])
@require_session_token
async def restore_game():
    """Resume a saved game from its signed token."""
    session_service = get_session_service()
    if not session_service:
        return _service_unavailable()

    game_state = request.game_state
    game_logger.log_user_action(request, 'restore_game', game_date=game_state.game_date)

    try:
        session_id = await session_service.restore_session(game_state)
    except SentenceNotFoundError as e:
        return _error_response('restore_game', str(e), 404)
    except SentenceLoadError as e:
        game_logger.log_error(request, e, 'restore_game')
        return _error_response('restore_game', 'Failed to load sentence', 502)

    response_data = _state_payload(session_service, session_id)
    game_logger.log_server_response(request, 'restore_game', True, response_data, session_id)
    return jsonify(response_data)


@game_bp.route('/game/<session_id>/state', methods=['GET'])
def get_state(session_id):
    """Get current game state."""
    session_service = get_session_service()
    if not session_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'get_state', session_id)

    try:
        response_data = _state_payload(session_service, session_id)
    except SessionNotFoundError as e:
        return _error_response('get_state', str(e), 404, session_id)

    game_logger.log_server_response(request, 'get_state', True, response_data, session_id)
    return jsonify(response_data)


@game_bp.route('/game/<session_id>/guess', methods=['POST'])
def make_guess(session_id):
    """Submit a letter guess."""
    session_service = get_session_service()
    if not session_service:
        return _service_unavailable()

    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'letter' not in data:
        return _error_response('submit_guess', 'Letter is required', 400, session_id)

    letter = data['letter']
    game_logger.log_user_action(request, 'submit_guess', session_id, letter=letter)

    try:
        result = session_service.process_guess(session_id, letter)
    except SessionNotFoundError as e:
        return _error_response('submit_guess', str(e), 404, session_id)
    except InvalidInputError as e:
        return _error_response('submit_guess', str(e), 400, session_id, attempted_letter=letter)
    except (DuplicateGuessError, GameCompleteError) as e:
        return _error_response('submit_guess', str(e), 409, session_id, attempted_letter=letter)

    response_data = _state_payload(session_service, session_id)
    response_data['result'] = result.to_dict()

    game_logger.log_server_response(
        request, 'submit_guess', True, response_data, session_id,
        letter=result.letter, is_correct=result.is_correct,
        points=result.score_result.points_earned, game_complete=result.game_complete
    )
    return jsonify(response_data)


@game_bp.route('/game/<session_id>/submit', methods=['POST'])
def submit_session_score(session_id):
    """Submit a finished session's score to the leaderboard."""
    session_service = get_session_service()
    if not session_service:
        return _service_unavailable()

    leaderboard_service = get_leaderboard_service()
    if not leaderboard_service:
        return jsonify({
            'success': False,
            'error': 'Leaderboard service unavailable'
        }), 503

    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return _error_response('submit_session_score', 'Invalid JSON in request body', 400, session_id)

    player_name = data.get('playerName')
    game_logger.log_user_action(request, 'submit_session_score', session_id, player_name=player_name)

    try:
        engine = session_service.get_engine(session_id)
    except SessionNotFoundError as e:
        return _error_response('submit_session_score', str(e), 404, session_id)

    if not engine.is_complete():
        return _error_response('submit_session_score', 'Game is not complete yet', 400, session_id)

    result = leaderboard_service.submit_score(player_name, engine.get_current_score(), engine.get_game_date())
    if not result['success']:
        status = {'DUPLICATE_SUBMISSION': 409, 'FUTURE_DATE': 403, 'STORAGE_ERROR': 500}.get(result.get('code'), 400)
        return _error_response('submit_session_score', result['error'], status, session_id)

    broadcast_leaderboard_update(current_app.socketio)

    game_logger.log_server_response(request, 'submit_session_score', True, result, session_id)
    return jsonify(result)


@game_bp.route('/game/<session_id>', methods=['DELETE'])
def delete_game(session_id):
    """Delete a game session."""
    session_service = get_session_service()
    if not session_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'delete_game', session_id)

    success = session_service.delete_session(session_id)
    response_data = {
        'success': success
    }

    game_logger.log_server_response(request, 'delete_game', success, response_data, session_id)
    if success:
        game_logger.log_game_event(session_id, 'session_deleted', request.remote_addr)

    return jsonify(response_data), (200 if success else 404)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    session_service = get_session_service()
    leaderboard_service = get_leaderboard_service()

    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'active_sessions': session_service.get_active_session_count() if session_service else 0,
        'log_stats': game_logger.get_log_stats(),
        'leaderboard_available': leaderboard_service is not None,
        'leaderboard_subscribers': len(subscribers),
        'token_service_available': get_token_service() is not None
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
