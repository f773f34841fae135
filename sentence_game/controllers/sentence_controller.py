"""
Sentence Controller

Serves the daily sentence for a date.
"""

from flask import Blueprint, current_app, request, jsonify
from ..exceptions import SentenceLoadError, SentenceNotFoundError
from ..services.sentence_service import get_sentence_source
from ..utils.game_logger import game_logger
from ..utils.helpers import get_today_date
from ..utils.validation import check_game_date_window

sentence_bp = Blueprint('sentence', __name__)


@sentence_bp.route('/sentence/<game_date>', methods=['GET'])
async def get_sentence(game_date):
    """Get the sentence scheduled for a date."""
    game_logger.log_user_action(request, 'get_sentence', game_date=game_date)

    sentence_source = get_sentence_source()
    if not sentence_source:
        return jsonify({
            'success': False,
            'error': 'Sentence service unavailable'
        }), 500

    date_error = check_game_date_window(
        game_date, get_today_date(), current_app.config.get('SENTENCE_HISTORY_DAYS', 365)
    )
    if date_error:
        message, status = date_error
        error_response = {
            'success': False,
            'error': message
        }
        game_logger.log_server_response(request, 'get_sentence', False, error_response, game_date=game_date)
        return jsonify(error_response), status

    try:
        payload = await sentence_source.get_sentence(game_date)
    except SentenceNotFoundError as e:
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_sentence', False, error_response, game_date=game_date)
        return jsonify(error_response), 404
    except SentenceLoadError as e:
        game_logger.log_error(request, e, 'get_sentence')
        return jsonify({
            'success': False,
            'error': 'Failed to retrieve sentence'
        }), 500

    response_data = {
        'success': True,
        'sentence': payload.sentence,
        'date': game_date,
        'difficulty': payload.difficulty
    }

    # Logged without the sentence text
    game_logger.log_server_response(
        request, 'get_sentence', True, {'success': True, 'date': game_date}, difficulty=payload.difficulty
    )
    return jsonify(response_data)
