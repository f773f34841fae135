"""
Guess the Sentence Game Server Application Package

This package contains the daily sentence guessing game: the single-player
game core, the session, token and leaderboard services built around it, and
the HTTP and WebSocket layers that expose them.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Tuple of the Flask application and its SocketIO instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    allowed_origins = config_class.ALLOWED_ORIGINS
    if not allowed_origins or '*' in allowed_origins:
        allowed_origins = '*'
    CORS(app, origins=allowed_origins)
    socketio = SocketIO(app, cors_allowed_origins=allowed_origins, logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.sentence_controller import sentence_bp
    from .controllers.leaderboard_controller import leaderboard_bp

    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(sentence_bp, url_prefix='/api')
    app.register_blueprint(leaderboard_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
