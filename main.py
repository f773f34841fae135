"""
Guess the Sentence Game Server - Main Entry Point

This is the main entry point for the game server.
It initializes all services and starts the Flask-SocketIO application.
"""

import threading
import time
from pymongo.errors import PyMongoError
from sentence_game import create_app
from sentence_game.config import Config
from sentence_game.services.leaderboard_service import initialize_leaderboard_service, get_leaderboard_service
from sentence_game.services.sentence_service import initialize_sentence_source
from sentence_game.services.session_service import initialize_session_service, get_session_service
from sentence_game.services.token_service import initialize_token_service
from sentence_game.utils.game_logger import game_logger


def session_cleanup_worker(app):
    """
    Background worker that periodically evicts idle game sessions.
    Runs every SESSION_CLEANUP_INTERVAL_SECONDS.
    """
    print("Session cleanup worker started")
    while True:
        try:
            with app.app_context():
                session_service = get_session_service()
                if session_service:
                    removed = session_service.cleanup_stale_sessions(Config.SESSION_IDLE_TIMEOUT_SECONDS)
                    if removed > 0:
                        game_logger.logger.info(f"Session cleanup: Removed {removed} idle sessions")
                        game_logger.log_game_event(
                            None, 'sessions_evicted', 'system',
                            removed=removed,
                            idle_timeout_seconds=Config.SESSION_IDLE_TIMEOUT_SECONDS,
                            active_sessions=session_service.get_active_session_count()
                        )
        except Exception as e:
            game_logger.logger.error(f"Error in session cleanup worker: {e}")

        time.sleep(Config.SESSION_CLEANUP_INTERVAL_SECONDS)


def shutdown_services():
    """Release the MongoDB client held by the leaderboard service, if any."""
    leaderboard_service = get_leaderboard_service()
    if leaderboard_service:
        leaderboard_service.close_connection()
        game_logger.logger.info("Leaderboard MongoDB connection closed")


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # Leaderboard persistence is optional; without MongoDB the game still runs
        leaderboard_service = None
        if Config.MONGO_URI:
            leaderboard_service = initialize_leaderboard_service(
                Config.MONGO_URI,
                database_name=Config.MONGO_DB_NAME,
                max_player_name_length=Config.MAX_PLAYER_NAME_LENGTH,
                max_daily_score=Config.MAX_DAILY_SCORE,
                max_leaderboard_entries=Config.MAX_LEADERBOARD_ENTRIES
            )
            if leaderboard_service:
                print("✓ Leaderboard service initialized successfully")
            else:
                print("✗ Failed to initialize leaderboard service")
        else:
            print("✗ MongoDB URI not configured, leaderboard disabled")

        # Sentence source
        if Config.SENTENCE_SOURCE == 'mongo':
            if not leaderboard_service:
                raise RuntimeError("SENTENCE_SOURCE=mongo requires a working MongoDB connection")
            sentence_source = initialize_sentence_source('mongo', leaderboard_service.sentences_collection)
        else:
            sentence_source = initialize_sentence_source(Config.SENTENCE_SOURCE)
        print(f"✓ Sentence source initialized ({Config.SENTENCE_SOURCE})")

        initialize_session_service(sentence_source)
        print("✓ Session service initialized successfully")

        initialize_token_service(Config.SESSION_TOKEN_SECRET, Config.SESSION_TOKEN_EXPIRATION_DAYS)
        print("✓ Session token service initialized successfully")

        # Create Flask app
        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        cleanup_thread = threading.Thread(target=session_cleanup_worker, args=(app,), daemon=True)
        cleanup_thread.start()
        print(f"✓ Session cleanup worker started - checking every {Config.SESSION_CLEANUP_INTERVAL_SECONDS} seconds")

        game_logger.logger.info("Guess the Sentence Server Starting")

        print(f"\nStarting Guess the Sentence Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Leaderboard available: {leaderboard_service is not None}")
        print("=" * 50)

        # Start the server
        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Guess the Sentence Server shutting down (KeyboardInterrupt)")
    except (PyMongoError, RuntimeError, ValueError) as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise
    finally:
        shutdown_services()


if __name__ == '__main__':
    main()
