"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env
load_dotenv('sentence_game/config/config.env')


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    ALLOWED_ORIGINS = [
        origin.strip() for origin in os.getenv('ALLOWED_ORIGINS', '*').split(',') if origin.strip()
    ]

    # Database Settings
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'guess_the_sentence')

    # Sentence Settings
    SENTENCE_SOURCE = os.getenv('SENTENCE_SOURCE', 'file')  # "file" or "mongo"
    SENTENCE_HISTORY_DAYS = int(os.getenv('SENTENCE_HISTORY_DAYS', 365))

    # Session Settings
    SESSION_TOKEN_SECRET = os.getenv('SESSION_TOKEN_SECRET', SECRET_KEY)
    SESSION_TOKEN_EXPIRATION_DAYS = int(os.getenv('SESSION_TOKEN_EXPIRATION_DAYS', 2))
    SESSION_IDLE_TIMEOUT_SECONDS = int(os.getenv('SESSION_IDLE_TIMEOUT_SECONDS', 3600))
    SESSION_CLEANUP_INTERVAL_SECONDS = int(os.getenv('SESSION_CLEANUP_INTERVAL_SECONDS', 60))

    # Leaderboard Settings
    MAX_LEADERBOARD_ENTRIES = int(os.getenv('MAX_LEADERBOARD_ENTRIES', 100))
    MAX_PLAYER_NAME_LENGTH = int(os.getenv('MAX_PLAYER_NAME_LENGTH', 50))
    MAX_DAILY_SCORE = int(os.getenv('MAX_DAILY_SCORE', 1000000))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    SESSION_TOKEN_SECRET = 'testing-session-secret-0123456789abcdef0123456789'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
