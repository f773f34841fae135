"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and the sentence schedule
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    SENTENCE_SCHEDULE, BASE_POINTS_PER_LETTER, INCORRECT_GUESS_PENALTY, MULTIPLIER_GROWTH,
    validate_sentence_schedule_integrity, get_sentence_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'SENTENCE_SCHEDULE', 'BASE_POINTS_PER_LETTER', 'INCORRECT_GUESS_PENALTY', 'MULTIPLIER_GROWTH',
    'validate_sentence_schedule_integrity', 'get_sentence_statistics'
]
