"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Board dimensions and word lists (game rules)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import ANSWER_WORDS, GUESS_WORDS, NUM_ROWS, NUM_COLS, validate_word_list_integrity

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'ANSWER_WORDS', 'GUESS_WORDS', 'NUM_ROWS', 'NUM_COLS', 'validate_word_list_integrity'
]
