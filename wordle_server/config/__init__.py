"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Word lists and their validation (game rules)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import ANSWER_LIST, GUESS_LIST, WORD_LENGTH, validate_word_list_integrity

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ANSWER_LIST', 'GUESS_LIST', 'WORD_LENGTH', 'validate_word_list_integrity'
]
