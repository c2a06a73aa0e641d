"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, keyboard layout and word list
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LIST, MAX_ROUNDS, WORD_LENGTH, ARABIC_KEYBOARD_ROWS, ENGLISH_TO_ARABIC_MAP,
    validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LIST', 'MAX_ROUNDS', 'WORD_LENGTH', 'ARABIC_KEYBOARD_ROWS', 'ENGLISH_TO_ARABIC_MAP',
    'validate_word_list_integrity', 'get_word_statistics'
]
