"""
Utilities Package

Contains utility functions and the structured game logger.
"""

from .helpers import get_user_identity
from .game_logger import game_logger

__all__ = ['get_user_identity', 'game_logger']
