"""
Services Package

Contains all business logic: word source, scoring, the game state machine,
input handling, rendering and the session-owning game service.
"""

from .game_service import GameService, get_game_service, initialize_game_service
from .word_source import WordSource

__all__ = ['GameService', 'get_game_service', 'initialize_game_service', 'WordSource']
