"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import with_game_service
from .helpers import get_player_id
from .game_logger import game_logger

__all__ = ['with_game_service', 'get_player_id', 'game_logger']
