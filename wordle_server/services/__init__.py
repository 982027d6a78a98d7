"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameService
from .match_engine import evaluate
from .statistics_service import aggregate_statistics
from .vocabulary import Vocabulary, default_vocabulary

__all__ = [
    'GameService',
    'evaluate',
    'aggregate_statistics',
    'Vocabulary', 'default_vocabulary'
]
