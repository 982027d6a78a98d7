"""
Storage Package

Game store implementations and the factory that picks one from config.
"""

from .base import GameStore
from .memory_store import MemoryGameStore
from .mongo_store import MongoGameStore


def create_game_store(config_class) -> GameStore:
    """Build the game store named by config_class.GAME_STORE."""
    kind = getattr(config_class, 'GAME_STORE', 'memory')
    if kind == 'memory':
        return MemoryGameStore()
    if kind == 'mongo':
        return MongoGameStore(config_class.MONGO_URI, getattr(config_class, 'MONGO_DB_NAME', 'wordle_game'))
    raise ValueError(f"Unknown GAME_STORE '{kind}'. Must be 'memory' or 'mongo'")


__all__ = ['GameStore', 'MemoryGameStore', 'MongoGameStore', 'create_game_store']
