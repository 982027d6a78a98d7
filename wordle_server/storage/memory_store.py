"""
In-memory game store, used for development and tests.
"""

import threading
from dataclasses import replace
from typing import Dict, Iterator

from ..errors import GameNotFound, StorageConflict
from ..models.game import Game
from .base import GameStore


class MemoryGameStore(GameStore):
    """Keeps games in a dict guarded by a single lock."""

    kind = "memory"

    def __init__(self):
        self.games: Dict[str, Game] = {}  # Active games by game_id
        self._lock = threading.Lock()

    def load(self, game_id: str) -> Game:
        with self._lock:
            game = self.games.get(game_id)
            if game is None:
                raise GameNotFound(game_id)
            # Callers get a snapshot; the stored row changes only via update()
            return replace(game)

    def create(self, game_id: str, player_id: str, secret_word: str) -> Game:
        game = Game(game_id=game_id, secret_word=secret_word, player_id=player_id)
        with self._lock:
            if game_id in self.games:
                raise ValueError(f"Game '{game_id}' already exists")
            self.games[game_id] = game
        return replace(game)

    def update(self, game_id: str, attempt_count: int, solved: bool) -> None:
        with self._lock:
            game = self.games.get(game_id)
            if game is None:
                raise GameNotFound(game_id)
            if game.solved or game.attempt_count != attempt_count - 1:
                raise StorageConflict(game_id)
            game.attempt_count = attempt_count
            game.solved = solved

    def iter_games(self) -> Iterator[Game]:
        with self._lock:
            snapshot = [replace(game) for game in self.games.values()]
        return iter(snapshot)

    def __len__(self) -> int:
        return len(self.games)
