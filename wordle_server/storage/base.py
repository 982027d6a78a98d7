"""
Game Store Interface

A store persists game rows. The game service is the only caller that
mutates them, and only through update().
"""

from abc import ABC, abstractmethod
from typing import Iterator

from ..models.game import Game


class GameStore(ABC):
    """Persistence contract for game rows."""

    kind = "abstract"

    @abstractmethod
    def load(self, game_id: str) -> Game:
        """Return the stored game. Raises GameNotFound."""

    @abstractmethod
    def create(self, game_id: str, player_id: str, secret_word: str) -> Game:
        """Store a new unsolved game with zero attempts."""

    @abstractmethod
    def update(self, game_id: str, attempt_count: int, solved: bool) -> None:
        """
        Atomically record an evaluated guess.

        The write only applies while the stored row is unsolved and holds
        attempt_count - 1 attempts. Otherwise StorageConflict is raised
        (GameNotFound if the row is gone).
        """

    @abstractmethod
    def iter_games(self) -> Iterator[Game]:
        """Yield every stored game."""
