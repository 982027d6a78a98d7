"""
MongoDB Game Store

Persists games in a MongoDB collection. Guess updates are a single
conditional update_one, so concurrent guesses on one game cannot both
apply on top of the same attempt count.
"""

import datetime
from typing import Dict, Iterator, Optional

from pymongo.collection import Collection
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..errors import GameNotFound, StorageConflict
from ..models.game import Game
from .base import GameStore


class MongoGameStore(GameStore):
    """
    Game store backed by a MongoDB collection.

    Document layout:
        game_id, secret_word, attempt_count, solved, player_id, created_at
    """

    kind = "mongo"

    def __init__(self, mongo_uri: Optional[str] = None, db_name: str = 'wordle_game',
                 collection: Optional[Collection] = None):
        """
        Initialize the store with a MongoDB connection.

        Args:
            mongo_uri: MongoDB connection string, used when no collection is given
            db_name: Database holding the games collection
            collection: Ready collection to use instead of connecting
        """
        if collection is None:
            if not mongo_uri:
                raise ValueError("MongoGameStore needs a mongo_uri or a collection")
            self.client = MongoClient(mongo_uri, server_api=ServerApi('1'))
            # Fail fast on a bad connection string
            self.client.admin.command('ping')
            collection = self.client[db_name].games
        self.games_collection = collection

        self.games_collection.create_index("game_id", unique=True)
        self.games_collection.create_index("player_id")

    @staticmethod
    def _to_game(doc: Dict) -> Game:
        return Game(
            game_id=doc["game_id"],
            secret_word=doc["secret_word"],
            attempt_count=doc.get("attempt_count", 0),
            solved=bool(doc.get("solved", False)),
            player_id=doc.get("player_id"),
            created_at=doc.get("created_at") or datetime.datetime.now(datetime.timezone.utc),
        )

    def load(self, game_id: str) -> Game:
        doc = self.games_collection.find_one({"game_id": game_id})
        if doc is None:
            raise GameNotFound(game_id)
        return self._to_game(doc)

    def create(self, game_id: str, player_id: str, secret_word: str) -> Game:
        game = Game(game_id=game_id, secret_word=secret_word, player_id=player_id)
        self.games_collection.insert_one({
            "game_id": game.game_id,
            "secret_word": game.secret_word,
            "attempt_count": game.attempt_count,
            "solved": game.solved,
            "player_id": game.player_id,
            "created_at": game.created_at,
        })
        return game

    def update(self, game_id: str, attempt_count: int, solved: bool) -> None:
        result = self.games_collection.update_one(
            {"game_id": game_id, "attempt_count": attempt_count - 1, "solved": False},
            {"$set": {"attempt_count": attempt_count, "solved": solved}},
        )
        if result.matched_count == 1:
            return

        if self.games_collection.find_one({"game_id": game_id}, {"_id": 1}) is None:
            raise GameNotFound(game_id)
        raise StorageConflict(game_id)

    def iter_games(self) -> Iterator[Game]:
        for doc in self.games_collection.find({}):
            yield self._to_game(doc)
