"""
Game Service

Contains the game lifecycle: creating games and evaluating guesses
against stored game state.
"""

import uuid
from typing import List, Optional

from ..errors import GameBusy, InvalidGuess, StorageConflict
from ..models.game import EvaluationResult, GameView, PlayerStatistics
from ..storage.base import GameStore
from ..utils.game_logger import game_logger
from .match_engine import evaluate, pattern_key
from .statistics_service import aggregate_statistics, empty_statistics
from .vocabulary import Vocabulary


class GameService:
    """
    Game lifecycle manager.

    This class handles:
    - Game creation with unique game IDs and a hidden secret word
    - Guess validation and evaluation
    - The only write path for attempt counts and solved flags

    A game moves created -> in_progress -> solved and never leaves solved.
    """

    def __init__(self, store: GameStore, vocabulary: Vocabulary, retry_limit: int = 3):
        self.store = store
        self.vocabulary = vocabulary
        self.retry_limit = max(1, retry_limit)

    def create_game(self, player_id: str) -> str:
        """
        Creates a new game with a randomly selected secret word.

        Args:
            player_id: Player the game counts towards in statistics

        Returns:
            str: Unique game ID (the secret word is never returned)
        """
        game_id = str(uuid.uuid4())
        secret_word = self.vocabulary.pick_random_secret()
        self.store.create(game_id, player_id, secret_word)
        return game_id

    def get_game(self, game_id: str) -> GameView:
        """Returns the public view of a game. Raises GameNotFound."""
        return GameView.from_game(self.store.load(game_id))

    def submit_guess(self, game_id: str, guess_text: str) -> EvaluationResult:
        """
        Evaluates a guess and records the attempt.

        Guessing at a solved game is not an error: the secret is revealed
        again and nothing is written.

        Args:
            game_id: Unique game identifier
            guess_text: The submitted word

        Returns:
            EvaluationResult for this submission

        Raises:
            GameNotFound: If the game does not exist
            InvalidGuess: If the guess has the wrong length or is not a word
            GameBusy: If concurrent updates kept conflicting
        """
        guess = (guess_text or '').strip().lower()

        for attempt in range(1, self.retry_limit + 1):
            game = self.store.load(game_id)

            if game.solved:
                return EvaluationResult(
                    solved=True,
                    guess=guess,
                    attempt_count=game.attempt_count,
                    revealed_word=game.secret_word,
                )

            word_length = len(game.secret_word)
            if len(guess) != word_length:
                raise InvalidGuess(guess, f"Guess must be exactly {word_length} letters")
            if not self.vocabulary.is_valid_guess(word_length, guess):
                raise InvalidGuess(guess, f"'{guess}' is not a valid guess")

            solved, evaluation = evaluate(game.secret_word, guess)
            attempt_count = game.attempt_count + 1

            try:
                self.store.update(game_id, attempt_count, solved)
            except StorageConflict:
                game_logger.logger.warning(
                    f"Conflicting update on game {game_id} (try {attempt}/{self.retry_limit})"
                )
                continue

            game_logger.logger.debug(
                f"Game {game_id} attempt {attempt_count}: {guess} -> {pattern_key(evaluation)}"
            )
            return EvaluationResult(
                solved=solved,
                guess=guess,
                attempt_count=attempt_count,
                evaluation=evaluation,
                revealed_word=game.secret_word if solved else None,
            )

        raise GameBusy(game_id, self.retry_limit)

    def get_player_statistics(self, player_id: Optional[str] = None) -> List[PlayerStatistics]:
        """
        Per-player aggregates over all stored games.

        Args:
            player_id: Restrict the result to one player

        Returns:
            List of PlayerStatistics sorted by player ID
        """
        stats = aggregate_statistics(self.store.iter_games())
        if player_id is not None:
            return [stats.get(player_id) or empty_statistics(player_id)]
        return [stats[key] for key in sorted(stats)]
