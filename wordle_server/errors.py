"""
Game Errors

Exceptions raised by the game service and stores. Controllers map each
subclass of WordleError to an HTTP status.
"""


class WordleError(Exception):
    """Base class for all game errors."""
    status_code = 500


class GameNotFound(WordleError):
    """No stored game matches the identifier."""
    status_code = 404

    def __init__(self, game_id: str):
        super().__init__(f"Game '{game_id}' not found")
        self.game_id = game_id


class InvalidGuess(WordleError):
    """The guess is the wrong length or not in the word list."""
    status_code = 400

    def __init__(self, guess: str, reason: str):
        super().__init__(reason)
        self.guess = guess
        self.reason = reason


class StorageConflict(WordleError):
    """The stored game changed between load and update."""
    status_code = 409

    def __init__(self, game_id: str):
        super().__init__(f"Game '{game_id}' was updated concurrently")
        self.game_id = game_id


class GameBusy(WordleError):
    """Retries for a conflicting update ran out."""
    status_code = 503

    def __init__(self, game_id: str, attempts: int):
        super().__init__(f"Game '{game_id}' is busy, please retry")
        self.game_id = game_id
        self.attempts = attempts
