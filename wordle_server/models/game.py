"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional


class MatchType(Enum):
    """Per-letter classification of a guess against the secret word."""
    EXACT = "EXACT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


@dataclass
class Game:
    """Stored game row. Only the game service writes attempt_count and solved."""
    game_id: str
    secret_word: str
    attempt_count: int = 0
    solved: bool = False
    player_id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def state(self) -> str:
        if self.solved:
            return "solved"
        if self.attempt_count == 0:
            return "created"
        return "in_progress"


@dataclass(frozen=True)
class CharacterMatch:
    position: int
    character: str
    classification: MatchType

    def to_dict(self) -> Dict:
        return {
            "position": self.position,
            "character": self.character,
            "classification": self.classification.value,
        }


@dataclass
class EvaluationResult:
    """Outcome of a single guess submission."""
    solved: bool
    guess: str
    attempt_count: int
    evaluation: List[CharacterMatch] = field(default_factory=list)
    revealed_word: Optional[str] = None  # Only set once solved

    def to_dict(self) -> Dict:
        return {
            "solved": self.solved,
            "guess": self.guess,
            "attempt_count": self.attempt_count,
            "evaluation": [match.to_dict() for match in self.evaluation],
            "revealed_word": self.revealed_word,
        }


@dataclass
class GameView:
    """Public projection of a game. The secret stays hidden until solved."""
    game_id: str
    attempt_count: int
    solved: bool
    state: str
    revealed_word: Optional[str] = None

    @classmethod
    def from_game(cls, game: Game) -> "GameView":
        return cls(
            game_id=game.game_id,
            attempt_count=game.attempt_count,
            solved=game.solved,
            state=game.state,
            revealed_word=game.secret_word if game.solved else None,
        )


@dataclass
class PlayerStatistics:
    """Aggregate results for one player across all of their games."""
    player_id: str
    average_attempts: Optional[float]
    max_attempts: Optional[int]
    solved_count: int
    total_count: int
