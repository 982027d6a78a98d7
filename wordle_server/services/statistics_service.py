"""
Statistics Service

Aggregates stored games into per-player results. Read-only: it never
touches game state.
"""

from collections import defaultdict
from typing import Dict, Iterable, List

from ..models.game import Game, PlayerStatistics


def aggregate_statistics(games: Iterable[Game]) -> Dict[str, PlayerStatistics]:
    """
    Groups games by player and summarizes them.

    Averages and maxima only consider solved games; both are None for a
    player who has not solved anything yet.
    """
    by_player: Dict[str, List[Game]] = defaultdict(list)
    for game in games:
        by_player[game.player_id or 'unknown'].append(game)

    stats = {}
    for player_id, player_games in by_player.items():
        solved_attempts = [g.attempt_count for g in player_games if g.solved]
        stats[player_id] = PlayerStatistics(
            player_id=player_id,
            average_attempts=round(sum(solved_attempts) / len(solved_attempts), 2) if solved_attempts else None,
            max_attempts=max(solved_attempts) if solved_attempts else None,
            solved_count=len(solved_attempts),
            total_count=len(player_games),
        )
    return stats


def empty_statistics(player_id: str) -> PlayerStatistics:
    return PlayerStatistics(player_id=player_id, average_attempts=None, max_attempts=None,
                            solved_count=0, total_count=0)
