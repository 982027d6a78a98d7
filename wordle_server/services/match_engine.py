"""
Match Engine

Implements the Wordle letter evaluation algorithm. Pure functions only:
no I/O and no shared state, so it is safe to call from any request thread.
"""

from typing import List, Optional, Tuple

from ..models.game import CharacterMatch, MatchType


def evaluate(secret: str, guess: str) -> Tuple[bool, List[CharacterMatch]]:
    """
    Classifies every letter of a guess against the secret word.

    Exact matches are resolved first and each secret letter can be claimed
    by at most one guess position, so repeated letters are never
    double-counted.

    Args:
        secret: The word being guessed
        guess: The submitted word, same length as the secret

    Returns:
        Tuple of (solved, classifications ordered by position)

    Raises:
        ValueError: If the words differ in length
    """
    if len(secret) != len(guess):
        raise ValueError(
            f"Guess length {len(guess)} does not match secret length {len(secret)}"
        )

    classifications = [MatchType.ABSENT] * len(guess)

    # Working copy of the secret; claimed slots are set to None
    pool: List[Optional[str]] = list(secret)
    used = [False] * len(guess)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == secret[i]:
            classifications[i] = MatchType.EXACT
            used[i] = True
            pool[i] = None

    # Second pass: letters present elsewhere in the secret
    for i, letter in enumerate(guess):
        if used[i]:
            continue
        if letter in pool:
            classifications[i] = MatchType.PRESENT
            used[i] = True
            pool[pool.index(letter)] = None

    matches = [
        CharacterMatch(position=i, character=letter, classification=classifications[i])
        for i, letter in enumerate(guess)
    ]
    return guess == secret, matches


def pattern_key(matches: List[CharacterMatch]) -> str:
    """Compact string form of a classification, e.g. 'PP-EE' for mower/owler."""
    symbols = {MatchType.EXACT: 'E', MatchType.PRESENT: 'P', MatchType.ABSENT: '-'}
    return ''.join(symbols[match.classification] for match in matches)
