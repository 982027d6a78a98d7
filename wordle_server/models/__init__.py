"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import CharacterMatch, EvaluationResult, Game, GameView, MatchType, PlayerStatistics

__all__ = ['CharacterMatch', 'EvaluationResult', 'Game', 'GameView', 'MatchType', 'PlayerStatistics']
