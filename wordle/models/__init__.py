"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameOutcome, GameState, GameStats, GuessError, LetterStatus, SubmitResult

__all__ = ['GameOutcome', 'GameState', 'GameStats', 'GuessError', 'LetterStatus', 'SubmitResult']
