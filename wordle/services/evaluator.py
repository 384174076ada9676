"""
Guess Evaluator

Scores a guess against the secret word letter by letter.
"""

from collections import Counter
from typing import List

from ..models.game import LetterStatus


def evaluate_guess(guess: str, secret: str) -> List[LetterStatus]:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are scored first so that a repeated guess letter is never
    credited more times than it occurs in the secret.

    Args:
        guess: Uppercase guess, same length as the secret
        secret: Uppercase secret word

    Returns:
        List of LetterStatus, one per position

    Raises:
        ValueError: If the guess and secret differ in length
    """
    if len(guess) != len(secret):
        raise ValueError(f"guess length ({len(guess)}) != secret length ({len(secret)})")

    result = [LetterStatus.ABSENT] * len(secret)
    remaining = Counter(secret)

    # First pass: exact position matches
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            result[i] = LetterStatus.CORRECT
            remaining[g] -= 1

    # Second pass: letters present elsewhere, consuming remaining counts
    for i, g in enumerate(guess):
        if result[i] is LetterStatus.CORRECT:
            continue
        if remaining[g] > 0:
            result[i] = LetterStatus.PRESENT
            remaining[g] -= 1

    return result
