"""
patterns.py

Scores a guess against a candidate secret.

Each score is an integer 0..242 encoding the 5-tile feedback pattern in
base-3 (see feedback.py). Scoring is not symmetric: score(a, b) and
score(b, a) differ whenever the two words repeat letters differently.
"""

import numpy as np

from .feedback import WORD_LENGTH, FeedbackDigit, encode_feedback


# Markers for consumed positions; they never equal a letter or each other.
_USED_GUESS = ":"
_USED_CANDIDATE = "?"


def score(guess: str, candidate: str) -> int:
    """
    Encode the feedback `guess` would receive if `candidate` were the secret.

    Duplicate letters follow the game's rules:

    1. First mark exact matches. Each one consumes that position in both
       words so it cannot be matched again.

    2. Then, for every remaining guess letter, take the leftmost unconsumed
       candidate position holding the same letter, if any, and consume it.

    A candidate letter is therefore never reported present more times than
    it occurs.
    """
    g = list(guess)
    c = list(candidate)
    digits = [FeedbackDigit.ABSENT] * WORD_LENGTH

    # First pass: exact matches
    for i in range(WORD_LENGTH):
        if g[i] == c[i]:
            digits[i] = FeedbackDigit.CORRECT
            g[i] = _USED_GUESS
            c[i] = _USED_CANDIDATE

    # Second pass: present elsewhere, consuming candidate letters left to right
    for i in range(WORD_LENGTH):
        if digits[i] == FeedbackDigit.CORRECT:
            continue
        for j in range(WORD_LENGTH):
            if c[j] == g[i]:
                c[j] = _USED_CANDIDATE
                digits[i] = FeedbackDigit.PRESENT
                break

    return encode_feedback(digits)


def score_row(guess: str, candidates) -> np.ndarray:
    """Scores of one guess against every candidate, in candidate order."""
    row = np.zeros(len(candidates), dtype=np.uint8)
    for j, candidate in enumerate(candidates):
        row[j] = score(guess, candidate)
    return row
