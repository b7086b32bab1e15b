"""
candidates.py

The candidate set: every word the secret could still be, mapped to its
likelihood. It only ever shrinks.
"""

from .feedback import to_ternary, to_word
from .likelihood import DEFAULT_CURVE, likelihood
from .patterns import score


def build_candidates(entries, curve=DEFAULT_CURVE):
    """Initial candidate set from (word, frequency) entries."""
    candidates = {}
    for word, frequency in entries:
        weight = likelihood(frequency, curve)
        if weight > 0.0:
            candidates[word] = weight
    return candidates


def narrow(guess, observed, candidates):
    """
    Remove, in place, every candidate that would not have produced the
    observed score for `guess`. Returns the number of words removed.
    """
    rejected = [word for word in candidates if score(guess, word) != observed]
    for word in rejected:
        del candidates[word]
    return len(rejected)


def apply_history(history, candidates):
    """Narrow once per (guess, feedback string) pair, in order."""
    for guess, feedback in history:
        narrow(to_word(guess), to_ternary(feedback), candidates)
    return candidates
