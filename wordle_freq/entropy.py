"""
entropy.py

Ranks guesses by the Shannon entropy of the feedback they would produce
across the remaining candidates.

Every remaining candidate counts once. The likelihood weights carried by
the candidate set are not used here.
"""

import numpy as np
from tqdm import tqdm

from .feedback import MAX_SCORE
from .patterns import score_row


def score_distribution(guess, candidates):
    """Number of candidates landing in each of the 243 feedback buckets."""
    return np.bincount(score_row(guess, candidates), minlength=MAX_SCORE)


def entropy_from_counts(counts, total=None):
    """Compute Shannon entropy in bits from bucket counts."""
    if total is None:
        total = counts.sum()
    if total == 0:
        return 0.0
    probs = counts[counts > 0] / total
    return float(-np.sum(probs * np.log2(probs)))


def guess_entropy(guess, candidates):
    """Entropy of one guess across the current candidate set."""
    return entropy_from_counts(score_distribution(guess, candidates), len(candidates))


def rank_guesses(dictionary, candidates, progress=False):
    """
    Score every dictionary word as a possible next guess.

    Guesses need not be possible secrets themselves. Words with zero entropy
    tell us nothing and are dropped. The result is sorted ascending, so the
    most informative guess comes last; equal entropies keep dictionary order.
    """
    words = list(candidates)
    ranked = []

    for item in tqdm(dictionary, desc="Ranking guesses", disable=not progress):
        guess = item if isinstance(item, str) else item[0]
        entropy = guess_entropy(guess, words)
        if entropy > 0.0:
            ranked.append((guess, entropy))

    ranked.sort(key=lambda pair: pair[1])
    return ranked
