"""Frequency-weighted Wordle candidate filtering and entropy ranking."""

from .candidates import apply_history, build_candidates, narrow
from .entropy import entropy_from_counts, guess_entropy, rank_guesses, score_distribution
from .feedback import (
    ALL_CORRECT,
    MAX_SCORE,
    FeedbackDigit,
    decode_feedback,
    encode_feedback,
    format_feedback,
    from_ternary,
    parse_feedback,
    to_ternary,
    to_word,
)
from .likelihood import DEFAULT_CURVE, CurveFit, fit, likelihood, squash
from .patterns import score, score_row
from .session import SolvingSession
from .words import FrequencyEntry, load_frequencies, parse_line

__all__ = [
    "ALL_CORRECT",
    "MAX_SCORE",
    "DEFAULT_CURVE",
    "CurveFit",
    "FeedbackDigit",
    "FrequencyEntry",
    "SolvingSession",
    "apply_history",
    "build_candidates",
    "decode_feedback",
    "encode_feedback",
    "entropy_from_counts",
    "fit",
    "format_feedback",
    "from_ternary",
    "guess_entropy",
    "likelihood",
    "load_frequencies",
    "narrow",
    "parse_feedback",
    "parse_line",
    "rank_guesses",
    "score",
    "score_distribution",
    "score_row",
    "squash",
    "to_ternary",
    "to_word",
]
