"""
session.py

One solving session: a fixed dictionary, a candidate set narrowed by each
observed (guess, feedback) pair, and guess ranking on demand.
"""

from .candidates import build_candidates, narrow
from .entropy import rank_guesses
from .feedback import from_ternary, to_ternary, to_word
from .likelihood import DEFAULT_CURVE


class SolvingSession:
    """Tracks what the secret can still be after each observation.

    Parameters
    ----------
    dictionary : list[FrequencyEntry]
        Every word that may be guessed. Never modified.
    curve : CurveFit
        Likelihood curve used to admit the initial candidates.
    """

    def __init__(self, dictionary, curve=DEFAULT_CURVE) -> None:
        self._dictionary = list(dictionary)
        self._candidates = build_candidates(self._dictionary, curve)
        self._history: list[tuple[str, str]] = []

    def observe(self, guess: str, feedback) -> int:
        """Apply one observation and return how many candidates remain.

        *feedback* is either a 'b'/'y'/'g' string or an integer score.
        An empty candidate set is a valid outcome, not an error.
        """
        word = to_word(guess)
        observed = to_ternary(feedback) if isinstance(feedback, str) else feedback
        label = from_ternary(observed)
        narrow(word, observed, self._candidates)
        self._history.append((word, label))
        return len(self._candidates)

    def rank(self, progress: bool = False) -> list[tuple[str, float]]:
        return rank_guesses(self._dictionary, self._candidates, progress=progress)

    def is_exhausted(self) -> bool:
        return not self._candidates

    def is_solved(self) -> bool:
        return len(self._candidates) == 1

    @property
    def candidates(self) -> dict[str, float]:
        return dict(self._candidates)

    @property
    def dictionary(self) -> list:
        return list(self._dictionary)

    @property
    def history(self) -> list[tuple[str, str]]:
        return list(self._history)
