"""
likelihood.py

Maps a word's corpus frequency to a plausibility weight in [0, 1].

The weight is a logistic squash of a fitted quadratic. The quadratic peaks
around the frequency of typical answer words and falls off steeply on both
sides, so very rare and very common words get weights near zero.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class CurveFit:
    """Coefficients of fit(x) = a*x**2 + b*x + c. Tuned offline."""

    a: float
    b: float
    c: float


DEFAULT_CURVE = CurveFit(a=-19970122538.988, b=41168735.495139, c=-10.0)


def fit(frequency: float, curve: CurveFit = DEFAULT_CURVE) -> float:
    return curve.a * frequency * frequency + curve.b * frequency + curve.c


def squash(x: float) -> float:
    """Logistic function 1 / (1 + e**-x). Returns 0.0 once e**-x overflows."""
    try:
        return 1.0 / (1.0 + math.exp(-x))
    except OverflowError:
        return 0.0


def likelihood(frequency: float, curve: CurveFit = DEFAULT_CURVE) -> float:
    """
    Plausibility of a word as the secret, from its corpus frequency.

    Mathematically always positive, but for fitted values below about
    -709.78 e**-x overflows and the weight is exactly 0.0. That happens for
    frequencies above roughly 0.0021 with the default curve.
    """
    return squash(fit(frequency, curve))
