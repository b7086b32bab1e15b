"""
feedback.py

Words and feedback patterns.

A feedback pattern is five digits, one per letter of the guess:

    0 = absent   ('b')
    1 = present  ('y')
    2 = correct  ('g')

Patterns are packed into a single base-3 integer, most significant digit
first, so the leftmost letter contributes digit * 3**4. Every integer in
0..242 is exactly one pattern.
"""

import string
from enum import IntEnum


WORD_LENGTH = 5
MAX_SCORE = 3**WORD_LENGTH
ALL_CORRECT = MAX_SCORE - 1

Word = str


class FeedbackDigit(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


_SYMBOLS = {
    FeedbackDigit.ABSENT: "b",
    FeedbackDigit.PRESENT: "y",
    FeedbackDigit.CORRECT: "g",
}
_DIGITS = {symbol: digit for digit, symbol in _SYMBOLS.items()}
_LETTERS = frozenset(string.ascii_lowercase)


def to_word(text: str) -> Word:
    """Normalise user text into a Word, rejecting anything not 5 ASCII letters."""
    word = text.strip().lower()
    if len(word) != WORD_LENGTH or not _LETTERS.issuperset(word):
        raise ValueError(f"{text!r} is not a {WORD_LENGTH}-letter word")
    return word


def encode_feedback(digits) -> int:
    """Pack five feedback digits into a single integer code."""
    code = 0
    for digit in digits:
        code = code * 3 + int(digit)
    return code


def decode_feedback(code: int) -> tuple:
    """Unpack an integer code into five FeedbackDigit values."""
    if not 0 <= code < MAX_SCORE:
        raise ValueError(f"feedback code {code} outside 0..{MAX_SCORE - 1}")

    digits = [FeedbackDigit.ABSENT] * WORD_LENGTH
    for pos in range(WORD_LENGTH - 1, -1, -1):
        code, digit = divmod(code, 3)
        digits[pos] = FeedbackDigit(digit)
    return tuple(digits)


def parse_feedback(text: str) -> tuple:
    """Parse a 'b'/'y'/'g' string such as 'bygyb' into feedback digits."""
    symbols = text.strip().lower()
    if len(symbols) != WORD_LENGTH:
        raise ValueError(f"feedback {text!r} must have exactly {WORD_LENGTH} symbols")
    try:
        return tuple(_DIGITS[ch] for ch in symbols)
    except KeyError as exc:
        raise ValueError(f"bad feedback symbol {exc.args[0]!r} in {text!r}") from None


def format_feedback(digits) -> str:
    return "".join(_SYMBOLS[FeedbackDigit(d)] for d in digits)


def to_ternary(text: str) -> int:
    return encode_feedback(parse_feedback(text))


def from_ternary(code: int) -> str:
    return format_feedback(decode_feedback(code))
