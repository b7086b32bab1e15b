"""
words.py

Loads the word frequency list.

Each line holds a word followed by whitespace-separated frequency samples,
oldest first. A word's frequency is the mean of its most recent samples.
No numpy here, just clean text handling.
"""

import math
from collections import deque
from pathlib import Path
from typing import NamedTuple

from .feedback import to_word


DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_WORDS_PATH = DATA_DIR / "wordle_words_freqs_full.txt"

SAMPLE_WINDOW = 5


class FrequencyEntry(NamedTuple):
    word: str
    frequency: float


def parse_line(line: str) -> FrequencyEntry:
    """Parse 'word f1 f2 ...' into an entry averaging the last SAMPLE_WINDOW samples."""
    parts = line.split()
    if not parts:
        raise ValueError("there was no word here")
    word = to_word(parts[0])

    samples = deque(maxlen=SAMPLE_WINDOW)
    for raw in parts[1:]:
        try:
            value = float(raw)
        except ValueError:
            raise ValueError(f"cannot parse frequency {raw!r} for {word!r}") from None
        if value < 0 or not math.isfinite(value):
            raise ValueError(f"invalid frequency {raw!r} for {word!r}")
        samples.append(value)

    if not samples:
        raise ValueError(f"no frequency samples for {word!r}")
    return FrequencyEntry(word, sum(samples) / len(samples))


def load_frequencies(path=DEFAULT_WORDS_PATH):
    """
    Returns:
        entries: list of FrequencyEntry sorted ascending by frequency
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word frequency list not found: {path}")

    entries = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                entries.append(parse_line(line))
            except ValueError as exc:
                raise ValueError(f"{path}:{lineno}: {exc}") from exc

    entries.sort(key=lambda entry: entry.frequency)
    return entries
