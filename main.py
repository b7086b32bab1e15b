"""
main.py

Replays a fixed game history and ranks every dictionary word as the next guess.
"""

from wordle_freq.candidates import apply_history, build_candidates
from wordle_freq.entropy import rank_guesses
from wordle_freq.words import load_frequencies


HISTORY = [
    ("tares", "bybyb"),
    ("colin", "ybbbb"),
    ("psych", "bbyyb"),
]


try:
    entries = load_frequencies()
except (FileNotFoundError, ValueError) as exc:
    raise SystemExit(str(exc)) from exc

candidates = apply_history(HISTORY, build_candidates(entries))

for word in candidates:
    print(word)

print("*** RANKED GUESSES ***")
for word, entropy in rank_guesses(entries, candidates, progress=True):
    print(f"{entropy} {word}")
