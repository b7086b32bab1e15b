"""
wordle_entropy.py

CLI for frequency-weighted Wordle solving.

Reads the word frequency list, applies each observed guess and its feedback
in order, then prints the surviving candidates followed by next-guess
suggestions ranked by entropy (ascending, best guess last).

Feedback format:
- 5 letters of: g (green), y (yellow), b (black/gray), e.g. "bygyb"

Optional:
-observe WORD FEEDBACK: one observation; repeat for each guess made so far.
-top N: only show the N most informative guesses.
-candidates-only: only suggest words that could still be the secret.
-progress: show a progress bar while ranking.
"""

import argparse

from wordle_freq.entropy import rank_guesses
from wordle_freq.session import SolvingSession
from wordle_freq.words import DEFAULT_WORDS_PATH, load_frequencies


TOP_GUESSES = 20
SEPARATOR = "*** RANKED GUESSES ***"


def print_candidates(session):
    for word in session.candidates:
        print(word)


def print_ranking(ranked, top):
    if top > 0:
        ranked = ranked[-top:]
    for word, entropy in ranked:
        print(f"{entropy} {word}")


def run(session, top, candidates_only, progress):
    print_candidates(session)
    print(SEPARATOR)

    if candidates_only:
        remaining = session.candidates
        guesses = [entry for entry in session.dictionary if entry.word in remaining]
        ranked = rank_guesses(guesses, remaining, progress=progress)
    else:
        ranked = session.rank(progress)
    print_ranking(ranked, top)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Narrow Wordle candidates by feedback and rank next guesses by entropy."
    )
    parser.add_argument(
        "-dictionary",
        type=str,
        default=str(DEFAULT_WORDS_PATH),
        help="Word frequency list: one word per line followed by frequency samples.",
    )
    parser.add_argument(
        "-observe",
        nargs=2,
        action="append",
        default=[],
        metavar=("WORD", "FEEDBACK"),
        help="A guess and its b/y/g feedback; repeat in the order played.",
    )
    parser.add_argument(
        "-top",
        type=int,
        default=TOP_GUESSES,
        help=f"Number of best guesses to print, 0 for all (default: {TOP_GUESSES}).",
    )
    parser.add_argument(
        "-candidates-only",
        action="store_true",
        help="Only suggest words that are still possible secrets.",
    )
    parser.add_argument(
        "-progress",
        action="store_true",
        help="Show a progress bar while ranking guesses.",
    )
    args = parser.parse_args(argv)
    if args.top < 0:
        parser.error("-top must be 0 (all) or a positive number")
    return args


def main(argv=None):
    args = parse_args(argv)

    try:
        entries = load_frequencies(args.dictionary)
        session = SolvingSession(entries)
        for word, feedback in args.observe:
            session.observe(word, feedback)
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    run(session, args.top, args.candidates_only, args.progress)


if __name__ == "__main__":
    main()
