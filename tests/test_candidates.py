from wordle_freq.candidates import apply_history, build_candidates, narrow
from wordle_freq.feedback import to_ternary
from wordle_freq.patterns import score
from wordle_freq.words import FrequencyEntry


WORDS = [
    "tares", "colin", "psych", "decay", "crane", "about", "level",
    "speed", "abide", "hello", "mappa", "maaph", "aaemp", "cynic",
]
HISTORY = [("tares", "bybyb"), ("colin", "ybbbb"), ("psych", "bbyyb")]


def make_entries(words, frequency=1e-3):
    return [FrequencyEntry(word, frequency) for word in words]


def test_build_candidates_admits_positive_likelihood():
    entries = [
        FrequencyEntry("decay", 1e-3),
        FrequencyEntry("which", 0.01),
        FrequencyEntry("zymic", 0.0),
    ]
    candidates = build_candidates(entries)
    assert set(candidates) == {"decay", "zymic"}
    assert candidates["decay"] > candidates["zymic"] > 0.0


def test_narrow_is_monotonic_and_consistent():
    candidates = build_candidates(make_entries(WORDS))
    before = len(candidates)
    observed = to_ternary("bybyb")

    removed = narrow("tares", observed, candidates)

    assert len(candidates) == before - removed
    assert len(candidates) <= before
    assert all(score("tares", word) == observed for word in candidates)


def test_narrow_is_idempotent():
    candidates = build_candidates(make_entries(WORDS))
    observed = to_ternary("bybbb")
    narrow("crane", observed, candidates)
    once = dict(candidates)

    assert narrow("crane", observed, candidates) == 0
    assert candidates == once


def test_narrow_to_empty_is_allowed():
    candidates = build_candidates(make_entries(["decay", "level"]))
    narrow("zzzzz", to_ternary("ggggg"), candidates)
    assert candidates == {}


def test_reference_history():
    candidates = apply_history(HISTORY, build_candidates(make_entries(WORDS)))
    assert set(candidates) == {"decay"}


def test_history_independent_of_storage_order():
    forward = apply_history(HISTORY, build_candidates(make_entries(WORDS)))

    backward = build_candidates(make_entries(WORDS[::-1]))
    for guess, feedback in HISTORY:
        narrow(guess, to_ternary(feedback), backward)

    assert forward == backward
