import pytest

from wordle_freq.feedback import (
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


def test_every_code_round_trips():
    for code in range(MAX_SCORE):
        assert encode_feedback(decode_feedback(code)) == code


def test_most_significant_digit_is_leftmost():
    assert to_ternary("gbbbb") == 2 * 81
    assert to_ternary("bbbby") == 1
    assert to_ternary("ygbyy") == 81 + 2 * 27 + 3 + 1
    assert to_ternary("bbbbb") == 0
    assert to_ternary("ggggg") == ALL_CORRECT


def test_decode_gives_digits():
    assert decode_feedback(0) == (FeedbackDigit.ABSENT,) * 5
    assert decode_feedback(5) == (
        FeedbackDigit.ABSENT,
        FeedbackDigit.ABSENT,
        FeedbackDigit.ABSENT,
        FeedbackDigit.PRESENT,
        FeedbackDigit.CORRECT,
    )


def test_decode_rejects_out_of_range():
    with pytest.raises(ValueError):
        decode_feedback(MAX_SCORE)
    with pytest.raises(ValueError):
        decode_feedback(-1)


def test_string_format():
    assert from_ternary(to_ternary("bygyb")) == "bygyb"
    assert parse_feedback(" GYBBY\n") == parse_feedback("gybby")
    assert format_feedback([2, 1, 0, 0, 1]) == "gybby"


@pytest.mark.parametrize("text", ["bygy", "bygybb", "bygyx", "12012"])
def test_parse_feedback_rejects_bad_strings(text):
    with pytest.raises(ValueError):
        parse_feedback(text)


def test_to_word():
    assert to_word(" Crane\n") == "crane"
    for bad in ["cran", "cranes", "cr4ne", "crân"]:
        with pytest.raises(ValueError):
            to_word(bad)
