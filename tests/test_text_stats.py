import pytest

from backend.core.exceptions import EmptyInput, TooShort
from backend.services.text_stats import (
    SummaryResult,
    count_words,
    reading_time_minutes,
    reduction_percent,
    validate_input,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("", 0),
        ("   \n\t ", 0),
        ("one", 1),
        ("  two\twords  ", 2),
        ("a\n\nb   c", 3),
    ],
)
def test_count_words(text, expected):
    assert count_words(text) == expected


@pytest.mark.parametrize("text", ["", "    ", "\n\t"])
def test_validate_empty(text):
    with pytest.raises(EmptyInput):
        validate_input(text)


def test_validate_too_short():
    with pytest.raises(TooShort) as exc:
        validate_input("one two three four five six seven eight nine")
    assert exc.value.details == {"word_count": 9, "min_words": 10}


def test_validate_accepts_ten_words():
    assert validate_input(" one two three four five six seven eight nine ten ") == 10


def test_reduction_and_reading_time():
    result = SummaryResult(content="x", word_count=40, original_word_count=100)
    assert reduction_percent(result) == 60
    assert reading_time_minutes(result) == 1


def test_reduction_rounds_half_up():
    result = SummaryResult(content="x", word_count=1, original_word_count=8)
    assert reduction_percent(result) == 88


def test_reading_time_rounds_up():
    result = SummaryResult(content="x", word_count=201, original_word_count=1000)
    assert reading_time_minutes(result) == 2


def test_reduction_with_no_original_words():
    result = SummaryResult(content="", word_count=0, original_word_count=0)
    assert reduction_percent(result) == 0


def test_build_counts_both_texts(long_text):
    result = SummaryResult.build("short summary here", long_text)
    assert result.word_count == 3
    assert result.original_word_count == 12


def test_counts_cannot_be_negative():
    with pytest.raises(ValueError):
        SummaryResult(content="x", word_count=-1, original_word_count=3)
