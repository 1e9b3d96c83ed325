from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from backend.core.exceptions import EmptyInput, TooShort

MIN_WORDS = 10
WORDS_PER_MINUTE = 200


def count_words(text: str) -> int:
    cleaned = (text or "").strip()
    if not cleaned:
        return 0
    return len(cleaned.split())


def validate_input(text: str) -> int:
    """
    Check the text is worth a summary request and return its word count.
    Raises EmptyInput / TooShort; both are raised before any network call.
    """
    words = count_words(text)
    if words == 0:
        raise EmptyInput()
    if words < MIN_WORDS:
        raise TooShort(details={"word_count": words, "min_words": MIN_WORDS})
    return words


class SummaryResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str
    word_count: int = Field(..., ge=0)
    original_word_count: int = Field(..., ge=0)

    @classmethod
    def build(cls, content: str, submitted_text: str) -> "SummaryResult":
        return cls(
            content=content,
            word_count=count_words(content),
            original_word_count=count_words(submitted_text),
        )


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def reduction_percent(result: SummaryResult) -> int:
    orig = result.original_word_count
    if orig == 0:
        return 0
    return _round_half_up((orig - result.word_count) / orig * 100)


def reading_time_minutes(result: SummaryResult) -> int:
    return math.ceil(result.word_count / WORDS_PER_MINUTE)
