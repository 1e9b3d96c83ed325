from __future__ import annotations

from typing import Any, Dict, Optional

GENERIC_FAILURE_MESSAGE = "Failed to generate summary. Please check your text or try again later."


class SummoraError(Exception):
    """Base error. `message` is always safe to show to an end user."""

    code = "summora_error"
    status_code = 500
    default_message = "Unexpected error."

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class InvalidOption(SummoraError):
    code = "invalid_option"
    status_code = 422
    default_message = "Unknown summary option."


class EmptyInput(SummoraError):
    code = "empty_input"
    status_code = 400
    default_message = "Please enter some text to summarize."


class TooShort(SummoraError):
    code = "too_short"
    status_code = 400
    default_message = "Text is too short to summarize effectively. Try at least 10 words."


class EmptyResponse(SummoraError):
    """The endpoint answered but carried no text."""

    code = "empty_response"
    status_code = 502
    default_message = "Empty response from AI"


class SummarizationFailed(SummoraError):
    code = "summarization_failed"
    status_code = 502
    default_message = GENERIC_FAILURE_MESSAGE
