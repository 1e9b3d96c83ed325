from __future__ import annotations

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Callable, Iterator, Optional, Union

from backend.core.exceptions import SummoraError
from backend.services.summary_config import SummaryConfig, set_option
from backend.services.text_stats import SummaryResult, count_words, validate_input

logger = logging.getLogger(__name__)

SummarizeFn = Callable[[str, SummaryConfig], str]

UNEXPECTED_ERROR = "An unexpected error occurred."


class Workspace:
    """
    Session state for one browser session: text box, options, busy flag,
    error banner and the last result. Only one request is in flight at a time.
    """

    def __init__(self) -> None:
        self.text: str = ""
        self.config: SummaryConfig = SummaryConfig()
        self.busy: bool = False
        self.error: Optional[str] = None
        self.result: Optional[SummaryResult] = None

    @property
    def live_word_count(self) -> int:
        return count_words(self.text)

    @property
    def can_submit(self) -> bool:
        return not self.busy and bool(self.text.strip())

    def set_option(self, field: str, value: Union[str, Enum]) -> SummaryConfig:
        self.config = set_option(self.config, field, value)
        return self.config

    def clear(self) -> None:
        self.text = ""
        self.result = None
        self.error = None

    @contextmanager
    def busy_guard(self) -> Iterator[None]:
        self.busy = True
        try:
            yield
        finally:
            self.busy = False

    def submit(self, summarize_fn: SummarizeFn) -> Optional[SummaryResult]:
        """
        Validate, call `summarize_fn` once, and store the outcome.
        Returns the new result, or None when nothing was produced.
        """
        if self.busy:
            logger.info("Submission ignored: a request is already in flight")
            return None

        text = self.text
        config = self.config

        try:
            validate_input(text)
        except SummoraError as e:
            self.error = e.message
            return None

        self.error = None
        with self.busy_guard():
            try:
                content = summarize_fn(text, config)
            except SummoraError as e:
                self.error = e.message
                return None
            except Exception:
                logger.exception("Summary request raised an unexpected error")
                self.error = UNEXPECTED_ERROR
                return None

        self.result = SummaryResult.build(content, text)
        return self.result
