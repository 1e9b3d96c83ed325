from __future__ import annotations

from enum import Enum
from typing import Dict, Type

from backend.services.summary_config import (
    SummaryConfig,
    SummaryFormat,
    SummaryLength,
    SummaryTone,
)

LENGTH_CLAUSES: Dict[SummaryLength, str] = {
    SummaryLength.CONCISE: "very brief and concise, core message only",
    SummaryLength.BALANCED: "informative but condensed, main points clearly",
    SummaryLength.DETAILED: "thorough and comprehensive, covering major supporting details",
}

TONE_CLAUSES: Dict[SummaryTone, str] = {
    SummaryTone.PROFESSIONAL: "formal and professional",
    SummaryTone.CASUAL: "casual and easy to read",
    SummaryTone.ACADEMIC: "scholarly and analytical",
    SummaryTone.CREATIVE: "engaging and creative",
}

FORMAT_CLAUSES: Dict[SummaryFormat, str] = {
    SummaryFormat.PARAGRAPH: "a well-structured paragraph",
    SummaryFormat.BULLETS: "a clear list of bullet points",
}

INSTRUCTION_TEMPLATE = (
    "Summarize the following text using intelligence.\n"
    "The summary should be {length}.\n"
    "The tone should be {tone}.\n"
    "The output format should be {format}.\n"
    "\n"
    "Input Text:\n"
    "---\n"
    "{text}\n"
    "---\n"
    "\n"
    "Return only the summary text without any preamble or conversational fillers."
)


def _check_exhaustive(enum_cls: Type[Enum], table: Dict) -> None:
    missing = [m.value for m in enum_cls if m not in table]
    if missing:
        raise RuntimeError(f"{enum_cls.__name__} has no clause for: {missing}")


_check_exhaustive(SummaryLength, LENGTH_CLAUSES)
_check_exhaustive(SummaryTone, TONE_CLAUSES)
_check_exhaustive(SummaryFormat, FORMAT_CLAUSES)


def build_instruction(text: str, config: SummaryConfig) -> str:
    """Interpolate the three option clauses and the untouched input text."""
    return INSTRUCTION_TEMPLATE.format(
        length=LENGTH_CLAUSES[config.length],
        tone=TONE_CLAUSES[config.tone],
        format=FORMAT_CLAUSES[config.format],
        text=text,
    )
