from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from backend.api.schemas import ApiResponse, Meta
from backend.core.config import settings
from backend.services.summarization_service import summarize
from backend.services.summary_config import SummaryConfig, option_choices
from backend.services.text_stats import (
    SummaryResult,
    reading_time_minutes,
    reduction_percent,
    validate_input,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/summarization",
    tags=["Summarization"],
)


class SummarizationRequest(BaseModel):
    text: str = Field(..., description="Input text to summarize (at least 10 words).")
    config: SummaryConfig = Field(default_factory=SummaryConfig, description="Length, tone and format.")


class SummarizationResponse(BaseModel):
    summary: str
    word_count: int
    original_word_count: int
    reduction_percent: int
    reading_time_minutes: int


@router.post("/summarize", response_model=ApiResponse[SummarizationResponse])
def summarize_text(request: Request, payload: SummarizationRequest) -> ApiResponse[SummarizationResponse]:
    original_words = validate_input(payload.text)
    cfg = payload.config

    logger.info(
        "Summarization request received (words=%d, length=%s, tone=%s, format=%s)",
        original_words, cfg.length.value, cfg.tone.value, cfg.format.value,
    )

    content = summarize(payload.text, cfg)
    result = SummaryResult.build(content, payload.text)

    logger.info(
        "Summarization completed (summary_words=%d, original_words=%d)",
        result.word_count, result.original_word_count,
    )

    data = SummarizationResponse(
        summary=result.content,
        word_count=result.word_count,
        original_word_count=result.original_word_count,
        reduction_percent=reduction_percent(result),
        reading_time_minutes=reading_time_minutes(result),
    )

    meta = Meta(
        request_id=request.state.request_id,
        version=settings.app_version,
        mode="llm",
        model=settings.llm_model,
    )

    return ApiResponse(data=data, meta=meta)


@router.get("/options")
def options() -> Dict[str, Any]:
    """Allowed values and defaults for each summary option."""
    return option_choices()
