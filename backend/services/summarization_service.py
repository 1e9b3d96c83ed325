import logging

from backend.core.exceptions import SummarizationFailed
from backend.nlp.openai_client import generate_text
from backend.nlp.prompts import build_instruction
from backend.services.summary_config import SummaryConfig

logger = logging.getLogger(__name__)


def summarize(text: str, config: SummaryConfig) -> str:
    """
    One outbound call per invocation, no retry and no caching.
    Every failure is logged in full and re-raised as SummarizationFailed
    with the generic user-facing message.
    """
    prompt = build_instruction(text, config)
    try:
        raw = generate_text(prompt)
    except Exception as e:
        logger.exception(
            "Summarization failed (%s, length=%s, tone=%s, format=%s)",
            type(e).__name__, config.length.value, config.tone.value, config.format.value,
        )
        raise SummarizationFailed() from e

    return raw.strip()
