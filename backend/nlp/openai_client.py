from __future__ import annotations

import logging
import time
from typing import Any, Optional

import httpx
from openai import OpenAI
from openai import APIConnectionError, APIStatusError

from backend.core.config import settings
from backend.core.exceptions import EmptyResponse

logger = logging.getLogger(__name__)

# Fixed sampling parameters for every summary request.
TEMPERATURE = 0.7
TOP_P = 0.8
TOP_K = 40

_client: Optional[OpenAI] = None


def _build_http_client() -> httpx.Client:
    return httpx.Client(timeout=None)


def get_client() -> OpenAI:
    """
    Build the SDK client on first use and reuse it afterwards.
    The key is read from settings once; no SDK retries and no client timeout,
    a request stays open until the endpoint answers.
    """
    global _client
    if _client is None:
        if not settings.api_key:
            logger.warning("API_KEY is not set; requests to %s will be rejected", settings.llm_base_url)
        _client = OpenAI(
            api_key=settings.api_key,
            base_url=settings.llm_base_url,
            max_retries=0,
            timeout=None,
            http_client=_build_http_client(),
        )
    return _client


def _response_text(resp: Any) -> str:
    choices = getattr(resp, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not isinstance(content, str):
        return ""
    return content


def generate_text(prompt: str, *, model: Optional[str] = None) -> str:
    """
    Send one prompt to the generative-text endpoint and return its raw text.

    Raises EmptyResponse when the endpoint answers without a text payload;
    transport and status errors from the SDK propagate unchanged.
    """
    use_model = model or settings.llm_model
    label = f"chat.completions.create (model={use_model})"

    t0 = time.perf_counter()
    try:
        resp = get_client().chat.completions.create(
            model=use_model,
            messages=[{"role": "user", "content": prompt}],
            temperature=TEMPERATURE,
            top_p=TOP_P,
            # not part of the OpenAI schema; OpenAI-compatible backends read it from the body
            extra_body={"top_k": TOP_K},
        )
    except APIStatusError as e:
        dt_ms = (time.perf_counter() - t0) * 1000.0
        logger.warning("%s status error (%.0f ms, status=%s)", label, dt_ms, getattr(e, "status_code", None))
        raise
    except APIConnectionError as e:
        dt_ms = (time.perf_counter() - t0) * 1000.0
        logger.warning("%s failed (%.0f ms): %s", label, dt_ms, type(e).__name__)
        raise

    dt_ms = (time.perf_counter() - t0) * 1000.0
    logger.info("%s succeeded (%.0f ms, prompt_chars=%d)", label, dt_ms, len(prompt))

    text = _response_text(resp)
    if not text.strip():
        raise EmptyResponse()
    return text
