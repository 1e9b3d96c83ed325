from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests

from backend.core.exceptions import EmptyInput, SummarizationFailed, TooShort
from backend.services.summary_config import SummaryConfig
from frontend.config_frontend import BACKEND_URL, HEALTH_TIMEOUT_SEC

logger = logging.getLogger(__name__)

# only precondition messages are shown as sent; anything else gets the generic message
_PRECONDITION_ERRORS = {
    EmptyInput.code: EmptyInput,
    TooShort.code: TooShort,
}


def unwrap_api_response(resp: requests.Response) -> Tuple[bool, Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    try:
        body = resp.json()
    except ValueError:
        return False, None, None

    if not isinstance(body, dict):
        return False, None, None

    ok = bool(body.get("ok", False))
    if ok:
        return True, body.get("data"), body.get("meta")
    return False, None, body.get("meta")


def extract_error(resp: requests.Response) -> Dict[str, Any]:
    try:
        body = resp.json()
        if isinstance(body, dict) and "error" in body:
            return body["error"]
    except ValueError:
        pass

    return {
        "code": f"http_{resp.status_code}",
        "message": (resp.text[:500] if resp.text else "Request failed"),
        "details": None,
    }


def request_summary(text: str, config: SummaryConfig, backend_url: str = BACKEND_URL) -> str:
    """
    POST the text and config snapshot to the backend and return the summary.
    Empty or too-short input surfaces as EmptyInput / TooShort with the
    backend message; every other failure is SummarizationFailed with the
    generic message.
    """
    payload = {"text": text, "config": config.model_dump(mode="json")}
    try:
        resp = requests.post(f"{backend_url}/summarization/summarize", json=payload, timeout=None)
    except requests.exceptions.RequestException as e:
        logger.error("Summary request to %s failed: %s", backend_url, e)
        raise SummarizationFailed() from e

    ok, data, meta = unwrap_api_response(resp)
    if not ok:
        err = extract_error(resp)
        logger.error(
            "Backend rejected summary request (status=%d, code=%s, request_id=%s)",
            resp.status_code, err.get("code"), (meta or {}).get("request_id"),
        )
        code = err.get("code")
        if code in _PRECONDITION_ERRORS:
            raise _PRECONDITION_ERRORS[code](err.get("message"))
        raise SummarizationFailed()

    summary = (data or {}).get("summary")
    if not isinstance(summary, str) or not summary.strip():
        raise SummarizationFailed()
    return summary


def _json_or_empty(resp: requests.Response) -> Dict[str, Any]:
    try:
        body = resp.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def fetch_health(backend_url: str = BACKEND_URL) -> Tuple[bool, Dict[str, Any]]:
    try:
        r = requests.get(f"{backend_url}/health", timeout=HEALTH_TIMEOUT_SEC)
    except requests.exceptions.RequestException as e:
        return False, {"error": str(e)}
    if r.status_code != 200:
        return False, {"status_code": r.status_code}
    return True, _json_or_empty(r)
