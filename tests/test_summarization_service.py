from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import httpx
import pytest
from openai import APIConnectionError

from backend.core.exceptions import GENERIC_FAILURE_MESSAGE, EmptyResponse, SummarizationFailed
from backend.nlp import openai_client
from backend.services.summarization_service import summarize
from backend.services.summary_config import SummaryConfig


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def client():
    fake = MagicMock()
    with patch.object(openai_client, "get_client", return_value=fake):
        yield fake


def test_returns_trimmed_text(client, long_text, default_config):
    client.chat.completions.create.return_value = _completion("  - point one\n- point two \n")

    assert summarize(long_text, default_config) == "- point one\n- point two"
    assert client.chat.completions.create.call_count == 1


def test_sends_prompt_with_fixed_sampling(client, long_text):
    client.chat.completions.create.return_value = _completion("ok")
    cfg = SummaryConfig(length="concise", tone="casual", format="bullets")

    summarize(long_text, cfg)

    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["temperature"] == 0.7
    assert kwargs["top_p"] == 0.8
    assert kwargs["extra_body"] == {"top_k": 40}
    assert kwargs["model"] == openai_client.settings.llm_model
    prompt = kwargs["messages"][0]["content"]
    assert "very brief and concise" in prompt
    assert long_text in prompt


@pytest.mark.parametrize("content", [None, "", "   \n"])
def test_empty_payload_raises_summarization_failed(client, long_text, default_config, content):
    client.chat.completions.create.return_value = _completion(content)

    with pytest.raises(SummarizationFailed) as exc:
        summarize(long_text, default_config)
    assert isinstance(exc.value.__cause__, EmptyResponse)


def test_no_choices_raises_summarization_failed(client, long_text, default_config):
    client.chat.completions.create.return_value = SimpleNamespace(choices=[])

    with pytest.raises(SummarizationFailed):
        summarize(long_text, default_config)


def test_transport_error_is_replaced_by_generic_message(client, long_text, default_config, caplog):
    request = httpx.Request("POST", "https://llm.invalid/v1/chat/completions")
    client.chat.completions.create.side_effect = APIConnectionError(message="socket exploded at 10.0.0.7", request=request)

    with pytest.raises(SummarizationFailed) as exc:
        summarize(long_text, default_config)

    assert exc.value.message == GENERIC_FAILURE_MESSAGE
    assert "socket exploded" not in str(exc.value)
    assert "APIConnectionError" in caplog.text


def test_any_exception_is_translated(long_text, default_config):
    with patch("backend.services.summarization_service.generate_text", side_effect=RuntimeError("boom")):
        with pytest.raises(SummarizationFailed) as exc:
            summarize(long_text, default_config)
    assert str(exc.value) == GENERIC_FAILURE_MESSAGE


def test_generate_text_raises_empty_response(client):
    client.chat.completions.create.return_value = _completion(None)

    with pytest.raises(EmptyResponse):
        openai_client.generate_text("prompt")


def test_real_client_sends_a_single_request_on_server_error(monkeypatch, long_text, default_config):
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(500, json={"error": {"message": "upstream down"}})

    monkeypatch.setattr(openai_client, "_client", None)
    monkeypatch.setattr(
        openai_client,
        "_build_http_client",
        lambda: httpx.Client(transport=httpx.MockTransport(handler), timeout=None),
    )

    with pytest.raises(SummarizationFailed):
        summarize(long_text, default_config)

    assert len(seen) == 1
    assert seen[0].endswith("/chat/completions")
