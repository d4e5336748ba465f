"""
Summary: Validate Ollama request shape and error mapping without a live server.
Why: Transport failures and malformed bodies must surface as distinct model errors.
"""

from __future__ import annotations

from typing import Any

import pytest
import requests
from pytest_mock import MockerFixture

from music_agent.errors import LLMRequestError, LLMResponseError
from music_agent.platform.llm import DEFAULT_MODEL, OllamaClient


def _client(mocker: MockerFixture, **response_attrs: Any) -> tuple[OllamaClient, Any]:
    session = mocker.Mock(spec=requests.Session)
    response = mocker.Mock()
    response.ok = True
    response.status_code = 200
    response.text = ""
    for key, value in response_attrs.items():
        setattr(response, key, value)
    session.post.return_value = response
    return OllamaClient("http://localhost:11434/", session=session), session


def test_client_defaults() -> None:
    client = OllamaClient("http://localhost:11434")

    assert client.provider_name() == "Ollama"
    assert client.model == DEFAULT_MODEL == "llama3.2"


def test_with_model_keeps_endpoint() -> None:
    client = OllamaClient("http://localhost:11434").with_model("mistral")

    assert client.model == "mistral"
    assert client.base_url == "http://localhost:11434"


def test_generate_posts_non_streaming_request(mocker: MockerFixture) -> None:
    client, session = _client(mocker)
    session.post.return_value.json.return_value = {"response": "Looks good", "done": True}

    answer = client.generate("Describe this track")

    assert answer == "Looks good"
    args, kwargs = session.post.call_args
    assert args[0] == "http://localhost:11434/api/generate"
    assert kwargs["json"] == {"model": "llama3.2", "prompt": "Describe this track", "stream": False}


def test_connection_failure_is_request_error(mocker: MockerFixture) -> None:
    client, session = _client(mocker)
    session.post.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(LLMRequestError, match="Is Ollama running"):
        _ = client.generate("prompt")


def test_error_status_is_request_error(mocker: MockerFixture) -> None:
    client, _ = _client(mocker, ok=False, status_code=404, text='{"error":"model not found"}')

    with pytest.raises(LLMRequestError, match="404") as excinfo:
        _ = client.generate("prompt")

    assert "model not found" in str(excinfo.value)


def test_non_json_body_is_response_error(mocker: MockerFixture) -> None:
    client, session = _client(mocker)
    session.post.return_value.json.side_effect = ValueError("Expecting value")

    with pytest.raises(LLMResponseError):
        _ = client.generate("prompt")


@pytest.mark.parametrize("body", [{"done": True}, {"response": 42}, ["response"]])
def test_missing_response_text_is_response_error(mocker: MockerFixture, body: Any) -> None:
    client, session = _client(mocker)
    session.post.return_value.json.return_value = body

    with pytest.raises(LLMResponseError):
        _ = client.generate("prompt")
