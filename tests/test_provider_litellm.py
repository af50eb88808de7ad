"""Tests for LiteLLM Provider."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from gigatools_agent.errors import TransportError
from gigatools_agent.providers.litellm_provider import LiteLLMProvider


class FakeStatusError(Exception):
    """Stands in for a LiteLLM exception carrying an HTTP status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


@pytest.fixture
def provider():
    """Create a default provider."""
    return LiteLLMProvider(api_key="test-key", default_model="test/model")


def _text_response(content: str) -> MagicMock:
    mock_response = MagicMock()
    mock_choice = MagicMock()
    mock_choice.message.content = content
    mock_choice.message.tool_calls = None
    mock_choice.finish_reason = "stop"
    mock_response.choices = [mock_choice]
    mock_response.usage.prompt_tokens = 10
    mock_response.usage.completion_tokens = 20
    mock_response.usage.total_tokens = 30
    return mock_response


@pytest.mark.asyncio
async def test_chat_basic(provider):
    """Test basic chat completion without tools."""
    with patch("litellm.acompletion", new_callable=AsyncMock) as mock_acompletion:
        mock_acompletion.return_value = _text_response("Hello there!")

        response = await provider.chat([{"role": "user", "content": "Hi"}])

        mock_acompletion.assert_called_once()
        kwargs = mock_acompletion.call_args.kwargs
        assert kwargs["model"] == "test/model"
        assert kwargs["api_key"] == "test-key"
        assert kwargs["messages"] == [{"role": "user", "content": "Hi"}]
        assert kwargs["num_retries"] == 3
        assert kwargs["extra_body"] == {"profanity_check": False}
        assert "tools" not in kwargs
        assert "api_base" not in kwargs

        assert response.content == "Hello there!"
        assert not response.has_tool_calls
        assert response.finish_reason == "stop"
        assert response.usage == {
            "prompt_tokens": 10,
            "completion_tokens": 20,
            "total_tokens": 30,
        }


@pytest.mark.asyncio
async def test_chat_passes_client_settings():
    provider = LiteLLMProvider(
        api_key="k",
        api_base="https://llm.example.com/v1",
        max_retries=5,
        profanity_check=True,
    )
    with patch("litellm.acompletion", new_callable=AsyncMock) as mock_acompletion:
        mock_acompletion.return_value = _text_response("ok")

        await provider.chat([{"role": "user", "content": "Hi"}])

        kwargs = mock_acompletion.call_args.kwargs
        assert kwargs["model"] == "gigachat/GigaChat-2-Max"
        assert kwargs["api_base"] == "https://llm.example.com/v1"
        assert kwargs["num_retries"] == 5
        assert kwargs["extra_body"] == {"profanity_check": True}


@pytest.mark.asyncio
async def test_chat_with_tool_calls(provider):
    """Test chat completion that returns tool calls."""
    mock_response = MagicMock()
    mock_choice = MagicMock()
    mock_choice.message.content = None

    mock_tc1 = MagicMock()
    mock_tc1.id = "call_1"
    mock_tc1.function.name = "add"
    mock_tc1.function.arguments = '{"value1": 3, "value2": 8}'

    mock_tc2 = MagicMock()
    mock_tc2.id = "call_2"
    mock_tc2.function.name = "bad_json_tool"
    mock_tc2.function.arguments = "not valid json"

    mock_tc3 = MagicMock()
    mock_tc3.id = "call_3"
    mock_tc3.function.name = "get_current_time"
    mock_tc3.function.arguments = ""

    mock_choice.message.tool_calls = [mock_tc1, mock_tc2, mock_tc3]
    mock_choice.finish_reason = "tool_calls"
    mock_response.choices = [mock_choice]
    mock_response.usage = None

    with patch("litellm.acompletion", new_callable=AsyncMock) as mock_acompletion:
        mock_acompletion.return_value = mock_response

        tools_schema = [{"type": "function", "function": {"name": "add"}}]
        response = await provider.chat(
            [{"role": "user", "content": "what is 3 plus 8"}],
            tools=tools_schema,
            model="specific/model",
        )

        assert mock_acompletion.call_args.kwargs["model"] == "specific/model"
        assert mock_acompletion.call_args.kwargs["tools"] == tools_schema

        assert response.has_tool_calls
        assert [tc.name for tc in response.tool_calls] == ["add", "bad_json_tool", "get_current_time"]
        assert response.tool_calls[0].arguments == {"value1": 3, "value2": 8}
        assert response.tool_calls[1].arguments == {"raw": "not valid json"}
        assert response.tool_calls[2].arguments == {}
        assert response.usage == {}


@pytest.mark.asyncio
async def test_chat_http_failure_raises_transport_error(provider):
    with patch("litellm.acompletion", new_callable=AsyncMock) as mock_acompletion:
        mock_acompletion.side_effect = FakeStatusError(401, "Authorization error: header is incorrect")

        with pytest.raises(TransportError) as exc_info:
            await provider.chat([{"role": "user", "content": "Hi"}])

    assert exc_info.value.status_code == 401
    assert exc_info.value.body == "Authorization error: header is incorrect"
    assert isinstance(exc_info.value.__cause__, FakeStatusError)


@pytest.mark.asyncio
async def test_chat_other_failures_propagate(provider):
    with patch("litellm.acompletion", new_callable=AsyncMock) as mock_acompletion:
        mock_acompletion.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await provider.chat([{"role": "user", "content": "Hi"}])


def test_get_default_model(provider):
    """Test getting default model."""
    assert provider.get_default_model() == "test/model"
