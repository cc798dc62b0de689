from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from app.analysis.exceptions import AnalysisBackendError, AnalysisTimeoutError
from app.analysis.openai_client_adapter import OpenAIClientAdapter


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _generate(mock_client: MagicMock, system_prompt: str = "system") -> str:
    with patch(
        "app.analysis.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)
        return adapter.generate(
            model="m",
            temperature=0.7,
            system_prompt=system_prompt,
            user_prompt="user",
        )


class TestOpenAIClientAdapter:
    def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response('{"ok": true}')
        assert _generate(mock_client) == '{"ok": true}'

    def test_sends_system_and_user_messages(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("x")
        _generate(mock_client)
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "m"
        assert kwargs["temperature"] == 0.7
        assert kwargs["messages"] == [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "user"},
        ]

    def test_omits_blank_system_prompt(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("x")
        _generate(mock_client, system_prompt="")
        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages == [{"role": "user", "content": "user"}]

    def test_client_is_built_without_retries(self) -> None:
        with patch("app.analysis.openai_client_adapter.openai.OpenAI") as mock_openai:
            OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url="https://x/v1")
        mock_openai.assert_called_once_with(
            api_key="k",
            timeout=30,
            base_url="https://x/v1",
            max_retries=0,
        )

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        with pytest.raises(AnalysisBackendError, match="empty response"):
            _generate(mock_client)

    def test_raises_error_for_no_choices(self) -> None:
        mock_client = MagicMock()
        response = MagicMock()
        response.choices = []
        mock_client.chat.completions.create.return_value = response
        with pytest.raises(AnalysisBackendError, match="no choices"):
            _generate(mock_client)

    def test_raises_backend_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with pytest.raises(AnalysisBackendError, match="network error") as exc_info:
            _generate(mock_client)
        assert not isinstance(exc_info.value, AnalysisTimeoutError)

    def test_raises_timeout_error_on_api_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APITimeoutError(
            request=MagicMock()
        )
        with pytest.raises(AnalysisTimeoutError, match="within 30s"):
            _generate(mock_client)

    def test_raises_timeout_error_on_httpx_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(AnalysisTimeoutError):
            _generate(mock_client)

    def test_raises_backend_error_on_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="server error",
            request=MagicMock(),
            body=None,
        )
        with pytest.raises(AnalysisBackendError, match="API error"):
            _generate(mock_client)
