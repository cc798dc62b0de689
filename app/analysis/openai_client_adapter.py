import httpx
import openai

from app.analysis.client_base import BaseGenerativeClient
from app.analysis.exceptions import AnalysisBackendError, AnalysisTimeoutError


class OpenAIClientAdapter(BaseGenerativeClient):
    """Generative client built on the OpenAI-compatible chat API.

    Retries are disabled so ``timeout_seconds`` bounds the whole call.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def generate(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        messages = [{"role": "user", "content": user_prompt}]
        if system_prompt:
            messages.insert(0, {"role": "system", "content": system_prompt})
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=messages,  # type: ignore[arg-type]
            )
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise AnalysisTimeoutError(
                f"AI provider did not answer within {self._timeout_seconds}s: {exc}"
            ) from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            raise AnalysisBackendError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AnalysisBackendError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AnalysisBackendError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AnalysisBackendError("AI returned empty response")
        return content
