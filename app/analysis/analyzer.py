"""AI-powered engagement analysis: build prompt, call backend, normalize."""

from app.analysis.client_base import BaseGenerativeClient
from app.analysis.models import AnalysisMode, AnalysisOutcome, AnalysisRequest
from app.analysis.normalizer import ResponseNormalizer
from app.analysis.request_builder import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_PLATFORM,
    AnalysisRequestBuilder,
)
from app.logging.logger import Log


class ContentAnalyzer:
    """Runs one analysis against a generative backend."""

    def __init__(
        self,
        *,
        client: BaseGenerativeClient,
        model: str,
        temperature: float = 0.7,
        builder: AnalysisRequestBuilder | None = None,
        normalizer: ResponseNormalizer | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._builder = builder if builder is not None else AnalysisRequestBuilder()
        self._normalizer = normalizer if normalizer is not None else ResponseNormalizer()

    def analyze(
        self,
        text: str,
        content_type: str = DEFAULT_CONTENT_TYPE,
        platform: str = DEFAULT_PLATFORM,
        mode: AnalysisMode | str = AnalysisMode.FULL,
    ) -> AnalysisOutcome:
        """Analyze ``text`` and return the normalized record.

        Raises:
            EmptyContentError: before any backend call, if ``text`` is blank.
            AnalysisTimeoutError: if the backend exceeds its time bound.
            AnalysisBackendError: on any other backend failure.
        """
        request = self._builder.build(text, content_type, platform, mode)
        if request.was_truncated:
            Log.info(
                f"Analysis text truncated from {len(text)} to "
                f"{self._builder.limit_for(request.mode)} chars"
            )
        return self._run(request, original_text=text)

    def tips(self, platform: str = DEFAULT_PLATFORM) -> AnalysisOutcome:
        """Ask the backend for general engagement tips.

        Raises:
            AnalysisTimeoutError: if the backend exceeds its time bound.
            AnalysisBackendError: on any other backend failure.
        """
        return self._run(self._builder.build_tips(platform), original_text="")

    def _run(self, request: AnalysisRequest, original_text: str) -> AnalysisOutcome:
        Log.debug(f"Analysis prompt:\n{request.prompt}")
        raw_response = self._client.generate(
            model=self._model,
            temperature=self._temperature,
            system_prompt=request.system_prompt,
            user_prompt=request.prompt,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        record = self._normalizer.normalize(raw_response, request.mode)
        kind = "raw fallback" if record.is_fallback else "structured"
        Log.info(f"Analysis complete ({request.mode.value}, {kind})")
        return AnalysisOutcome(record=record, request=request, original_text=original_text)
