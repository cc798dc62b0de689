"""Builds bounded prompts for the generative backend."""

from app.analysis.exceptions import EmptyContentError
from app.analysis.models import AnalysisMode, AnalysisRequest
from app.analysis.prompt_loader import load_prompt_template, load_response_shape

TRUNCATION_MARKER = "…"
DEFAULT_CONTENT_TYPE = "social-media"
DEFAULT_PLATFORM = "general"

SYSTEM_PROMPTS: dict[AnalysisMode, str] = {
    AnalysisMode.FULL: (
        "You are a social media content optimization expert with deep knowledge of "
        "engagement strategies across all major platforms. Provide practical, "
        "data-driven advice."
    ),
    AnalysisMode.QUICK: "You are a social media expert. Provide quick, actionable feedback.",
    AnalysisMode.TIPS: "You are a social media marketing expert.",
}


def truncate(text: str, limit: int) -> tuple[str, bool]:
    """Cut ``text`` to ``limit`` chars plus a one-char marker when it is longer."""
    if len(text) <= limit:
        return text, False
    return text[:limit] + TRUNCATION_MARKER, True


class AnalysisRequestBuilder:
    """Turns user text and analysis parameters into an AnalysisRequest."""

    def __init__(self, full_text_limit: int = 4000, quick_text_limit: int = 2000) -> None:
        self._limits = {
            AnalysisMode.FULL: full_text_limit,
            AnalysisMode.QUICK: quick_text_limit,
        }
        self._templates = {mode: load_prompt_template(mode) for mode in AnalysisMode}
        self._shapes = {mode: load_response_shape(mode) for mode in AnalysisMode}

    def limit_for(self, mode: AnalysisMode) -> int:
        return self._limits[mode]

    def build(
        self,
        text: str,
        content_type: str = DEFAULT_CONTENT_TYPE,
        platform: str = DEFAULT_PLATFORM,
        mode: AnalysisMode | str = AnalysisMode.FULL,
    ) -> AnalysisRequest:
        """Build a request, truncating the text to the mode's cap.

        Raises:
            EmptyContentError: if ``text`` is empty after trimming whitespace.
        """
        if not text or not text.strip():
            raise EmptyContentError("Text content is empty")
        mode = AnalysisMode(mode)
        if mode not in self._limits:
            raise ValueError(f"Mode '{mode.value}' takes no text, use build_tips()")
        content_type = content_type.strip() or DEFAULT_CONTENT_TYPE
        platform = platform.strip() or DEFAULT_PLATFORM

        bounded, was_truncated = truncate(text, self._limits[mode])
        prompt = self._templates[mode].format(
            content_type=content_type,
            platform=platform,
            text=bounded,
            response_shape=self._shapes[mode],
        )
        return AnalysisRequest(
            text=bounded,
            content_type=content_type,
            platform=platform,
            mode=mode,
            was_truncated=was_truncated,
            prompt=prompt,
            system_prompt=SYSTEM_PROMPTS[mode],
        )

    def build_tips(self, platform: str = DEFAULT_PLATFORM) -> AnalysisRequest:
        """Build a request for general engagement tips. No user text is sent."""
        platform = platform.strip() or DEFAULT_PLATFORM
        prompt = self._templates[AnalysisMode.TIPS].format(
            platform=platform,
            response_shape=self._shapes[AnalysisMode.TIPS],
        )
        return AnalysisRequest(
            text="",
            content_type="tips",
            platform=platform,
            mode=AnalysisMode.TIPS,
            was_truncated=False,
            prompt=prompt,
            system_prompt=SYSTEM_PROMPTS[AnalysisMode.TIPS],
        )
