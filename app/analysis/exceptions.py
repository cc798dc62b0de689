class AnalysisError(Exception):
    """Base exception for content analysis failures."""

    user_message = "Failed to analyze content"


class EmptyContentError(AnalysisError):
    """Raised when the text to analyze is empty after trimming whitespace."""

    user_message = "Text content is required"


class PromptLoadError(AnalysisError):
    """Raised when a bundled prompt or response shape cannot be read."""


class AnalysisBackendError(AnalysisError):
    """Raised when the generative backend call fails."""


class AnalysisTimeoutError(AnalysisBackendError):
    """Raised when the generative backend does not answer within the time bound."""

    user_message = "Analysis timed out, please try again"
