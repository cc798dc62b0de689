from abc import ABC, abstractmethod


class BaseGenerativeClient(ABC):
    """Contract for provider-specific generative text clients."""

    @abstractmethod
    def generate(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return the provider response as plain text.

        Raises:
            AnalysisTimeoutError: if the provider exceeds the time bound.
            AnalysisBackendError: on any other provider failure.
        """
