from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from app.extraction.models import RecognizedUnit


@dataclass(frozen=True)
class OcrText:
    """Recognized text with page-level confidence and unit breakdown."""

    text: str
    confidence: float
    words: list[RecognizedUnit] = field(default_factory=list)
    lines: list[RecognizedUnit] = field(default_factory=list)


class BaseOcrEngine(ABC):
    """Contract for all OCR adapters."""

    @abstractmethod
    def recognize(self, image_path: Path) -> OcrText:
        """Recognize text in an image file.

        Raises:
            OcrExtractionError: if recognition fails for any reason.
        """
