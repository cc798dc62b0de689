from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class PdfText:
    """Text and document facts reported by a PDF engine."""

    text: str
    page_count: int
    info: dict[str, str] = field(default_factory=dict)


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_path: Path) -> PdfText:
        """Extract plain text from a PDF file.

        Args:
            pdf_path: Path to a PDF file on local disk.

        Returns:
            PdfText with pages joined by newlines, the page count and
            the document metadata.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """


def clean_metadata(raw: dict[str, object] | None) -> dict[str, str]:
    """Keep non-empty metadata entries as strings."""
    if not raw:
        return {}
    return {str(key): str(value) for key, value in raw.items() if value not in (None, "")}
