from dataclasses import dataclass, field
from typing import Literal

EngineName = Literal["pdf", "ocr"]


@dataclass(frozen=True)
class Artifact:
    """A single uploaded file as received from the caller."""

    id: str
    display_name: str
    media_type: str
    data: bytes = field(repr=False)

    @property
    def byte_size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class PdfArtifact:
    """Artifact resolved to the PDF text engine."""

    artifact: Artifact
    engine: EngineName = "pdf"


@dataclass(frozen=True)
class ImageArtifact:
    """Artifact resolved to the OCR engine."""

    artifact: Artifact
    engine: EngineName = "ocr"


ValidatedArtifact = PdfArtifact | ImageArtifact


@dataclass(frozen=True)
class BoundingBox:
    """Pixel rectangle of a recognized unit (left/top to right/bottom)."""

    x0: int
    y0: int
    x1: int
    y1: int


@dataclass(frozen=True)
class RecognizedUnit:
    """A word or a line as reported by the OCR engine."""

    text: str
    confidence: float
    bbox: BoundingBox


@dataclass(frozen=True)
class UnitCounts:
    words: int = 0
    lines: int = 0
    characters: int = 0


@dataclass(frozen=True)
class ExtractionQuality:
    """Engine-reported quality metadata for one extraction."""

    unit_counts: UnitCounts = field(default_factory=UnitCounts)
    confidence: float | None = None
    page_count: int | None = None
    info: dict[str, str] = field(default_factory=dict)
    words: list[RecognizedUnit] = field(default_factory=list)
    lines: list[RecognizedUnit] = field(default_factory=list)


@dataclass(frozen=True)
class ExtractionResult:
    """Output of one extraction: text plus quality metadata."""

    artifact_id: str
    text: str
    quality: ExtractionQuality
    engine: EngineName

    @property
    def word_count(self) -> int:
        return self.quality.unit_counts.words

    @property
    def character_count(self) -> int:
        return self.quality.unit_counts.characters
