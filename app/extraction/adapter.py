"""Single entry point that turns artifact bytes into an ExtractionResult."""

from pathlib import Path, PurePath

from app.extraction.models import (
    Artifact,
    ExtractionQuality,
    ExtractionResult,
    ImageArtifact,
    PdfArtifact,
    UnitCounts,
    ValidatedArtifact,
)
from app.extraction.temp_storage import scoped_temp_file
from app.extraction.validator import DEFAULT_MAX_FILE_SIZE_BYTES, validate_artifact
from app.logging.logger import Log
from app.ocr.base import BaseOcrEngine
from app.pdf.base import BasePdfExtractor


def count_words(text: str) -> int:
    """Count whitespace-delimited non-empty tokens."""
    return len(text.split())


def count_lines(text: str) -> int:
    return sum(1 for line in text.splitlines() if line.strip())


class ExtractionAdapter:
    """Validates an artifact, stages it on disk and runs the matching engine."""

    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        ocr_engine: BaseOcrEngine,
        max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES,
        temp_dir: str | None = None,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._ocr_engine = ocr_engine
        self._max_file_size_bytes = max_file_size_bytes
        self._temp_dir = temp_dir

    @property
    def max_file_size_bytes(self) -> int:
        return self._max_file_size_bytes

    def validate(
        self,
        artifact: Artifact,
        accepted_media_types: frozenset[str] | None = None,
    ) -> ValidatedArtifact:
        return validate_artifact(artifact, self._max_file_size_bytes, accepted_media_types)

    def extract(
        self,
        data: bytes,
        media_type: str,
        artifact_id: str = "",
        display_name: str = "",
    ) -> ExtractionResult:
        """Extract text from raw bytes with a declared media type.

        Raises:
            ArtifactValidationError: on unsupported type, oversize or empty input.
            EngineError: if the engine fails on valid input.
        """
        artifact = Artifact(
            id=artifact_id,
            display_name=display_name or artifact_id,
            media_type=media_type,
            data=data,
        )
        return self.extract_artifact(self.validate(artifact))

    def extract_artifact(self, validated: ValidatedArtifact) -> ExtractionResult:
        """Run the engine resolved at validation time."""
        artifact = validated.artifact
        suffix = PurePath(artifact.display_name).suffix
        with scoped_temp_file(
            artifact.data,
            prefix=f"{validated.engine}-",
            suffix=suffix,
            directory=self._temp_dir,
        ) as path:
            if isinstance(validated, PdfArtifact):
                result = self._run_pdf(artifact.id, path)
            elif isinstance(validated, ImageArtifact):
                result = self._run_ocr(artifact.id, path)
            else:
                raise TypeError(f"Unknown artifact variant: {type(validated).__name__}")
        Log.info(
            f"Extracted {result.character_count} chars ({result.word_count} words) "
            f"from '{artifact.display_name}' via {result.engine}"
        )
        return result

    def _run_pdf(self, artifact_id: str, path: Path) -> ExtractionResult:
        pdf = self._pdf_extractor.extract(path)
        quality = ExtractionQuality(
            unit_counts=UnitCounts(
                words=count_words(pdf.text),
                lines=count_lines(pdf.text),
                characters=len(pdf.text),
            ),
            page_count=pdf.page_count,
            info=pdf.info,
        )
        return ExtractionResult(artifact_id=artifact_id, text=pdf.text, quality=quality, engine="pdf")

    def _run_ocr(self, artifact_id: str, path: Path) -> ExtractionResult:
        ocr = self._ocr_engine.recognize(path)
        quality = ExtractionQuality(
            unit_counts=UnitCounts(
                words=len(ocr.words),
                lines=len(ocr.lines),
                characters=len(ocr.text),
            ),
            confidence=ocr.confidence,
            words=ocr.words,
            lines=ocr.lines,
        )
        return ExtractionResult(artifact_id=artifact_id, text=ocr.text, quality=quality, engine="ocr")
