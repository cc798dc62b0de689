"""Integration tests for PDF ingestion with real extraction engines.

No mocks for PDF parsing: reportlab builds the documents, pdfplumber and
PyMuPDF read them back.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from app.config.settings import Settings
from app.extraction.adapter import ExtractionAdapter
from app.extraction.exceptions import PdfExtractionError
from app.extraction.factory import build_extraction_adapter
from app.extraction.models import Artifact
from app.ingestion.models import ArtifactStatus, BatchAggregate
from app.ingestion.orchestrator import IngestionOrchestrator
from app.ocr.base import BaseOcrEngine
from app.pdf.pdfplumber_adapter import PdfPlumberAdapter


def _pdf_artifact(name: str, data: bytes) -> Artifact:
    return Artifact(id=name, display_name=name, media_type="application/pdf", data=data)


@pytest.fixture()
def adapter(tmp_path: Path) -> ExtractionAdapter:
    return ExtractionAdapter(
        pdf_extractor=PdfPlumberAdapter(),
        ocr_engine=MagicMock(spec=BaseOcrEngine),
        temp_dir=str(tmp_path),
    )


class TestSinglePdf:
    def test_five_page_pdf_counts(self, adapter: ExtractionAdapter, five_page_pdf_bytes: bytes) -> None:
        result = adapter.extract(five_page_pdf_bytes, "application/pdf", "r1", "report.pdf")
        assert result.engine == "pdf"
        assert result.quality.page_count == 5
        assert result.word_count == len(result.text.split())
        assert result.word_count == 15
        for page in range(1, 6):
            assert f"Engagement page {page}" in result.text

    @pytest.mark.parametrize("engine", ["pdfplumber", "pymupdf"])
    def test_both_engines_agree_on_words(
        self, tmp_path: Path, engine: str, five_page_pdf_bytes: bytes
    ) -> None:
        settings = Settings(pdf_engine=engine, upload_temp_dir=str(tmp_path))
        result = build_extraction_adapter(settings).extract(five_page_pdf_bytes, "application/pdf")
        assert result.quality.page_count == 5
        assert result.word_count == 15

    def test_blank_pdf_succeeds_with_empty_text(
        self, adapter: ExtractionAdapter, empty_pdf_bytes: bytes
    ) -> None:
        result = adapter.extract(empty_pdf_bytes, "application/pdf")
        assert result.text == ""
        assert result.word_count == 0
        assert result.quality.page_count == 1

    def test_corrupt_pdf_raises(self, adapter: ExtractionAdapter) -> None:
        with pytest.raises(PdfExtractionError):
            adapter.extract(b"%PDF-1.4 not really a pdf", "application/pdf")

    def test_temp_files_are_removed(
        self, tmp_path: Path, adapter: ExtractionAdapter, sample_pdf_bytes: bytes
    ) -> None:
        adapter.extract(sample_pdf_bytes, "application/pdf", display_name="a.pdf")
        with pytest.raises(PdfExtractionError):
            adapter.extract(b"%PDF-1.4 broken", "application/pdf", display_name="b.pdf")
        assert list(tmp_path.iterdir()) == []


class TestPdfBatch:
    def test_mixed_batch(
        self,
        adapter: ExtractionAdapter,
        sample_pdf_bytes: bytes,
        multi_page_pdf_bytes: bytes,
    ) -> None:
        orchestrator = IngestionOrchestrator(adapter, max_workers=3)
        report = orchestrator.ingest([
            _pdf_artifact("one.pdf", sample_pdf_bytes),
            _pdf_artifact("broken.pdf", b"%PDF-1.4 broken"),
            _pdf_artifact("two.pdf", multi_page_pdf_bytes),
        ])
        assert report.aggregate is BatchAggregate.PARTIAL
        assert report.outcomes["broken.pdf"].status is ArtifactStatus.ERROR
        assert report.outcomes["one.pdf"].status is ArtifactStatus.SUCCESS
        assert report.current_text is not None
        assert "Page two content" in report.current_text
        assert set(report.texts()) == {"one.pdf", "two.pdf"}
