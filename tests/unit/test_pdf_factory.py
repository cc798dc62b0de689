import pytest

from app.config.settings import Settings
from app.pdf.factory import PdfExtractorFactory
from app.pdf.pdfplumber_adapter import PdfPlumberAdapter
from app.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPdfExtractorFactory:
    @pytest.mark.parametrize(
        ("engine", "expected"),
        [
            ("pdfplumber", PdfPlumberAdapter),
            ("pymupdf", PyMuPdfAdapter),
            (" PdfPlumber ", PdfPlumberAdapter),
            ("PYMUPDF", PyMuPdfAdapter),
        ],
    )
    def test_resolves_engine(self, engine: str, expected: type) -> None:
        assert isinstance(PdfExtractorFactory.for_engine(engine), expected)

    def test_create_uses_settings(self) -> None:
        adapter = PdfExtractorFactory.create(Settings(pdf_engine="pymupdf"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_default_engine_is_pdfplumber(self) -> None:
        assert isinstance(PdfExtractorFactory.create(Settings()), PdfPlumberAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine 'poppler'"):
            PdfExtractorFactory.for_engine("poppler")

    def test_lists_engines(self) -> None:
        assert PdfExtractorFactory.engines() == ["pdfplumber", "pymupdf"]
