from typing import ClassVar

from app.config.settings import Settings
from app.pdf.base import BasePdfExtractor
from app.pdf.pdfplumber_adapter import PdfPlumberAdapter
from app.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Resolves the configured PDF text engine.

    Both engines satisfy the same contract; pdfplumber is the default and
    PyMuPDF is the faster alternative for large documents.
    """

    ENGINES: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def engines(cls) -> list[str]:
        return sorted(cls.ENGINES)

    @classmethod
    def for_engine(cls, name: str) -> BasePdfExtractor:
        engine_cls = cls.ENGINES.get(name.strip().lower())
        if engine_cls is None:
            raise ValueError(f"Unknown PDF engine '{name}'. Choose from: {cls.engines()}")
        return engine_cls()

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        return cls.for_engine(settings.pdf_engine)
