from pathlib import Path

import pdfplumber

from app.extraction.exceptions import PdfExtractionError
from app.pdf.base import BasePdfExtractor, PdfText, clean_metadata


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, pdf_path: Path) -> PdfText:
        try:
            with pdfplumber.open(pdf_path) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
                info = clean_metadata(pdf.metadata)
            return PdfText(text="\n".join(pages).strip(), page_count=len(pages), info=info)
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
