from pathlib import Path

import pymupdf

from app.extraction.exceptions import PdfExtractionError
from app.pdf.base import BasePdfExtractor, PdfText, clean_metadata


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, pdf_path: Path) -> PdfText:
        try:
            with pymupdf.open(pdf_path, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
                info = clean_metadata(doc.metadata)
            return PdfText(text="\n".join(pages).strip(), page_count=len(pages), info=info)
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
