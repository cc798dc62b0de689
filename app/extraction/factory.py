from app.config.settings import Settings
from app.extraction.adapter import ExtractionAdapter
from app.ocr.tesseract_adapter import TesseractAdapter
from app.pdf.factory import PdfExtractorFactory


def build_extraction_adapter(settings: Settings) -> ExtractionAdapter:
    """Build an ExtractionAdapter with the configured PDF and OCR engines."""
    return ExtractionAdapter(
        pdf_extractor=PdfExtractorFactory.create(settings),
        ocr_engine=TesseractAdapter(
            language=settings.ocr_language,
            tesseract_cmd=settings.tesseract_cmd,
        ),
        max_file_size_bytes=settings.max_file_size_bytes,
        temp_dir=settings.upload_temp_dir or None,
    )
