"""HTTP surface: upload, analysis, health and capability endpoints."""

import uuid
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.analysis.analyzer import ContentAnalyzer
from app.analysis.exceptions import AnalysisError, AnalysisTimeoutError, EmptyContentError
from app.analysis.factory import AnalyzerFactory
from app.analysis.models import AnalysisMode, AnalysisOutcome
from app.analysis.request_builder import DEFAULT_PLATFORM
from app.api.schemas import AnalyzeBody, QuickAnalyzeBody, batch_payload, extraction_payload
from app.config.settings import Settings
from app.extraction.adapter import ExtractionAdapter
from app.extraction.exceptions import (
    ArtifactValidationError,
    EmptyBatchError,
    ExtractionError,
    UnsupportedMediaTypeError,
)
from app.extraction.factory import build_extraction_adapter
from app.extraction.models import Artifact
from app.extraction.validator import IMAGE_MEDIA_TYPES, PDF_MEDIA_TYPES, normalize_media_type
from app.ingestion.orchestrator import IngestionOrchestrator
from app.logging.logger import Log
from app.pdf.factory import PdfExtractorFactory


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "message": message})


def _to_artifact(upload: UploadFile, max_bytes: int) -> Artifact:
    # One byte past the limit is enough for validation to reject it.
    return Artifact(
        id=uuid.uuid4().hex,
        display_name=upload.filename or "upload",
        media_type=upload.content_type or "application/octet-stream",
        data=upload.file.read(max_bytes + 1),
    )


def _size_label(size_bytes: int) -> str:
    if size_bytes >= 1024 * 1024:
        return f"{size_bytes // (1024 * 1024)}MB"
    return f"{size_bytes // 1024}KB"


def _analysis_response(outcome: AnalysisOutcome) -> dict[str, Any]:
    return {"success": True, "data": outcome.to_dict()}


def create_app(
    settings: Settings | None = None,
    *,
    adapter: ExtractionAdapter | None = None,
    analyzer: ContentAnalyzer | None = None,
) -> FastAPI:
    """Build the FastAPI application with its collaborators."""
    settings = settings if settings is not None else Settings()
    adapter = adapter if adapter is not None else build_extraction_adapter(settings)
    analyzer = analyzer if analyzer is not None else AnalyzerFactory.create(settings)
    orchestrator = IngestionOrchestrator(
        adapter,
        max_workers=settings.max_extraction_workers,
        max_batch_files=settings.max_batch_files,
        accepted_media_types=IMAGE_MEDIA_TYPES,
    )

    app = FastAPI(title="Engagement Analyzer API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ArtifactValidationError)
    async def _validation_error(_: Request, exc: ArtifactValidationError) -> JSONResponse:
        Log.warning(f"Rejected upload: {exc}")
        return _error(400, exc.user_message, str(exc))

    @app.exception_handler(ExtractionError)
    async def _extraction_error(_: Request, exc: ExtractionError) -> JSONResponse:
        Log.error(f"Extraction engine failed: {exc}")
        return _error(500, exc.user_message, "The file could not be processed, please re-upload it")

    @app.exception_handler(EmptyContentError)
    async def _empty_content(_: Request, exc: EmptyContentError) -> JSONResponse:
        return _error(400, exc.user_message, "Provide some text to analyze")

    @app.exception_handler(AnalysisTimeoutError)
    async def _analysis_timeout(_: Request, exc: AnalysisTimeoutError) -> JSONResponse:
        Log.error(f"Analysis timed out: {exc}")
        return _error(504, exc.user_message, "The analysis service took too long to answer")

    @app.exception_handler(AnalysisError)
    async def _analysis_error(_: Request, exc: AnalysisError) -> JSONResponse:
        Log.error(f"Analysis failed: {exc}")
        return _error(500, exc.user_message, "The analysis service is unavailable, please retry")

    @app.get("/api/health")
    def health_check() -> dict[str, str]:
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    def _extract_single(
        upload: UploadFile | None,
        allowed: frozenset[str],
        kind: str,
    ) -> JSONResponse | dict[str, Any]:
        if upload is None:
            return _error(400, f"No {kind} file uploaded", f"Attach a {kind} file to the request")
        artifact = _to_artifact(upload, settings.max_file_size_bytes)
        if normalize_media_type(artifact.media_type) not in allowed:
            raise UnsupportedMediaTypeError(
                f"'{artifact.display_name}' ({artifact.media_type}) is not a {kind} file"
            )
        result = adapter.extract(
            artifact.data,
            artifact.media_type,
            artifact_id=artifact.id,
            display_name=artifact.display_name,
        )
        return {"success": True, "data": extraction_payload(artifact.display_name, result)}

    @app.post("/api/pdf/extract", response_model=None)
    def extract_pdf(pdf: UploadFile | None = File(None)) -> JSONResponse | dict[str, Any]:
        return _extract_single(pdf, PDF_MEDIA_TYPES, "PDF")

    @app.post("/api/ocr/extract", response_model=None)
    def extract_image(image: UploadFile | None = File(None)) -> JSONResponse | dict[str, Any]:
        return _extract_single(image, IMAGE_MEDIA_TYPES, "image")

    @app.post("/api/ocr/extract-multiple")
    def extract_images(images: list[UploadFile] | None = File(None)) -> dict[str, Any]:
        if not images:
            raise EmptyBatchError("No image files in request")
        artifacts = [_to_artifact(upload, settings.max_file_size_bytes) for upload in images]
        report = orchestrator.ingest(artifacts)
        return {"success": True, "data": batch_payload(report)}

    @app.post("/api/analysis/analyze")
    def analyze(body: AnalyzeBody) -> dict[str, Any]:
        outcome = analyzer.analyze(body.text, body.content_type, body.platform, AnalysisMode.FULL)
        return _analysis_response(outcome)

    @app.post("/api/analysis/quick-analyze")
    def quick_analyze(body: QuickAnalyzeBody) -> dict[str, Any]:
        outcome = analyzer.analyze(body.text, mode=AnalysisMode.QUICK)
        return _analysis_response(outcome)

    @app.get("/api/analysis/tips")
    def tips(platform: str = DEFAULT_PLATFORM) -> dict[str, Any]:
        outcome = analyzer.tips(platform)
        return {"success": True, "data": outcome.record.to_dict()}

    @app.get("/api/pdf/supported-formats")
    def pdf_formats() -> dict[str, Any]:
        return {
            "supportedFormats": sorted(PDF_MEDIA_TYPES),
            "maxFileSize": _size_label(settings.max_file_size_bytes),
            "engine": settings.pdf_engine,
            "availableEngines": PdfExtractorFactory.engines(),
            "features": [
                "Text extraction",
                "Page count detection",
                "Document metadata extraction",
                "Character and word count",
            ],
        }

    @app.get("/api/ocr/supported-formats")
    def ocr_formats() -> dict[str, Any]:
        return {
            "supportedFormats": sorted(IMAGE_MEDIA_TYPES),
            "maxFileSize": _size_label(settings.max_file_size_bytes),
            "maxFilesPerRequest": settings.max_batch_files,
            "features": [
                "Optical Character Recognition (OCR)",
                f"Recognition language: {settings.ocr_language}",
                "Confidence scoring",
                "Word and line-level extraction",
                "Bounding box information",
                "Batch processing support",
            ],
        }

    return app
