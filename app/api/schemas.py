"""Request bodies and response payload builders for the HTTP surface."""

from dataclasses import asdict
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.extraction.models import ExtractionResult, RecognizedUnit
from app.ingestion.models import IngestionReport


class AnalyzeBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str = ""
    content_type: str = Field(default="social-media", alias="contentType")
    platform: str = "general"


class QuickAnalyzeBody(BaseModel):
    text: str = ""


def _unit_payload(unit: RecognizedUnit) -> dict[str, Any]:
    return {"text": unit.text, "confidence": unit.confidence, "bbox": asdict(unit.bbox)}


def extraction_payload(file_name: str, result: ExtractionResult) -> dict[str, Any]:
    """Flatten an ExtractionResult into the upload response ``data`` object."""
    quality = result.quality
    data: dict[str, Any] = {
        "fileName": file_name,
        "engine": result.engine,
        "extractedText": result.text,
        "characterCount": quality.unit_counts.characters,
        "wordCount": quality.unit_counts.words,
        "lineCount": quality.unit_counts.lines,
    }
    if quality.page_count is not None:
        data["pageCount"] = quality.page_count
        data["info"] = quality.info
    if quality.confidence is not None:
        data["confidence"] = quality.confidence
        data["words"] = [_unit_payload(w) for w in quality.words]
        data["lines"] = [_unit_payload(line) for line in quality.lines]
    return data


def batch_payload(report: IngestionReport) -> dict[str, Any]:
    results: list[dict[str, Any]] = []
    for outcome in report.outcomes.values():
        if outcome.result is not None:
            entry = extraction_payload(outcome.display_name, outcome.result)
            entry.pop("words", None)
            entry.pop("lines", None)
            entry["success"] = True
        else:
            entry = {
                "fileName": outcome.display_name,
                "success": False,
                "error": outcome.error.user_message if outcome.error else "Unknown error",
            }
        entry["status"] = outcome.status.value
        results.append(entry)
    return {
        "totalFiles": report.total,
        "successfulExtractions": report.successful,
        "failedExtractions": report.failed,
        "aggregate": report.aggregate.value,
        "extractedText": report.current_text,
        "results": results,
        "rejected": [
            {"fileName": r.display_name, "reason": r.reason, "error": r.error.user_message}
            for r in report.rejected
        ],
    }
