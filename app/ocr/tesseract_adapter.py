"""OCR adapter on top of the Tesseract engine via pytesseract."""

from pathlib import Path
from typing import Any

import pytesseract
from PIL import Image

from app.extraction.exceptions import OcrExtractionError
from app.extraction.models import BoundingBox, RecognizedUnit
from app.ocr.base import BaseOcrEngine, OcrText

LineKey = tuple[int, int, int]


def _round_confidence(value: float) -> float:
    return round(value, 2)


def _union(boxes: list[BoundingBox]) -> BoundingBox:
    return BoundingBox(
        x0=min(b.x0 for b in boxes),
        y0=min(b.y0 for b in boxes),
        x1=max(b.x1 for b in boxes),
        y1=max(b.y1 for b in boxes),
    )


class TesseractAdapter(BaseOcrEngine):
    """Recognizes text with Tesseract and groups words into lines."""

    def __init__(self, *, language: str = "eng", tesseract_cmd: str = "") -> None:
        self._language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(self, image_path: Path) -> OcrText:
        try:
            with Image.open(image_path) as image:
                data = pytesseract.image_to_data(
                    image.convert("RGB"),
                    lang=self._language,
                    output_type=pytesseract.Output.DICT,
                )
        except OcrExtractionError:
            raise
        except Exception as exc:
            raise OcrExtractionError(f"tesseract recognition failed: {exc}") from exc
        return self._build_result(data)

    def _build_result(self, data: dict[str, list[Any]]) -> OcrText:
        words: list[RecognizedUnit] = []
        grouped: dict[LineKey, list[RecognizedUnit]] = {}

        for idx, token in enumerate(data.get("text", [])):
            text = (token or "").strip()
            if not text:
                continue
            try:
                confidence = float(data["conf"][idx])
            except (KeyError, TypeError, ValueError):
                continue
            if confidence < 0:
                continue
            left = int(data["left"][idx])
            top = int(data["top"][idx])
            bbox = BoundingBox(
                x0=left,
                y0=top,
                x1=left + int(data["width"][idx]),
                y1=top + int(data["height"][idx]),
            )
            word = RecognizedUnit(text=text, confidence=_round_confidence(confidence), bbox=bbox)
            words.append(word)
            key = (
                int(data["block_num"][idx]),
                int(data["par_num"][idx]),
                int(data["line_num"][idx]),
            )
            grouped.setdefault(key, []).append(word)

        lines = [
            RecognizedUnit(
                text=" ".join(w.text for w in line_words),
                confidence=_round_confidence(
                    sum(w.confidence for w in line_words) / len(line_words)
                ),
                bbox=_union([w.bbox for w in line_words]),
            )
            for line_words in grouped.values()
        ]
        confidence = (
            _round_confidence(sum(w.confidence for w in words) / len(words)) if words else 0.0
        )
        return OcrText(
            text="\n".join(line.text for line in lines),
            confidence=confidence,
            words=words,
            lines=lines,
        )
