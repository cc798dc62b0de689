from pathlib import Path
from unittest.mock import patch

import pytest

from app.extraction.exceptions import OcrExtractionError
from app.extraction.models import BoundingBox
from app.ocr.tesseract_adapter import TesseractAdapter


def _tesseract_data() -> dict[str, list[object]]:
    # two words on line 1, one word on line 2, plus a layout row and a blank token
    return {
        "text": ["", "Grow", "faster", "Today", " "],
        "conf": ["-1", "91.25", "88", "70.5", "-1"],
        "left": [0, 10, 60, 10, 0],
        "top": [0, 5, 6, 30, 0],
        "width": [100, 40, 50, 45, 0],
        "height": [50, 12, 11, 12, 0],
        "block_num": [1, 1, 1, 1, 1],
        "par_num": [1, 1, 1, 1, 1],
        "line_num": [0, 1, 1, 2, 2],
    }


@pytest.fixture()
def image_path(tmp_path: Path, sample_png_bytes: bytes) -> Path:
    path = tmp_path / "image.png"
    path.write_bytes(sample_png_bytes)
    return path


class TestTesseractAdapter:
    def test_groups_words_into_lines(self, image_path: Path) -> None:
        with patch(
            "app.ocr.tesseract_adapter.pytesseract.image_to_data",
            return_value=_tesseract_data(),
        ):
            result = TesseractAdapter().recognize(image_path)

        assert result.text == "Grow faster\nToday"
        assert [w.text for w in result.words] == ["Grow", "faster", "Today"]
        assert [line.text for line in result.lines] == ["Grow faster", "Today"]

    def test_reports_rounded_confidences(self, image_path: Path) -> None:
        with patch(
            "app.ocr.tesseract_adapter.pytesseract.image_to_data",
            return_value=_tesseract_data(),
        ):
            result = TesseractAdapter().recognize(image_path)

        assert result.words[0].confidence == 91.25
        assert result.lines[0].confidence == round((91.25 + 88.0) / 2, 2)
        assert result.confidence == round((91.25 + 88.0 + 70.5) / 3, 2)

    def test_line_bbox_is_union_of_words(self, image_path: Path) -> None:
        with patch(
            "app.ocr.tesseract_adapter.pytesseract.image_to_data",
            return_value=_tesseract_data(),
        ):
            result = TesseractAdapter().recognize(image_path)

        assert result.words[0].bbox == BoundingBox(x0=10, y0=5, x1=50, y1=17)
        assert result.lines[0].bbox == BoundingBox(x0=10, y0=5, x1=110, y1=17)

    def test_passes_language(self, image_path: Path) -> None:
        with patch(
            "app.ocr.tesseract_adapter.pytesseract.image_to_data",
            return_value=_tesseract_data(),
        ) as mock_data:
            TesseractAdapter(language="deu").recognize(image_path)
        assert mock_data.call_args.kwargs["lang"] == "deu"

    def test_no_words_gives_empty_text(self, image_path: Path) -> None:
        with patch(
            "app.ocr.tesseract_adapter.pytesseract.image_to_data",
            return_value={"text": [], "conf": []},
        ):
            result = TesseractAdapter().recognize(image_path)
        assert result.text == ""
        assert result.confidence == 0.0
        assert result.words == []

    def test_wraps_engine_failure(self, image_path: Path) -> None:
        with patch(
            "app.ocr.tesseract_adapter.pytesseract.image_to_data",
            side_effect=RuntimeError("tesseract is not installed"),
        ):
            with pytest.raises(OcrExtractionError, match="tesseract recognition failed"):
                TesseractAdapter().recognize(image_path)

    def test_wraps_unreadable_image(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.png"
        path.write_bytes(b"not an image")
        with pytest.raises(OcrExtractionError):
            TesseractAdapter().recognize(path)
