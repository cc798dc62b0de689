import pytest

from app.extraction.exceptions import (
    ArtifactTooLargeError,
    EmptyArtifactError,
    UnsupportedMediaTypeError,
)
from app.extraction.models import Artifact, ImageArtifact, PdfArtifact
from app.extraction.validator import normalize_media_type, validate_artifact


def _artifact(media_type: str, data: bytes = b"x", name: str = "file") -> Artifact:
    return Artifact(id="a1", display_name=name, media_type=media_type, data=data)


class TestDispatch:
    def test_pdf_resolves_to_pdf_variant(self) -> None:
        validated = validate_artifact(_artifact("application/pdf"))
        assert isinstance(validated, PdfArtifact)
        assert validated.engine == "pdf"

    @pytest.mark.parametrize(
        "media_type",
        ["image/jpeg", "image/jpg", "image/png", "image/gif", "image/bmp", "image/tiff"],
    )
    def test_supported_images_resolve_to_image_variant(self, media_type: str) -> None:
        validated = validate_artifact(_artifact(media_type))
        assert isinstance(validated, ImageArtifact)
        assert validated.engine == "ocr"

    def test_media_type_parameters_and_case_are_ignored(self) -> None:
        validated = validate_artifact(_artifact("Application/PDF; version=1.7"))
        assert isinstance(validated, PdfArtifact)

    @pytest.mark.parametrize("media_type", ["image/webp", "text/plain", "application/zip", ""])
    def test_unsupported_type_raises(self, media_type: str) -> None:
        with pytest.raises(UnsupportedMediaTypeError):
            validate_artifact(_artifact(media_type))

    def test_accepted_types_narrow_supported_ones(self) -> None:
        images_only = frozenset({"image/png", "image/jpeg"})
        with pytest.raises(UnsupportedMediaTypeError):
            validate_artifact(_artifact("application/pdf"), accepted_media_types=images_only)
        validated = validate_artifact(_artifact("image/PNG"), accepted_media_types=images_only)
        assert isinstance(validated, ImageArtifact)

    def test_accepted_types_cannot_widen_supported_ones(self) -> None:
        with pytest.raises(UnsupportedMediaTypeError):
            validate_artifact(
                _artifact("image/webp"), accepted_media_types=frozenset({"image/webp"})
            )

class TestSize:
    def test_over_cap_raises(self) -> None:
        with pytest.raises(ArtifactTooLargeError, match="max 4"):
            validate_artifact(_artifact("image/png", data=b"12345"), max_file_size_bytes=4)

    def test_exactly_at_cap_is_accepted(self) -> None:
        validated = validate_artifact(_artifact("image/png", data=b"1234"), max_file_size_bytes=4)
        assert validated.artifact.byte_size == 4

    def test_empty_artifact_raises(self) -> None:
        with pytest.raises(EmptyArtifactError):
            validate_artifact(_artifact("application/pdf", data=b""))

    def test_type_is_checked_before_size(self) -> None:
        with pytest.raises(UnsupportedMediaTypeError):
            validate_artifact(_artifact("text/plain", data=b"12345"), max_file_size_bytes=1)


class TestUserMessages:
    def test_user_message_differs_from_detail(self) -> None:
        with pytest.raises(UnsupportedMediaTypeError) as exc_info:
            validate_artifact(_artifact("text/plain", name="notes.txt"))
        assert "notes.txt" in str(exc_info.value)
        assert "notes.txt" not in exc_info.value.user_message


def test_normalize_media_type() -> None:
    assert normalize_media_type(" IMAGE/PNG ; q=1") == "image/png"
