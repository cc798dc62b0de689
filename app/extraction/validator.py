"""Validates uploaded artifacts and resolves them to an extraction engine."""

from app.extraction.exceptions import (
    ArtifactTooLargeError,
    EmptyArtifactError,
    UnsupportedMediaTypeError,
)
from app.extraction.models import Artifact, ImageArtifact, PdfArtifact, ValidatedArtifact

PDF_MEDIA_TYPES = frozenset({"application/pdf"})
IMAGE_MEDIA_TYPES = frozenset({
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/bmp",
    "image/tiff",
})
DEFAULT_MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024


def normalize_media_type(media_type: str) -> str:
    """Lowercase a media type and drop parameters such as ``; charset=...``."""
    return media_type.split(";", 1)[0].strip().lower()


def validate_artifact(
    artifact: Artifact,
    max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES,
    accepted_media_types: frozenset[str] | None = None,
) -> ValidatedArtifact:
    """Check type and size, then tag the artifact with its engine.

    ``accepted_media_types`` narrows the supported types for one caller,
    e.g. an image-only upload field.

    Raises:
        UnsupportedMediaTypeError: if no engine handles the media type.
        ArtifactTooLargeError: if the artifact exceeds ``max_file_size_bytes``.
        EmptyArtifactError: if the artifact has no bytes.
    """
    media_type = normalize_media_type(artifact.media_type)
    supported = media_type in PDF_MEDIA_TYPES or media_type in IMAGE_MEDIA_TYPES
    if not supported or (
        accepted_media_types is not None and media_type not in accepted_media_types
    ):
        raise UnsupportedMediaTypeError(
            f"Unsupported media type '{artifact.media_type}' for '{artifact.display_name}'"
        )
    if artifact.byte_size > max_file_size_bytes:
        raise ArtifactTooLargeError(
            f"'{artifact.display_name}' is {artifact.byte_size} bytes "
            f"(max {max_file_size_bytes})"
        )
    if artifact.byte_size == 0:
        raise EmptyArtifactError(f"'{artifact.display_name}' is empty")
    if media_type in PDF_MEDIA_TYPES:
        return PdfArtifact(artifact=artifact)
    return ImageArtifact(artifact=artifact)
