class ExtractionError(Exception):
    """Base exception for all extraction-related errors.

    ``str(exc)`` carries diagnostic detail for logs; ``user_message`` is the
    text that may be shown to the person who uploaded the file.
    """

    user_message = "Failed to extract text from file"


class ArtifactValidationError(ExtractionError):
    """Raised when an artifact is rejected before any engine runs."""

    user_message = "Invalid file"


class UnsupportedMediaTypeError(ArtifactValidationError):
    """Raised when the declared media type has no extraction engine."""

    user_message = (
        "Invalid file type. Only PDF and image files "
        "(JPEG, PNG, GIF, BMP, TIFF) are allowed."
    )


class ArtifactTooLargeError(ArtifactValidationError):
    """Raised when an artifact exceeds the configured size cap."""

    user_message = "File is too large"


class EmptyArtifactError(ArtifactValidationError):
    """Raised when an artifact carries no bytes."""

    user_message = "Uploaded file is empty"


class DuplicateArtifactError(ArtifactValidationError):
    """Raised when a batch already holds an artifact with the same name or id."""

    user_message = "This file was already uploaded in this batch"


class EmptyBatchError(ArtifactValidationError):
    """Raised when a batch has no artifacts at all."""

    user_message = "No files uploaded"


class BatchTooLargeError(ArtifactValidationError):
    """Raised when a batch holds more artifacts than allowed."""

    user_message = "Too many files in one upload"


class EngineError(ExtractionError):
    """Raised when an extraction engine fails on valid input."""


class PdfExtractionError(EngineError):
    """Raised when PDF text extraction fails."""

    user_message = "Failed to extract text from PDF"


class OcrExtractionError(EngineError):
    """Raised when OCR fails on an image."""

    user_message = "Failed to extract text from image"
