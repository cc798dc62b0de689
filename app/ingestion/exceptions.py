class IngestionError(Exception):
    """Base exception for ingestion bookkeeping errors."""


class InvalidStatusTransitionError(IngestionError):
    """Raised when an artifact status would move backwards or leave a terminal state."""


class UnknownArtifactError(IngestionError):
    """Raised when a status is requested for an artifact not on the board."""
