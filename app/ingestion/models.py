from dataclasses import dataclass, field
from enum import Enum

from app.extraction.exceptions import ExtractionError
from app.extraction.models import ExtractionResult


class ArtifactStatus(str, Enum):
    QUEUED = "queued"
    PROCESSING = "processing"
    SUCCESS = "success"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (ArtifactStatus.SUCCESS, ArtifactStatus.ERROR)


class BatchAggregate(str, Enum):
    ALL_SUCCESS = "all_success"
    PARTIAL = "partial"
    ALL_FAILED = "all_failed"


@dataclass(frozen=True)
class ArtifactOutcome:
    """Final state of one processed artifact."""

    artifact_id: str
    display_name: str
    status: ArtifactStatus
    result: ExtractionResult | None = None
    error: ExtractionError | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is ArtifactStatus.SUCCESS


@dataclass(frozen=True)
class RejectedArtifact:
    """Artifact dropped before processing (not counted as processed)."""

    artifact_id: str
    display_name: str
    reason: str
    error: ExtractionError


@dataclass
class IngestionReport:
    """Per-artifact outcomes of one batch, in submission order."""

    outcomes: dict[str, ArtifactOutcome] = field(default_factory=dict)
    rejected: list[RejectedArtifact] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def successful(self) -> int:
        return sum(1 for o in self.outcomes.values() if o.succeeded)

    @property
    def failed(self) -> int:
        return self.total - self.successful

    @property
    def aggregate(self) -> BatchAggregate:
        if self.total and self.successful == self.total:
            return BatchAggregate.ALL_SUCCESS
        if self.successful == 0:
            return BatchAggregate.ALL_FAILED
        return BatchAggregate.PARTIAL

    @property
    def current_text(self) -> str | None:
        """Text of the last successful artifact in submission order."""
        for outcome in reversed(list(self.outcomes.values())):
            if outcome.succeeded and outcome.result is not None:
                return outcome.result.text
        return None

    def texts(self) -> dict[str, str]:
        """Extracted text of every successful artifact, keyed by artifact id."""
        return {
            artifact_id: outcome.result.text
            for artifact_id, outcome in self.outcomes.items()
            if outcome.succeeded and outcome.result is not None
        }
