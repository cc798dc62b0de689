"""Batch ingestion: dedupe, validate, extract concurrently, report per artifact."""

from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor

from app.extraction.adapter import ExtractionAdapter
from app.extraction.exceptions import (
    ArtifactValidationError,
    BatchTooLargeError,
    DuplicateArtifactError,
    EmptyBatchError,
    EngineError,
    ExtractionError,
)
from app.extraction.models import Artifact, ValidatedArtifact
from app.ingestion.models import (
    ArtifactOutcome,
    ArtifactStatus,
    IngestionReport,
    RejectedArtifact,
)
from app.ingestion.status_board import StatusBoard
from app.logging.logger import Log


class IngestionOrchestrator:
    """Runs a batch of artifacts through the ExtractionAdapter.

    Artifacts are independent: a failure in one never cancels the others.
    An artifact repeating an earlier name or id is rejected, not processed.
    """

    def __init__(
        self,
        adapter: ExtractionAdapter,
        max_workers: int = 5,
        max_batch_files: int | None = None,
        accepted_media_types: frozenset[str] | None = None,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._adapter = adapter
        self._max_workers = max_workers
        self._max_batch_files = max_batch_files
        self._accepted_media_types = accepted_media_types

    def ingest(
        self,
        batch: Sequence[Artifact],
        board: StatusBoard | None = None,
    ) -> IngestionReport:
        """Extract text from every artifact in ``batch``.

        Args:
            batch: Uploaded artifacts in submission order.
            board: Optional status board shared with concurrent readers.

        Raises:
            EmptyBatchError: if ``batch`` is empty.
            BatchTooLargeError: if ``batch`` exceeds ``max_batch_files``.
        """
        if not batch:
            raise EmptyBatchError("Batch contains no artifacts")
        if self._max_batch_files is not None and len(batch) > self._max_batch_files:
            raise BatchTooLargeError(
                f"Batch has {len(batch)} artifacts (max {self._max_batch_files})"
            )

        board = board if board is not None else StatusBoard()
        report = IngestionReport()
        accepted = self._drop_duplicates(batch, report)
        for artifact in accepted:
            board.register(artifact.id)

        pending: list[tuple[Artifact, Future[ArtifactOutcome] | ArtifactOutcome]] = []
        workers = min(self._max_workers, len(accepted))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="extract") as executor:
            for artifact in accepted:
                try:
                    validated = self._adapter.validate(artifact, self._accepted_media_types)
                except ArtifactValidationError as exc:
                    pending.append((artifact, self._fail(artifact, exc, board)))
                    continue
                pending.append((artifact, executor.submit(self._process, validated, board)))

            for artifact, item in pending:
                outcome = item.result() if isinstance(item, Future) else item
                report.outcomes[artifact.id] = outcome

        Log.info(
            f"Ingested batch of {len(batch)}: {report.successful} succeeded, "
            f"{report.failed} failed, {len(report.rejected)} rejected "
            f"({report.aggregate.value})"
        )
        return report

    def _drop_duplicates(
        self,
        batch: Sequence[Artifact],
        report: IngestionReport,
    ) -> list[Artifact]:
        seen_names: set[str] = set()
        seen_ids: set[str] = set()
        accepted: list[Artifact] = []
        for artifact in batch:
            if artifact.display_name in seen_names:
                reason = "duplicate_name"
                detail = f"Duplicate file name '{artifact.display_name}' in batch"
            elif artifact.id in seen_ids:
                reason = "duplicate_id"
                detail = f"Duplicate artifact id '{artifact.id}' ('{artifact.display_name}') in batch"
            else:
                seen_names.add(artifact.display_name)
                seen_ids.add(artifact.id)
                accepted.append(artifact)
                continue
            error = DuplicateArtifactError(detail)
            report.rejected.append(
                RejectedArtifact(
                    artifact_id=artifact.id,
                    display_name=artifact.display_name,
                    reason=reason,
                    error=error,
                )
            )
            Log.warning(detail)
        return accepted

    def _process(self, validated: ValidatedArtifact, board: StatusBoard) -> ArtifactOutcome:
        artifact = validated.artifact
        board.advance(artifact.id, ArtifactStatus.PROCESSING)
        try:
            result = self._adapter.extract_artifact(validated)
        except ExtractionError as exc:
            return self._fail(artifact, exc, board)
        except Exception as exc:
            Log.exception(f"Unexpected failure extracting '{artifact.display_name}'")
            wrapped = EngineError(f"Unexpected {type(exc).__name__}: {exc}")
            return self._fail(artifact, wrapped, board)
        board.advance(artifact.id, ArtifactStatus.SUCCESS)
        return ArtifactOutcome(
            artifact_id=artifact.id,
            display_name=artifact.display_name,
            status=ArtifactStatus.SUCCESS,
            result=result,
        )

    @staticmethod
    def _fail(artifact: Artifact, error: ExtractionError, board: StatusBoard) -> ArtifactOutcome:
        board.advance(artifact.id, ArtifactStatus.ERROR)
        Log.warning(f"Extraction failed for '{artifact.display_name}': {error}")
        return ArtifactOutcome(
            artifact_id=artifact.id,
            display_name=artifact.display_name,
            status=ArtifactStatus.ERROR,
            error=error,
        )
