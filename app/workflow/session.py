"""Client-side workflow: upload, analyze, then show results.

WorkflowSession drives one user's WorkflowState through those steps. The
HTTP routes in ``app.api.app`` stay stateless and call the orchestrator
and analyzer directly; a front end or embedding caller owns a session.
"""

from collections.abc import Sequence

from app.analysis.analyzer import ContentAnalyzer
from app.analysis.exceptions import AnalysisError
from app.analysis.models import AnalysisMode, AnalysisOutcome
from app.extraction.exceptions import ExtractionError
from app.extraction.models import Artifact
from app.ingestion.models import IngestionReport
from app.ingestion.orchestrator import IngestionOrchestrator
from app.logging.logger import Log
from app.workflow.state import WorkflowState

NO_TEXT_MESSAGE = "No text could be extracted from the uploaded files"


class WorkflowSession:
    """Single writer of one user's WorkflowState.

    Runs ingestion and analysis and applies their results, one operation
    at a time.
    """

    def __init__(
        self,
        orchestrator: IngestionOrchestrator,
        analyzer: ContentAnalyzer,
        state: WorkflowState | None = None,
    ) -> None:
        self._orchestrator = orchestrator
        self._analyzer = analyzer
        self._state = state if state is not None else WorkflowState()

    @property
    def state(self) -> WorkflowState:
        return self._state

    def upload(self, batch: Sequence[Artifact]) -> IngestionReport:
        """Extract text from ``batch`` and make the latest success current.

        Raises:
            OperationInProgressError: if another operation is in flight.
            ArtifactValidationError: if the batch as a whole is rejected.
        """
        ticket = self._state.begin("extraction")
        try:
            report = self._orchestrator.ingest(batch)
        except ExtractionError as exc:
            self._state.fail(ticket, exc.user_message)
            raise
        except Exception:
            self._state.fail(ticket, ExtractionError.user_message)
            raise

        text = report.current_text
        if text is None:
            self._state.fail(ticket, NO_TEXT_MESSAGE)
        else:
            self._state.complete_extraction(ticket, text)
        return report

    def enter_text(self, text: str) -> None:
        self._state.provide_text(text)

    def analyze(
        self,
        content_type: str = "social-media",
        platform: str = "general",
        mode: AnalysisMode | str = AnalysisMode.FULL,
    ) -> AnalysisOutcome | None:
        """Analyze the current text.

        Returns None when the state was reset while the call was in flight.

        Raises:
            OperationInProgressError: if another operation is in flight.
            EmptyContentError: if there is no text to analyze.
            AnalysisBackendError: if the backend call fails or times out.
        """
        ticket = self._state.begin("analysis")
        text = self._state.snapshot().extracted_text
        try:
            outcome = self._analyzer.analyze(text, content_type, platform, mode)
        except AnalysisError as exc:
            self._state.fail(ticket, exc.user_message)
            raise
        except Exception:
            self._state.fail(ticket, AnalysisError.user_message)
            raise

        if not self._state.complete_analysis(ticket, outcome.record):
            Log.info("Analysis finished after a reset, result dropped")
            return None
        return outcome

    def clear_results(self) -> None:
        self._state.clear_results()
