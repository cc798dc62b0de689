"""Client workflow state: upload -> analyze -> results.

The stage is derived from which fields are present; ``is_loading`` is an
orthogonal in-flight flag. Every mutation happens under one lock, and
``clear_results`` bumps ``version`` so completions started before the reset
are recognized as stale and dropped.
"""

import threading
from dataclasses import dataclass
from enum import Enum

from app.analysis.models import AnalysisRecord
from app.logging.logger import Log
from app.workflow.exceptions import OperationInProgressError


class WorkflowStage(str, Enum):
    UPLOADING = "uploading"
    READY_TO_ANALYZE = "ready_to_analyze"
    SHOWING_RESULTS = "showing_results"


@dataclass(frozen=True)
class WorkflowSnapshot:
    """Consistent read-only view of the workflow at one instant."""

    extracted_text: str
    analysis_record: AnalysisRecord | None
    is_loading: bool
    version: int
    last_error: str | None = None

    @property
    def stage(self) -> WorkflowStage:
        if self.analysis_record is not None:
            return WorkflowStage.SHOWING_RESULTS
        if self.extracted_text:
            return WorkflowStage.READY_TO_ANALYZE
        return WorkflowStage.UPLOADING


@dataclass(frozen=True)
class Ticket:
    """Handle for one in-flight operation, bound to the state version it started on."""

    version: int
    operation: str


class WorkflowState:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._extracted_text = ""
        self._analysis_record: AnalysisRecord | None = None
        self._is_loading = False
        self._version = 0
        self._last_error: str | None = None

    def snapshot(self) -> WorkflowSnapshot:
        with self._lock:
            return self._snapshot()

    @property
    def stage(self) -> WorkflowStage:
        return self.snapshot().stage

    def begin(self, operation: str) -> Ticket:
        """Mark an operation in flight.

        Raises:
            OperationInProgressError: if another operation is still in flight.
        """
        with self._lock:
            if self._is_loading:
                raise OperationInProgressError(
                    f"Cannot start {operation}: another operation is in flight"
                )
            self._is_loading = True
            self._last_error = None
            return Ticket(version=self._version, operation=operation)

    def provide_text(self, text: str) -> None:
        """Set typed text directly, replacing any previous text and results."""
        with self._lock:
            if self._is_loading:
                raise OperationInProgressError("Cannot replace text while an operation is in flight")
            self._extracted_text = text
            self._analysis_record = None
            self._last_error = None

    def complete_extraction(self, ticket: Ticket, text: str) -> bool:
        """Apply extracted text. Returns False if the ticket is stale."""
        with self._lock:
            if not self._is_current(ticket):
                return False
            self._extracted_text = text
            self._analysis_record = None
            self._is_loading = False
            return True

    def complete_analysis(self, ticket: Ticket, record: AnalysisRecord) -> bool:
        """Apply an analysis record. Returns False if the ticket is stale."""
        with self._lock:
            if not self._is_current(ticket):
                return False
            self._analysis_record = record
            self._is_loading = False
            return True

    def fail(self, ticket: Ticket, message: str) -> bool:
        """Record a failed operation. Returns False if the ticket is stale."""
        with self._lock:
            if not self._is_current(ticket):
                return False
            self._last_error = message
            self._is_loading = False
            return True

    def clear_results(self) -> WorkflowSnapshot:
        """Reset every field at once and invalidate in-flight tickets."""
        with self._lock:
            self._extracted_text = ""
            self._analysis_record = None
            self._is_loading = False
            self._last_error = None
            self._version += 1
            return self._snapshot()

    def _is_current(self, ticket: Ticket) -> bool:
        if ticket.version != self._version:
            Log.warning(
                f"Discarding stale {ticket.operation} result "
                f"(started at v{ticket.version}, now v{self._version})"
            )
            return False
        return True

    def _snapshot(self) -> WorkflowSnapshot:
        return WorkflowSnapshot(
            extracted_text=self._extracted_text,
            analysis_record=self._analysis_record,
            is_loading=self._is_loading,
            version=self._version,
            last_error=self._last_error,
        )
