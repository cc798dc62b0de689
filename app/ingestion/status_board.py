import threading

from app.ingestion.exceptions import InvalidStatusTransitionError, UnknownArtifactError
from app.ingestion.models import ArtifactStatus

_ALLOWED: dict[ArtifactStatus, frozenset[ArtifactStatus]] = {
    ArtifactStatus.QUEUED: frozenset({ArtifactStatus.PROCESSING, ArtifactStatus.ERROR}),
    ArtifactStatus.PROCESSING: frozenset({ArtifactStatus.SUCCESS, ArtifactStatus.ERROR}),
    ArtifactStatus.SUCCESS: frozenset(),
    ArtifactStatus.ERROR: frozenset(),
}


class StatusBoard:
    """Thread-safe per-artifact status map with forward-only transitions.

    Every read and write holds the same lock, so a reader never sees an
    artifact in a state earlier than one already written.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._statuses: dict[str, ArtifactStatus] = {}

    def register(self, artifact_id: str) -> None:
        with self._lock:
            if artifact_id in self._statuses:
                raise InvalidStatusTransitionError(f"Artifact '{artifact_id}' already registered")
            self._statuses[artifact_id] = ArtifactStatus.QUEUED

    def advance(self, artifact_id: str, status: ArtifactStatus) -> None:
        with self._lock:
            current = self._statuses.get(artifact_id)
            if current is None:
                raise UnknownArtifactError(f"Artifact '{artifact_id}' is not on the board")
            if status not in _ALLOWED[current]:
                raise InvalidStatusTransitionError(
                    f"Artifact '{artifact_id}': {current.value} -> {status.value} is not allowed"
                )
            self._statuses[artifact_id] = status

    def get(self, artifact_id: str) -> ArtifactStatus:
        with self._lock:
            try:
                return self._statuses[artifact_id]
            except KeyError:
                raise UnknownArtifactError(
                    f"Artifact '{artifact_id}' is not on the board"
                ) from None

    def snapshot(self) -> dict[str, ArtifactStatus]:
        with self._lock:
            return dict(self._statuses)

    def is_settled(self) -> bool:
        with self._lock:
            return all(status.is_terminal for status in self._statuses.values())
