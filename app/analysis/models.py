from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar


class AnalysisMode(str, Enum):
    FULL = "full"
    QUICK = "quick"
    TIPS = "tips"


class _Absent:
    """Marks a recognized field the model did not return at all."""

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


# Distinct from None, which the model can send as an explicit null.
ABSENT: Any = _Absent()


@dataclass(frozen=True)
class AnalysisRequest:
    """Bounded prompt input for one analysis call. Never mutated."""

    text: str
    content_type: str
    platform: str
    mode: AnalysisMode
    was_truncated: bool
    prompt: str
    system_prompt: str = ""


@dataclass(frozen=True)
class RawFallback:
    """Model output that could not be mapped onto the typed record.

    ``parse_failed`` is True when the output was not valid JSON. Otherwise
    ``payload`` holds the parsed value that lacked every recognized key.
    """

    text: str
    parse_failed: bool
    payload: Any = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"text": self.text, "parseFailed": self.parse_failed}
        if self.payload is not None:
            data["payload"] = self.payload
        return data


@dataclass(frozen=True)
class AnalysisRecord:
    """Normalized analysis output.

    Holds either at least one structured field or a ``raw_fallback``,
    never both and never neither. Fields the model omitted stay ``ABSENT``;
    an explicit JSON null is kept as None.
    """

    WIRE_NAMES: ClassVar[dict[str, str]] = {
        "content_analysis": "contentAnalysis",
        "engagement_metrics": "engagementMetrics",
        "improvement_suggestions": "improvementSuggestions",
        "best_practices": "bestPractices",
        "sentiment": "sentiment",
        "engagement_score": "engagementScore",
        "top_suggestion": "topSuggestion",
        "hashtag_suggestion": "hashtagSuggestion",
        "tips": "tips",
    }

    content_analysis: Any = ABSENT
    engagement_metrics: Any = ABSENT
    improvement_suggestions: Any = ABSENT
    best_practices: Any = ABSENT
    sentiment: Any = ABSENT
    engagement_score: Any = ABSENT
    top_suggestion: Any = ABSENT
    hashtag_suggestion: Any = ABSENT
    tips: Any = ABSENT
    raw_fallback: RawFallback | None = None

    def __post_init__(self) -> None:
        has_structured = bool(self.structured_fields())
        if has_structured and self.raw_fallback is not None:
            raise ValueError("AnalysisRecord cannot hold both structured fields and raw_fallback")
        if not has_structured and self.raw_fallback is None:
            raise ValueError("AnalysisRecord needs structured fields or raw_fallback")

    @classmethod
    def from_wire(cls, fields: dict[str, Any]) -> "AnalysisRecord":
        by_wire = {wire: attr for attr, wire in cls.WIRE_NAMES.items()}
        return cls(**{by_wire[key]: value for key, value in fields.items()})

    @property
    def is_fallback(self) -> bool:
        return self.raw_fallback is not None

    def structured_fields(self) -> dict[str, Any]:
        """Present structured fields keyed by their wire (camelCase) names."""
        return {
            wire: getattr(self, attr)
            for attr, wire in self.WIRE_NAMES.items()
            if getattr(self, attr) is not ABSENT
        }

    def to_dict(self) -> dict[str, Any]:
        if self.raw_fallback is not None:
            return {"rawFallback": self.raw_fallback.to_dict()}
        return self.structured_fields()


@dataclass(frozen=True)
class AnalysisOutcome:
    """An AnalysisRecord together with the request facts that produced it."""

    record: AnalysisRecord
    request: AnalysisRequest
    original_text: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def text_length(self) -> int:
        return len(self.original_text)

    def to_dict(self) -> dict[str, Any]:
        return {
            "analysis": self.record.to_dict(),
            "originalText": self.original_text,
            "textLength": self.text_length,
            "contentType": self.request.content_type,
            "platform": self.request.platform,
            "mode": self.request.mode.value,
            "wasTruncated": self.request.was_truncated,
            "timestamp": self.timestamp.isoformat(),
        }
