"""Coerces raw generative-model output into an AnalysisRecord.

Two stages:
1. strip markdown code fences and surrounding whitespace;
2. strict JSON parse, or fall back to the raw text.

A parsed value that carries none of the mode's recognized keys is kept
whole under ``raw_fallback``. A recognized key sent as null is kept as
None; one left out stays ABSENT. Nothing here raises to the caller.
"""

import json
import re
from typing import Any

from app.analysis.models import AnalysisMode, AnalysisRecord, RawFallback
from app.logging.logger import Log

RECOGNIZED_KEYS: dict[AnalysisMode, tuple[str, ...]] = {
    AnalysisMode.FULL: (
        "contentAnalysis",
        "engagementMetrics",
        "improvementSuggestions",
        "bestPractices",
    ),
    AnalysisMode.QUICK: (
        "sentiment",
        "engagementScore",
        "topSuggestion",
        "hashtagSuggestion",
    ),
    AnalysisMode.TIPS: ("tips",),
}

_OPENING_FENCE = re.compile(r"^```[\w-]*[ \t]*\n?")
_CLOSING_FENCE = re.compile(r"\n?```$")


def strip_code_fences(raw: str) -> str:
    """Remove a surrounding ```lang ... ``` fence, tagged or bare, on one line or many."""
    cleaned = raw.strip()
    if not cleaned.startswith("```"):
        return cleaned
    body = _OPENING_FENCE.sub("", cleaned, count=1)
    body = _CLOSING_FENCE.sub("", body.rstrip(), count=1)
    return body.strip()


class ResponseNormalizer:
    """Maps model output to a guaranteed-shape AnalysisRecord."""

    def normalize(
        self,
        raw_text: str | None,
        mode: AnalysisMode | str = AnalysisMode.FULL,
    ) -> AnalysisRecord:
        mode = AnalysisMode(mode)
        raw = raw_text if isinstance(raw_text, str) else ""
        try:
            return self._normalize(raw, mode)
        except Exception:
            Log.exception("Unexpected failure normalizing model output, using raw text")
            return AnalysisRecord(raw_fallback=RawFallback(text=raw, parse_failed=True))

    def _normalize(self, raw: str, mode: AnalysisMode) -> AnalysisRecord:
        cleaned = strip_code_fences(raw)
        try:
            parsed: Any = json.loads(cleaned)
        except (ValueError, RecursionError) as exc:
            Log.warning(f"Model output is not valid JSON, passing raw text through: {exc}")
            return AnalysisRecord(raw_fallback=RawFallback(text=raw, parse_failed=True))

        fields = self._recognized_fields(parsed, mode)
        if not fields:
            Log.warning(
                f"Model output has none of the {mode.value} analysis keys, keeping it opaque"
            )
            return AnalysisRecord(
                raw_fallback=RawFallback(text=raw, parse_failed=False, payload=parsed)
            )

        missing = [key for key in RECOGNIZED_KEYS[mode] if key not in fields]
        if missing:
            Log.info(f"Model output omitted {', '.join(missing)}")
        return AnalysisRecord.from_wire(fields)

    @staticmethod
    def _recognized_fields(parsed: Any, mode: AnalysisMode) -> dict[str, Any]:
        if not isinstance(parsed, dict):
            return {}
        return {
            key: parsed[key]
            for key in RECOGNIZED_KEYS[mode]
            if key in parsed
        }
