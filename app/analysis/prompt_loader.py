from pathlib import Path

from app.analysis.exceptions import PromptLoadError
from app.analysis.models import AnalysisMode

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(mode: AnalysisMode, path: Path | None = None) -> str:
    """Load the analysis prompt template for a mode.

    Args:
        mode: Analysis mode selecting the bundled template.
        path: Explicit template file overriding the bundled one.

    Returns:
        The raw template string with ``{content_type}``, ``{platform}``,
        ``{text}`` and ``{response_shape}`` placeholders.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / f"{mode.value}_analysis_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt template: {exc}") from exc


def load_response_shape(mode: AnalysisMode, path: Path | None = None) -> str:
    """Load the JSON response shape the model is asked to follow.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / f"{mode.value}_analysis_shape.json"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise PromptLoadError(f"Failed to load response shape: {exc}") from exc
